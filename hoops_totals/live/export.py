"""Tabular export of live model edges."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Mapping, Sequence, Union

import pandas as pd
import pytz

from ..data.normalize import lookup_team
from ..features.team_aggregator import index_team_stats
from ..models.live import LiveGame
from ..models.team import TeamStats
from ..strategies.rules import project_total
from .signals import coerce_live_games

DEFAULT_TIMEZONE = "US/Eastern"
EDGE_COLUMNS = [
    "Date",
    "Home Team",
    "Away Team",
    "Vegas Line",
    "Home Avg PPG",
    "Away Avg PPG",
    "Model Projection",
    "Edge",
]


def local_game_date(commence_time: str, tz: str = DEFAULT_TIMEZONE) -> str:
    """Convert an ISO-8601 UTC start time to a local ``YYYY-MM-DD`` date."""
    if not commence_time:
        return ""
    try:
        start = datetime.fromisoformat(commence_time.replace("Z", "+00:00"))
    except ValueError:
        return ""
    if start.tzinfo is None:
        start = pytz.utc.localize(start)
    return start.astimezone(pytz.timezone(tz)).date().isoformat()


def live_edges_frame(
    live_games: Iterable[Union[LiveGame, Mapping]],
    team_stats: Sequence[TeamStats],
    tz: str = DEFAULT_TIMEZONE,
) -> pd.DataFrame:
    """
    One row per live game with the team-model projection and its edge.

    Missing team aggregates leave the PPG columns as ``"-"`` and the
    projection/edge at 0.
    """
    teams = index_team_stats(team_stats)
    rows: List[dict] = []
    for game in coerce_live_games(live_games):
        home = lookup_team(teams, game.home_team)
        away = lookup_team(teams, game.away_team)
        projection = project_total(home, away) if home and away else 0.0
        line = game.totals_line() or 0.0
        edge = projection - line if line > 0 and projection > 0 else 0.0
        rows.append(
            {
                "Date": local_game_date(game.commence_time, tz),
                "Home Team": game.home_team,
                "Away Team": game.away_team,
                "Vegas Line": line,
                "Home Avg PPG": f"{home.avg_points_for:.1f}" if home else "-",
                "Away Avg PPG": f"{away.avg_points_for:.1f}" if away else "-",
                "Model Projection": round(projection, 1),
                "Edge": round(edge, 1),
            }
        )
    return pd.DataFrame(rows, columns=EDGE_COLUMNS)


def export_live_edges_csv(
    output_path: str,
    live_games: Iterable[Union[LiveGame, Mapping]],
    team_stats: Sequence[TeamStats],
    tz: str = DEFAULT_TIMEZONE,
) -> int:
    """Write the live edges table to CSV and return the number of rows."""
    frame = live_edges_frame(live_games, team_stats, tz)
    frame.to_csv(output_path, index=False)
    return len(frame)

"""Fold match-level data into per-team season averages.

Two aggregations are provided and deliberately kept apart:

``aggregate_team_stats``
    The full season aggregate. Needs the raw season records because the
    granular shooting and discipline numbers (FGA, 3P%, fouls, FTM, ...)
    only exist at period level. Live signals use this one.

``aggregate_backtest_team_stats``
    A light aggregate computed from processed matches alone, so a backtest
    over any season can be run without its raw records. Granular fields
    stay at zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence

from ..data.numeric import parse_float, parse_int
from ..models.match import ProcessedMatch
from ..models.team import TeamStats
from .box_score import BoxScoreTotals, game_pace, sum_box_scores
from .metrics import calculate_fg_pct, calculate_ratio_pct, calculate_true_shooting

logger = logging.getLogger(__name__)


@dataclass
class _TeamAccumulator:
    games: int = 0
    points_for: float = 0.0
    points_against: float = 0.0
    pace: float = 0.0
    ts: float = 0.0
    overs: int = 0
    fga: float = 0.0
    fg_pct: float = 0.0
    fg3_pct: float = 0.0
    fouls: float = 0.0
    ftm: float = 0.0
    turnovers: float = 0.0
    fta: float = 0.0
    rebounds: float = 0.0

    def add_game(self, points_for: int, points_against: int, pace: float, is_over: bool) -> None:
        self.games += 1
        self.points_for += points_for
        self.points_against += points_against
        self.pace += pace
        if is_over:
            self.overs += 1

    def add_box_score(self, points: int, box: BoxScoreTotals) -> None:
        self.ts += calculate_true_shooting(points, box.fga, box.fta)
        self.fga += box.fga
        self.fg_pct += calculate_fg_pct(box.fgm, box.fga)
        self.fg3_pct += calculate_ratio_pct(box.fg3m, box.fg3a)
        self.fouls += box.fouls
        self.ftm += box.ftm
        self.turnovers += box.turnovers
        self.fta += box.fta
        self.rebounds += box.rebounds

    def finalize(self, name: str) -> TeamStats:
        n = self.games
        if n == 0:
            return TeamStats(name=name)
        return TeamStats(
            name=name,
            games_played=n,
            avg_points_for=self.points_for / n,
            avg_points_against=self.points_against / n,
            avg_pace=self.pace / n,
            avg_ts=self.ts / n,
            over_rate=(self.overs / n) * 100,
            avg_fga=self.fga / n,
            avg_fg_pct=self.fg_pct / n,
            avg_3p_pct=self.fg3_pct / n,
            avg_fouls=self.fouls / n,
            avg_ftm=self.ftm / n,
            avg_turnovers=self.turnovers / n,
            avg_fta=self.fta / n,
            avg_rebounds=self.rebounds / n,
        )


def aggregate_team_stats(
    processed_matches: Sequence[ProcessedMatch],
    raw_matches: Iterable[Mapping] = (),
) -> List[TeamStats]:
    """
    Build full season averages for every team in the raw records.

    Args:
        processed_matches: Processed matches of the same season (kept for
            call-site symmetry; every number is re-derived from raw data)
        raw_matches: RawMatch dictionaries

    Returns:
        One TeamStats per team, in order of first appearance. Empty when no
        raw records are supplied.
    """
    raw_list = [m for m in raw_matches if isinstance(m, Mapping)]
    if not raw_list:
        return []

    teams: Dict[str, _TeamAccumulator] = {}
    for raw in raw_list:
        home_team = str(raw.get("home_team", ""))
        away_team = str(raw.get("away_team", ""))
        for name in (home_team, away_team):
            teams.setdefault(name, _TeamAccumulator())

        box = sum_box_scores(raw)
        pace = game_pace(box)
        home_score = parse_int(raw.get("home_score"))
        away_score = parse_int(raw.get("away_score"))
        line = parse_float((raw.get("line_odds") or {}).get("total_line"))
        is_over = home_score + away_score > line

        home = teams[home_team]
        home.add_game(home_score, away_score, pace, is_over)
        home.add_box_score(home_score, box["home"])

        away = teams[away_team]
        away.add_game(away_score, home_score, pace, is_over)
        away.add_box_score(away_score, box["away"])

    logger.debug(
        "Aggregated %d teams from %d raw / %d processed matches",
        len(teams),
        len(raw_list),
        len(processed_matches),
    )
    return [acc.finalize(name) for name, acc in teams.items()]


def aggregate_backtest_team_stats(processed_matches: Iterable[ProcessedMatch]) -> List[TeamStats]:
    """
    Light per-team averages derived from processed matches only.

    Points for/against, pace, TS%, FG% and over rate are populated; the
    period-granular fields are left at zero.
    """
    teams: Dict[str, _TeamAccumulator] = {}
    for match in processed_matches:
        is_over = match.total_score > match.line
        sides = (
            (match.home_team, match.home_score, match.away_score, match.home_ts, match.home_fg_pct),
            (match.away_team, match.away_score, match.home_score, match.away_ts, match.away_fg_pct),
        )
        for name, points_for, points_against, ts, fg_pct in sides:
            acc = teams.setdefault(name, _TeamAccumulator())
            acc.add_game(points_for, points_against, match.pace, is_over)
            acc.ts += ts
            acc.fg_pct += fg_pct

    return [acc.finalize(name) for name, acc in teams.items()]


def index_team_stats(team_stats: Iterable[TeamStats]) -> Dict[str, TeamStats]:
    """Map team name to stats; the first entry wins for duplicate names."""
    index: Dict[str, TeamStats] = {}
    for stats in team_stats:
        index.setdefault(stats.name, stats)
    return index

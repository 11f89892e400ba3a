"""Season snapshot: every derived view of one season, built in one call.

Switching seasons means building a new snapshot; an existing snapshot is
never updated in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple

from ..models.match import ProcessedMatch
from ..models.team import TeamStats
from .match_processor import process_matches
from .team_aggregator import aggregate_backtest_team_stats, aggregate_team_stats


@dataclass(frozen=True)
class SeasonSnapshot:
    season_id: str
    matches: Tuple[ProcessedMatch, ...]
    teams: Tuple[TeamStats, ...]
    backtest_teams: Tuple[TeamStats, ...]

    @property
    def is_empty(self) -> bool:
        return not self.matches


def build_season_snapshot(raw_matches: Iterable[Mapping], season_id: str = "") -> SeasonSnapshot:
    """
    Process a season's raw records into an immutable snapshot.

    Args:
        raw_matches: RawMatch dictionaries of one season
        season_id: Identifier carried for display

    Returns:
        SeasonSnapshot with processed matches, full team aggregates (for
        live signals) and light team aggregates (for backtests)
    """
    raw_list = list(raw_matches)
    matches = process_matches(raw_list)
    return SeasonSnapshot(
        season_id=season_id,
        matches=tuple(matches),
        teams=tuple(aggregate_team_stats(matches, raw_list)),
        backtest_teams=tuple(aggregate_backtest_team_stats(matches)),
    )

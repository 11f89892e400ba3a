"""Fold a raw match's per-period box-score lines into game totals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping

from ..data.numeric import parse_int
from .metrics import calculate_possessions


@dataclass
class BoxScoreTotals:
    """One team's box score summed over every recorded period."""

    fga: int = 0
    fgm: int = 0
    fg3a: int = 0
    fg3m: int = 0
    fta: int = 0
    ftm: int = 0
    orb: int = 0
    rebounds: int = 0
    turnovers: int = 0
    fouls: int = 0
    possessions: float = 0.0
    periods: int = 0

    def add_period(self, stats: Mapping) -> None:
        self.fga += parse_int(stats.get("field_goals_attempted"))
        self.fgm += parse_int(stats.get("field_goals_made"))
        self.fg3a += parse_int(stats.get("3_point_field_g_attempted"))
        self.fg3m += parse_int(stats.get("3_point_field_goals_made"))
        self.fta += parse_int(stats.get("free_throws_attempted"))
        self.ftm += parse_int(stats.get("free_throws_made"))
        self.orb += parse_int(stats.get("offensive_rebounds"))
        self.rebounds += parse_int(stats.get("total_rebounds"))
        self.turnovers += parse_int(stats.get("turnovers"))
        self.fouls += parse_int(stats.get("personal_fouls"))
        self.possessions += calculate_possessions(stats)
        self.periods += 1


def sum_box_scores(raw_match: Mapping) -> Dict[str, BoxScoreTotals]:
    """
    Sum period-level stats for both teams of a raw match.

    Args:
        raw_match: RawMatch dictionary

    Returns:
        ``{"home": BoxScoreTotals, "away": BoxScoreTotals}``
    """
    home_team = raw_match.get("home_team")
    away_team = raw_match.get("away_team")
    totals = {"home": BoxScoreTotals(), "away": BoxScoreTotals()}

    quarter_stats = raw_match.get("quarter_stats") or {}
    if not isinstance(quarter_stats, Mapping):
        return totals

    for period_stats in quarter_stats.values():
        if not isinstance(period_stats, Mapping):
            continue
        home_line = period_stats.get(home_team)
        if isinstance(home_line, Mapping):
            totals["home"].add_period(home_line)
        away_line = period_stats.get(away_team)
        if isinstance(away_line, Mapping):
            totals["away"].add_period(away_line)

    return totals


def game_pace(totals: Dict[str, BoxScoreTotals]) -> float:
    """Estimated game pace: mean of both teams' summed possessions."""
    return (totals["home"].possessions + totals["away"].possessions) / 2

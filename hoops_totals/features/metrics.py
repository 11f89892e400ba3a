"""Per-period and per-game derived basketball metrics."""

from __future__ import annotations

from typing import Mapping, Optional

from ..data.numeric import parse_int

POSSESSION_FACTOR = 0.96
FREE_THROW_WEIGHT = 0.44


def calculate_possessions(stats: Optional[Mapping]) -> float:
    """
    Estimate possessions for one team's box-score line.

    Formula: ``0.96 * (FGA + 0.44 * FTA - ORB + TOV)``.

    Args:
        stats: QuarterStats mapping (string-typed values)

    Returns:
        Estimated possessions, or 0 when no stats are supplied
    """
    if not stats:
        return 0.0

    fga = parse_int(stats.get("field_goals_attempted"))
    fta = parse_int(stats.get("free_throws_attempted"))
    orb = parse_int(stats.get("offensive_rebounds"))
    tov = parse_int(stats.get("turnovers"))

    return POSSESSION_FACTOR * (fga + FREE_THROW_WEIGHT * fta - orb + tov)


def calculate_true_shooting(points: float, fga: float, fta: float) -> float:
    """
    True-shooting percentage from aggregated shot counts.

    Args:
        points: Points scored
        fga: Field goals attempted
        fta: Free throws attempted

    Returns:
        TS% on a 0-100 scale (0 when points or the denominator is 0)
    """
    if points == 0:
        return 0.0
    denominator = 2 * (fga + FREE_THROW_WEIGHT * fta)
    if denominator == 0:
        return 0.0
    return (points / denominator) * 100


def calculate_ts(points: float, stats: Optional[Mapping]) -> float:
    """True-shooting percentage for a single QuarterStats line."""
    if not stats:
        return 0.0
    return calculate_true_shooting(
        points,
        parse_int(stats.get("field_goals_attempted")),
        parse_int(stats.get("free_throws_attempted")),
    )


def calculate_ratio_pct(made: float, attempted: float) -> float:
    """``made / attempted * 100`` guarded against zero attempts."""
    if attempted > 0:
        return (made / attempted) * 100
    return 0.0


def calculate_fg_pct(fgm: float, fga: float) -> float:
    return calculate_ratio_pct(fgm, fga)

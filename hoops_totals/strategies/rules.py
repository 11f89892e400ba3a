"""Pick rules shared by the backtest strategies and the live evaluator."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from ..models.match import ProcessedMatch
from ..models.team import TeamStats

DEFAULT_LEAGUE_AVG = 230.0
DEFAULT_MARGIN = 5.0
DEFAULT_EFFICIENCY_THRESHOLD = 46.5


class BetSide(str, Enum):
    OVER = "OVER"
    UNDER = "UNDER"


def format_number(value: float) -> str:
    """Render whole numbers without a trailing ``.0`` (``236.0`` -> ``236``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def league_average(matches: Iterable[ProcessedMatch], fallback: float = DEFAULT_LEAGUE_AVG) -> float:
    """Mean combined total of ``matches``; ``fallback`` when there are none."""
    totals = [m.total_score for m in matches]
    if not totals:
        return fallback
    return sum(totals) / len(totals)


def project_total(home: TeamStats, away: TeamStats) -> float:
    """Team-trends projection: average of both teams' typical game totals."""
    home_avg_total = home.avg_points_for + home.avg_points_against
    away_avg_total = away.avg_points_for + away.avg_points_against
    return (home_avg_total + away_avg_total) / 4 * 2


def combined_fg_pct(home: TeamStats, away: TeamStats) -> float:
    return (home.avg_fg_pct + away.avg_fg_pct) / 2


def reversion_pick(line: float, league_avg: float, margin: float) -> Optional[BetSide]:
    """Fade lines that sit more than ``margin`` away from the league average."""
    if line > league_avg + margin:
        return BetSide.UNDER
    if line < league_avg - margin:
        return BetSide.OVER
    return None


def model_pick(projection: float, line: float, margin: float) -> Optional[BetSide]:
    if projection > line + margin:
        return BetSide.OVER
    if projection < line - margin:
        return BetSide.UNDER
    return None


def efficiency_pick(combined_fg: float, threshold: float) -> Optional[BetSide]:
    # Strictly above: a combined FG% equal to the threshold is not a signal
    if combined_fg > threshold:
        return BetSide.OVER
    return None

"""Totals betting strategies.

Each strategy kind is its own small frozen dataclass carrying only the
parameters it needs; ``create_strategy`` maps the string identifiers used
on the command line to those variants.
"""

from .base import BaseStrategy, BetDecision, StrategyContext
from .blind import BlindOver, BlindUnder
from .efficiency import HighEfficiencyOver
from .reversion import LeagueAverageReversion
from .rules import (
    DEFAULT_EFFICIENCY_THRESHOLD,
    DEFAULT_LEAGUE_AVG,
    DEFAULT_MARGIN,
    BetSide,
    league_average,
)
from .team_model import TeamTrendsModel

STRATEGY_IDS = [
    BlindOver.strategy_id,
    BlindUnder.strategy_id,
    LeagueAverageReversion.strategy_id,
    TeamTrendsModel.strategy_id,
    HighEfficiencyOver.strategy_id,
]


def create_strategy(
    strategy_id: str,
    margin: float = DEFAULT_MARGIN,
    efficiency_threshold: float = DEFAULT_EFFICIENCY_THRESHOLD,
) -> BaseStrategy:
    """
    Create a strategy from its identifier.

    Args:
        strategy_id: One of ``STRATEGY_IDS``
        margin: Value margin for reversion and team-model strategies
        efficiency_threshold: Combined FG% threshold for the efficiency strategy

    Returns:
        Strategy instance
    """
    if strategy_id == BlindOver.strategy_id:
        return BlindOver()
    elif strategy_id == BlindUnder.strategy_id:
        return BlindUnder()
    elif strategy_id == LeagueAverageReversion.strategy_id:
        return LeagueAverageReversion(margin=margin)
    elif strategy_id == TeamTrendsModel.strategy_id:
        return TeamTrendsModel(margin=margin)
    elif strategy_id == HighEfficiencyOver.strategy_id:
        return HighEfficiencyOver(threshold=efficiency_threshold)
    else:
        raise ValueError(f"Unknown strategy: {strategy_id}")


__all__ = [
    "BaseStrategy",
    "BetDecision",
    "BetSide",
    "BlindOver",
    "BlindUnder",
    "DEFAULT_EFFICIENCY_THRESHOLD",
    "DEFAULT_LEAGUE_AVG",
    "DEFAULT_MARGIN",
    "HighEfficiencyOver",
    "LeagueAverageReversion",
    "STRATEGY_IDS",
    "StrategyContext",
    "TeamTrendsModel",
    "create_strategy",
    "league_average",
]

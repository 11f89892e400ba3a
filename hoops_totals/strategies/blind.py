"""Blind strategies: bet the same side of every game."""

from dataclasses import dataclass
from typing import Optional

from ..models.match import ProcessedMatch
from .base import BaseStrategy, BetDecision, StrategyContext
from .rules import BetSide

BLIND_REASON = "Blind Bet"


@dataclass(frozen=True)
class BlindOver(BaseStrategy):
    """Always bet the Over."""

    strategy_id = "ALL_OVER"
    label = "Blind Over"

    def decide(self, match: ProcessedMatch, context: StrategyContext) -> Optional[BetDecision]:
        return BetDecision(BetSide.OVER, BLIND_REASON)


@dataclass(frozen=True)
class BlindUnder(BaseStrategy):
    """Always bet the Under."""

    strategy_id = "ALL_UNDER"
    label = "Blind Under"

    def decide(self, match: ProcessedMatch, context: StrategyContext) -> Optional[BetDecision]:
        return BetDecision(BetSide.UNDER, BLIND_REASON)

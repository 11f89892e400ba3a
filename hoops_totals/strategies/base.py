"""Base strategy interface for totals betting rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..data.normalize import lookup_team
from ..models.match import ProcessedMatch
from ..models.team import TeamStats
from .rules import BetSide


@dataclass(frozen=True)
class BetDecision:
    """A strategy's decision to bet one side of a match."""

    side: BetSide
    reason: str


@dataclass(frozen=True)
class StrategyContext:
    """Dataset-level inputs a strategy may consult while deciding."""

    league_avg: float
    team_stats: Dict[str, TeamStats] = field(default_factory=dict)

    def team(self, name: str) -> Optional[TeamStats]:
        """Look up a team's aggregates, normalizing feed-specific names."""
        return lookup_team(self.team_stats, name)


class BaseStrategy(ABC):
    """Abstract base class for all totals strategies."""

    strategy_id: str = ""
    label: str = ""

    @abstractmethod
    def decide(self, match: ProcessedMatch, context: StrategyContext) -> Optional[BetDecision]:
        """
        Decide whether to bet a match.

        Args:
            match: Match being replayed
            context: League average and team aggregates of the active dataset

        Returns:
            BetDecision, or None to skip the match
        """
        pass

    @property
    def requires_team_stats(self) -> bool:
        return False

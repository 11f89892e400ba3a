"""High shooting-efficiency Over strategy."""

from dataclasses import dataclass
from typing import Optional

from ..models.match import ProcessedMatch
from .base import BaseStrategy, BetDecision, StrategyContext
from .rules import DEFAULT_EFFICIENCY_THRESHOLD, combined_fg_pct, efficiency_pick, format_number


@dataclass(frozen=True)
class HighEfficiencyOver(BaseStrategy):
    """Bet the Over when both teams' average FG% combined exceeds ``threshold``."""

    threshold: float = DEFAULT_EFFICIENCY_THRESHOLD

    strategy_id = "HIGH_EFFICIENCY_OVER"
    label = "High Efficiency Over"

    @property
    def requires_team_stats(self) -> bool:
        return True

    def decide(self, match: ProcessedMatch, context: StrategyContext) -> Optional[BetDecision]:
        home = context.team(match.home_team)
        away = context.team(match.away_team)
        if home is None or away is None:
            return None

        combined = combined_fg_pct(home, away)
        side = efficiency_pick(combined, self.threshold)
        if side is None:
            return None
        return BetDecision(side, f"Combined FG% {combined:.1f}% > {format_number(self.threshold)}%")

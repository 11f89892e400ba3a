"""League-average reversion strategy."""

from dataclasses import dataclass
from typing import Optional

from ..models.match import ProcessedMatch
from .base import BaseStrategy, BetDecision, StrategyContext
from .rules import DEFAULT_MARGIN, BetSide, format_number, reversion_pick


@dataclass(frozen=True)
class LeagueAverageReversion(BaseStrategy):
    """
    Bet against lines that stray from the league scoring average.

    A line more than ``margin`` points above the average is played Under,
    one more than ``margin`` below it is played Over.
    """

    margin: float = DEFAULT_MARGIN

    strategy_id = "LEAGUE_AVG_REVERSION"
    label = "League Avg Reversion"

    def decide(self, match: ProcessedMatch, context: StrategyContext) -> Optional[BetDecision]:
        side = reversion_pick(match.line, context.league_avg, self.margin)
        if side is None:
            return None

        line = format_number(match.line)
        avg = f"{context.league_avg:.1f}"
        margin = format_number(self.margin)
        if side is BetSide.UNDER:
            return BetDecision(side, f"Line {line} > League Avg {avg} + {margin}")
        return BetDecision(side, f"Line {line} < League Avg {avg} - {margin}")

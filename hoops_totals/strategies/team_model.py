"""Team-trends projection strategy."""

from dataclasses import dataclass
from typing import Optional

from ..models.match import ProcessedMatch
from .base import BaseStrategy, BetDecision, StrategyContext
from .rules import DEFAULT_MARGIN, BetSide, format_number, model_pick, project_total


@dataclass(frozen=True)
class TeamTrendsModel(BaseStrategy):
    """Bet when the projected total clears the line by more than ``margin``."""

    margin: float = DEFAULT_MARGIN

    strategy_id = "TEAM_MODEL"
    label = "Team Trends Model"

    @property
    def requires_team_stats(self) -> bool:
        return True

    def decide(self, match: ProcessedMatch, context: StrategyContext) -> Optional[BetDecision]:
        home = context.team(match.home_team)
        away = context.team(match.away_team)
        if home is None or away is None:
            return None

        projection = project_total(home, away)
        side = model_pick(projection, match.line, self.margin)
        if side is None:
            return None

        op = ">" if side is BetSide.OVER else "<"
        return BetDecision(side, f"Model Proj {projection:.1f} {op} Line {format_number(match.line)}")

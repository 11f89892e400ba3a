"""Replay a strategy over historical matches and settle every bet.

A run is a pure function of its configuration and match set: the same
inputs always produce the same totals and the same audit log order, so a
caller can simply recompute whenever a parameter changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from ..features.team_aggregator import aggregate_backtest_team_stats, index_team_stats
from ..models.match import ProcessedMatch
from ..models.team import TeamStats
from ..strategies.base import BaseStrategy, BetDecision, StrategyContext
from ..strategies.rules import BetSide, league_average

logger = logging.getLogger(__name__)

WIN = "WIN"
LOSS = "LOSS"
PUSH = "PUSH"


@dataclass(frozen=True)
class BacktestConfig:
    """Parameters of one backtest run."""

    strategy: BaseStrategy
    wager: float = 100.0
    team: Optional[str] = None  # None = all teams
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def __post_init__(self):
        """Validate run parameters."""
        if self.wager <= 0:
            raise ValueError(f"Wager must be positive, got {self.wager}")
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError(f"start_date {self.start_date} is after end_date {self.end_date}")

    def includes(self, match: ProcessedMatch) -> bool:
        """Check the team and inclusive date-range filters."""
        if self.team and not match.involves(self.team):
            return False
        if self.start_date and match.date < self.start_date:
            return False
        if self.end_date and match.date > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class BetLogEntry:
    match_id: str
    date: date
    home: str
    away: str
    score: int
    line: float
    pick: BetSide
    result: str
    pnl: float
    reason: str

    def to_dict(self) -> dict:
        return {
            "id": self.match_id,
            "date": self.date.isoformat(),
            "home": self.home,
            "away": self.away,
            "score": self.score,
            "line": self.line,
            "pick": self.pick.value,
            "result": self.result,
            "pnl": self.pnl,
            "reason": self.reason,
        }


@dataclass
class BacktestResult:
    wins: int = 0
    losses: int = 0
    pushes: int = 0
    total_bets: int = 0
    profit: float = 0.0
    roi: float = 0.0
    league_avg: float = 0.0
    history: List[BetLogEntry] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        """Share of decided (non-push) bets that won, in percent."""
        decided = self.wins + self.losses
        return (self.wins / decided) * 100 if decided else 0.0

    def to_dict(self) -> dict:
        return {
            "wins": self.wins,
            "losses": self.losses,
            "pushes": self.pushes,
            "total_bets": self.total_bets,
            "profit": self.profit,
            "roi": self.roi,
            "league_avg": self.league_avg,
            "history": [entry.to_dict() for entry in self.history],
        }


def settle_bet(side: BetSide, match: ProcessedMatch, wager: float):
    """
    Settle one bet against the final total.

    Args:
        side: Side that was bet
        match: Completed match
        wager: Stake

    Returns:
        Tuple of (outcome, pnl) where outcome is WIN, LOSS or PUSH
    """
    if side is BetSide.OVER:
        won = match.total_score > match.line
        lost = match.total_score < match.line
        odds = match.over_odds
    else:
        won = match.total_score < match.line
        lost = match.total_score > match.line
        odds = match.under_odds

    if won:
        return WIN, wager * (odds - 1)
    if lost:
        return LOSS, -wager
    return PUSH, 0.0


def run_backtest(
    config: BacktestConfig,
    matches: Sequence[ProcessedMatch],
    team_stats: Optional[Sequence[TeamStats]] = None,
) -> BacktestResult:
    """
    Run a strategy over the active match set.

    Args:
        config: Strategy and filters
        matches: Active season's processed matches
        team_stats: Team aggregates for strategies that need them. When
            omitted they are derived from ``matches`` with the light
            processed-match aggregator.

    Returns:
        BacktestResult with counts, profit, ROI and the ordered bet log
    """
    filtered = [m for m in matches if config.includes(m)]
    filtered.sort(key=lambda m: m.date, reverse=True)

    if team_stats is None:
        team_stats = aggregate_backtest_team_stats(matches) if config.strategy.requires_team_stats else []
    context = StrategyContext(
        league_avg=league_average(filtered),
        team_stats=index_team_stats(team_stats),
    )

    result = BacktestResult(league_avg=context.league_avg)
    for match in filtered:
        decision: Optional[BetDecision] = config.strategy.decide(match, context)
        if decision is None:
            continue

        outcome, pnl = settle_bet(decision.side, match, config.wager)
        result.total_bets += 1
        result.profit += pnl
        if outcome == WIN:
            result.wins += 1
        elif outcome == LOSS:
            result.losses += 1
        else:
            result.pushes += 1

        result.history.append(
            BetLogEntry(
                match_id=match.id,
                date=match.date,
                home=match.home_team,
                away=match.away_team,
                score=match.total_score,
                line=match.line,
                pick=decision.side,
                result=outcome,
                pnl=pnl,
                reason=decision.reason,
            )
        )

    if result.total_bets > 0:
        result.roi = (result.profit / (result.total_bets * config.wager)) * 100

    logger.info(
        "Backtest %s: %d bets over %d matches, profit %.2f, ROI %.2f%%",
        config.strategy.strategy_id,
        result.total_bets,
        len(filtered),
        result.profit,
        result.roi,
    )
    return result

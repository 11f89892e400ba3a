"""Processed match model for totals analysis."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Tuple


class MatchResult(str, Enum):
    """Settlement of a game's combined score against its totals line."""

    OVER = "OVER"
    UNDER = "UNDER"
    PUSH = "PUSH"

    @classmethod
    def settle(cls, total: float, line: float) -> "MatchResult":
        """
        Settle a total against a line.

        Args:
            total: Combined final score
            line: Bookmaker totals line

        Returns:
            OVER if total > line, UNDER if total < line, otherwise PUSH
        """
        if total > line:
            return cls.OVER
        if total < line:
            return cls.UNDER
        return cls.PUSH


@dataclass(frozen=True)
class ProcessedMatch:
    """Canonical derived record for one completed game."""

    id: str
    date: date
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    total_score: int
    regulation_total: int
    line: float
    over_odds: float
    under_odds: float
    result: MatchResult
    diff: float
    pace: float
    home_ts: float
    away_ts: float
    home_fg_pct: float
    away_fg_pct: float
    quarterly_totals: Tuple[int, int, int, int]
    home_q_scores: Tuple[int, int, int, int]
    away_q_scores: Tuple[int, int, int, int]
    is_ot: bool

    def involves(self, team: str) -> bool:
        """Check whether ``team`` played in this game."""
        return team == self.home_team or team == self.away_team

    def score_for(self, team: str) -> Tuple[int, int]:
        """Return ``(points_for, points_against)`` from ``team``'s side."""
        if team == self.home_team:
            return self.home_score, self.away_score
        return self.away_score, self.home_score

    def opponent_of(self, team: str) -> str:
        return self.away_team if team == self.home_team else self.home_team

    def to_dict(self) -> dict:
        """Convert match to dictionary."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "home_team": self.home_team,
            "away_team": self.away_team,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "total_score": self.total_score,
            "regulation_total": self.regulation_total,
            "line": self.line,
            "over_odds": self.over_odds,
            "under_odds": self.under_odds,
            "result": self.result.value,
            "diff": self.diff,
            "pace": self.pace,
            "home_ts": self.home_ts,
            "away_ts": self.away_ts,
            "home_fg_pct": self.home_fg_pct,
            "away_fg_pct": self.away_fg_pct,
            "quarterly_totals": list(self.quarterly_totals),
            "home_q_scores": list(self.home_q_scores),
            "away_q_scores": list(self.away_q_scores),
            "is_ot": self.is_ot,
        }

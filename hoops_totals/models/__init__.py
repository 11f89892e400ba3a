"""Data models for matches, teams and live odds."""

from .live import Bookmaker, LineMovement, LiveGame, Market, Outcome
from .match import MatchResult, ProcessedMatch
from .team import TeamStats

__all__ = [
    "Bookmaker",
    "LineMovement",
    "LiveGame",
    "Market",
    "MatchResult",
    "Outcome",
    "ProcessedMatch",
    "TeamStats",
]

"""Matchup analysis."""

from .matchup import InsightType, MatchupInsight, analyze_matchup

__all__ = ["InsightType", "MatchupInsight", "analyze_matchup"]

"""Derived match and team metrics."""

from .market_insights import MarketInsights, TeamMarketProfile, calculate_market_insights, market_profiles
from .match_insights import MatchInsights, generate_match_insights
from .match_processor import process_matches
from .snapshot import SeasonSnapshot, build_season_snapshot
from .team_aggregator import aggregate_backtest_team_stats, aggregate_team_stats
from .team_profile import advanced_ratings, quarter_averages, recent_form

__all__ = [
    "MarketInsights",
    "MatchInsights",
    "SeasonSnapshot",
    "TeamMarketProfile",
    "advanced_ratings",
    "aggregate_backtest_team_stats",
    "aggregate_team_stats",
    "build_season_snapshot",
    "calculate_market_insights",
    "generate_match_insights",
    "market_profiles",
    "process_matches",
    "quarter_averages",
    "recent_form",
]

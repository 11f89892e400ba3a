"""NBA totals analytics: match processing, team aggregates, backtests and live edges."""

from .analysis import analyze_matchup
from .backtest import BacktestConfig, run_backtest
from .features import (
    aggregate_backtest_team_stats,
    aggregate_team_stats,
    build_season_snapshot,
    calculate_market_insights,
    generate_match_insights,
    process_matches,
)
from .live import evaluate_live_signals
from .strategies import create_strategy

__version__ = "0.1.0"

__all__ = [
    "BacktestConfig",
    "aggregate_backtest_team_stats",
    "aggregate_team_stats",
    "analyze_matchup",
    "build_season_snapshot",
    "calculate_market_insights",
    "create_strategy",
    "evaluate_live_signals",
    "generate_match_insights",
    "process_matches",
    "run_backtest",
]

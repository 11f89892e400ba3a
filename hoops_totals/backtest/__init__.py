"""Historical strategy backtesting."""

from .engine import BacktestConfig, BacktestResult, BetLogEntry, run_backtest, settle_bet

__all__ = ["BacktestConfig", "BacktestResult", "BetLogEntry", "run_backtest", "settle_bet"]

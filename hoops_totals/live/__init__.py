"""Live odds evaluation."""

from .export import export_live_edges_csv, live_edges_frame
from .movements import detect_line_movements
from .signals import SIGNAL_FILTERS, LiveSignal, evaluate_live_signals

__all__ = [
    "LiveSignal",
    "SIGNAL_FILTERS",
    "detect_line_movements",
    "evaluate_live_signals",
    "export_live_edges_csv",
    "live_edges_frame",
]

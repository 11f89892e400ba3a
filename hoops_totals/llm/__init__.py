"""AI season summaries."""

from .summary import GeminiSummaryClient, SummaryConfig, SummaryError, build_summary_prompt, generate_summary

__all__ = [
    "GeminiSummaryClient",
    "SummaryConfig",
    "SummaryError",
    "build_summary_prompt",
    "generate_summary",
]

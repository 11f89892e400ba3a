"""Rolling historical context for a single match.

Only games played strictly before the target date are used, so a backtest
never sees information from the day of the game itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..models.match import ProcessedMatch

MEAN_WINDOW = 15
RATE_WINDOW = 10
HIGH_SCORING_TOTAL = 240
Q4_TREND_THRESHOLD = 2.0

TREND_HIGH_INTENSITY = "High Intensity (+)"
TREND_FADE = "Fade (-)"
TREND_NEUTRAL = "Neutral"


@dataclass(frozen=True)
class MatchInsights:
    mean15: float
    sd15: float
    high_scoring_rate: float
    q4_trend: str
    q4_trend_value: float


def relevant_history(match: ProcessedMatch, all_matches: Sequence[ProcessedMatch]) -> List[ProcessedMatch]:
    """Earlier games involving either team, most recent first."""
    teams = {match.home_team, match.away_team}
    history = [
        m for m in all_matches
        if m.date < match.date and (m.home_team in teams or m.away_team in teams)
    ]
    history.sort(key=lambda m: m.date, reverse=True)
    return history


def _sample_sd(values: np.ndarray) -> float:
    if values.size < 2:
        return 0.0
    return float(np.std(values, ddof=1))


def _q4_trend(matches: Sequence[ProcessedMatch]) -> float:
    deltas = [
        m.quarterly_totals[3] - np.mean(m.quarterly_totals[:3])
        for m in matches
        if len(m.quarterly_totals) == 4
    ]
    if not deltas:
        return 0.0
    return float(np.mean(deltas))


def classify_q4_trend(value: float) -> str:
    if value > Q4_TREND_THRESHOLD:
        return TREND_HIGH_INTENSITY
    if value < -Q4_TREND_THRESHOLD:
        return TREND_FADE
    return TREND_NEUTRAL


def generate_match_insights(match: ProcessedMatch, all_matches: Sequence[ProcessedMatch]) -> MatchInsights:
    """
    Compute look-back statistics for ``match``.

    Args:
        match: Target match
        all_matches: Full processed history (any order)

    Returns:
        MatchInsights with the mean/sample SD of the last 15 combined totals,
        the share (%) of the last 10 above 240, and the Q4 scoring trend
    """
    history = relevant_history(match, all_matches)

    totals15 = np.array([m.total_score for m in history[:MEAN_WINDOW]], dtype=float)
    mean15 = float(totals15.mean()) if totals15.size else 0.0
    sd15 = _sample_sd(totals15)

    last10 = history[:RATE_WINDOW]
    if last10:
        high_scoring = sum(1 for m in last10 if m.total_score > HIGH_SCORING_TOTAL)
        high_scoring_rate = (high_scoring / len(last10)) * 100
    else:
        high_scoring_rate = 0.0

    trend_value = _q4_trend(last10)
    return MatchInsights(
        mean15=mean15,
        sd15=sd15,
        high_scoring_rate=high_scoring_rate,
        q4_trend=classify_q4_trend(trend_value),
        q4_trend_value=trend_value,
    )

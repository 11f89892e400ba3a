"""Natural-language season summary through the Gemini REST API."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import requests

from ..models.match import ProcessedMatch
from ..models.team import TeamStats
from ..strategies.rules import format_number

logger = logging.getLogger(__name__)

GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-2.5-flash"

TOP_OVER_TEAMS = 3
RECENT_GAMES = 5

MISSING_KEY_MESSAGE = (
    "## API Key Missing\n\n"
    f"Set {GEMINI_API_KEY_ENV} in the environment to enable AI summaries."
)


class SummaryError(Exception):
    """Error returned by the summary API."""


@dataclass
class SummaryConfig:
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    timeout: int = 60
    max_tokens: int = 1000
    temperature: float = 0.7

    def __post_init__(self):
        if self.api_key is None:
            self.api_key = (os.environ.get(GEMINI_API_KEY_ENV) or "").strip() or None


def build_summary_prompt(matches: Sequence[ProcessedMatch], teams: Sequence[TeamStats]) -> str:
    """Prompt built from match count, top over-rate teams and the latest games."""
    recent = list(matches)[:RECENT_GAMES]
    top_over = sorted(teams, key=lambda t: t.over_rate, reverse=True)[:TOP_OVER_TEAMS]

    top_text = ", ".join(f"{t.name} ({t.over_rate:.1f}%)" for t in top_over)
    recent_text = " | ".join(
        f"{m.home_team} vs {m.away_team}: Total {m.total_score} (Line {format_number(m.line)})"
        for m in recent
    )
    return (
        "You are a professional NBA sports betting analyst. Analyze the following "
        "summary data derived from historical matches and provide 3 key actionable "
        "betting insights for Totals (Over/Under).\n\n"
        "Data Summary:\n"
        f"- Total Matches Analyzed: {len(matches)}\n"
        f"- Top {TOP_OVER_TEAMS} Teams hitting the Over: {top_text}\n"
        f"- Recent {RECENT_GAMES} games results: {recent_text}\n\n"
        "Format your response in Markdown with bold headers. Focus on trends, pace "
        "and potential value. Keep it concise."
    )


class GeminiSummaryClient:
    """Synchronous Gemini ``generateContent`` client."""

    def __init__(self, config: Optional[SummaryConfig] = None):
        self.config = config or SummaryConfig()
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    @property
    def configured(self) -> bool:
        return bool(self.config.api_key)

    def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Raises:
            SummaryError: Missing key, HTTP failure or an empty response
        """
        if not self.config.api_key:
            raise SummaryError(f"{GEMINI_API_KEY_ENV} not configured")

        url = f"{GEMINI_BASE_URL}/{self.config.model}:generateContent?key={self.config.api_key}"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "maxOutputTokens": self.config.max_tokens,
                "temperature": self.config.temperature,
            },
        }
        try:
            response = self.session.post(url, json=payload, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise SummaryError(str(exc)) from exc

        if response.status_code != 200:
            raise SummaryError(f"Gemini API error {response.status_code}: {response.text[:500]}")

        try:
            data = response.json()
        except ValueError as exc:
            raise SummaryError("Gemini response was not JSON") from exc
        return _extract_text(data)


def _extract_text(data: Dict) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        raise SummaryError("No candidates in Gemini response")
    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts)
    if not text:
        raise SummaryError("Empty Gemini response")
    return text


def generate_summary(
    matches: Sequence[ProcessedMatch],
    teams: Sequence[TeamStats],
    client: Optional[GeminiSummaryClient] = None,
) -> Optional[str]:
    """
    Summarize the season's totals trends.

    Returns:
        Model text, a placeholder message when no API key is configured,
        or None when the API call fails
    """
    client = client or GeminiSummaryClient()
    if not client.configured:
        return MISSING_KEY_MESSAGE

    prompt = build_summary_prompt(matches, teams)
    try:
        return client.generate(prompt)
    except SummaryError as exc:
        logger.warning("Failed to generate summary: %s", exc)
        return None

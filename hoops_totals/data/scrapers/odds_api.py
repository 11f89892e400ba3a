"""The Odds API client for live NBA totals."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import requests

from ...models.live import LiveGame
from ..validators import validate_live_odds_payload

logger = logging.getLogger(__name__)

ODDS_API_KEY_ENV = "ODDS_API_KEY"
THE_ODDS_API_BASE = "https://api.the-odds-api.com/v4"
CACHE_FILENAME = "live_odds.json"


@dataclass
class OddsApiConfig:
    api_key: Optional[str] = None
    base_url: str = THE_ODDS_API_BASE
    sport: str = "basketball_nba"
    bookmakers: List[str] = field(default_factory=lambda: ["betfair", "pinnacle", "unibet_eu", "onexbet"])
    markets: List[str] = field(default_factory=lambda: ["h2h", "spreads", "totals"])
    timeout: int = 30

    def __post_init__(self):
        if self.api_key is None:
            self.api_key = os.environ.get(ODDS_API_KEY_ENV) or None


class OddsApiScraper:
    """Fetches the live odds snapshot; failures surface as an empty snapshot."""

    def __init__(self, config: Optional[OddsApiConfig] = None, cache_dir: Optional[str] = None):
        self.config = config or OddsApiConfig()
        self.session = requests.Session()
        self.cache_dir = Path(cache_dir) if cache_dir else None
        if self.cache_dir:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.requests_remaining: Optional[str] = None

    def fetch_live_games(self, force_refresh: bool = False) -> List[LiveGame]:
        """
        Fetch upcoming games with bookmaker quotes.

        Args:
            force_refresh: Ignore the disk cache

        Returns:
            Parsed LiveGame list (empty on any API or network failure)
        """
        if not force_refresh:
            cached = self.cached_games()
            if cached:
                logger.info("Loaded live odds from cache.")
                return cached

        if not self.config.api_key:
            logger.warning("Live odds unavailable. Set %s.", ODDS_API_KEY_ENV)
            return []

        url = f"{self.config.base_url}/sports/{self.config.sport}/odds/"
        params = {
            "bookmakers": ",".join(self.config.bookmakers),
            "markets": ",".join(self.config.markets),
            "apiKey": self.config.api_key,
        }
        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout)
        except requests.RequestException as exc:
            logger.warning("Failed to fetch live odds: %s", exc)
            return []

        if not response.ok:
            logger.warning("Live odds API quota limit or error: %s %s", response.status_code, response.reason)
            return []
        self.requests_remaining = response.headers.get("x-requests-remaining")

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Live odds response was not JSON: %s", exc)
            return []

        errors = validate_live_odds_payload(payload)
        if errors:
            logger.warning("Live odds failed validation: %s", "; ".join(errors[:5]))
            return []

        self._save_cache({"games": payload})
        return [LiveGame.from_dict(g) for g in payload]

    def cached_games(self) -> List[LiveGame]:
        """Games from the last saved snapshot, or an empty list."""
        cached = self._load_cache()
        if not cached:
            return []
        return [LiveGame.from_dict(g) for g in cached.get("games", []) if isinstance(g, dict)]

    def _load_cache(self) -> Optional[Dict]:
        if not self.cache_dir:
            return None
        path = self.cache_dir / CACHE_FILENAME
        if not path.exists():
            return None
        try:
            with open(path, "r") as f:
                return json.load(f)
        except json.JSONDecodeError:
            logger.warning("Error parsing cached odds, ignoring %s", path)
            return None

    def _save_cache(self, payload: Dict) -> None:
        if not self.cache_dir:
            return
        with open(self.cache_dir / CACHE_FILENAME, "w") as f:
            json.dump(payload, f, indent=2)

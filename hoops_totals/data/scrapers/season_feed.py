"""HTTP season-file feed with a JSON disk cache."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import requests

from ..seasons import get_season
from ..validators import validate_raw_matches_payload

logger = logging.getLogger(__name__)


class SeasonFeedScraper:
    """Downloads season match files from a static base URL."""

    def __init__(self, base_url: str, cache_dir: Optional[str] = None):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)",
            }
        )
        self.cache_dir = Path(cache_dir) if cache_dir else None
        if self.cache_dir:
            self.cache_dir.mkdir(parents=True, exist_ok=True)

    def fetch_season(self, season_id: str) -> List[Dict]:
        """
        Fetch one season's raw match records.

        A fetch or parse failure is logged and returned as an empty list;
        the processing core is never handed a partial season.
        """
        season = get_season(season_id)
        if season is None:
            logger.warning("Unknown season id %s", season_id)
            return []

        cached = self._load_cache(season.filename)
        if cached:
            matches = cached.get("matches", [])
            if isinstance(matches, list) and matches:
                return matches

        url = f"{self.base_url}/{season.filename}"
        try:
            response = self.session.get(url, timeout=45)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Could not fetch season %s: %s", season_id, exc)
            return []

        errors = validate_raw_matches_payload(payload)
        if errors:
            logger.warning("Season %s failed validation: %s", season_id, "; ".join(errors[:5]))
            return []

        matches = payload.get("matches", []) if isinstance(payload, dict) else payload
        self._save_cache(season.filename, {"matches": matches})
        return matches

    def _load_cache(self, filename: str) -> Optional[Dict]:
        if not self.cache_dir:
            return None
        path = self.cache_dir / filename
        if not path.exists():
            return None
        try:
            with open(path, "r") as f:
                return json.load(f)
        except json.JSONDecodeError:
            return None

    def _save_cache(self, filename: str, payload: Dict) -> None:
        if not self.cache_dir:
            return
        path = self.cache_dir / filename
        with open(path, "w") as f:
            json.dump(payload, f, indent=2)

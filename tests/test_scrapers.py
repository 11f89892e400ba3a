"""Unit tests for the season feed and odds API clients (HTTP mocked)."""

import pytest
import requests

from hoops_totals.data.scrapers import OddsApiConfig, OddsApiScraper, SeasonFeedScraper
from hoops_totals.data.scrapers.odds_api import ODDS_API_KEY_ENV


class FakeResponse:
    def __init__(self, payload=None, status_code=200, headers=None):
        self._payload = payload
        self.status_code = status_code
        self.ok = status_code < 400
        self.reason = "OK" if self.ok else "Unauthorized"
        self.headers = headers or {}
        self.text = str(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} {self.reason}")


ODDS_PAYLOAD = [
    {
        "id": "g1",
        "commence_time": "2025-01-20T00:30:00Z",
        "home_team": "LA Clippers",
        "away_team": "Miami Heat",
        "bookmakers": [
            {
                "key": "pinnacle",
                "markets": [
                    {
                        "key": "totals",
                        "outcomes": [
                            {"name": "Over", "price": 1.95, "point": 221.5},
                            {"name": "Under", "price": 1.87, "point": 221.5},
                        ],
                    }
                ],
            }
        ],
    }
]


def test_odds_config_reads_api_key_from_env(monkeypatch):
    """Test odds API key from the environment."""
    monkeypatch.setenv(ODDS_API_KEY_ENV, "secret")
    assert OddsApiConfig().api_key == "secret"
    monkeypatch.delenv(ODDS_API_KEY_ENV)
    assert OddsApiConfig().api_key is None


def test_odds_without_key_returns_empty(monkeypatch):
    """Test odds fetch without an API key."""
    monkeypatch.delenv(ODDS_API_KEY_ENV, raising=False)
    scraper = OddsApiScraper()

    def fail(*args, **kwargs):
        raise AssertionError("no request expected")

    monkeypatch.setattr(scraper.session, "get", fail)
    assert scraper.fetch_live_games() == []


def test_odds_fetch_parses_and_caches(tmp_path, monkeypatch):
    """Test odds fetch and cache."""
    scraper = OddsApiScraper(OddsApiConfig(api_key="k"), cache_dir=str(tmp_path))
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params))
        return FakeResponse(ODDS_PAYLOAD, headers={"x-requests-remaining": "42"})

    monkeypatch.setattr(scraper.session, "get", fake_get)
    games = scraper.fetch_live_games()

    assert [g.id for g in games] == ["g1"]
    assert games[0].totals_line() == pytest.approx(221.5)
    assert scraper.requests_remaining == "42"
    url, params = calls[0]
    assert url.endswith("/sports/basketball_nba/odds/")
    assert params["markets"] == "h2h,spreads,totals"
    assert params["apiKey"] == "k"

    # Second call is served from the cache
    cached = scraper.fetch_live_games()
    assert len(calls) == 1
    assert cached == games
    assert scraper.cached_games() == games
    assert OddsApiScraper(OddsApiConfig(api_key="k")).cached_games() == []


def test_odds_http_error_returns_empty(monkeypatch):
    """Test odds fetch with an HTTP error."""
    scraper = OddsApiScraper(OddsApiConfig(api_key="k"))
    monkeypatch.setattr(scraper.session, "get", lambda *a, **kw: FakeResponse({"message": "quota"}, status_code=401))
    assert scraper.fetch_live_games() == []


def test_odds_network_error_returns_empty(monkeypatch):
    """Test odds fetch with a network error."""
    scraper = OddsApiScraper(OddsApiConfig(api_key="k"))

    def boom(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(scraper.session, "get", boom)
    assert scraper.fetch_live_games() == []


def test_season_feed_fetch_and_cache(tmp_path, monkeypatch, raw_match_factory):
    """Test season feed fetch and cache."""
    scraper = SeasonFeedScraper("https://example.test/data/", cache_dir=str(tmp_path))
    urls = []

    def fake_get(url, timeout=None):
        urls.append(url)
        return FakeResponse({"matches": [raw_match_factory()]})

    monkeypatch.setattr(scraper.session, "get", fake_get)

    matches = scraper.fetch_season("2025")
    assert len(matches) == 1
    assert urls == ["https://example.test/data/nba_2025.json"]
    assert (tmp_path / "nba_2025.json").exists()

    scraper.fetch_season("2025")
    assert len(urls) == 1


def test_season_feed_failures_return_empty(monkeypatch):
    """Test season feed failures."""
    scraper = SeasonFeedScraper("https://example.test")

    monkeypatch.setattr(scraper.session, "get", lambda *a, **kw: FakeResponse(None, status_code=500))
    assert scraper.fetch_season("2025") == []

    monkeypatch.setattr(scraper.session, "get", lambda *a, **kw: FakeResponse({"matches": []}))
    assert scraper.fetch_season("2025") == []

    monkeypatch.setattr(scraper.session, "get", lambda *a, **kw: FakeResponse(None))
    assert scraper.fetch_season("2025") == []

    assert scraper.fetch_season("1999") == []

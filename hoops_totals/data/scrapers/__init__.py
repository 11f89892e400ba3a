"""Scraper exports."""

from .odds_api import OddsApiConfig, OddsApiScraper
from .season_feed import SeasonFeedScraper

__all__ = [
    "OddsApiConfig",
    "OddsApiScraper",
    "SeasonFeedScraper",
]

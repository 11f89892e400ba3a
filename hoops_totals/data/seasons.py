"""Registry of the season files the engine knows about."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

DATA_DIR_ENV = "HOOPS_TOTALS_DATA_DIR"
DEFAULT_DATA_DIR = "datasets"


@dataclass(frozen=True)
class Season:
    id: str
    name: str
    filename: str


# First entry is the current (default) season.
SEASONS: List[Season] = [
    Season("2025", "2024-2025 Season (Current)", "nba_2025.json"),
    Season("2024", "2023-2024 Season", "nba_2024.json"),
]


def default_season() -> Season:
    return SEASONS[0]


def get_season(season_id: str) -> Optional[Season]:
    for season in SEASONS:
        if season.id == season_id:
            return season
    return None


def data_dir() -> Path:
    return Path(os.environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR))


def season_path(season: Season, base_dir: Optional[str] = None) -> Path:
    """Local path of a season file, under ``base_dir`` or the configured data dir."""
    root = Path(base_dir) if base_dir else data_dir()
    return root / season.filename

"""Data loader for season match files."""

import json
import logging
from datetime import date, timedelta
from typing import Dict, List, Sequence

import numpy as np

from ..models.match import ProcessedMatch
from ..models.team import TeamStats

logger = logging.getLogger(__name__)

SAMPLE_TEAMS = [
    "Boston Celtics",
    "Denver Nuggets",
    "Indiana Pacers",
    "Los Angeles Clippers",
    "Miami Heat",
    "Oklahoma City Thunder",
]


class DataLoader:
    """Loads and saves season data as JSON files."""

    @staticmethod
    def load_raw_matches(file_path: str) -> List[Dict]:
        """
        Load raw match records from a season file.

        The file holds either a JSON list of matches or an object with a
        ``matches`` list.

        Args:
            file_path: Path to JSON file

        Returns:
            List of RawMatch dictionaries
        """
        with open(file_path, 'r') as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get('matches', [])
        if not isinstance(data, list):
            raise ValueError(f"Season file {file_path} does not contain a match list")

        matches = [m for m in data if isinstance(m, dict)]
        logger.info("Loaded %d raw matches from %s", len(matches), file_path)
        return matches

    @staticmethod
    def save_processed(matches: Sequence[ProcessedMatch], file_path: str) -> None:
        """
        Save processed matches to a JSON file.

        Args:
            matches: Processed matches
            file_path: Output file path
        """
        with open(file_path, 'w') as f:
            json.dump({"matches": [m.to_dict() for m in matches]}, f, indent=2)

    @staticmethod
    def save_team_stats(teams: Sequence[TeamStats], file_path: str) -> None:
        with open(file_path, 'w') as f:
            json.dump({"teams": [t.to_dict() for t in teams]}, f, indent=2)

    @staticmethod
    def load_team_stats(file_path: str) -> List[TeamStats]:
        with open(file_path, 'r') as f:
            data = json.load(f)
        return [TeamStats.from_dict(t) for t in data.get('teams', [])]

    @staticmethod
    def create_sample_data(output_path: str, num_games: int = 60, seed: int = 2025) -> None:
        """
        Create a synthetic season file for testing.

        Args:
            output_path: Path to save sample data
            num_games: Number of games to generate
            seed: Random seed
        """
        rng = np.random.default_rng(seed)
        start = date(2024, 10, 22)
        matches = []

        for i in range(num_games):
            home, away = rng.choice(len(SAMPLE_TEAMS), size=2, replace=False)
            home_team = SAMPLE_TEAMS[int(home)]
            away_team = SAMPLE_TEAMS[int(away)]
            game_date = start + timedelta(days=i // 3)

            quarter_scores = {}
            quarter_stats = {}
            home_total = 0
            away_total = 0
            for q in ("Q1", "Q2", "Q3", "Q4"):
                h = int(rng.integers(22, 35))
                a = int(rng.integers(22, 35))
                home_total += h
                away_total += a
                quarter_scores[q] = {"home_score": str(h), "away_score": str(a)}
                quarter_stats[q] = {
                    home_team: _sample_quarter_line(rng, h),
                    away_team: _sample_quarter_line(rng, a),
                }

            line = round(float(rng.normal(228, 6)) * 2) / 2
            matches.append({
                "match_id": f"sample-{i + 1:04d}",
                "stage": "Regular Season",
                "date": game_date.strftime("%d.%m.%Y") + " 19:30",
                "scraped_at": "",
                "home_team": home_team,
                "away_team": away_team,
                "home_score": str(home_total),
                "away_score": str(away_total),
                "quarter_scores": quarter_scores,
                "match_stats": {},
                "quarter_stats": quarter_stats,
                "line_odds": {"total_line": line, "over_odds": 1.91, "under_odds": 1.91},
            })

        with open(output_path, 'w') as f:
            json.dump(matches, f, indent=2)


def _sample_quarter_line(rng, points: int) -> Dict[str, str]:
    fta = int(rng.integers(2, 9))
    ftm = min(fta, int(rng.integers(1, 8)))
    fg3a = int(rng.integers(6, 13))
    fg3m = min(fg3a, int(rng.integers(1, 6)))
    fgm = max(fg3m, (points - ftm - fg3m) // 2)
    fga = fgm + int(rng.integers(8, 16))
    orb = int(rng.integers(1, 5))
    drb = int(rng.integers(6, 12))
    return {
        "field_goals_attempted": str(fga),
        "field_goals_made": str(fgm),
        "3_point_field_g_attempted": str(fg3a),
        "3_point_field_goals_made": str(fg3m),
        "free_throws_attempted": str(fta),
        "free_throws_made": str(ftm),
        "offensive_rebounds": str(orb),
        "defensive_rebounds": str(drb),
        "total_rebounds": str(orb + drb),
        "assists": str(int(rng.integers(4, 9))),
        "turnovers": str(int(rng.integers(1, 5))),
        "personal_fouls": str(int(rng.integers(3, 7))),
    }

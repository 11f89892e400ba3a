"""Schema validators for season files and live odds snapshots."""

from __future__ import annotations

from typing import Dict, List, Union

Payload = Union[Dict, List]

REQUIRED_MATCH_FIELDS = {"match_id", "date", "home_team", "away_team", "home_score", "away_score"}
REQUIRED_GAME_FIELDS = {"id", "home_team", "away_team"}


def _records(payload: Payload, key: str):
    if isinstance(payload, dict):
        return payload.get(key)
    return payload


def validate_raw_matches_payload(payload: Payload) -> List[str]:
    errors: List[str] = []
    matches = _records(payload, "matches")
    if not isinstance(matches, list) or not matches:
        return ["season payload must be a non-empty list of matches"]

    for idx, row in enumerate(matches):
        if not isinstance(row, dict):
            errors.append(f"matches[{idx}] must be an object")
            continue
        missing = sorted(k for k in REQUIRED_MATCH_FIELDS if k not in row)
        if missing:
            errors.append(f"matches[{idx}] missing fields: {', '.join(missing)}")
        if not isinstance(row.get("quarter_scores", {}), dict):
            errors.append(f"matches[{idx}] quarter_scores must be an object")
        if not isinstance(row.get("quarter_stats", {}), dict):
            errors.append(f"matches[{idx}] quarter_stats must be an object")
        if not isinstance(row.get("line_odds", {}), dict):
            errors.append(f"matches[{idx}] line_odds must be an object")
    return errors


def validate_live_odds_payload(payload: Payload) -> List[str]:
    errors: List[str] = []
    games = _records(payload, "games")
    if not isinstance(games, list):
        return ["odds payload must be a list of games"]

    for idx, row in enumerate(games):
        if not isinstance(row, dict):
            errors.append(f"games[{idx}] must be an object")
            continue
        missing = sorted(k for k in REQUIRED_GAME_FIELDS if k not in row)
        if missing:
            errors.append(f"games[{idx}] missing fields: {', '.join(missing)}")
        if not isinstance(row.get("bookmakers", []), list):
            errors.append(f"games[{idx}] bookmakers must be a list")
    return errors

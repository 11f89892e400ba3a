"""Transform raw season records into processed matches."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Mapping, Tuple

from ..data.numeric import parse_float, parse_int
from ..models.match import MatchResult, ProcessedMatch
from .box_score import game_pace, sum_box_scores
from .metrics import calculate_fg_pct, calculate_true_shooting

logger = logging.getLogger(__name__)

REGULATION_PERIODS = ("Q1", "Q2", "Q3", "Q4")
OVERTIME_PERIOD = "OT"
DEFAULT_ODDS = 1.91  # decimal equivalent of -110


def parse_match_date(value) -> date:
    """
    Parse a ``DD.MM.YYYY`` season-file date.

    Anything after the first space (a kick-off time) is ignored. Unparseable
    dates degrade to ``date.min`` so the record still sorts last.
    """
    text = str(value or "").strip().split(" ")[0]
    parts = text.split(".")
    if len(parts) == 3:
        day, month, year = (parse_int(p) for p in parts)
        try:
            return date(year, month, day)
        except (ValueError, OverflowError):
            pass
    logger.debug("Unparseable match date %r", value)
    return date.min


def _period_scores(quarter_scores: Mapping, side: str) -> Tuple[int, int, int, int]:
    scores = []
    for period in REGULATION_PERIODS:
        entry = quarter_scores.get(period)
        scores.append(parse_int(entry.get(side)) if isinstance(entry, Mapping) else 0)
    return tuple(scores)


def process_match(raw: Mapping) -> ProcessedMatch:
    """Derive a single ProcessedMatch from a RawMatch dictionary."""
    home_team = str(raw.get("home_team", ""))
    away_team = str(raw.get("away_team", ""))
    home_score = parse_int(raw.get("home_score"))
    away_score = parse_int(raw.get("away_score"))
    total_score = home_score + away_score

    line_odds = raw.get("line_odds") or {}
    line = parse_float(line_odds.get("total_line"))
    over_odds = parse_float(line_odds.get("over_odds")) or DEFAULT_ODDS
    under_odds = parse_float(line_odds.get("under_odds")) or DEFAULT_ODDS

    quarter_scores = raw.get("quarter_scores") or {}
    if not isinstance(quarter_scores, Mapping):
        quarter_scores = {}
    home_q = _period_scores(quarter_scores, "home_score")
    away_q = _period_scores(quarter_scores, "away_score")
    quarterly_totals = tuple(h + a for h, a in zip(home_q, away_q))

    box = sum_box_scores(raw)
    home_box, away_box = box["home"], box["away"]

    return ProcessedMatch(
        id=str(raw.get("match_id", "")),
        date=parse_match_date(raw.get("date")),
        home_team=home_team,
        away_team=away_team,
        home_score=home_score,
        away_score=away_score,
        total_score=total_score,
        regulation_total=sum(quarterly_totals),
        line=line,
        over_odds=over_odds,
        under_odds=under_odds,
        result=MatchResult.settle(total_score, line),
        diff=total_score - line,
        pace=game_pace(box),
        # Full-game recomputation on summed shot counts, not a mean of periods
        home_ts=calculate_true_shooting(home_score, home_box.fga, home_box.fta),
        away_ts=calculate_true_shooting(away_score, away_box.fga, away_box.fta),
        home_fg_pct=calculate_fg_pct(home_box.fgm, home_box.fga),
        away_fg_pct=calculate_fg_pct(away_box.fgm, away_box.fga),
        quarterly_totals=quarterly_totals,
        home_q_scores=home_q,
        away_q_scores=away_q,
        is_ot=quarter_scores.get(OVERTIME_PERIOD) is not None,
    )


def process_matches(raw_matches: Iterable[Mapping]) -> List[ProcessedMatch]:
    """
    Process a season of raw match records.

    Args:
        raw_matches: RawMatch dictionaries in file order

    Returns:
        ProcessedMatch list sorted by date, most recent first. Games on the
        same date keep their input order.
    """
    processed = [process_match(raw) for raw in raw_matches if isinstance(raw, Mapping)]
    processed.sort(key=lambda m: m.date, reverse=True)
    logger.info("Processed %d matches", len(processed))
    return processed

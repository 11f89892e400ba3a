"""Unit tests for raw match processing."""

from datetime import date

import pytest

from hoops_totals.features.match_processor import (
    DEFAULT_ODDS,
    parse_match_date,
    process_match,
    process_matches,
)
from hoops_totals.models.match import MatchResult

POSSESSIONS_PER_PERIOD = 0.96 * (22 + 0.44 * 5 - 2 + 3)


def test_process_match_derives_totals(raw_match_factory):
    """Test derived match totals."""
    match = process_match(raw_match_factory())

    assert match.id == "m1"
    assert match.date == date(2025, 1, 15)
    assert match.home_score == 110
    assert match.away_score == 100
    assert match.total_score == 210
    assert match.regulation_total == 210
    assert match.result is MatchResult.UNDER
    assert match.diff == pytest.approx(-10.5)
    assert match.quarterly_totals == (55, 54, 54, 47)
    assert match.home_q_scores == (30, 28, 27, 25)
    assert match.is_ot is False


def test_process_match_full_game_shooting(raw_match_factory):
    """Test full game shooting metrics."""
    match = process_match(raw_match_factory())

    # 4 periods of 22 FGA / 10 FGM / 5 FTA
    assert match.home_ts == pytest.approx(110 / (2 * (88 + 0.44 * 20)) * 100)
    assert match.away_ts == pytest.approx(100 / (2 * (88 + 0.44 * 20)) * 100)
    assert match.home_fg_pct == pytest.approx(40 / 88 * 100)
    assert match.pace == pytest.approx(4 * POSSESSIONS_PER_PERIOD)


def test_overtime_counts_in_total_but_not_regulation(raw_match_factory):
    """Test overtime scoring."""
    raw = raw_match_factory(home_q=(25, 25, 25, 25), away_q=(25, 25, 25, 25), ot=(12, 8), line=205)
    match = process_match(raw)

    assert match.is_ot is True
    assert match.total_score == 220
    assert match.regulation_total == 200
    assert match.result is MatchResult.OVER
    # OT box score is summed into pace as a fifth period
    assert match.pace == pytest.approx(5 * POSSESSIONS_PER_PERIOD)


def test_push_when_total_equals_line(raw_match_factory):
    """Test push result."""
    match = process_match(raw_match_factory(line=210))
    assert match.result is MatchResult.PUSH
    assert match.diff == 0


def test_missing_odds_default_and_missing_line_is_zero(raw_match_factory):
    """Test missing odds and line."""
    raw = raw_match_factory()
    raw["line_odds"] = {}
    match = process_match(raw)

    assert match.line == 0
    assert match.over_odds == DEFAULT_ODDS
    assert match.under_odds == DEFAULT_ODDS
    assert match.result is MatchResult.OVER


def test_malformed_fields_degrade_to_zero(raw_match_factory):
    """Test malformed box score fields."""
    raw = raw_match_factory()
    raw["home_score"] = "n/a"
    raw["quarter_scores"]["Q1"]["home_score"] = None
    raw["quarter_stats"] = {}

    match = process_match(raw)

    assert match.home_score == 0
    assert match.home_q_scores[0] == 0
    assert match.home_ts == 0
    assert match.pace == 0


def test_parse_match_date():
    """Test match date parsing."""
    assert parse_match_date("03.11.2024 20:00") == date(2024, 11, 3)
    assert parse_match_date("28.02.2025") == date(2025, 2, 28)
    assert parse_match_date("2025-01-01") == date.min
    assert parse_match_date(None) == date.min
    assert parse_match_date("01.01.99999999999999999999") == date.min
    assert parse_match_date("31.02.2025") == date.min


def test_process_matches_sorts_newest_first_and_is_stable(raw_match_factory):
    """Test match ordering."""
    raws = [
        raw_match_factory(match_id="a", match_date="01.01.2025"),
        raw_match_factory(match_id="b", match_date="03.01.2025"),
        raw_match_factory(match_id="c", match_date="01.01.2025"),
        raw_match_factory(match_id="d", match_date="02.01.2025"),
    ]
    processed = process_matches(raws)

    assert [m.id for m in processed] == ["b", "d", "a", "c"]


def test_oversized_fields_degrade_per_record(raw_match_factory):
    """Test that out-of-range lines, dates and box scores do not abort the run."""
    huge_line = raw_match_factory(match_id="a", line=10**400)
    huge_date = raw_match_factory(match_id="b", match_date="01.01.99999999999999999999")
    huge_stats = raw_match_factory(match_id="c")
    huge_stats["home_score"] = "9" * 400
    huge_stats["quarter_stats"]["Q1"]["Boston Celtics"]["field_goals_attempted"] = "9" * 400

    matches = process_matches([huge_line, huge_date, huge_stats])
    by_id = {m.id: m for m in matches}

    assert len(matches) == 3
    assert by_id["a"].line == 0
    assert by_id["a"].result is MatchResult.OVER
    assert by_id["b"].date == date.min
    assert matches[-1].id == "b"
    assert by_id["c"].home_score == 0


def test_process_matches_is_idempotent(raw_match_factory):
    """Test repeated processing agrees."""
    raws = [raw_match_factory(match_id=str(i), match_date=f"{i + 1:02d}.01.2025") for i in range(5)]
    assert process_matches(raws) == process_matches(raws)


def test_process_matches_empty():
    """Test processing an empty season."""
    assert process_matches([]) == []

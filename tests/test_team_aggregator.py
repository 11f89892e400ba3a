"""Unit tests for team season aggregation."""

import pytest

from hoops_totals.features.match_processor import process_matches
from hoops_totals.features.team_aggregator import (
    aggregate_backtest_team_stats,
    aggregate_team_stats,
    index_team_stats,
)

TS_DENOMINATOR = 2 * (88 + 0.44 * 20)


@pytest.fixture
def two_game_season(raw_match_factory):
    return [
        raw_match_factory(match_id="g1", match_date="10.01.2025"),
        raw_match_factory(
            match_id="g2",
            match_date="12.01.2025",
            home="Miami Heat",
            away="Boston Celtics",
            home_q=(30, 30, 30, 30),
            away_q=(28, 28, 28, 28),
        ),
    ]


def test_aggregate_team_stats_averages(two_game_season):
    """Test team averages."""
    processed = process_matches(two_game_season)
    teams = aggregate_team_stats(processed, two_game_season)

    assert [t.name for t in teams] == ["Boston Celtics", "Miami Heat"]
    celtics, heat = teams

    assert celtics.games_played == 2
    assert celtics.avg_points_for == pytest.approx(111.0)
    assert celtics.avg_points_against == pytest.approx(110.0)
    assert celtics.over_rate == pytest.approx(50.0)
    assert celtics.avg_ts == pytest.approx((110 + 112) / 2 / TS_DENOMINATOR * 100)
    assert heat.avg_points_for == pytest.approx(110.0)


def test_aggregate_team_stats_granular_fields(two_game_season):
    """Test box score averages."""
    celtics = aggregate_team_stats(process_matches(two_game_season), two_game_season)[0]

    assert celtics.avg_fga == pytest.approx(88.0)
    assert celtics.avg_fg_pct == pytest.approx(40 / 88 * 100)
    assert celtics.avg_3p_pct == pytest.approx(37.5)
    assert celtics.avg_fouls == pytest.approx(20.0)
    assert celtics.avg_ftm == pytest.approx(16.0)
    assert celtics.avg_fta == pytest.approx(20.0)
    assert celtics.avg_turnovers == pytest.approx(12.0)
    assert celtics.avg_rebounds == pytest.approx(44.0)


def test_games_played_sum_is_twice_match_count(raw_match_factory):
    """Test games played totals."""
    raws = [
        raw_match_factory(match_id="1", home="A", away="B"),
        raw_match_factory(match_id="2", home="B", away="C"),
        raw_match_factory(match_id="3", home="C", away="A"),
    ]
    teams = aggregate_team_stats(process_matches(raws), raws)
    assert sum(t.games_played for t in teams) == 2 * len(raws)


def test_aggregate_team_stats_without_raw_records_is_empty(two_game_season):
    """Test aggregation without raw records."""
    assert aggregate_team_stats(process_matches(two_game_season), []) == []


def test_backtest_aggregate_uses_processed_fields_only(two_game_season):
    """Test backtest team aggregation."""
    processed = process_matches(two_game_season)
    teams = index_team_stats(aggregate_backtest_team_stats(processed))

    celtics = teams["Boston Celtics"]
    assert celtics.games_played == 2
    assert celtics.avg_points_for == pytest.approx(111.0)
    assert celtics.avg_fg_pct == pytest.approx(40 / 88 * 100)
    assert celtics.avg_pace > 0
    assert celtics.avg_fga == 0
    assert celtics.avg_3p_pct == 0


def test_backtest_aggregate_team_order_follows_processed_order(two_game_season):
    """Test backtest team order."""
    processed = process_matches(two_game_season)
    # Newest game first: Heat hosted on the 12th
    assert [t.name for t in aggregate_backtest_team_stats(processed)] == ["Miami Heat", "Boston Celtics"]


def test_index_team_stats_first_entry_wins(two_game_season):
    """Test team stats index."""
    processed = process_matches(two_game_season)
    teams = aggregate_team_stats(processed, two_game_season)
    index = index_team_stats(teams + [teams[0].__class__(name="Boston Celtics")])

    assert index["Boston Celtics"].games_played == 2


def test_oversized_line_does_not_abort_aggregation(raw_match_factory):
    """Test that an out-of-range totals line is treated as missing."""
    raws = [raw_match_factory(line=10**400)]
    teams = aggregate_team_stats(process_matches(raws), raws)

    assert [t.games_played for t in teams] == [1, 1]
    assert teams[0].over_rate == 100

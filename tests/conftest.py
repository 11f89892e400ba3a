"""Shared builders for season records used across the test suite."""

from datetime import date

import pytest

from hoops_totals.models.match import MatchResult, ProcessedMatch

DEFAULT_LINE = {
    "field_goals_attempted": "22",
    "field_goals_made": "10",
    "3_point_field_g_attempted": "8",
    "3_point_field_goals_made": "3",
    "free_throws_attempted": "5",
    "free_throws_made": "4",
    "offensive_rebounds": "2",
    "total_rebounds": "11",
    "turnovers": "3",
    "personal_fouls": "5",
}


def build_raw_match(
    match_id="m1",
    match_date="15.01.2025 19:30",
    home="Boston Celtics",
    away="Miami Heat",
    home_q=(30, 28, 27, 25),
    away_q=(25, 26, 27, 22),
    ot=None,
    line=220.5,
    over_odds=1.91,
    under_odds=1.91,
    home_line=None,
    away_line=None,
):
    """RawMatch dictionary with every box-score value string-typed."""
    periods = ["Q1", "Q2", "Q3", "Q4"]
    quarter_scores = {
        p: {"home_score": str(h), "away_score": str(a)}
        for p, h, a in zip(periods, home_q, away_q)
    }
    home_score = sum(home_q)
    away_score = sum(away_q)
    if ot is not None:
        quarter_scores["OT"] = {"home_score": str(ot[0]), "away_score": str(ot[1])}
        periods.append("OT")
        home_score += ot[0]
        away_score += ot[1]

    quarter_stats = {
        p: {home: dict(home_line or DEFAULT_LINE), away: dict(away_line or DEFAULT_LINE)}
        for p in periods
    }
    return {
        "match_id": match_id,
        "stage": "Regular Season",
        "date": match_date,
        "scraped_at": "2025-01-16T08:00:00",
        "home_team": home,
        "away_team": away,
        "home_score": str(home_score),
        "away_score": str(away_score),
        "quarter_scores": quarter_scores,
        "match_stats": {},
        "quarter_stats": quarter_stats,
        "line_odds": {"total_line": line, "over_odds": over_odds, "under_odds": under_odds},
    }


def build_processed_match(
    match_id="p1",
    match_date=date(2025, 1, 15),
    home="Boston Celtics",
    away="Miami Heat",
    home_score=115,
    away_score=110,
    line=220.5,
    over_odds=1.91,
    under_odds=1.91,
    home_fg_pct=46.0,
    away_fg_pct=46.0,
    quarterly_totals=(55, 55, 55, 60),
):
    total = home_score + away_score
    return ProcessedMatch(
        id=match_id,
        date=match_date,
        home_team=home,
        away_team=away,
        home_score=home_score,
        away_score=away_score,
        total_score=total,
        regulation_total=sum(quarterly_totals),
        line=line,
        over_odds=over_odds,
        under_odds=under_odds,
        result=MatchResult.settle(total, line),
        diff=total - line,
        pace=98.0,
        home_ts=57.0,
        away_ts=55.0,
        home_fg_pct=home_fg_pct,
        away_fg_pct=away_fg_pct,
        quarterly_totals=tuple(quarterly_totals),
        home_q_scores=(28, 28, 28, 31),
        away_q_scores=(27, 27, 27, 29),
        is_ot=False,
    )


@pytest.fixture
def raw_match_factory():
    return build_raw_match


@pytest.fixture
def processed_match_factory():
    return build_processed_match

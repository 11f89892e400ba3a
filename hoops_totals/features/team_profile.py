"""Team profile views: quarter scoring, efficiency ratings and recent form."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Sequence

from ..models.match import ProcessedMatch
from ..models.team import TeamStats
from .metrics import FREE_THROW_WEIGHT


@dataclass(frozen=True)
class AdvancedRatings:
    ortg: float
    drtg: float
    tov_pct: float
    net_rating: float


@dataclass(frozen=True)
class RecentGame:
    match_id: str
    date: date
    opponent: str
    result: str  # W or L
    score: str
    total_result: str
    line: float


def quarter_averages(team: str, matches: Sequence[ProcessedMatch]) -> List[float]:
    """
    Average points the team scores in each regulation quarter.

    Args:
        team: Team name
        matches: Processed matches to scan

    Returns:
        Four per-quarter averages (all zero if the team has no games)
    """
    sums = [0.0, 0.0, 0.0, 0.0]
    games = 0
    for match in matches:
        if not match.involves(team):
            continue
        scores = match.home_q_scores if match.home_team == team else match.away_q_scores
        for i, points in enumerate(scores[:4]):
            sums[i] += points
        games += 1
    if games == 0:
        return sums
    return [s / games for s in sums]


def advanced_ratings(stats: TeamStats) -> AdvancedRatings:
    """Offensive/defensive rating per 100 possessions and turnover rate."""
    ortg = (stats.avg_points_for / stats.avg_pace) * 100 if stats.avg_pace > 0 else 0.0
    drtg = (stats.avg_points_against / stats.avg_pace) * 100 if stats.avg_pace > 0 else 0.0
    tov_denominator = stats.avg_fga + FREE_THROW_WEIGHT * stats.avg_fta + stats.avg_turnovers
    tov_pct = (stats.avg_turnovers / tov_denominator) * 100 if tov_denominator > 0 else 0.0
    return AdvancedRatings(ortg=ortg, drtg=drtg, tov_pct=tov_pct, net_rating=ortg - drtg)


def recent_form(team: str, matches: Sequence[ProcessedMatch], limit: int = 5) -> List[RecentGame]:
    """Most recent ``limit`` games for a team, newest first."""
    team_matches = sorted(
        (m for m in matches if m.involves(team)),
        key=lambda m: m.date,
        reverse=True,
    )
    games = []
    for match in team_matches[:limit]:
        points_for, points_against = match.score_for(team)
        games.append(
            RecentGame(
                match_id=match.id,
                date=match.date,
                opponent=match.opponent_of(team),
                result="W" if points_for > points_against else "L",
                score=f"{points_for}-{points_against}",
                total_result=match.result.value,
                line=match.line,
            )
        )
    return games

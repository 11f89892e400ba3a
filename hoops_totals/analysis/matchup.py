"""Rule-based matchup signals from two teams' season averages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ..models.team import TeamStats

# Typical league pace is ~100 possessions; 175 combined FGA implies a fast game.
PACE_COMBINED_FGA = 175.0
BRICK_3P_PCT = 33.0
FOUL_COMBINED_FOULS = 40.0
FOUL_COMBINED_FTM = 35.0
MISMATCH_POINTS = 115.0
DEFENSE_POINTS_AGAINST = 108.0


class InsightType(str, Enum):
    PACE = "PACE"
    BRICK = "BRICK"
    FOUL = "FOUL"
    MISMATCH = "MISMATCH"
    DEFENSE = "DEFENSE"


@dataclass(frozen=True)
class MatchupInsight:
    type: InsightType
    title: str
    desc: str

    def to_dict(self) -> dict:
        return {"type": self.type.value, "title": self.title, "desc": self.desc}


def _mismatch(offense: TeamStats, defense: TeamStats) -> MatchupInsight:
    return MatchupInsight(
        type=InsightType.MISMATCH,
        title=f"{offense.name} Scoring Potential",
        desc=(
            f"Elite Offense vs Poor Defense. {offense.name} scores "
            f"{offense.avg_points_for:.1f} while {defense.name} allows "
            f"{defense.avg_points_against:.1f}."
        ),
    )


def analyze_matchup(team_a: TeamStats, team_b: TeamStats) -> List[MatchupInsight]:
    """
    Evaluate every matchup rule independently.

    Args:
        team_a: First team's season averages
        team_b: Second team's season averages

    Returns:
        Zero or more insights, in rule order
    """
    insights: List[MatchupInsight] = []

    combined_fga = team_a.avg_fga + team_b.avg_fga
    if combined_fga > PACE_COMBINED_FGA:
        insights.append(
            MatchupInsight(
                type=InsightType.PACE,
                title="Pace Clash: High Volume",
                desc=(
                    f"Combined Avg FGA is {combined_fga:.1f}. Both teams play fast, "
                    "increasing potential for Over."
                ),
            )
        )

    if team_a.avg_3p_pct < BRICK_3P_PCT and team_b.avg_3p_pct < BRICK_3P_PCT:
        insights.append(
            MatchupInsight(
                type=InsightType.BRICK,
                title="Brick City Warning",
                desc=(
                    f"Both teams shoot < 33% from deep ({team_a.avg_3p_pct:.1f}% & "
                    f"{team_b.avg_3p_pct:.1f}%). Risk of scoring droughts."
                ),
            )
        )

    combined_fouls = team_a.avg_fouls + team_b.avg_fouls
    combined_ftm = team_a.avg_ftm + team_b.avg_ftm
    if combined_fouls > FOUL_COMBINED_FOULS and combined_ftm > FOUL_COMBINED_FTM:
        insights.append(
            MatchupInsight(
                type=InsightType.FOUL,
                title="Whistle Heavy",
                desc=(
                    f"High combined fouls ({combined_fouls:.0f}) & FTM ({combined_ftm:.0f}). "
                    "Frequent stops & free points favor Over."
                ),
            )
        )

    if team_a.avg_points_for > MISMATCH_POINTS and team_b.avg_points_against > MISMATCH_POINTS:
        insights.append(_mismatch(team_a, team_b))
    if team_b.avg_points_for > MISMATCH_POINTS and team_a.avg_points_against > MISMATCH_POINTS:
        insights.append(_mismatch(team_b, team_a))

    if team_a.avg_points_against < DEFENSE_POINTS_AGAINST and team_b.avg_points_against < DEFENSE_POINTS_AGAINST:
        insights.append(
            MatchupInsight(
                type=InsightType.DEFENSE,
                title="Defensive Battle",
                desc="Both teams allow < 108 PPG. Expect tight contesting and lower total.",
            )
        )

    return insights

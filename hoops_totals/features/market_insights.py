"""Rank teams by how well the totals market prices their games."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from ..models.match import MatchResult, ProcessedMatch

PROFILE_COLUMNS = ["name", "avg_diff", "over_pct", "games"]


@dataclass(frozen=True)
class TeamMarketProfile:
    name: str
    avg_diff: float
    over_pct: float


@dataclass(frozen=True)
class MarketInsights:
    most_volatile: Optional[TeamMarketProfile]
    most_predictable: Optional[TeamMarketProfile]
    most_over: Optional[TeamMarketProfile]
    most_under: Optional[TeamMarketProfile]


def market_profiles(matches: Sequence[ProcessedMatch]) -> pd.DataFrame:
    """
    Per-team volatility and over percentage.

    ``avg_diff`` is the mean absolute deviation of the final total from the
    line across the team's games; ``over_pct`` the share of those games that
    settled OVER. Rows are ordered by each team's first appearance.
    """
    rows = []
    for match in matches:
        for team in (match.home_team, match.away_team):
            rows.append(
                {
                    "name": team,
                    "abs_diff": abs(match.diff),
                    "is_over": 1.0 if match.result is MatchResult.OVER else 0.0,
                }
            )
    if not rows:
        return pd.DataFrame(columns=PROFILE_COLUMNS)

    df = pd.DataFrame(rows)
    grouped = df.groupby("name", sort=False).agg(
        avg_diff=("abs_diff", "mean"),
        over_pct=("is_over", "mean"),
        games=("abs_diff", "size"),
    )
    grouped["over_pct"] = grouped["over_pct"] * 100
    return grouped.reset_index()[PROFILE_COLUMNS]


def _profile(profiles: pd.DataFrame, position) -> TeamMarketProfile:
    row = profiles.loc[position]
    return TeamMarketProfile(
        name=str(row["name"]),
        avg_diff=float(row["avg_diff"]),
        over_pct=float(row["over_pct"]),
    )


def calculate_market_insights(matches: Sequence[ProcessedMatch]) -> MarketInsights:
    """
    Pick the four headline teams of the market dashboard.

    Ties resolve to the team that appears first in ``matches``.

    Returns:
        MarketInsights; every entry is ``None`` when there are no matches
    """
    profiles = market_profiles(matches)
    if profiles.empty:
        return MarketInsights(None, None, None, None)

    return MarketInsights(
        most_volatile=_profile(profiles, profiles["avg_diff"].idxmax()),
        most_predictable=_profile(profiles, profiles["avg_diff"].idxmin()),
        most_over=_profile(profiles, profiles["over_pct"].idxmax()),
        most_under=_profile(profiles, profiles["over_pct"].idxmin()),
    )

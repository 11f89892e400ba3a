"""Advisory picks for upcoming games.

Applies the conditional backtest rules (team model, reversion, efficiency)
to a live totals line. Live signals always use the current default
season: its full team aggregates and its league average, regardless of
which season a backtest is looking at. Nothing is settled here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from ..data.normalize import lookup_team
from ..features.team_aggregator import index_team_stats
from ..models.live import LiveGame
from ..models.match import ProcessedMatch
from ..models.team import TeamStats
from ..strategies.rules import (
    DEFAULT_EFFICIENCY_THRESHOLD,
    DEFAULT_MARGIN,
    BetSide,
    combined_fg_pct,
    efficiency_pick,
    league_average,
    model_pick,
    project_total,
    reversion_pick,
)

logger = logging.getLogger(__name__)

REVERSION_THRESHOLD = 5.0

FILTER_ALL = "ALL"
FILTER_MODEL = "MODEL"
FILTER_REVERSION = "REVERSION"
FILTER_HIGH_EFFICIENCY = "HIGH_EFFICIENCY"
SIGNAL_FILTERS = [FILTER_ALL, FILTER_MODEL, FILTER_REVERSION, FILTER_HIGH_EFFICIENCY]


@dataclass(frozen=True)
class LiveSignal:
    game_id: str
    home: str
    away: str
    commence_time: str
    line: float
    projected: float
    model_pick: Optional[BetSide]
    model_edge: float
    reversion_pick: Optional[BetSide]
    efficiency_pick: Optional[BetSide]
    combined_fg: float
    over_price: float
    under_price: float

    @property
    def tags(self) -> List[str]:
        """Names of the rule families that produced a pick."""
        tags = []
        if self.model_pick:
            tags.append(FILTER_MODEL)
        if self.reversion_pick:
            tags.append(FILTER_REVERSION)
        if self.efficiency_pick:
            tags.append(FILTER_HIGH_EFFICIENCY)
        return tags

    def matches_filter(self, signal_filter: str) -> bool:
        if signal_filter == FILTER_ALL:
            return True
        return signal_filter in self.tags

    def to_dict(self) -> dict:
        return {
            "id": self.game_id,
            "home": self.home,
            "away": self.away,
            "commence_time": self.commence_time,
            "line": self.line,
            "projected": self.projected,
            "model_pick": self.model_pick.value if self.model_pick else None,
            "model_edge": self.model_edge,
            "reversion_pick": self.reversion_pick.value if self.reversion_pick else None,
            "efficiency_pick": self.efficiency_pick.value if self.efficiency_pick else None,
            "combined_fg": self.combined_fg,
            "over_price": self.over_price,
            "under_price": self.under_price,
        }


def coerce_live_games(live_games: Iterable[Union[LiveGame, Mapping]]) -> List[LiveGame]:
    """Accept parsed LiveGame objects or raw odds-feed dictionaries."""
    games = []
    for game in live_games:
        if isinstance(game, LiveGame):
            games.append(game)
        elif isinstance(game, Mapping):
            games.append(LiveGame.from_dict(game))
    return games


def evaluate_game(
    game: LiveGame,
    teams: Mapping[str, TeamStats],
    league_avg: float,
    margin: float = DEFAULT_MARGIN,
    efficiency_threshold: float = DEFAULT_EFFICIENCY_THRESHOLD,
) -> Optional[LiveSignal]:
    """
    Evaluate one live game.

    Returns:
        LiveSignal, or None when the game has no usable totals market or no
        rule fired
    """
    market = game.totals_market()
    if market is None:
        return None
    over = market.outcome("Over")
    under = market.outcome("Under")
    if over is None or under is None or not over.point:
        return None

    line = over.point
    home = lookup_team(teams, game.home_team)
    away = lookup_team(teams, game.away_team)

    projected = 0.0
    edge = 0.0
    pick_model = None
    combined = 0.0
    pick_efficiency = None
    if home and away:
        projected = project_total(home, away)
        edge = projected - line
        pick_model = model_pick(projected, line, margin)
        combined = combined_fg_pct(home, away)
        pick_efficiency = efficiency_pick(combined, efficiency_threshold)

    pick_reversion = reversion_pick(line, league_avg, REVERSION_THRESHOLD)

    if not pick_model and not pick_reversion and not pick_efficiency:
        return None

    return LiveSignal(
        game_id=game.id,
        home=game.home_team,
        away=game.away_team,
        commence_time=game.commence_time,
        line=line,
        projected=projected,
        model_pick=pick_model,
        model_edge=abs(edge),
        reversion_pick=pick_reversion,
        efficiency_pick=pick_efficiency,
        combined_fg=combined,
        over_price=over.price,
        under_price=under.price,
    )


def evaluate_live_signals(
    live_games: Iterable[Union[LiveGame, Mapping]],
    team_stats: Sequence[TeamStats],
    default_matches: Sequence[ProcessedMatch],
    margin: float = DEFAULT_MARGIN,
    efficiency_threshold: float = DEFAULT_EFFICIENCY_THRESHOLD,
    signal_filter: str = FILTER_ALL,
) -> List[LiveSignal]:
    """
    Produce advisory picks for a live odds snapshot.

    Args:
        live_games: Odds snapshot (LiveGame objects or feed dictionaries)
        team_stats: Full aggregates of the current default season
        default_matches: Processed matches of the current default season,
            used for the reversion league average
        margin: Team-model edge required for a model pick
        efficiency_threshold: Combined FG% required for an efficiency pick
        signal_filter: ALL, MODEL, REVERSION or HIGH_EFFICIENCY

    Returns:
        Signals in snapshot order
    """
    if signal_filter not in SIGNAL_FILTERS:
        raise ValueError(f"Unknown signal filter: {signal_filter}")

    teams = index_team_stats(team_stats)
    league_avg = league_average(default_matches)

    signals = []
    for game in coerce_live_games(live_games):
        signal = evaluate_game(game, teams, league_avg, margin, efficiency_threshold)
        if signal is not None and signal.matches_filter(signal_filter):
            signals.append(signal)

    logger.debug("Evaluated live snapshot: %d signals (filter=%s)", len(signals), signal_filter)
    return signals

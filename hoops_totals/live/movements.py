"""Totals line movement between two odds snapshots."""

from __future__ import annotations

import time
from typing import Dict, Iterable, Mapping, Optional, Union

from ..models.live import LineMovement, LiveGame
from .signals import coerce_live_games


def detect_line_movements(
    old_games: Iterable[Union[LiveGame, Mapping]],
    new_games: Iterable[Union[LiveGame, Mapping]],
    previous: Optional[Dict[str, LineMovement]] = None,
    now: Optional[float] = None,
) -> Dict[str, LineMovement]:
    """
    Record games whose totals line changed since the last snapshot.

    Args:
        old_games: Previous snapshot
        new_games: Fresh snapshot
        previous: Movements recorded so far; carried forward unless replaced
        now: Timestamp in epoch milliseconds (defaults to the current time)

    Returns:
        New movement map keyed by game id
    """
    timestamp = now if now is not None else time.time() * 1000
    movements = dict(previous or {})
    old_by_id = {game.id: game for game in coerce_live_games(old_games)}

    for game in coerce_live_games(new_games):
        old_game = old_by_id.get(game.id)
        if old_game is None:
            continue
        new_line = game.totals_line()
        old_line = old_game.totals_line()
        if new_line is None or old_line is None or new_line == old_line:
            continue
        movements[game.id] = LineMovement(
            game_id=game.id,
            old_line=old_line,
            new_line=new_line,
            timestamp=timestamp,
            direction="UP" if new_line > old_line else "DOWN",
        )
    return movements

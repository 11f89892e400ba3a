"""Live odds snapshot models (The Odds API v4 shape)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..data.numeric import parse_float

TOTALS_MARKET = "totals"


@dataclass(frozen=True)
class Outcome:
    name: str
    price: float
    point: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Outcome":
        point = data.get("point")
        return cls(
            name=str(data.get("name", "")),
            price=parse_float(data.get("price")),
            point=parse_float(point) if point is not None else None,
        )


@dataclass(frozen=True)
class Market:
    key: str
    last_update: str = ""
    outcomes: List[Outcome] = field(default_factory=list)

    def outcome(self, name: str) -> Optional[Outcome]:
        """Return the first outcome called ``name`` (e.g. ``"Over"``)."""
        for candidate in self.outcomes:
            if candidate.name == name:
                return candidate
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Market":
        return cls(
            key=str(data.get("key", "")),
            last_update=str(data.get("last_update", "")),
            outcomes=[Outcome.from_dict(o) for o in data.get("outcomes") or [] if isinstance(o, dict)],
        )


@dataclass(frozen=True)
class Bookmaker:
    key: str
    title: str = ""
    last_update: str = ""
    markets: List[Market] = field(default_factory=list)

    def market(self, key: str) -> Optional[Market]:
        for candidate in self.markets:
            if candidate.key == key:
                return candidate
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Bookmaker":
        return cls(
            key=str(data.get("key", "")),
            title=str(data.get("title", "")),
            last_update=str(data.get("last_update", "")),
            markets=[Market.from_dict(m) for m in data.get("markets") or [] if isinstance(m, dict)],
        )


@dataclass(frozen=True)
class LiveGame:
    """An upcoming game with its bookmaker quotes."""

    id: str
    home_team: str
    away_team: str
    commence_time: str = ""
    sport_key: str = ""
    sport_title: str = ""
    bookmakers: List[Bookmaker] = field(default_factory=list)

    def totals_market(self) -> Optional[Market]:
        """Totals market of the first listed bookmaker, if any."""
        if not self.bookmakers:
            return None
        return self.bookmakers[0].market(TOTALS_MARKET)

    def totals_line(self) -> Optional[float]:
        """Line of the first totals outcome; ``None`` when missing or zero."""
        market = self.totals_market()
        if market is None or not market.outcomes:
            return None
        return market.outcomes[0].point or None

    @classmethod
    def from_dict(cls, data: dict) -> "LiveGame":
        return cls(
            id=str(data.get("id", "")),
            home_team=str(data.get("home_team", "")),
            away_team=str(data.get("away_team", "")),
            commence_time=str(data.get("commence_time", "")),
            sport_key=str(data.get("sport_key", "")),
            sport_title=str(data.get("sport_title", "")),
            bookmakers=[Bookmaker.from_dict(b) for b in data.get("bookmakers") or [] if isinstance(b, dict)],
        )


@dataclass(frozen=True)
class LineMovement:
    """A change in a game's totals line between two odds snapshots."""

    game_id: str
    old_line: float
    new_line: float
    timestamp: float
    direction: str  # UP or DOWN

    def to_dict(self) -> dict:
        return {
            "game_id": self.game_id,
            "old_line": self.old_line,
            "new_line": self.new_line,
            "timestamp": self.timestamp,
            "direction": self.direction,
        }

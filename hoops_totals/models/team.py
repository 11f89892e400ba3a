"""Team season aggregate model."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class TeamStats:
    """Per-team season averages folded from every game the team played."""

    name: str
    games_played: int = 0
    avg_points_for: float = 0.0
    avg_points_against: float = 0.0
    avg_pace: float = 0.0
    avg_ts: float = 0.0
    over_rate: float = 0.0
    # Granular box-score averages; zero when only processed matches were available
    avg_fga: float = 0.0
    avg_fg_pct: float = 0.0
    avg_3p_pct: float = 0.0
    avg_fouls: float = 0.0
    avg_ftm: float = 0.0
    avg_turnovers: float = 0.0
    avg_fta: float = 0.0
    avg_rebounds: float = 0.0

    @property
    def avg_total(self) -> float:
        """Average combined score of this team's games."""
        return self.avg_points_for + self.avg_points_against

    def to_dict(self) -> dict:
        """Convert team stats to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TeamStats":
        """Create team stats from dictionary."""
        return cls(
            name=data["name"],
            games_played=int(data.get("games_played", 0)),
            avg_points_for=float(data.get("avg_points_for", 0.0)),
            avg_points_against=float(data.get("avg_points_against", 0.0)),
            avg_pace=float(data.get("avg_pace", 0.0)),
            avg_ts=float(data.get("avg_ts", 0.0)),
            over_rate=float(data.get("over_rate", 0.0)),
            avg_fga=float(data.get("avg_fga", 0.0)),
            avg_fg_pct=float(data.get("avg_fg_pct", 0.0)),
            avg_3p_pct=float(data.get("avg_3p_pct", 0.0)),
            avg_fouls=float(data.get("avg_fouls", 0.0)),
            avg_ftm=float(data.get("avg_ftm", 0.0)),
            avg_turnovers=float(data.get("avg_turnovers", 0.0)),
            avg_fta=float(data.get("avg_fta", 0.0)),
            avg_rebounds=float(data.get("avg_rebounds", 0.0)),
        )

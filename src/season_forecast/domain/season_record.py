from dataclasses import dataclass


@dataclass(frozen=True)
class SeasonRecord:
    team_id: str
    team_name: str
    wins: int
    losses: int
    runs_scored: int
    runs_allowed: int
    strength_of_schedule: float = 0.5
    division: str | None = None

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def run_differential(self) -> int:
        return self.runs_scored - self.runs_allowed

    @property
    def record_label(self) -> str:
        return f"{self.wins}-{self.losses}"

from dataclasses import dataclass
from enum import Enum


class PaceTier(Enum):
    ELITE = "elite"
    CONTENDER = "contender"
    BUBBLE = "bubble"
    FRINGE = "fringe"
    REBUILDING = "rebuilding"


class LuckAssessment(Enum):
    UNDERPERFORMING = "underperforming"
    OVERPERFORMING = "overperforming"
    SUSTAINABLE = "sustainable"


@dataclass(frozen=True)
class PaceResult:
    current_pace_wins: int
    projected_wins: int
    projected_losses: int
    pythagorean_wins: int
    games_remaining: int
    win_pct: float = 0.0


@dataclass(frozen=True)
class TeamPace:
    """One row of the league pace table."""

    team_id: str
    team_name: str
    wins: int
    losses: int
    pace: PaceResult
    tier: PaceTier
    playoff_pace: bool
    run_differential: int
    pythagorean_diff: int
    luck: LuckAssessment
    division_lead_pace: int
    strength_of_schedule: float
    division: str | None = None


@dataclass(frozen=True)
class PaceSummary:
    playoff_teams: int
    best_team: str
    best_pace: int
    worst_team: str
    worst_pace: int
    avg_run_diff: float

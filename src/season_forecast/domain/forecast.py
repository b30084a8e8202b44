from dataclasses import dataclass
from enum import Enum

from season_forecast.domain.pace import PaceResult


class OddsTier(Enum):
    STRONG = "strong"
    GOOD = "good"
    FAIR = "fair"
    LONG_SHOT = "long_shot"


@dataclass(frozen=True)
class WinBucket:
    win_total: int
    probability_pct: int
    cumulative_pct: int


@dataclass(frozen=True)
class WinDistribution:
    """Discretized season win-total distribution built from a (mean, std_dev) pair.

    ``buckets`` is ordered by ascending ``win_total`` and may be empty when the
    configured window contains no integers.
    """

    mean: float
    std_dev: float
    buckets: tuple[WinBucket, ...]

    def is_degenerate(self) -> bool:
        """True when no bucket carries any probability mass."""
        return not any(b.probability_pct > 0 for b in self.buckets)

    def total_pct(self) -> int:
        return sum(b.probability_pct for b in self.buckets)

    def cumulative_at(self, win_total: int) -> int:
        """Cumulative percentage of outcomes at or below ``win_total``."""
        if not self.buckets or win_total < self.buckets[0].win_total:
            return 0
        cumulative = 0
        for bucket in self.buckets:
            if bucket.win_total > win_total:
                break
            cumulative = bucket.cumulative_pct
        return cumulative


@dataclass(frozen=True)
class ProjectionSummary:
    mean_wins: float
    median_wins: float
    p10: float
    p25: float
    p75: float
    p90: float
    floor_wins: float
    ceiling_wins: float
    standard_dev: float


@dataclass(frozen=True)
class ProbabilityBreakdown:
    """Categorical season outcome odds, each in [0, 100].

    Categories overlap and are not expected to sum to 100.
    """

    division: float
    wild_card: float
    any_playoff: float
    pennant: float
    world_series: float
    first_pick: float = 0.0
    sub_eighty: float = 0.0
    ninety_plus: float = 0.0
    hundred_plus: float = 0.0


@dataclass(frozen=True)
class SeasonScenario:
    key: str
    label: str
    wins: int
    losses: int
    outcome: str
    probability_pct: float


@dataclass(frozen=True)
class SeasonForecast:
    team_id: str
    team_name: str
    current_record: str
    games_played: int
    pace: PaceResult
    distribution: WinDistribution
    projections: ProjectionSummary
    probabilities: ProbabilityBreakdown
    scenarios: tuple[SeasonScenario, ...]

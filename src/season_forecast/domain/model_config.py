from dataclasses import dataclass


@dataclass(frozen=True)
class ModelConfig:
    """Tunable constants of the season projection model.

    Attributes:
        total_season_games: Games in a full regular season.
        pythagorean_exponent: Exponent of the runs-scored/runs-allowed win expectation.
        distribution_window_min: Lowest win total the distribution may cover.
        distribution_window_max: Highest win total the distribution may cover.
        distribution_half_width: Wins either side of the mean covered by the distribution.
        playoff_pace_threshold: Pace at or above which a team is on playoff pace.
        min_std_dev: Floor for the derived win-total standard deviation.
    """

    total_season_games: int = 162
    pythagorean_exponent: float = 1.83
    distribution_window_min: int = 50
    distribution_window_max: int = 115
    distribution_half_width: int = 25
    playoff_pace_threshold: int = 88
    min_std_dev: float = 1.0


@dataclass(frozen=True)
class PlayoffCutoffs:
    """Win-total thresholds mapped to categorical season outcomes."""

    division: int = 95
    wild_card: int = 88
    pennant: int = 98
    world_series: int = 102
    first_pick: int = 60
    sub_eighty: int = 80
    ninety_plus: int = 90
    hundred_plus: int = 100


DEFAULT_MODEL_CONFIG = ModelConfig()
DEFAULT_PLAYOFF_CUTOFFS = PlayoffCutoffs()

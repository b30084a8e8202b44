import logging
import math
from collections.abc import Sequence

from season_forecast.domain.forecast import SeasonForecast
from season_forecast.domain.model_config import (
    DEFAULT_MODEL_CONFIG,
    DEFAULT_PLAYOFF_CUTOFFS,
    ModelConfig,
    PlayoffCutoffs,
)
from season_forecast.domain.pace import PaceResult
from season_forecast.domain.season_record import SeasonRecord
from season_forecast.forecast.distribution import build_distribution
from season_forecast.forecast.summary import breakdown_probabilities, build_scenarios, summarize
from season_forecast.pace.model import compute_pace

logger = logging.getLogger(__name__)


def remaining_games_std_dev(pace: PaceResult, config: ModelConfig = DEFAULT_MODEL_CONFIG) -> float:
    """Binomial spread of wins over the games left, floored at ``config.min_std_dev``."""
    p = pace.win_pct
    spread = math.sqrt(pace.games_remaining * p * (1 - p))
    return max(config.min_std_dev, spread)


def forecast_season(
    record: SeasonRecord,
    config: ModelConfig = DEFAULT_MODEL_CONFIG,
    cutoffs: PlayoffCutoffs = DEFAULT_PLAYOFF_CUTOFFS,
    std_dev: float | None = None,
) -> SeasonForecast:
    """Project one team's season from its record to final win-total odds.

    The distribution is centred on the pace model's projected wins. When
    ``std_dev`` is not given it is derived from the games remaining.
    """
    pace = compute_pace(record, config)
    mean = float(pace.projected_wins)
    if std_dev is None:
        std_dev = remaining_games_std_dev(pace, config)
    logger.debug("Forecasting %s: mean=%.1f std_dev=%.2f", record.team_id, mean, std_dev)

    distribution = build_distribution(mean, std_dev, config)
    projections = summarize(distribution)
    return SeasonForecast(
        team_id=record.team_id,
        team_name=record.team_name,
        current_record=record.record_label,
        games_played=record.games_played,
        pace=pace,
        distribution=distribution,
        projections=projections,
        probabilities=breakdown_probabilities(pace, distribution, cutoffs),
        scenarios=build_scenarios(projections, distribution, cutoffs, config),
    )


def forecast_league(
    records: Sequence[SeasonRecord],
    config: ModelConfig = DEFAULT_MODEL_CONFIG,
    cutoffs: PlayoffCutoffs = DEFAULT_PLAYOFF_CUTOFFS,
) -> list[SeasonForecast]:
    """Forecast every team independently, in input order."""
    return [forecast_season(r, config, cutoffs) for r in records]

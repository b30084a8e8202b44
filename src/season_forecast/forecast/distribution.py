import logging
import math

import numpy as np

from season_forecast.domain.forecast import WinBucket, WinDistribution
from season_forecast.domain.model_config import DEFAULT_MODEL_CONFIG, ModelConfig
from season_forecast.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def distribution_window(mean: float, config: ModelConfig = DEFAULT_MODEL_CONFIG) -> tuple[int, int]:
    """Integer win totals ``(low, high)`` covered by a distribution centred on ``mean``.

    The clamps come from the config and are not derived from the season length.
    ``low > high`` means the window is empty.
    """
    low = max(config.distribution_window_min, mean - config.distribution_half_width)
    high = min(config.distribution_window_max, mean + config.distribution_half_width)
    return math.ceil(low), math.floor(high)


def build_distribution(mean: float, std_dev: float, config: ModelConfig = DEFAULT_MODEL_CONFIG) -> WinDistribution:
    """Build a normalized, integer-percentage win-total distribution.

    Each win total in the window gets the normal density at that point,
    rounded to whole percentage points, and the buckets are then rescaled
    so they sum to roughly 100. Rounding happens per bucket, so the total
    can drift a few points from 100.

    Raises ``InvalidParameterError`` if ``std_dev`` is not a positive number.
    """
    if not math.isfinite(mean):
        raise InvalidParameterError(f"mean must be finite, got {mean}")
    if not math.isfinite(std_dev) or std_dev <= 0:
        raise InvalidParameterError(f"std_dev must be > 0, got {std_dev}")

    low, high = distribution_window(mean, config)
    if low > high:
        logger.debug("Empty distribution window for mean=%.2f (%d > %d)", mean, low, high)
        return WinDistribution(mean=mean, std_dev=std_dev, buckets=())

    wins = np.arange(low, high + 1)
    z = (wins - mean) / std_dev
    density = np.exp(-0.5 * z * z) / (std_dev * math.sqrt(2 * math.pi))
    freq = np.maximum(np.floor(density * 100 + 0.5), 0)

    total = freq.sum()
    if total > 0:
        freq = np.floor(freq / total * 100 + 0.5)
    else:
        logger.debug("Distribution for mean=%.2f std_dev=%.2f has no mass", mean, std_dev)
    cumulative = np.cumsum(freq)

    buckets = tuple(
        WinBucket(win_total=int(w), probability_pct=int(p), cumulative_pct=int(c))
        for w, p, c in zip(wins, freq, cumulative, strict=True)
    )
    return WinDistribution(mean=mean, std_dev=std_dev, buckets=buckets)

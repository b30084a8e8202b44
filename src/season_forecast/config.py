from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, TypeVar

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from season_forecast.domain.model_config import ModelConfig, PlayoffCutoffs
from season_forecast.exceptions import ForecastConfigError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

_DEFAULTS: dict[str, object] = {
    "model": {
        "total_season_games": 162,
        "pythagorean_exponent": 1.83,
        "distribution_window_min": 50,
        "distribution_window_max": 115,
        "distribution_half_width": 25,
        "playoff_pace_threshold": 88,
        "min_std_dev": 1.0,
    },
    "cutoffs": {
        "division": 95,
        "wild_card": 88,
        "pennant": 98,
        "world_series": 102,
        "first_pick": 60,
        "sub_eighty": 80,
        "ninety_plus": 90,
        "hundred_plus": 100,
    },
}


def create_config(
    yaml_path: str = "forecast.yaml",
    env_prefix: str = "FORECAST",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        overrides: Nested dict of values that win over every other layer.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _whole_number(text: str) -> int:
    # YAML may carry whole counts as floats, e.g. 95.0
    try:
        return int(text)
    except ValueError:
        value = float(text)
        if not value.is_integer():
            raise ValueError(f"{text} is not a whole number") from None
        return int(value)


def _read(cfg: ConfigurationSet, key: str, convert: Callable[[str], T]) -> T:
    # env vars arrive as strings, YAML and defaults as native types
    raw = cfg[key]
    try:
        return convert(str(raw))
    except ValueError:
        raise ForecastConfigError(f"Config '{key}': invalid numeric value {raw!r}")


def load_model_config(cfg: ConfigurationSet | None = None) -> ModelConfig:
    if cfg is None:
        cfg = create_config()
    model = ModelConfig(
        total_season_games=_read(cfg, "model.total_season_games", _whole_number),
        pythagorean_exponent=_read(cfg, "model.pythagorean_exponent", float),
        distribution_window_min=_read(cfg, "model.distribution_window_min", _whole_number),
        distribution_window_max=_read(cfg, "model.distribution_window_max", _whole_number),
        distribution_half_width=_read(cfg, "model.distribution_half_width", _whole_number),
        playoff_pace_threshold=_read(cfg, "model.playoff_pace_threshold", _whole_number),
        min_std_dev=_read(cfg, "model.min_std_dev", float),
    )
    validate_model_config(model)
    return model


def validate_model_config(model: ModelConfig) -> None:
    if model.total_season_games <= 0:
        raise ForecastConfigError(f"total_season_games must be > 0, got {model.total_season_games}")
    if model.pythagorean_exponent <= 0:
        raise ForecastConfigError(f"pythagorean_exponent must be > 0, got {model.pythagorean_exponent}")
    if model.distribution_half_width < 0:
        raise ForecastConfigError(f"distribution_half_width must be >= 0, got {model.distribution_half_width}")
    if model.min_std_dev <= 0:
        raise ForecastConfigError(f"min_std_dev must be > 0, got {model.min_std_dev}")


def load_playoff_cutoffs(cfg: ConfigurationSet | None = None) -> PlayoffCutoffs:
    if cfg is None:
        cfg = create_config()
    cutoffs = PlayoffCutoffs(
        division=_read(cfg, "cutoffs.division", _whole_number),
        wild_card=_read(cfg, "cutoffs.wild_card", _whole_number),
        pennant=_read(cfg, "cutoffs.pennant", _whole_number),
        world_series=_read(cfg, "cutoffs.world_series", _whole_number),
        first_pick=_read(cfg, "cutoffs.first_pick", _whole_number),
        sub_eighty=_read(cfg, "cutoffs.sub_eighty", _whole_number),
        ninety_plus=_read(cfg, "cutoffs.ninety_plus", _whole_number),
        hundred_plus=_read(cfg, "cutoffs.hundred_plus", _whole_number),
    )
    validate_playoff_cutoffs(cutoffs)
    return cutoffs


def validate_playoff_cutoffs(cutoffs: PlayoffCutoffs) -> None:
    for field in dataclasses.fields(cutoffs):
        value = getattr(cutoffs, field.name)
        if value < 0:
            raise ForecastConfigError(f"cutoff {field.name} must be >= 0, got {value}")

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from config import ConfigurationSet

from season_forecast.config import create_config, load_model_config, load_playoff_cutoffs
from season_forecast.domain.model_config import DEFAULT_MODEL_CONFIG, DEFAULT_PLAYOFF_CUTOFFS
from season_forecast.exceptions import ForecastConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_create_config_returns_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/forecast.yaml")
    assert isinstance(cfg, ConfigurationSet)
    assert cfg["model.total_season_games"] == 162
    assert cfg["model.pythagorean_exponent"] == 1.83
    assert cfg["cutoffs.wild_card"] == 88


def test_defaults_match_dataclass_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/forecast.yaml")
    assert load_model_config(cfg) == DEFAULT_MODEL_CONFIG
    assert load_playoff_cutoffs(cfg) == DEFAULT_PLAYOFF_CUTOFFS


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    yaml_file = tmp_path / "forecast.yaml"
    yaml_file.write_text("model:\n  total_season_games: 60\ncutoffs:\n  division: 36\n")
    cfg = create_config(yaml_path=str(yaml_file))
    model = load_model_config(cfg)
    assert model.total_season_games == 60
    # Defaults still apply for unset keys
    assert model.pythagorean_exponent == 1.83
    assert load_playoff_cutoffs(cfg).division == 36


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_file = tmp_path / "forecast.yaml"
    yaml_file.write_text("model:\n  playoff_pace_threshold: 90\n")
    monkeypatch.setenv("FORECAST__MODEL__PLAYOFF_PACE_THRESHOLD", "86")
    monkeypatch.setenv("FORECAST__MODEL__PYTHAGOREAN_EXPONENT", "2")

    model = load_model_config(create_config(yaml_path=str(yaml_file)))
    assert model.playoff_pace_threshold == 86
    assert model.pythagorean_exponent == 2.0


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORECAST__CUTOFFS__WILD_CARD", "87")
    cfg = create_config(yaml_path="/nonexistent/forecast.yaml", overrides={"cutoffs": {"wild_card": 84}})
    assert load_playoff_cutoffs(cfg).wild_card == 84


def test_non_numeric_value_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORECAST__MODEL__TOTAL_SEASON_GAMES", "lots")
    with pytest.raises(ForecastConfigError, match="model.total_season_games"):
        load_model_config(create_config(yaml_path="/nonexistent/forecast.yaml"))


@pytest.mark.parametrize(
    ("key", "value", "message"),
    [
        ("total_season_games", 0, "total_season_games"),
        ("pythagorean_exponent", -1.0, "pythagorean_exponent"),
        ("distribution_half_width", -5, "distribution_half_width"),
        ("min_std_dev", 0.0, "min_std_dev"),
    ],
)
def test_invalid_model_values_rejected(key: str, value: object, message: str) -> None:
    cfg = create_config(yaml_path="/nonexistent/forecast.yaml", overrides={"model": {key: value}})
    with pytest.raises(ForecastConfigError, match=message):
        load_model_config(cfg)


def test_inverted_window_is_allowed() -> None:
    cfg = create_config(
        yaml_path="/nonexistent/forecast.yaml",
        overrides={"model": {"distribution_window_min": 120, "distribution_window_max": 110}},
    )
    model = load_model_config(cfg)
    assert model.distribution_window_min > model.distribution_window_max


def test_whole_number_float_accepted_for_counts(tmp_path: Path) -> None:
    yaml_file = tmp_path / "forecast.yaml"
    yaml_file.write_text("model:\n  total_season_games: 162.0\ncutoffs:\n  division: 95.0\n")
    cfg = create_config(yaml_path=str(yaml_file))
    assert load_model_config(cfg).total_season_games == 162
    cutoffs = load_playoff_cutoffs(cfg)
    assert cutoffs.division == 95
    assert isinstance(cutoffs.division, int)


def test_fractional_count_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORECAST__CUTOFFS__WILD_CARD", "87.5")
    with pytest.raises(ForecastConfigError, match="cutoffs.wild_card"):
        load_playoff_cutoffs(create_config(yaml_path="/nonexistent/forecast.yaml"))


def test_negative_cutoff_rejected() -> None:
    cfg = create_config(yaml_path="/nonexistent/forecast.yaml", overrides={"cutoffs": {"first_pick": -1}})
    with pytest.raises(ForecastConfigError, match="first_pick"):
        load_playoff_cutoffs(cfg)

"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os

import pytest

from season_forecast.domain.model_config import ModelConfig, PlayoffCutoffs
from season_forecast.domain.season_record import SeasonRecord


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all FORECAST__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("FORECAST__"):
            monkeypatch.delenv(key)


@pytest.fixture
def model_config() -> ModelConfig:
    return ModelConfig()


@pytest.fixture
def cutoffs() -> PlayoffCutoffs:
    return PlayoffCutoffs()


@pytest.fixture
def giants() -> SeasonRecord:
    """A 57-40 team through 97 games."""
    return SeasonRecord(
        team_id="SF",
        team_name="San Francisco Giants",
        wins=57,
        losses=40,
        runs_scored=470,
        runs_allowed=400,
        strength_of_schedule=0.503,
        division="NL West",
    )

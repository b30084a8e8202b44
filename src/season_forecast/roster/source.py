import csv
import logging
from pathlib import Path
from typing import Protocol

import numpy as np

from season_forecast.domain.model_config import DEFAULT_MODEL_CONFIG, ModelConfig
from season_forecast.domain.result import Err, Ok
from season_forecast.domain.season_record import SeasonRecord
from season_forecast.exceptions import InvalidParameterError
from season_forecast.roster.parsing import normalize_row, parse_season_record
from season_forecast.roster.teams import LEAGUE_TEAMS

logger = logging.getLogger(__name__)


class RosterSource(Protocol):
    def fetch_records(self) -> list[SeasonRecord]: ...


class CsvRosterSource:
    """Reads team season records from a CSV file.

    Expected columns: team_id, team_name, wins, losses, runs_scored,
    runs_allowed, and optionally strength_of_schedule and division. Header
    names are case-insensitive. Invalid rows are logged and skipped.
    """

    def __init__(self, path: Path, config: ModelConfig = DEFAULT_MODEL_CONFIG) -> None:
        self._path = path
        self._config = config

    def fetch_records(self) -> list[SeasonRecord]:
        with open(self._path, newline="", encoding="utf-8") as f:
            rows = [normalize_row(row) for row in csv.DictReader(f)]

        records: list[SeasonRecord] = []
        for row_number, row in enumerate(rows, start=2):
            match parse_season_record(row, row_number, self._config):
                case Ok(record):
                    records.append(record)
                case Err(error):
                    logger.warning("Skipping %s row %d: %s", self._path.name, error.row_number, error.message)
        logger.debug("Loaded %d of %d rows from %s", len(records), len(rows), self._path)
        return records


class DemoRosterSource:
    """Fabricates a plausible mid-season league for demos.

    All randomness comes from a generator seeded per instance, so the same
    seed always yields the same league.
    """

    def __init__(
        self,
        seed: int = 2026,
        games_played: int = 97,
        config: ModelConfig = DEFAULT_MODEL_CONFIG,
    ) -> None:
        if not 0 <= games_played <= config.total_season_games:
            raise InvalidParameterError(
                f"games_played must be between 0 and {config.total_season_games}, got {games_played}"
            )
        self._seed = seed
        self._games_played = games_played

    def fetch_records(self) -> list[SeasonRecord]:
        rng = np.random.default_rng(self._seed)
        games = self._games_played
        records: list[SeasonRecord] = []
        for team_id, team_name, division in LEAGUE_TEAMS:
            talent = float(np.clip(rng.normal(0.5, 0.06), 0.3, 0.7))
            wins = int(rng.binomial(games, talent))
            runs_per_game = float(rng.normal(4.5, 0.3))
            runs_scored = int(round(runs_per_game * games))
            # run differential tracks talent, plus noise
            runs_allowed = max(0, int(round(runs_scored - (talent - 0.5) * 10 * games + rng.normal(0, 25))))
            records.append(
                SeasonRecord(
                    team_id=team_id,
                    team_name=team_name,
                    wins=wins,
                    losses=games - wins,
                    runs_scored=runs_scored,
                    runs_allowed=runs_allowed,
                    strength_of_schedule=round(float(rng.uniform(0.47, 0.53)), 3),
                    division=division,
                )
            )
        return records

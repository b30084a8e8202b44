"""Row-level parsing of team season records."""

from season_forecast.domain.errors import RosterRowError
from season_forecast.domain.model_config import DEFAULT_MODEL_CONFIG, ModelConfig
from season_forecast.domain.result import Err, Ok, Result
from season_forecast.domain.season_record import SeasonRecord

REQUIRED_FIELDS = ("team_id", "team_name", "wins", "losses", "runs_scored", "runs_allowed")
INT_FIELDS = ("wins", "losses", "runs_scored", "runs_allowed")


def normalize_row(row: dict[str, str | None]) -> dict[str, str]:
    """Lowercase and strip header names; drop BOM and empty keys."""
    normalized: dict[str, str] = {}
    for key, value in row.items():
        if key is None:
            continue
        name = key.strip().lower().lstrip("\ufeff")
        normalized[name] = (value or "").strip()
    return normalized


def parse_season_record(
    row: dict[str, str],
    row_number: int,
    config: ModelConfig = DEFAULT_MODEL_CONFIG,
) -> Result[SeasonRecord, RosterRowError]:
    for field in REQUIRED_FIELDS:
        if not row.get(field):
            return Err(RosterRowError(f"missing required field '{field}'", row_number, field))

    ints: dict[str, int] = {}
    for field in INT_FIELDS:
        try:
            ints[field] = int(row[field])
        except ValueError:
            return Err(RosterRowError(f"'{field}' must be an integer, got {row[field]!r}", row_number, field))
        if ints[field] < 0:
            return Err(RosterRowError(f"'{field}' must be >= 0, got {ints[field]}", row_number, field))

    games_played = ints["wins"] + ints["losses"]
    if games_played > config.total_season_games:
        return Err(
            RosterRowError(
                f"{games_played} games played exceeds season length {config.total_season_games}",
                row_number,
            )
        )

    sos_raw = row.get("strength_of_schedule", "")
    try:
        strength_of_schedule = float(sos_raw) if sos_raw else 0.5
    except ValueError:
        return Err(
            RosterRowError(
                f"'strength_of_schedule' must be a number, got {sos_raw!r}", row_number, "strength_of_schedule"
            )
        )

    return Ok(
        SeasonRecord(
            team_id=row["team_id"],
            team_name=row["team_name"],
            wins=ints["wins"],
            losses=ints["losses"],
            runs_scored=ints["runs_scored"],
            runs_allowed=ints["runs_allowed"],
            strength_of_schedule=strength_of_schedule,
            division=row.get("division") or None,
        )
    )

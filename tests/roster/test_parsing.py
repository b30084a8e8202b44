from season_forecast.domain.errors import RosterRowError
from season_forecast.domain.model_config import ModelConfig
from season_forecast.domain.result import Err, Ok
from season_forecast.domain.season_record import SeasonRecord
from season_forecast.roster.parsing import normalize_row, parse_season_record


def _row(**overrides: str) -> dict[str, str]:
    row = {
        "team_id": "SF",
        "team_name": "San Francisco Giants",
        "wins": "57",
        "losses": "40",
        "runs_scored": "470",
        "runs_allowed": "400",
        "strength_of_schedule": "0.503",
        "division": "NL West",
    }
    row.update(overrides)
    return row


class TestNormalizeRow:
    def test_lowercases_and_strips(self) -> None:
        row = normalize_row({"\ufeffTeam_ID ": " SF ", "Wins": "57", None: "extra"})  # type: ignore[dict-item]
        assert row == {"team_id": "SF", "wins": "57"}

    def test_missing_values_become_empty(self) -> None:
        assert normalize_row({"division": None}) == {"division": ""}


class TestParseSeasonRecord:
    def test_valid_row(self) -> None:
        result = parse_season_record(_row(), row_number=2)
        assert result == Ok(
            SeasonRecord(
                team_id="SF",
                team_name="San Francisco Giants",
                wins=57,
                losses=40,
                runs_scored=470,
                runs_allowed=400,
                strength_of_schedule=0.503,
                division="NL West",
            )
        )

    def test_optional_fields_default(self) -> None:
        result = parse_season_record(_row(strength_of_schedule="", division=""), row_number=2)
        assert isinstance(result, Ok)
        assert result.value.strength_of_schedule == 0.5
        assert result.value.division is None

    def test_missing_required_field(self) -> None:
        row = _row()
        del row["runs_allowed"]
        result = parse_season_record(row, row_number=5)
        assert result == Err(RosterRowError("missing required field 'runs_allowed'", 5, "runs_allowed"))

    def test_non_integer(self) -> None:
        result = parse_season_record(_row(wins="fifty"), row_number=3)
        assert isinstance(result, Err)
        assert result.error.field == "wins"
        assert "must be an integer" in result.error.message

    def test_negative(self) -> None:
        result = parse_season_record(_row(losses="-2"), row_number=3)
        assert isinstance(result, Err)
        assert result.error.field == "losses"

    def test_too_many_games(self) -> None:
        result = parse_season_record(_row(wins="100", losses="70"), row_number=4)
        assert isinstance(result, Err)
        assert "exceeds season length 162" in result.error.message

    def test_season_length_from_config(self) -> None:
        config = ModelConfig(total_season_games=60)
        result = parse_season_record(_row(wins="40", losses="30"), row_number=4, config=config)
        assert isinstance(result, Err)

    def test_bad_strength_of_schedule(self) -> None:
        result = parse_season_record(_row(strength_of_schedule="hard"), row_number=2)
        assert isinstance(result, Err)
        assert result.error.field == "strength_of_schedule"

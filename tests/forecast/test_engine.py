import math

import pytest

from season_forecast.domain.model_config import ModelConfig
from season_forecast.domain.pace import PaceResult
from season_forecast.domain.season_record import SeasonRecord
from season_forecast.exceptions import InvalidParameterError
from season_forecast.forecast.engine import forecast_league, forecast_season, remaining_games_std_dev


def _record(team_id: str, wins: int, losses: int) -> SeasonRecord:
    return SeasonRecord(
        team_id=team_id,
        team_name=f"Team {team_id}",
        wins=wins,
        losses=losses,
        runs_scored=4 * (wins + losses),
        runs_allowed=4 * (wins + losses),
    )


class TestRemainingGamesStdDev:
    def test_binomial_spread(self) -> None:
        pace = PaceResult(95, 95, 67, 90, games_remaining=65, win_pct=0.6)
        assert remaining_games_std_dev(pace) == pytest.approx(math.sqrt(65 * 0.6 * 0.4))

    def test_floored_when_season_is_over(self) -> None:
        pace = PaceResult(97, 97, 65, 97, games_remaining=0, win_pct=0.6)
        assert remaining_games_std_dev(pace) == 1.0

    def test_floor_from_config(self) -> None:
        pace = PaceResult(97, 97, 65, 97, games_remaining=1, win_pct=0.6)
        assert remaining_games_std_dev(pace, ModelConfig(min_std_dev=2.5)) == 2.5


class TestForecastSeason:
    def test_centred_on_projected_wins(self, giants: SeasonRecord) -> None:
        result = forecast_season(giants)
        assert result.pace.projected_wins == 95
        assert result.projections.mean_wins == 95.0
        assert abs(result.projections.median_wins - 95) <= 1
        assert result.distribution.std_dev == pytest.approx(math.sqrt(65 * (57 / 97) * (40 / 97)))

    def test_identity_fields(self, giants: SeasonRecord) -> None:
        result = forecast_season(giants)
        assert result.team_id == "SF"
        assert result.team_name == "San Francisco Giants"
        assert result.current_record == "57-40"
        assert result.games_played == 97

    def test_explicit_std_dev(self, giants: SeasonRecord) -> None:
        result = forecast_season(giants, std_dev=7.4)
        assert result.projections.standard_dev == 7.4
        assert result.projections.median_wins == 95
        assert result.projections.p10 == 86
        assert result.projections.p90 == 105

    def test_probabilities_consistent(self, giants: SeasonRecord) -> None:
        odds = forecast_season(giants).probabilities
        assert odds.any_playoff == max(odds.division, odds.wild_card)
        assert odds.pennant <= odds.division

    def test_scenarios_ordered(self, giants: SeasonRecord) -> None:
        scenarios = forecast_season(giants).scenarios
        wins = [s.wins for s in scenarios]
        assert wins == sorted(wins)

    def test_losing_team_with_wide_spread_stays_ordered(self) -> None:
        pirates = SeasonRecord("PIT", "Pittsburgh Pirates", 37, 60, 380, 470)
        result = forecast_season(pirates, std_dev=10.0)
        proj = result.projections
        assert result.pace.projected_wins == 62
        assert proj.p75 <= proj.p90 <= proj.ceiling_wins
        assert [s.wins for s in result.scenarios] == [proj.p10, proj.p25, proj.median_wins, proj.p75, proj.p90]
        assert [s.wins for s in result.scenarios] == sorted(s.wins for s in result.scenarios)

    def test_invalid_std_dev_rejected(self, giants: SeasonRecord) -> None:
        with pytest.raises(InvalidParameterError):
            forecast_season(giants, std_dev=0.0)

    def test_no_games_played_degrades_to_zero(self) -> None:
        result = forecast_season(_record("NEW", 0, 0))
        assert result.distribution.buckets == ()
        assert result.projections.median_wins == 0
        assert result.projections.floor_wins == 0
        assert result.probabilities.any_playoff == 0

    def test_deterministic(self, giants: SeasonRecord) -> None:
        assert forecast_season(giants) == forecast_season(giants)


class TestForecastLeague:
    def test_one_forecast_per_team_in_order(self) -> None:
        records = [_record("A", 60, 40), _record("B", 40, 60)]
        results = forecast_league(records)
        assert [r.team_id for r in results] == ["A", "B"]
        assert results[0].probabilities.any_playoff > results[1].probabilities.any_playoff

    def test_empty(self) -> None:
        assert forecast_league([]) == []

import csv
import logging
from pathlib import Path
from typing import Annotated

import typer

from season_forecast.cli._logging import configure_logging
from season_forecast.cli._output import (
    print_error,
    print_forecast,
    print_json,
    print_luck_note,
    print_pace_summary,
    print_pace_table,
)
from season_forecast.config import create_config, load_model_config, load_playoff_cutoffs
from season_forecast.domain.model_config import ModelConfig
from season_forecast.domain.pace import LuckAssessment
from season_forecast.domain.season_record import SeasonRecord
from season_forecast.exceptions import ForecastError
from season_forecast.forecast.engine import forecast_season
from season_forecast.pace.model import project_league, summarize_pace
from season_forecast.roster.source import CsvRosterSource, DemoRosterSource, RosterSource

logger = logging.getLogger(__name__)

app = typer.Typer(name="season-forecast", help="Season pace tracking and win-total forecasts.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Season pace tracking and win-total forecasts."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_RosterOpt = Annotated[
    Path | None, typer.Option("--roster", help="CSV of team season records (default: demo league)")
]
_SeedOpt = Annotated[int, typer.Option("--demo-seed", help="Seed for the demo league")]
_GamesOpt = Annotated[int, typer.Option("--games-played", help="Games played per team in the demo league")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="YAML config file")]
_JsonOpt = Annotated[bool, typer.Option("--json", help="Emit JSON instead of tables")]


def _roster_source(roster: Path | None, seed: int, games_played: int, config: ModelConfig) -> RosterSource:
    if roster is not None:
        return CsvRosterSource(roster, config)
    return DemoRosterSource(seed=seed, games_played=games_played, config=config)


def _load_records(source: RosterSource) -> list[SeasonRecord]:
    try:
        records = source.fetch_records()
    except FileNotFoundError as e:
        print_error(f"roster file not found: {e.filename}")
        raise typer.Exit(code=1)
    except UnicodeDecodeError:
        print_error("roster file is not valid UTF-8")
        raise typer.Exit(code=1)
    except csv.Error as e:
        print_error(f"malformed roster CSV: {e}")
        raise typer.Exit(code=1)
    logger.debug("Loaded %d team records", len(records))
    return records


@app.command()
def pace(
    roster: _RosterOpt = None,
    demo_seed: _SeedOpt = 2026,
    games_played: _GamesOpt = 97,
    config_path: _ConfigOpt = "forecast.yaml",
    as_json: _JsonOpt = False,
) -> None:
    """Show every team's win pace, projected record and Pythagorean wins."""
    try:
        model_config = load_model_config(create_config(yaml_path=config_path))
        records = _load_records(_roster_source(roster, demo_seed, games_played, model_config))
        rows = project_league(records, model_config)
        summary = summarize_pace(rows)
    except ForecastError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        print_json({"teams": rows, "summary": summary})
        return

    print_pace_table(rows)
    typer.echo()
    print_pace_summary(summary)
    lucky = [r for r in rows if r.luck is not LuckAssessment.SUSTAINABLE]
    if lucky:
        typer.echo()
        for row in lucky:
            print_luck_note(row)


@app.command()
def forecast(
    team_id: Annotated[str, typer.Argument(help="Team identifier, e.g. SF")],
    roster: _RosterOpt = None,
    demo_seed: _SeedOpt = 2026,
    games_played: _GamesOpt = 97,
    config_path: _ConfigOpt = "forecast.yaml",
    std_dev: Annotated[
        float | None, typer.Option("--std-dev", help="Win-total standard deviation (default: derived)")
    ] = None,
    as_json: _JsonOpt = False,
) -> None:
    """Forecast one team's final win total and postseason odds."""
    try:
        cfg = create_config(yaml_path=config_path)
        model_config = load_model_config(cfg)
        cutoffs = load_playoff_cutoffs(cfg)
        records = _load_records(_roster_source(roster, demo_seed, games_played, model_config))
        record = next((r for r in records if r.team_id.lower() == team_id.lower()), None)
        if record is None:
            print_error(f"unknown team: {team_id}")
            raise typer.Exit(code=1)
        result = forecast_season(record, model_config, cutoffs, std_dev=std_dev)
    except ForecastError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        print_json(result)
        return
    print_forecast(result)

import json

from rich.console import Console
from rich.table import Table

from season_forecast.domain.forecast import OddsTier, ProbabilityBreakdown, SeasonForecast, WinDistribution
from season_forecast.domain.pace import LuckAssessment, PaceSummary, PaceTier, TeamPace
from season_forecast.forecast.summary import classify_odds
from season_forecast.serialization import to_json_dict

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_TIER_COLORS: dict[PaceTier, str] = {
    PaceTier.ELITE: "green",
    PaceTier.CONTENDER: "blue",
    PaceTier.BUBBLE: "yellow",
    PaceTier.FRINGE: "dark_orange",
    PaceTier.REBUILDING: "red",
}

_ODDS_COLORS: dict[OddsTier, str] = {
    OddsTier.STRONG: "green",
    OddsTier.GOOD: "blue",
    OddsTier.FAIR: "yellow",
    OddsTier.LONG_SHOT: "red",
}

_LUCK_NOTES: dict[LuckAssessment, str] = {
    LuckAssessment.UNDERPERFORMING: "underperforming run differential; upward regression likely",
    LuckAssessment.OVERPERFORMING: "overperforming run differential; some regression expected",
    LuckAssessment.SUSTAINABLE: "record matches run differential",
}

_HISTOGRAM_WIDTH = 40


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _signed(value: float) -> str:
    return f"+{value}" if value > 0 else str(value)


def print_pace_table(rows: list[TeamPace]) -> None:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Team")
    table.add_column("Record", justify="center")
    table.add_column("Pace", justify="right")
    table.add_column("Projected", justify="center")
    table.add_column("Playoff", justify="center")
    table.add_column("Run Diff", justify="right")
    table.add_column("Pythag", justify="right")
    table.add_column("Div Lead", justify="right")
    table.add_column("SOS", justify="right")
    for rank, row in enumerate(rows, start=1):
        color = _TIER_COLORS[row.tier]
        pyth = str(row.pace.pythagorean_wins)
        if row.pythagorean_diff != 0:
            pyth += f" ({_signed(row.pythagorean_diff)})"
        table.add_row(
            str(rank),
            row.team_name,
            f"{row.wins}-{row.losses}",
            f"[{color}]{row.pace.current_pace_wins}[/{color}]",
            f"{row.pace.projected_wins}-{row.pace.projected_losses}",
            "[green]YES[/green]" if row.playoff_pace else "NO",
            _signed(row.run_differential),
            pyth,
            _signed(row.division_lead_pace),
            f"{row.strength_of_schedule:.3f}",
        )
    console.print(table)


def print_pace_summary(summary: PaceSummary) -> None:
    console.print(f"  Playoff pace: [bold]{summary.playoff_teams}[/bold] teams")
    console.print(f"  Best pace:    [green]{summary.best_team} ({summary.best_pace}W)[/green]")
    console.print(f"  Worst pace:   [red]{summary.worst_team} ({summary.worst_pace}W)[/red]")
    console.print(f"  Avg run diff: {_signed(summary.avg_run_diff)}")


def _odds(pct: float) -> str:
    color = _ODDS_COLORS[classify_odds(pct)]
    return f"[{color}]{pct:.1f}%[/{color}]"


def print_probabilities(probabilities: ProbabilityBreakdown) -> None:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Outcome")
    table.add_column("Odds", justify="right")
    for label, pct in (
        ("Division", probabilities.division),
        ("Wild card", probabilities.wild_card),
        ("Any playoff", probabilities.any_playoff),
        ("Pennant", probabilities.pennant),
        ("World Series", probabilities.world_series),
        ("90+ wins", probabilities.ninety_plus),
        ("100+ wins", probabilities.hundred_plus),
        ("Sub-80 wins", probabilities.sub_eighty),
        ("First pick", probabilities.first_pick),
    ):
        table.add_row(label, _odds(pct))
    console.print(table)


def print_histogram(distribution: WinDistribution) -> None:
    if not distribution.buckets:
        console.print("  (empty distribution)")
        return
    peak = max(b.probability_pct for b in distribution.buckets) or 1
    for bucket in distribution.buckets:
        if bucket.probability_pct == 0:
            continue
        bar = "█" * max(1, round(bucket.probability_pct / peak * _HISTOGRAM_WIDTH))
        console.print(f"  {bucket.win_total:>3} {bar} {bucket.probability_pct}% (cum {bucket.cumulative_pct}%)")


def print_forecast(forecast: SeasonForecast) -> None:
    pace = forecast.pace
    proj = forecast.projections
    console.print(f"[bold]{forecast.team_name}[/bold] ({forecast.team_id})  {forecast.current_record}")
    console.print(f"  Games played: {forecast.games_played}  remaining: {pace.games_remaining}")
    console.print(
        f"  Pace: {pace.current_pace_wins}W  projected {pace.projected_wins}-{pace.projected_losses}"
        f"  pythagorean {pace.pythagorean_wins}W"
    )
    console.print()
    console.print("[bold]Projections[/bold]")
    console.print(f"  Mean {proj.mean_wins:.1f}  median {proj.median_wins}  std dev {proj.standard_dev:.2f}")
    console.print(f"  p10 {proj.p10}  p25 {proj.p25}  p75 {proj.p75}  p90 {proj.p90}")
    console.print(f"  Floor {proj.floor_wins}  ceiling {proj.ceiling_wins}")
    console.print()
    console.print("[bold]Probabilities[/bold]")
    print_probabilities(forecast.probabilities)
    console.print()
    console.print("[bold]Scenarios[/bold]")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Scenario")
    table.add_column("Record", justify="center")
    table.add_column("Chance", justify="right")
    table.add_column("Outcome")
    for scenario in forecast.scenarios:
        table.add_row(
            scenario.label,
            f"{scenario.wins}-{scenario.losses}",
            f"{scenario.probability_pct:.0f}%",
            scenario.outcome,
        )
    console.print(table)
    console.print()
    console.print("[bold]Win distribution[/bold]")
    print_histogram(forecast.distribution)


def print_luck_note(row: TeamPace) -> None:
    console.print(f"  {row.team_name}: {_LUCK_NOTES[row.luck]}")


def print_json(obj: object) -> None:
    console.out(json.dumps(to_json_dict(obj), indent=2), highlight=False)

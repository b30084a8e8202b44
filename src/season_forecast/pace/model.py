import logging
from collections.abc import Sequence

import numpy as np

from season_forecast.domain.model_config import DEFAULT_MODEL_CONFIG, ModelConfig
from season_forecast.domain.pace import LuckAssessment, PaceResult, PaceSummary, PaceTier, TeamPace
from season_forecast.domain.season_record import SeasonRecord
from season_forecast.exceptions import InsufficientDataError, InvalidParameterError
from season_forecast.rounding import round_half_up

logger = logging.getLogger(__name__)

# (minimum pace, tier), checked top-down
PACE_TIERS: tuple[tuple[int, PaceTier], ...] = (
    (95, PaceTier.ELITE),
    (88, PaceTier.CONTENDER),
    (81, PaceTier.BUBBLE),
    (72, PaceTier.FRINGE),
)

LUCK_MARGIN = 2


def _validate_record(record: SeasonRecord, config: ModelConfig) -> None:
    if record.wins < 0 or record.losses < 0:
        raise InvalidParameterError(
            f"Team '{record.team_id}': wins and losses must be >= 0, got {record.wins}-{record.losses}"
        )
    if record.games_played > config.total_season_games:
        raise InvalidParameterError(
            f"Team '{record.team_id}': {record.games_played} games played exceeds "
            f"season length {config.total_season_games}"
        )


def require_games_played(record: SeasonRecord) -> None:
    """Raise InsufficientDataError if the team has not played a game yet."""
    if record.games_played == 0:
        raise InsufficientDataError(f"Team '{record.team_id}' has not played any games")


def pythagorean_wins(runs_scored: int, runs_allowed: int, config: ModelConfig = DEFAULT_MODEL_CONFIG) -> int:
    """Expected win total from runs scored and allowed.

    ``0 ** k`` is taken as 0, so a team that has allowed no runs projects to a
    perfect season and a team with no runs either way projects to zero wins.
    """
    k = config.pythagorean_exponent
    rs_k = runs_scored**k if runs_scored > 0 else 0.0
    ra_k = runs_allowed**k if runs_allowed > 0 else 0.0
    denominator = rs_k + ra_k
    if denominator == 0:
        return 0
    return round_half_up(rs_k / denominator * config.total_season_games)


def compute_pace(record: SeasonRecord, config: ModelConfig = DEFAULT_MODEL_CONFIG) -> PaceResult:
    """Extrapolate a partial-season record to a full season.

    A team with no games played gets a pace of zero wins rather than an error.
    """
    _validate_record(record, config)
    season = config.total_season_games
    games_played = record.games_played
    games_remaining = season - games_played
    pyth = pythagorean_wins(record.runs_scored, record.runs_allowed, config)

    if games_played == 0:
        logger.debug("Team %s has no games played; using zero pace", record.team_id)
        return PaceResult(
            current_pace_wins=0,
            projected_wins=0,
            projected_losses=season,
            pythagorean_wins=pyth,
            games_remaining=games_remaining,
            win_pct=0.0,
        )

    win_pct = record.wins / games_played
    projected_wins = round_half_up(record.wins + win_pct * games_remaining)
    return PaceResult(
        current_pace_wins=round_half_up(win_pct * season),
        projected_wins=projected_wins,
        projected_losses=season - projected_wins,
        pythagorean_wins=pyth,
        games_remaining=games_remaining,
        win_pct=win_pct,
    )


def classify_playoff_pace(pace: PaceResult, threshold: int = DEFAULT_MODEL_CONFIG.playoff_pace_threshold) -> bool:
    return pace.current_pace_wins >= threshold


def classify_pace_tier(current_pace_wins: int) -> PaceTier:
    for minimum, tier in PACE_TIERS:
        if current_pace_wins >= minimum:
            return tier
    return PaceTier.REBUILDING


def assess_luck(pace: PaceResult) -> LuckAssessment:
    """Compare the Pythagorean expectation against the projected record."""
    diff = pace.pythagorean_wins - pace.projected_wins
    if diff > LUCK_MARGIN:
        return LuckAssessment.UNDERPERFORMING
    if diff < -LUCK_MARGIN:
        return LuckAssessment.OVERPERFORMING
    return LuckAssessment.SUSTAINABLE


def _division_lead_paces(records: Sequence[SeasonRecord], paces: Sequence[PaceResult]) -> list[int]:
    by_division: dict[str, list[int]] = {}
    for i, record in enumerate(records):
        if record.division is not None:
            by_division.setdefault(record.division, []).append(i)

    leads = [0] * len(records)
    for members in by_division.values():
        for i in members:
            rivals = [paces[j].projected_wins for j in members if j != i]
            if rivals:
                leads[i] = paces[i].projected_wins - max(rivals)
    return leads


def project_league(records: Sequence[SeasonRecord], config: ModelConfig = DEFAULT_MODEL_CONFIG) -> list[TeamPace]:
    """Compute the pace table for every team, best pace first."""
    paces = [compute_pace(r, config) for r in records]
    leads = _division_lead_paces(records, paces)

    rows: list[TeamPace] = []
    for record, pace, lead in zip(records, paces, leads, strict=True):
        rows.append(
            TeamPace(
                team_id=record.team_id,
                team_name=record.team_name,
                wins=record.wins,
                losses=record.losses,
                pace=pace,
                tier=classify_pace_tier(pace.current_pace_wins),
                playoff_pace=classify_playoff_pace(pace, config.playoff_pace_threshold),
                run_differential=record.run_differential,
                pythagorean_diff=pace.pythagorean_wins - pace.projected_wins,
                luck=assess_luck(pace),
                division_lead_pace=lead,
                strength_of_schedule=record.strength_of_schedule,
                division=record.division,
            )
        )
    rows.sort(key=lambda r: r.pace.current_pace_wins, reverse=True)
    logger.debug("Projected pace for %d teams", len(rows))
    return rows


def summarize_pace(team_paces: Sequence[TeamPace]) -> PaceSummary:
    if not team_paces:
        raise InsufficientDataError("Cannot summarize pace for an empty league")

    best = max(team_paces, key=lambda t: t.pace.current_pace_wins)
    worst = min(team_paces, key=lambda t: t.pace.current_pace_wins)
    avg_run_diff = float(np.mean([t.run_differential for t in team_paces]))
    return PaceSummary(
        playoff_teams=sum(1 for t in team_paces if t.playoff_pace),
        best_team=best.team_name,
        best_pace=best.pace.current_pace_wins,
        worst_team=worst.team_name,
        worst_pace=worst.pace.current_pace_wins,
        avg_run_diff=round(avg_run_diff, 1),
    )

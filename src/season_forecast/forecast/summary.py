import logging

from season_forecast.domain.forecast import (
    OddsTier,
    ProbabilityBreakdown,
    ProjectionSummary,
    SeasonScenario,
    WinDistribution,
)
from season_forecast.domain.model_config import (
    DEFAULT_MODEL_CONFIG,
    DEFAULT_PLAYOFF_CUTOFFS,
    ModelConfig,
    PlayoffCutoffs,
)
from season_forecast.domain.pace import PaceResult

logger = logging.getLogger(__name__)

PERCENTILE_TARGETS = (10, 25, 50, 75, 90)

# (minimum pct, tier), checked top-down
ODDS_TIERS: tuple[tuple[float, OddsTier], ...] = (
    (80, OddsTier.STRONG),
    (50, OddsTier.GOOD),
    (25, OddsTier.FAIR),
)

BUBBLE_MARGIN = 4


def percentile_wins(distribution: WinDistribution, target: float) -> float:
    """Smallest win total whose cumulative percentage reaches ``target``.

    Rounding can leave the bucket total short of 100, so a target past the
    total resolves to the highest win total with mass. Only a distribution
    with no mass at all falls back to its mean.
    """
    if distribution.is_degenerate():
        return distribution.mean
    for bucket in distribution.buckets:
        if bucket.cumulative_pct >= target:
            return bucket.win_total
    return max(b.win_total for b in distribution.buckets if b.probability_pct > 0)


def summarize(distribution: WinDistribution) -> ProjectionSummary:
    """Percentile band and extremes of a win distribution.

    ``mean_wins`` is the distribution's input mean, not recomputed from the
    buckets. A distribution with no mass reports the mean for every field.
    """
    mean = distribution.mean
    if distribution.is_degenerate():
        logger.debug("Degenerate distribution; summarizing as mean=%.2f", mean)
        return ProjectionSummary(
            mean_wins=mean,
            median_wins=mean,
            p10=mean,
            p25=mean,
            p75=mean,
            p90=mean,
            floor_wins=mean,
            ceiling_wins=mean,
            standard_dev=distribution.std_dev,
        )

    p10, p25, p50, p75, p90 = (percentile_wins(distribution, t) for t in PERCENTILE_TARGETS)
    supported = [b.win_total for b in distribution.buckets if b.probability_pct > 0]
    return ProjectionSummary(
        mean_wins=mean,
        median_wins=p50,
        p10=p10,
        p25=p25,
        p75=p75,
        p90=p90,
        floor_wins=min(supported),
        ceiling_wins=max(supported),
        standard_dev=distribution.std_dev,
    )


def survival_pct(distribution: WinDistribution, threshold: int) -> float:
    """P(final wins >= threshold) in percent, read as ``100 - cumulative(threshold - 1)``."""
    return float(min(100, max(0, 100 - distribution.cumulative_at(threshold - 1))))


def _at_most_pct(distribution: WinDistribution, threshold: int) -> float:
    return float(min(100, max(0, distribution.cumulative_at(threshold))))


def breakdown_probabilities(
    pace: PaceResult,
    distribution: WinDistribution,
    cutoffs: PlayoffCutoffs = DEFAULT_PLAYOFF_CUTOFFS,
) -> ProbabilityBreakdown:
    """Categorical season odds read off the distribution's survival function.

    ``any_playoff`` is ``max(division, wild_card)``: the two paths are not
    modelled as correlated, so this is a conservative union rather than an
    inclusion-exclusion probability. With no distribution mass, each category
    is 100 or 0 depending on whether the projected record clears the cutoff.
    """
    if distribution.is_degenerate():
        logger.debug("Degenerate distribution; using projected wins=%d for odds", pace.projected_wins)

        def at_least(threshold: int) -> float:
            return 100.0 if pace.projected_wins >= threshold else 0.0

        def at_most(threshold: int) -> float:
            return 100.0 if pace.projected_wins <= threshold else 0.0
    else:

        def at_least(threshold: int) -> float:
            return survival_pct(distribution, threshold)

        def at_most(threshold: int) -> float:
            return _at_most_pct(distribution, threshold)

    division = at_least(cutoffs.division)
    wild_card = at_least(cutoffs.wild_card)
    return ProbabilityBreakdown(
        division=division,
        wild_card=wild_card,
        any_playoff=max(division, wild_card),
        pennant=at_least(cutoffs.pennant),
        world_series=at_least(cutoffs.world_series),
        first_pick=at_most(cutoffs.first_pick),
        sub_eighty=at_most(cutoffs.sub_eighty - 1),
        ninety_plus=at_least(cutoffs.ninety_plus),
        hundred_plus=at_least(cutoffs.hundred_plus),
    )


def classify_odds(pct: float) -> OddsTier:
    for minimum, tier in ODDS_TIERS:
        if pct >= minimum:
            return tier
    return OddsTier.LONG_SHOT


def describe_outcome(wins: float, cutoffs: PlayoffCutoffs = DEFAULT_PLAYOFF_CUTOFFS) -> str:
    if wins >= cutoffs.division:
        return "Division title contender"
    if wins >= cutoffs.wild_card:
        return "Wild card berth"
    if wins >= cutoffs.wild_card - BUBBLE_MARGIN:
        return "On the bubble"
    return "Out of contention"


def build_scenarios(
    summary: ProjectionSummary,
    distribution: WinDistribution,
    cutoffs: PlayoffCutoffs = DEFAULT_PLAYOFF_CUTOFFS,
    config: ModelConfig = DEFAULT_MODEL_CONFIG,
) -> tuple[SeasonScenario, ...]:
    """Five named outcomes pinned to the percentile band, worst first.

    Each scenario's probability is the mass above the previous scenario's win
    total up to and including its own; ``best`` takes the remaining upper tail.
    """
    points = (
        ("worst", "Worst Case", summary.p10),
        ("pessimistic", "Pessimistic", summary.p25),
        ("likely", "Most Likely", summary.median_wins),
        ("optimistic", "Optimistic", summary.p75),
        ("best", "Best Case", summary.p90),
    )
    degenerate = distribution.is_degenerate()

    scenarios: list[SeasonScenario] = []
    previous_cumulative = 0
    for key, label, raw_wins in points:
        wins = int(raw_wins)
        if degenerate:
            probability = 100.0 if key == "likely" else 0.0
        elif key == "best":
            probability = float(max(0, distribution.total_pct() - previous_cumulative))
        else:
            cumulative = distribution.cumulative_at(wins)
            probability = float(max(0, cumulative - previous_cumulative))
            previous_cumulative = cumulative
        scenarios.append(
            SeasonScenario(
                key=key,
                label=label,
                wins=wins,
                losses=config.total_season_games - wins,
                outcome=describe_outcome(wins, cutoffs),
                probability_pct=probability,
            )
        )
    return tuple(scenarios)

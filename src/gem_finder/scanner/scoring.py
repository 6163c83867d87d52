"""Rule-based potential scoring for market records.

Each :class:`ScoreRule` reads one metric from a record and walks its tiers
from the strictest threshold down; the first tier whose predicate holds adds
its points and factor text. Rules are independent of each other, so the
table can be extended or tested one rule at a time.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.models import MarketRecord, PotentialScore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreTier:
    """One threshold of a rule: predicate on the metric, points, factor text."""

    predicate: Callable[[float], bool]
    points: int
    factor: str


@dataclass(frozen=True)
class ScoreRule:
    """A group of mutually exclusive tiers over a single metric."""

    name: str
    metric: Callable[[MarketRecord], Optional[float]]
    tiers: Tuple[ScoreTier, ...]

    def evaluate(self, record: MarketRecord) -> Optional[ScoreTier]:
        """Return the first matching tier, or None."""
        value = self.metric(record)
        if value is None:
            return None
        for tier in self.tiers:
            if tier.predicate(value):
                return tier
        return None

    @property
    def max_points(self) -> int:
        return max((tier.points for tier in self.tiers), default=0)


DEFAULT_RULES: Tuple[ScoreRule, ...] = (
    ScoreRule(
        name="market_cap",
        metric=lambda r: r.market_cap_millions,
        tiers=(
            ScoreTier(lambda v: v < 10, 4, "Micro market cap with massive growth potential"),
            ScoreTier(lambda v: v < 50, 3, "Very low market cap with high growth potential"),
        ),
    ),
    ScoreRule(
        name="volume_ratio",
        metric=lambda r: r.volume_to_market_cap,
        tiers=(
            ScoreTier(lambda v: v > 0.5, 4, "Exceptional trading volume relative to market cap"),
            ScoreTier(lambda v: v > 0.3, 3, "Very high trading volume relative to market cap"),
        ),
    ),
    ScoreRule(
        name="momentum",
        metric=lambda r: r.price_change_percentage_24h,
        tiers=(
            ScoreTier(lambda v: v > 15, 4, "Strong positive price momentum (>15%)"),
            ScoreTier(lambda v: v > 8, 2, "Good positive price momentum (>8%)"),
        ),
    ),
    ScoreRule(
        name="supply",
        metric=lambda r: r.supply_ratio,
        tiers=(
            ScoreTier(lambda v: v < 0.3, 3, "Very large room for supply growth"),
            ScoreTier(lambda v: v < 0.5, 2, "Significant room for supply growth"),
        ),
    ),
    ScoreRule(
        name="trading_activity",
        metric=lambda r: r.total_volume - r.market_cap,
        tiers=(
            ScoreTier(lambda v: v > 0, 2, "Extremely high trading activity"),
        ),
    ),
)

MAX_POTENTIAL_SCORE = sum(rule.max_points for rule in DEFAULT_RULES)


class PotentialScorer:
    """Scores records against an ordered rule table."""

    def __init__(self, rules: Optional[Sequence[ScoreRule]] = None):
        self.rules: List[ScoreRule] = list(DEFAULT_RULES if rules is None else rules)

    @property
    def max_score(self) -> int:
        return sum(rule.max_points for rule in self.rules)

    def score(self, record: MarketRecord) -> PotentialScore:
        """Compute a fresh score for *record*."""
        value = 0
        factors: List[str] = []
        for rule in self.rules:
            tier = rule.evaluate(record)
            if tier is None:
                continue
            value += tier.points
            factors.append(tier.factor)

        logger.debug(f"Scored {record.id}: {value} ({len(factors)} factors)")
        return PotentialScore(value=value, factors=factors)


_default_scorer = PotentialScorer()


def score_record(record: MarketRecord) -> PotentialScore:
    """Score *record* with the default rule table."""
    return _default_scorer.score(record)

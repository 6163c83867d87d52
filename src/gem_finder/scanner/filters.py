"""Candidate filter selecting small-cap, actively traded records."""

import logging
from typing import Dict, List, Optional, Sequence

from ..core.models import FilterCriterion, MarketRecord

logger = logging.getLogger(__name__)


class CandidateFilter:
    """
    Keeps records with a positive market cap below the cap ceiling and a
    volume/cap ratio above the floor. Records failing a check are dropped
    silently; input order is preserved.
    """

    def __init__(self, config: Optional[Dict] = None):
        defaults = self._default_config()
        if config:
            defaults.update(config)
        self.config = defaults

    @staticmethod
    def _default_config() -> Dict:
        return {
            "max_market_cap": 100_000_000,
            "min_volume_ratio": 0.1,
            # momentum and supply checks are displayed but only applied when enabled
            "enforce_advertised_criteria": False,
            "min_price_change_pct": 8.0,
            "max_supply_ratio": 0.5,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def passes(self, record: MarketRecord) -> bool:
        """True if *record* satisfies every inclusion condition."""
        if record.market_cap <= 0:
            return False
        if record.market_cap_millions >= self.config["max_market_cap"] / 1_000_000:
            return False
        if record.total_volume / record.market_cap <= self.config["min_volume_ratio"]:
            return False

        if self.config["enforce_advertised_criteria"]:
            change = record.price_change_percentage_24h
            if change is None or change <= self.config["min_price_change_pct"]:
                return False
            supply_ratio = record.supply_ratio
            if supply_ratio is not None and supply_ratio >= self.config["max_supply_ratio"]:
                return False

        return True

    def filter(self, records: Sequence[MarketRecord]) -> List[MarketRecord]:
        """Return the records passing all checks, in input order."""
        result = [r for r in records if self.passes(r)]
        logger.debug(f"Filtered {len(result)} candidates from {len(records)} records")
        return result

    def criteria(self) -> List[FilterCriterion]:
        """Discovery criteria as shown on the dashboard."""
        max_cap_m = self.config["max_market_cap"] / 1_000_000
        return [
            FilterCriterion(
                name="Market Cap",
                value=f"< ${max_cap_m:g}M",
                description="Focus on small-cap tokens with room for growth",
            ),
            FilterCriterion(
                name="Volume/Market Cap Ratio",
                value=f"> {self.config['min_volume_ratio']:g}",
                description="Ensures sufficient trading activity",
            ),
            FilterCriterion(
                name="Price Momentum",
                value=f"> {self.config['min_price_change_pct']:g}%",
                description="Shows growing market interest",
            ),
            FilterCriterion(
                name="Supply Distribution",
                value=f"< {self.config['max_supply_ratio'] * 100:g}%",
                description="Room for supply growth",
            ),
        ]


def filter_candidates(records: Sequence[MarketRecord], config: Optional[Dict] = None) -> List[MarketRecord]:
    """Filter *records* with the default (or given) thresholds."""
    return CandidateFilter(config).filter(records)

"""Gem scanner: fetch, filter, rank and describe potential gems."""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Union

from ..core.enums import ScanStatus, SortDirection, SortField
from ..core.models import ChartPoint, FilterCriterion, GemCandidate, MarketRecord, ScanResult
from ..data.connector import MarketDataError, MarketDataSource
from .filters import CandidateFilter
from .narrative import generate_narrative
from .ranker import rank_records, top_n
from .scoring import score_record

logger = logging.getLogger(__name__)


class GemScanner:
    """
    Runs the pipeline ``acquire -> filter -> rank -> top N -> score/narrate``
    and keeps the last filtered set so the list can be re-sorted without
    another fetch.
    """

    def __init__(self, config: Optional[Dict] = None):
        defaults = self._default_config()
        if config:
            defaults.update(config)
        self.config = defaults
        self.sort_field = SortField(self.config["sort_field"])
        self.sort_direction = SortDirection(self.config["sort_direction"])
        self.candidate_filter = CandidateFilter({
            key: self.config[key]
            for key in CandidateFilter._default_config()
            if key in self.config
        })
        self._filtered: List[MarketRecord] = []
        self._last_result = ScanResult()

    @staticmethod
    def _default_config() -> Dict:
        return {
            "top_n": 10,
            "sort_field": SortField.POTENTIAL_SCORE.value,
            "sort_direction": SortDirection.DESC.value,
            "max_market_cap": 100_000_000,
            "min_volume_ratio": 0.1,
            "enforce_advertised_criteria": False,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def last_result(self) -> ScanResult:
        return self._last_result

    def criteria(self) -> List[FilterCriterion]:
        return self.candidate_filter.criteria()

    def find_gems(self, records: Sequence[MarketRecord]) -> List[GemCandidate]:
        """Filter, rank and describe *records* with the current sort settings."""
        return self._rank_and_describe(self.candidate_filter.filter(records))

    async def scan_market(self, source: MarketDataSource) -> ScanResult:
        """
        Full scan against *source*.

        Acquisition failures never propagate: they produce a result with
        status ``ERROR`` and the error message.
        """
        self._last_result = ScanResult(status=ScanStatus.LOADING)
        try:
            records = await source.fetch_markets()
        except MarketDataError as e:
            logger.error(f"Market scan failed: {e}")
            self._filtered = []
            self._last_result = ScanResult(
                status=ScanStatus.ERROR,
                error=str(e),
                fetched_at=datetime.now(timezone.utc),
            )
            return self._last_result

        self._filtered = self.candidate_filter.filter(records)
        if not self._filtered:
            logger.warning("No records passed filtering")

        candidates = self._rank_and_describe(self._filtered)
        self._last_result = ScanResult(
            status=ScanStatus.READY,
            candidates=candidates,
            chart=self.build_chart_data(candidates),
            fetched_at=datetime.now(timezone.utc),
            total_records=len(records),
            filtered_records=len(self._filtered),
        )
        logger.info(
            f"Scan complete: {len(candidates)} gems from {len(self._filtered)} "
            f"candidates ({len(records)} records)"
        )
        return self._last_result

    def resort(
        self,
        field: Union[SortField, str],
        direction: Union[SortDirection, str, None] = None,
    ) -> ScanResult:
        """Re-rank the last filtered set by *field* without refetching."""
        self.sort_field = SortField(field)
        if direction is not None:
            self.sort_direction = SortDirection(direction)

        if self._last_result.status != ScanStatus.READY:
            return self._last_result

        candidates = self._rank_and_describe(self._filtered)
        previous = self._last_result
        self._last_result = ScanResult(
            status=ScanStatus.READY,
            candidates=candidates,
            chart=self.build_chart_data(candidates),
            fetched_at=previous.fetched_at,
            total_records=previous.total_records,
            filtered_records=previous.filtered_records,
        )
        return self._last_result

    def get_top_candidates(self, n: Optional[int] = None) -> List[GemCandidate]:
        """Return top *n* candidates from the last scan."""
        if n is None:
            n = self.config["top_n"]
        return self._last_result.candidates[:n]

    @staticmethod
    def build_chart_data(candidates: Sequence[GemCandidate]) -> List[ChartPoint]:
        """Chart projection: upper-cased symbol, score and market cap."""
        return [
            ChartPoint(
                label=c.record.symbol.upper(),
                score=c.score.value,
                market_cap=c.record.market_cap,
            )
            for c in candidates
        ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _rank_and_describe(self, records: Sequence[MarketRecord]) -> List[GemCandidate]:
        ranked = rank_records(records, self.sort_field, self.sort_direction)
        return [
            GemCandidate(
                record=record,
                score=score_record(record),
                narrative=generate_narrative(record),
            )
            for record in top_n(ranked, self.config["top_n"])
        ]

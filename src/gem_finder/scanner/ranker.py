"""Stable ranking of market records by score or a numeric field."""

import logging
from typing import Callable, List, Optional, Sequence, Union

from ..core.enums import SortDirection, SortField
from ..core.models import MarketRecord
from .scoring import score_record

logger = logging.getLogger(__name__)


def _sort_key(field: SortField) -> Callable[[MarketRecord], Optional[float]]:
    if field == SortField.POTENTIAL_SCORE:
        return lambda r: score_record(r).value
    return lambda r: getattr(r, field.value)


def rank_records(
    records: Sequence[MarketRecord],
    field: Union[SortField, str] = SortField.POTENTIAL_SCORE,
    direction: Union[SortDirection, str] = SortDirection.DESC,
) -> List[MarketRecord]:
    """
    Return a new list of *records* sorted by *field*.

    The sort is stable in both directions, so ties keep their input order.
    Records without a value for *field* go last. Scores are computed once
    per record per call.
    """
    field = SortField(field)
    direction = SortDirection(direction)
    key = _sort_key(field)

    keyed = [(key(r), r) for r in records]
    present = [(value, r) for value, r in keyed if value is not None]
    missing = [r for value, r in keyed if value is None]

    present.sort(key=lambda item: item[0], reverse=direction == SortDirection.DESC)

    logger.debug(f"Ranked {len(keyed)} records by {field.value} {direction.value}")
    return [r for _, r in present] + missing


def top_n(records: Sequence[MarketRecord], n: int = 10) -> List[MarketRecord]:
    """First *n* records of an already ranked sequence."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return list(records[:n])

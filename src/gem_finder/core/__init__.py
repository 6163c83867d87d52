"""Core module for the gem finder."""

from .models import (
    MarketRecord, PotentialScore, FilterCriterion,
    ChartPoint, GemCandidate, ScanResult
)
from .enums import SortField, SortDirection, ScanStatus

__all__ = [
    "MarketRecord",
    "PotentialScore",
    "FilterCriterion",
    "ChartPoint",
    "GemCandidate",
    "ScanResult",
    "SortField",
    "SortDirection",
    "ScanStatus",
]

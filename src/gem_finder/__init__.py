"""
Crypto Gem Finder

Finds small-cap, actively traded tokens in public market data, scores their
growth potential with a fixed rule table and explains each pick in one
sentence.
"""

__version__ = "0.1.0"
__author__ = "Gem Finder Team"

from .core.models import MarketRecord, PotentialScore, GemCandidate, ScanResult
from .core.enums import SortField, SortDirection, ScanStatus
from .scanner.filters import filter_candidates
from .scanner.scoring import score_record
from .scanner.ranker import rank_records
from .scanner.narrative import generate_narrative
from .scanner.gem_scanner import GemScanner

__all__ = [
    "MarketRecord",
    "PotentialScore",
    "GemCandidate",
    "ScanResult",
    "SortField",
    "SortDirection",
    "ScanStatus",
    "filter_candidates",
    "score_record",
    "rank_records",
    "generate_narrative",
    "GemScanner",
]

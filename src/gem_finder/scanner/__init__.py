"""Gem scanner: filtering, scoring, ranking and narration."""

from .filters import CandidateFilter, filter_candidates
from .gem_scanner import GemScanner
from .narrative import generate_narrative
from .ranker import rank_records, top_n
from .scoring import MAX_POTENTIAL_SCORE, PotentialScorer, ScoreRule, ScoreTier, score_record

__all__ = [
    "CandidateFilter",
    "filter_candidates",
    "GemScanner",
    "generate_narrative",
    "rank_records",
    "top_n",
    "MAX_POTENTIAL_SCORE",
    "PotentialScorer",
    "ScoreRule",
    "ScoreTier",
    "score_record",
]

"""Matching package exposing the fuzzy matcher and ranking helpers.

`scoring.py` holds the pure per-candidate matcher; `ranking.py` orders a
candidate list with it and `suggest.py` offers typo tolerant fallbacks.
"""

from .scoring import (
    EMPTY_QUERY_SCORE,
    MatchResult,
    ScoringConfig,
    SearchPrecision,
    match,
)
from .ranking import RankedCandidate, rank_candidates, best_match
from .suggest import Suggestion, suggest

__all__ = [
    "EMPTY_QUERY_SCORE",
    "MatchResult",
    "ScoringConfig",
    "SearchPrecision",
    "match",
    "RankedCandidate",
    "rank_candidates",
    "best_match",
    "Suggestion",
    "suggest",
]

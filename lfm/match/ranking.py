"""Ranking helpers for ordering a bounded list of candidate labels.

This is the caller side of ``match``: score every candidate once, keep the
successful ones that meet the requested search precision and sort them.

Sort order (deterministic):
    1. score, highest first
    2. span, shortest first
    3. first matched position, earliest first
    4. candidate text, lexicographic
    5. original input index
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .scoring import MatchResult, ScoringConfig, SearchPrecision, match

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedCandidate:
    candidate: str
    result: MatchResult
    index: int

    @property
    def score(self) -> int:
        return self.result.score

    def sort_key(self) -> Tuple[int, int, int, str, int]:
        first = self.result.first_position
        return (
            -self.result.score,
            self.result.span,
            first if first is not None else -1,
            self.candidate,
            self.index,
        )


def rank_candidates(
    query: str,
    candidates: Iterable[str],
    cfg: Optional[ScoringConfig] = None,
    precision: SearchPrecision | str = SearchPrecision.NONE,
    limit: int | None = None,
) -> List[RankedCandidate]:
    """Match ``query`` against every candidate and return the ranked hits.

    Args:
        query: Raw user query (may be empty or contain several terms)
        candidates: Candidate labels; order only matters as the final tie-break
        cfg: Scoring weights (defaults to ``ScoringConfig()``)
        precision: Minimum search precision a hit must meet
        limit: Maximum number of results to return (None = unlimited)

    Returns:
        List of RankedCandidate sorted best first
    """
    precision = SearchPrecision.parse(precision)
    ranked: List[RankedCandidate] = []
    total = 0
    for index, candidate in enumerate(candidates):
        total += 1
        result = match(query, candidate, cfg)
        if not result.meets_precision(precision):
            continue
        ranked.append(RankedCandidate(candidate=candidate, result=result, index=index))

    ranked.sort(key=RankedCandidate.sort_key)
    logger.debug(
        f"Ranked {total} candidates for query {query!r}: "
        f"{len(ranked)} matched (precision={precision.value})"
    )
    if limit is not None:
        ranked = ranked[:max(limit, 0)]
    return ranked


def best_match(
    query: str,
    candidates: Iterable[str],
    cfg: Optional[ScoringConfig] = None,
    precision: SearchPrecision | str = SearchPrecision.NONE,
) -> Optional[RankedCandidate]:
    """Return the top ranked candidate or None."""
    ranked = rank_candidates(query, candidates, cfg, precision, limit=1)
    return ranked[0] if ranked else None


__all__ = ["RankedCandidate", "rank_candidates", "best_match"]

"""Typo tolerant "did you mean" suggestions.

Subsequence matching rejects a query with a single mistyped character
("stetings" vs "Settings"). When a ranking comes back empty, callers can fall
back to these suggestions, which use rapidfuzz's weighted ratio instead of
subsequence matching. They never change ``match`` results or scores.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from rapidfuzz import fuzz, process, utils


@dataclass(frozen=True)
class Suggestion:
    candidate: str
    similarity: float  # 0-100
    index: int


def suggest(
    query: str,
    candidates: Sequence[str],
    limit: int = 3,
    score_cutoff: float = 70.0,
) -> List[Suggestion]:
    """Return up to ``limit`` candidates most similar to ``query``.

    Ordered by similarity (highest first), then candidate text, so equal
    similarities always come back in the same order.
    """
    if not query.strip() or not candidates or limit <= 0:
        return []
    hits = process.extract(
        query,
        list(candidates),
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=None,
        score_cutoff=score_cutoff,
    )
    suggestions = [Suggestion(candidate=choice, similarity=float(score), index=index)
                   for choice, score, index in hits]
    suggestions.sort(key=lambda s: (-s.similarity, s.candidate, s.index))
    return suggestions[:limit]


__all__ = ["Suggestion", "suggest"]

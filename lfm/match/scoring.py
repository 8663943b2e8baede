from __future__ import annotations
"""Subsequence fuzzy matching with additive scoring.

This module defines the value types and the ``match`` function that scores a
typed query against one candidate label (a launcher entry, a plugin command
title). It performs no I/O and holds no state between calls.

Design goals:
- Case-insensitive subsequence matching, one whitespace separated term at a time
- Weighted additive scoring whose weights respect a fixed precedence order
- Matched positions reported for highlighting
- Pure / side-effect free for easy unit testing

Term placement is greedy: each term takes the leftmost subsequence after the
previous term's last matched character. An earlier term is never moved to
make room for a better placement of a later one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Tuple

from ..utils.normalization import fold_char, fold_text, split_terms, is_word_boundary

# Score reported for an empty (or whitespace only) query. Every successful
# non-empty match scores strictly above it.
EMPTY_QUERY_SCORE = 0
NO_MATCH_SCORE = 0

# --- Search Precision ------------------------------------------------------

class SearchPrecision(str, Enum):
    NONE = "none"
    LOW = "low"
    REGULAR = "regular"

    @property
    def min_score(self) -> int:
        return _PRECISION_SCORES[self]

    @classmethod
    def parse(cls, value: "str | SearchPrecision") -> "SearchPrecision":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown search precision '{value}'. Available: {choices}") from None


_PRECISION_SCORES = {
    SearchPrecision.NONE: 0,
    SearchPrecision.LOW: 10,
    SearchPrecision.REGULAR: 20,
}

# --- Dataclasses -----------------------------------------------------------

@dataclass(frozen=True)
class MatchResult:
    success: bool
    score: int
    matched_positions: Tuple[int, ...] = ()

    @property
    def first_position(self) -> Optional[int]:
        return self.matched_positions[0] if self.matched_positions else None

    @property
    def span(self) -> int:
        """Distance between the first and last matched character (0 if none)."""
        if not self.matched_positions:
            return 0
        return self.matched_positions[-1] - self.matched_positions[0]

    def meets_precision(self, precision: "SearchPrecision | str") -> bool:
        return self.success and self.score >= SearchPrecision.parse(precision).min_score

# --- Scoring Configuration -------------------------------------------------

@dataclass
class ScoringConfig:
    """Weights for the additive score.

    Per matched character:
      weight_char          every matched character
      bonus_consecutive    directly follows the previous matched character
      bonus_word_boundary  sits at a word boundary (start, after separator,
                           camelCase hump, letter/digit transition)
      bonus_case_match     query character equals the candidate character
                           exactly (case-sensitive)
    Whole match:
      penalty_gap_char     per unmatched character inside the matched span
      weight_coverage      scaled by matched characters / candidate length

    Precedence (highest first): consecutive > word boundary > case match >
    span tightness > coverage. ``validate()`` rejects weights that break this
    order. The whole coverage term never exceeds ``weight_coverage``, which
    must stay below ``bonus_consecutive + penalty_gap_char``, the least a
    single contiguous step gains over a gap.

    Scoring examples (default weights):

    1. "open settings" vs "Open Settings Dialog"
       - base 12*4 = 48, consecutive 10*8 = 80, boundaries 2*6 = 12
       - case 10*2 = 20, gap -1, coverage 8*12//20 = 4
       - total 163

    2. "open settings" vs "xopenyzsettingsdialog"
       - base 48, consecutive 80, no boundaries, case 12*2 = 24
       - gap -2, coverage 8*12//21 = 4
       - total 154
    """
    weight_char: int = 4
    bonus_consecutive: int = 8
    bonus_word_boundary: int = 6
    bonus_case_match: int = 2
    penalty_gap_char: int = 1
    weight_coverage: int = 8

    def validate(self) -> "ScoringConfig":
        if self.weight_char < 0 or self.weight_coverage < 0:
            raise ValueError("weight_char and weight_coverage must not be negative")
        if not (self.bonus_consecutive > self.bonus_word_boundary > self.bonus_case_match
                > self.penalty_gap_char > 0):
            raise ValueError(
                "Scoring weights must satisfy bonus_consecutive > bonus_word_boundary > "
                f"bonus_case_match > penalty_gap_char > 0 (got {self.bonus_consecutive}, "
                f"{self.bonus_word_boundary}, {self.bonus_case_match}, {self.penalty_gap_char})"
            )
        if self.weight_coverage >= self.bonus_consecutive + self.penalty_gap_char:
            raise ValueError(
                "weight_coverage must be below bonus_consecutive + penalty_gap_char "
                f"(got {self.weight_coverage} >= {self.bonus_consecutive + self.penalty_gap_char})"
            )
        return self


_DEFAULT_CONFIG = ScoringConfig()

# --- Subsequence Search ----------------------------------------------------

def _locate_term(term: str, units: List[str], start: int) -> Optional[Tuple[List[Tuple[str, int]], int]]:
    """Leftmost subsequence placement of ``term`` at or after ``start``.

    Matching runs on folded text: each candidate index contributes its whole
    folded unit, consumed by the same run of folded query characters. A unit
    is reported once, paired with the first query character starting inside
    its run; units consumed only by the tail of an expanded query character
    are skipped. At the end of the term a unit may be consumed partially
    ("stras" reaches into "ß").

    Returns (query char, candidate index) pairs and the index after the last
    consumed unit, or None if the term does not fit.
    """
    folded = fold_text(term)
    owners: List[Optional[str]] = []  # query char starting at each folded offset
    for ch in term:
        owners.append(ch)
        owners.extend([None] * (len(fold_char(ch)) - 1))

    pairs: List[Tuple[str, int]] = []
    offset = 0
    cursor = start
    length = len(units)
    while offset < len(folded):
        if cursor >= length:
            return None
        unit = units[cursor]
        if folded.startswith(unit, offset):
            run = len(unit)
        elif len(folded) - offset < len(unit) and unit.startswith(folded[offset:]):
            run = len(folded) - offset
        else:
            cursor += 1
            continue
        owner = next((o for o in owners[offset:offset + run] if o is not None), None)
        if owner is not None:
            pairs.append((owner, cursor))
        offset += run
        cursor += 1
    return pairs, cursor

# --- Core Scoring Logic ----------------------------------------------------

def match(query: str, candidate: str, cfg: Optional[ScoringConfig] = None) -> MatchResult:
    """Match ``query`` against ``candidate`` and score the result.

    Never raises for string input: a miss is ``success=False`` with score 0
    and no positions; an empty query is a trivial success with
    ``EMPTY_QUERY_SCORE``.
    """
    cfg = cfg or _DEFAULT_CONFIG
    terms = split_terms(query)
    if not terms:
        return MatchResult(success=True, score=EMPTY_QUERY_SCORE)
    if not candidate:
        return MatchResult(success=False, score=NO_MATCH_SCORE)

    units = [fold_char(ch) for ch in candidate]

    # (query char, candidate index) for every matched character, in order
    pairs: List[Tuple[str, int]] = []
    cursor = 0
    for term in terms:
        located = _locate_term(term, units, cursor)
        if located is None:
            return MatchResult(success=False, score=NO_MATCH_SCORE)
        term_pairs, cursor = located
        pairs.extend(term_pairs)

    score = 0
    prev: Optional[int] = None
    for qch, pos in pairs:
        score += cfg.weight_char
        if prev is not None and pos == prev + 1:
            score += cfg.bonus_consecutive
        if is_word_boundary(candidate, pos):
            score += cfg.bonus_word_boundary
        if qch == candidate[pos]:
            score += cfg.bonus_case_match
        prev = pos

    first = pairs[0][1]
    last = pairs[-1][1]
    gap_chars = (last - first + 1) - len(pairs)
    score -= gap_chars * cfg.penalty_gap_char
    score += (cfg.weight_coverage * len(pairs)) // len(candidate)

    return MatchResult(
        success=True,
        score=max(score, EMPTY_QUERY_SCORE + 1),
        matched_positions=tuple(pos for _, pos in pairs),
    )


__all__ = [
    "EMPTY_QUERY_SCORE",
    "NO_MATCH_SCORE",
    "SearchPrecision",
    "MatchResult",
    "ScoringConfig",
    "match",
]

from __future__ import annotations
from functools import lru_cache
from typing import List


@lru_cache(maxsize=8192)
def fold_char(ch: str) -> str:
    """Case-fold a single character into its comparison unit.

    The unit may be longer than one character (``"ß"`` -> ``"ss"``,
    ``"ﬁ"`` -> ``"fi"``). Uppercasing first makes characters whose uppercase
    form folds elsewhere agree with it (``"ı"`` -> ``"I"`` -> ``"i"``), so a
    string and its uppercase form always fold to the same text.
    """
    return ch.upper().casefold()


def fold_text(s: str) -> str:
    return "".join(fold_char(ch) for ch in s)


def split_terms(query: str) -> List[str]:
    """Split a query into its non-empty whitespace separated terms."""
    return query.split()


def _kind(ch: str) -> str:
    if ch.isdigit():
        return "digit"
    if ch.isalpha():
        return "alpha"
    return "other"


def is_word_boundary(text: str, index: int) -> bool:
    """Return True if ``text[index]`` starts a new word.

    A word starts at the beginning of the string, after a non-alphanumeric
    separator, at a lowercase -> uppercase transition ("camelCase") and at a
    letter <-> digit transition ("win10", "3mf").
    """
    if index <= 0:
        return True
    prev = text[index - 1]
    cur = text[index]
    if not cur.isalnum():
        return False
    if not prev.isalnum():
        return True
    if prev.islower() and cur.isupper():
        return True
    return _kind(prev) != _kind(cur)


__all__ = ["fold_char", "fold_text", "split_terms", "is_word_boundary"]

"""
Low-level string utilities: edit distance, similarity, keywords, sanitizing.

All functions are pure and total; they never raise on odd input.
"""

import re
from collections import Counter
from typing import Any

from rapidfuzz.distance import Levenshtein

_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def edit_distance(s1: str, s2: str) -> int:
    """
    Case-insensitive Levenshtein distance.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Minimum number of single-character edits turning s1 into s2
    """
    return Levenshtein.distance(s1.lower(), s2.lower())


def similarity(s1: str, s2: str) -> float:
    """
    Normalized similarity: 1 - edit_distance / len(longer).

    Args:
        s1: First string
        s2: Second string

    Returns:
        Score in [0, 1]; 1.0 for identical (or both empty) strings
    """
    longer, shorter = (s1, s2) if len(s1) > len(s2) else (s2, s1)
    if len(longer) == 0:
        return 1.0
    score = (len(longer) - edit_distance(longer, shorter)) / float(len(longer))
    return max(0.0, min(1.0, score))


def extract_keywords(text: Any, max_keywords: int = 6) -> list[str]:
    """
    Most frequent words longer than three characters.

    Lower-cases, replaces everything outside [a-z0-9] and whitespace with a
    space, and ranks by descending count. Ties keep first-seen order.

    Args:
        text: Source text
        max_keywords: Number of keywords to return

    Returns:
        Keywords, most frequent first
    """
    if not text:
        return []
    words = [w for w in _NON_ALNUM.sub(" ", str(text).lower()).split() if len(w) > 3]
    # Counter preserves insertion order and sorted() is stable
    counts = Counter(words)
    ranked = sorted(counts, key=lambda w: counts[w], reverse=True)
    return ranked[:max_keywords]


def sanitize_text(value: Any) -> str:
    """
    Collapse whitespace runs to single spaces and trim.

    Args:
        value: Any value; None and other falsy values give ""

    Returns:
        Cleaned string
    """
    if not value:
        return ""
    return _WHITESPACE.sub(" ", str(value)).strip()

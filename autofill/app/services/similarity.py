"""
Similarity scoring between two pieces of form/profile text.

Scores are on a 0..1 scale: exact canonical match, substring containment, or
normalized edit distance. Weak fuzzy matches are discarded (scored 0) rather than
reported, trading recall for precision.
"""
from __future__ import annotations

from typing import Iterable

from rapidfuzz.distance import Levenshtein

from autofill.app.core.config import CONTAINS_SCORE, EXACT_SCORE, FUZZY_FLOOR
from autofill.app.utils.text import normalize


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions turning a into b."""
    return Levenshtein.distance(a, b)


def similarity(a: str | None, b: str | None) -> float:
    """Similarity of two raw strings after normalization. Either side empty scores 0."""
    left = normalize(a)
    right = normalize(b)
    if not left or not right:
        return 0.0
    if left == right:
        return EXACT_SCORE
    if right in left or left in right:
        return CONTAINS_SCORE

    ratio = 1 - edit_distance(left, right) / max(len(left), len(right))
    return ratio if ratio > FUZZY_FLOOR else 0.0


def best_similarity(text: str | None, phrases: Iterable[str]) -> float:
    """Highest similarity of text against any phrase; 0 when text is empty or no phrase scores."""
    if not text:
        return 0.0
    best = 0.0
    for phrase in phrases:
        score = similarity(text, phrase)
        if score > best:
            best = score
    return best

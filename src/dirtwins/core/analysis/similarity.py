from __future__ import annotations

"""
Similarity Scoring.

Two percentage scores in [0, 100]: a normalized edit-distance score for
directory names and an overlap score for sets of immediate child names.
"""

from typing import AbstractSet

from rapidfuzz.distance import Levenshtein


def name_similarity(a: str, b: str) -> float:
    """
    Score the lexical resemblance of two names.

    Computed as ``(1 - distance / max(len(a), len(b))) * 100`` with unit-cost
    insertions, deletions and substitutions. Two empty names score 100.

    Args:
        a: First name.
        b: Second name.

    Returns:
        float: Similarity percentage.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 100.0
    distance = Levenshtein.distance(a, b)
    return (1.0 - distance / longest) * 100.0


def content_similarity(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """
    Score the overlap of two child-name sets (intersection over union).

    Two empty sets score 100.
    """
    union = len(a | b)
    if union == 0:
        return 100.0
    return len(a & b) / union * 100.0

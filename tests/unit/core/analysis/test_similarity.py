from __future__ import annotations

"""
Unit tests for name and content similarity scoring.
"""

import pytest

from dirtwins.core.analysis.similarity import content_similarity, name_similarity


@pytest.mark.parametrize("value", ["", "a", "photos", "backup_2023", "ß/ü"])
def test_name_similarity_identity(value: str) -> None:
    assert name_similarity(value, value) == 100.0


def test_name_similarity_single_char_substitution() -> None:
    """'b' vs 'c': one substitution over length one scores zero."""
    assert name_similarity("b", "c") == 0.0


def test_name_similarity_normalizes_by_longest() -> None:
    # kitten -> sitting: distance 3, longest 7
    assert name_similarity("kitten", "sitting") == pytest.approx((1 - 3 / 7) * 100)
    assert name_similarity("backup_2023", "backup_2024") == pytest.approx((1 - 1 / 11) * 100)


def test_name_similarity_against_empty() -> None:
    assert name_similarity("", "abc") == 0.0
    assert name_similarity("abc", "") == 0.0


def test_name_similarity_is_symmetric() -> None:
    assert name_similarity("docs", "dogs_old") == name_similarity("dogs_old", "docs")


def test_content_similarity_empty_sets() -> None:
    assert content_similarity(set(), set()) == 100.0


def test_content_similarity_one_empty() -> None:
    assert content_similarity({"x"}, set()) == 0.0


def test_content_similarity_partial_overlap() -> None:
    # 2 shared out of 4 distinct names
    assert content_similarity({"x", "y", "z"}, {"x", "y", "w"}) == 50.0


@pytest.mark.parametrize(
    "a, b",
    [
        ({"x"}, {"x", "y"}),
        ({"a", "b", "c"}, {"c", "d"}),
        (set(), {"q"}),
        (frozenset({"m", "n"}), {"n", "o", "p"}),
    ],
)
def test_content_similarity_is_symmetric(a, b) -> None:
    assert content_similarity(a, b) == content_similarity(b, a)

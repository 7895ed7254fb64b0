"""Unit tests for Jaccard scoring."""

from __future__ import annotations

import pytest

from arabic_overlap.similarity import jaccard_similarity, overlap_counts


def test_both_empty_fingerprints_are_identical() -> None:
    assert jaccard_similarity(frozenset(), frozenset()) == 1.0


def test_single_empty_fingerprint_scores_zero() -> None:
    assert jaccard_similarity(frozenset(), frozenset({1})) == 0.0
    assert jaccard_similarity(frozenset({1}), frozenset()) == 0.0


def test_jaccard_ratio_of_partial_overlap() -> None:
    first = frozenset({1, 2, 3, 4})
    second = frozenset({1, 5, 6, 7})

    assert overlap_counts(first, second) == (1, 7)
    assert jaccard_similarity(first, second) == pytest.approx(1 / 7)
    assert jaccard_similarity(first, second) == jaccard_similarity(second, first)


def test_disjoint_and_identical_sets() -> None:
    assert jaccard_similarity({1, 2}, {3, 4}) == 0.0
    assert jaccard_similarity({1, 2}, {2, 1}) == 1.0

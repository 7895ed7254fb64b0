"""Set-overlap scoring between two fingerprints."""

from __future__ import annotations

from collections.abc import Set


def overlap_counts(first: Set[int], second: Set[int]) -> tuple[int, int]:
    """Return `(intersection, union)` sizes for two hash sets."""

    common = sum(1 for value in first if value in second)
    return common, len(first) + len(second) - common


def jaccard_similarity(first: Set[int], second: Set[int]) -> float:
    """Return the Jaccard ratio `|A ∩ B| / |A ∪ B|` in `[0, 1]`.

    Two empty fingerprints have nothing to tell apart and score 1.0; a single
    empty fingerprint scores 0.0.
    """

    if not first and not second:
        return 1.0
    if not first or not second:
        return 0.0

    common, union = overlap_counts(first, second)
    return common / union

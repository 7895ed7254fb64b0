"""Qualitative interpretation bands for similarity percentages.

Bands are half-open: `[0, 10)`, `[10, 30)`, `[30, 50)`, `[50, 70)`, `[70, 100]`.
"""

from __future__ import annotations

from enum import Enum


class SimilarityBand(Enum):
    """Qualitative similarity band with its lower bound and report message."""

    NONE = ("none", 0.0, "No significant similarity detected")
    MINOR = ("minor", 10.0, "Minor similarity - possibly coincidental")
    MODERATE = ("moderate", 30.0, "Moderate similarity - potential paraphrasing")
    HIGH = ("high", 50.0, "High similarity - likely plagiarism")
    VERY_HIGH = ("very_high", 70.0, "Very high similarity - probable direct copying")

    def __init__(self, label: str, lower_bound: float, message: str) -> None:
        self.label = label
        self.lower_bound = lower_bound
        self.message = message


def classify_percentage(percentage: float) -> SimilarityBand:
    """Return the band containing `percentage`.

    Raises:
        ValueError: If `percentage` is outside `[0, 100]` (including NaN).
    """

    if not 0.0 <= percentage <= 100.0:
        raise ValueError(f"Similarity percentage must be within [0, 100], got {percentage}.")

    selected = SimilarityBand.NONE
    for band in SimilarityBand:
        if percentage >= band.lower_bound:
            selected = band
    return selected

"""Unit tests for similarity interpretation bands."""

from __future__ import annotations

import pytest

from arabic_overlap.interpretation import SimilarityBand, classify_percentage


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (0.0, SimilarityBand.NONE),
        (9.99, SimilarityBand.NONE),
        (10.0, SimilarityBand.MINOR),
        (29.99, SimilarityBand.MINOR),
        (30.0, SimilarityBand.MODERATE),
        (49.99, SimilarityBand.MODERATE),
        (50.0, SimilarityBand.HIGH),
        (69.99, SimilarityBand.HIGH),
        (70.0, SimilarityBand.VERY_HIGH),
        (100.0, SimilarityBand.VERY_HIGH),
    ],
)
def test_bands_are_half_open(percentage: float, expected: SimilarityBand) -> None:
    assert classify_percentage(percentage) is expected


@pytest.mark.parametrize("percentage", [-0.01, 100.01, float("nan")])
def test_out_of_range_percentages_are_rejected(percentage: float) -> None:
    with pytest.raises(ValueError, match=r"within \[0, 100\]"):
        classify_percentage(percentage)


def test_band_messages() -> None:
    assert SimilarityBand.NONE.message == "No significant similarity detected"
    assert SimilarityBand.VERY_HIGH.message == "Very high similarity - probable direct copying"
    assert SimilarityBand.MODERATE.label == "moderate"

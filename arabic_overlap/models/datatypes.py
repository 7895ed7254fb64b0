"""Core datatypes shared across arabic-overlap modules.

Responsibilities:
- Represent immutable records produced by a comparison.
- Provide explicit success/failure outcomes for batch runs.

Key types:
- `DocumentPair`, `ComparisonResult`, and `PairOutcome`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import ComparisonError
from ..interpretation import SimilarityBand, classify_percentage


@dataclass(frozen=True, slots=True)
class DocumentPair:
    """Two document paths compared against each other.

    Attributes:
        first: Path to the first document.
        second: Path to the second document.
    """

    first: Path
    second: Path


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Outcome of one successful comparison.

    Attributes:
        ratio: Jaccard similarity in `[0, 1]`.
        ngram_size: Shingle window width used for both documents.
        normalized_lengths: Codepoint length of each normalized document.
        fingerprint_sizes: Number of distinct shingle hashes per document.
        intersection_size: Hashes shared by both fingerprints.
        union_size: Distinct hashes across both fingerprints.
    """

    ratio: float
    ngram_size: int
    normalized_lengths: tuple[int, int]
    fingerprint_sizes: tuple[int, int]
    intersection_size: int
    union_size: int

    @property
    def percentage(self) -> float:
        """Return the similarity scaled to `[0, 100]`."""

        return self.ratio * 100.0

    @property
    def band(self) -> SimilarityBand:
        """Return the qualitative band of the similarity percentage."""

        return classify_percentage(self.percentage)

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable payload for reporting."""

        return {
            "ratio": self.ratio,
            "percentage": round(self.percentage, 2),
            "band": self.band.label,
            "interpretation": self.band.message,
            "ngram_size": self.ngram_size,
            "normalized_lengths": list(self.normalized_lengths),
            "fingerprint_sizes": list(self.fingerprint_sizes),
            "intersection_size": self.intersection_size,
            "union_size": self.union_size,
        }


@dataclass(frozen=True, slots=True)
class PairOutcome:
    """Success or failure of one pair in a batch comparison.

    Exactly one of `result` and `error` is set.
    """

    pair: DocumentPair
    result: ComparisonResult | None = None
    error: ComparisonError | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("PairOutcome requires exactly one of `result` or `error`.")

    @property
    def ok(self) -> bool:
        """Return whether the comparison succeeded."""

        return self.result is not None

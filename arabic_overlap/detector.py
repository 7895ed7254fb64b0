"""Comparison orchestration for arabic-overlap.

Responsibilities:
- Define the stage order for one comparison: validate, decode, normalize,
  fingerprint, score.
- Keep each comparison independent by resetting retained fingerprints first.

Key types:
- `PlagiarismDetector`: orchestration facade for one pair at a time.
- `compare_pairs`: batch helper allocating one detector per pair.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TypeVar

from .config import DetectorConfig
from .errors import ComparisonError, EmptyInputError
from .io.reader import read_document_bytes
from .models.datatypes import ComparisonResult, DocumentPair, PairOutcome
from .shingling import Fingerprint, ShingleHasher
from .similarity import jaccard_similarity, overlap_counts
from .telemetry.logger import RunLogger
from .text.normalizer import ArabicNormalizer, decode_document, ensure_encodable

_StageResult = TypeVar("_StageResult")

_EMPTY_FINGERPRINT: Fingerprint = frozenset()


class PlagiarismDetector:
    """Compare two documents by shingle-set overlap after Arabic normalization."""

    def __init__(
        self,
        config: DetectorConfig | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize normalizer and hasher from a validated config."""

        self.config = config or DetectorConfig()
        self.config.validate()
        self._run_logger = run_logger
        self._normalizer = ArabicNormalizer(fold_alef_maksura=self.config.fold_alef_maksura)
        self._hasher = ShingleHasher(
            self.config.ngram_size,
            base=self.config.hash_base,
            modulus=self.config.hash_modulus,
            unit=self.config.hash_unit,
        )
        self._fingerprints: tuple[Fingerprint, Fingerprint] = (
            _EMPTY_FINGERPRINT,
            _EMPTY_FINGERPRINT,
        )

    @property
    def fingerprints(self) -> tuple[Fingerprint, Fingerprint]:
        """Return the fingerprints retained from the most recent comparison."""

        return self._fingerprints

    def reset(self) -> None:
        """Drop fingerprints retained from a previous comparison."""

        self._fingerprints = (_EMPTY_FINGERPRINT, _EMPTY_FINGERPRINT)

    def normalize(self, text: str) -> str:
        """Return the normalized form of decoded text."""

        return self._normalizer.normalize(text)

    def compare_files(self, first: Path, second: Path) -> ComparisonResult:
        """Read two documents from disk and compare them."""

        raw_first = read_document_bytes(first)
        raw_second = read_document_bytes(second)
        return self.compare_bytes(
            raw_first, raw_second, label_first=str(first), label_second=str(second)
        )

    def compare_bytes(
        self,
        raw_first: bytes,
        raw_second: bytes,
        *,
        label_first: str = "document_a",
        label_second: str = "document_b",
    ) -> ComparisonResult:
        """Compare two raw UTF-8 documents.

        Raises:
            EmptyInputError: If either input is zero-length.
            DecodingError: If either input is not valid UTF-8.
        """

        self.reset()
        self._run_stage(
            "validate",
            lambda: self._require_non_empty(
                ((label_first, raw_first), (label_second, raw_second))
            ),
        )
        texts = self._run_stage(
            "decode",
            lambda: (
                decode_document(raw_first, label=label_first),
                decode_document(raw_second, label=label_second),
            ),
        )
        return self._compare_decoded(texts[0], texts[1])

    def compare_texts(
        self,
        text_first: str,
        text_second: str,
        *,
        label_first: str = "document_a",
        label_second: str = "document_b",
    ) -> ComparisonResult:
        """Compare two already decoded documents.

        Raises:
            EmptyInputError: If either text is zero-length.
            DecodingError: If either text holds codepoints UTF-8 cannot encode.
        """

        self.reset()
        self._run_stage(
            "validate",
            lambda: self._require_non_empty(
                ((label_first, text_first), (label_second, text_second))
            ),
        )
        texts = self._run_stage(
            "decode",
            lambda: (
                ensure_encodable(text_first, label=label_first),
                ensure_encodable(text_second, label=label_second),
            ),
        )
        return self._compare_decoded(texts[0], texts[1])

    def _compare_decoded(self, text_first: str, text_second: str) -> ComparisonResult:
        """Run normalize, fingerprint and score stages on decoded text."""

        normalized = self._run_stage(
            "normalize",
            lambda: (self.normalize(text_first), self.normalize(text_second)),
        )
        self._fingerprints = self._run_stage(
            "fingerprint",
            lambda: (
                self._hasher.fingerprint(normalized[0]),
                self._hasher.fingerprint(normalized[1]),
            ),
            describe=lambda prints: {
                "ngram_size": self._hasher.ngram_size,
                "unit": self._hasher.unit,
                "sizes": f"{len(prints[0])}/{len(prints[1])}",
            },
        )
        first, second = self._fingerprints
        ratio = self._run_stage(
            "score",
            lambda: jaccard_similarity(first, second),
            describe=lambda value: {"ratio": f"{value:.4f}"},
        )
        common, union = overlap_counts(first, second)
        return ComparisonResult(
            ratio=ratio,
            ngram_size=self._hasher.ngram_size,
            normalized_lengths=(len(normalized[0]), len(normalized[1])),
            fingerprint_sizes=(len(first), len(second)),
            intersection_size=common,
            union_size=union,
        )

    @staticmethod
    def _require_non_empty(documents: Iterable[tuple[str, bytes | str]]) -> None:
        """Reject zero-length documents before decoding or normalization."""

        empty = [label for label, content in documents if len(content) == 0]
        if empty:
            names = ", ".join(f"`{label}`" for label in empty)
            raise EmptyInputError(
                detail=f"One or both files are empty: {names}.",
                hint="Provide non-empty UTF-8 text documents.",
            )

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        describe: Callable[[_StageResult], dict[str, object]] | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure events.

        `describe` maps the stage result to context attached to the complete event.
        """

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            context = describe(result) if describe is not None else {}
            self._run_logger.log_stage_complete(stage_name, **context)
        return result


def compare_pairs(
    pairs: Iterable[DocumentPair],
    config: DetectorConfig | None = None,
    run_logger: RunLogger | None = None,
) -> list[PairOutcome]:
    """Compare many document pairs, capturing failures per pair.

    Each pair gets its own detector, so outcomes never share fingerprint state.
    """

    outcomes: list[PairOutcome] = []
    for pair in pairs:
        detector = PlagiarismDetector(config=config, run_logger=run_logger)
        try:
            result = detector.compare_files(pair.first, pair.second)
        except ComparisonError as exc:
            outcomes.append(PairOutcome(pair=pair, error=exc))
            continue
        outcomes.append(PairOutcome(pair=pair, result=result))
    return outcomes

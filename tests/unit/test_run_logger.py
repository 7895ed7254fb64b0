"""Unit tests for structured stage logging."""

from __future__ import annotations

import io

import pytest

from arabic_overlap.detector import PlagiarismDetector
from arabic_overlap.errors import EmptyInputError
from arabic_overlap.telemetry.logger import RunLogger, render_context


def test_run_logger_formats_sorted_sanitized_context() -> None:
    sink = io.StringIO()
    logger = RunLogger(sink=sink)

    logger.log_stage_complete("score", ratio="0.5 x", band="minor")

    assert sink.getvalue().strip() == (
        "[phase] level=INFO stage=score event=complete band=minor ratio=0.5_x"
    )


def test_render_context_marks_blank_values_and_replaces_unsafe_characters() -> None:
    assert render_context({}) == ""
    assert render_context({"path": "  ", "label": "doc a/b.txt"}) == " label=doc_a/b.txt path=none"


def test_detector_emits_stage_events_in_order() -> None:
    sink = io.StringIO()
    detector = PlagiarismDetector(run_logger=RunLogger(sink=sink))

    detector.compare_bytes(b"abcdef", b"abcxyz")

    lines = sink.getvalue().splitlines()
    assert lines == [
        "[phase] level=INFO stage=validate event=start",
        "[phase] level=INFO stage=validate event=complete",
        "[phase] level=INFO stage=decode event=start",
        "[phase] level=INFO stage=decode event=complete",
        "[phase] level=INFO stage=normalize event=start",
        "[phase] level=INFO stage=normalize event=complete",
        "[phase] level=INFO stage=fingerprint event=start",
        "[phase] level=INFO stage=fingerprint event=complete ngram_size=3 sizes=4/4 unit=utf8",
        "[phase] level=INFO stage=score event=start",
        "[phase] level=INFO stage=score event=complete ratio=0.1429",
    ]


def test_detector_logs_decode_stage_for_text_input() -> None:
    sink = io.StringIO()
    detector = PlagiarismDetector(run_logger=RunLogger(sink=sink))

    detector.compare_texts("abcdef", "abcdef")

    assert "[phase] level=INFO stage=decode event=complete" in sink.getvalue()
    assert "stage=score event=complete ratio=1.0000" in sink.getvalue()


def test_detector_logs_failure_with_error_type_only() -> None:
    sink = io.StringIO()
    detector = PlagiarismDetector(run_logger=RunLogger(sink=sink))

    with pytest.raises(EmptyInputError):
        detector.compare_texts("", "secret text")

    output = sink.getvalue()
    assert "[phase] level=ERROR stage=validate event=failure error_type=EmptyInputError" in output
    assert "secret" not in output

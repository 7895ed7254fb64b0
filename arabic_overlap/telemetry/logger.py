"""Stage event logging for comparisons.

Every event is one deterministic line on the configured sink::

    [phase] level=INFO stage=fingerprint event=complete ngram_size=3 sizes=4/4 unit=utf8

Stage name, event kind and rendered context travel as `loguru` extras; the
message itself stays empty. Document text never reaches the log, and failure
events name only the exception type.
"""

from __future__ import annotations

from collections.abc import Mapping
import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_LINE_FORMAT = "[phase] level={level} stage={extra[stage]} event={extra[event]}{extra[context]}"
_SAFE_VALUE_CHARACTERS = frozenset("-_.:/")


def render_context(context: Mapping[str, object]) -> str:
    """Render ` key=value` tokens in key order, replacing unsafe value characters."""

    tokens: list[str] = []
    for key in sorted(context):
        value = str(context[key]).strip() or "none"
        safe = "".join(
            character if character.isalnum() or character in _SAFE_VALUE_CHARACTERS else "_"
            for character in value
        )
        tokens.append(f" {key}={safe}")
    return "".join(tokens)


class RunLogger:
    """Send comparison stage events to a single text sink."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Replace existing `loguru` handlers with one phase-line handler on `sink`."""

        _loguru_logger.remove()
        _loguru_logger.add(
            sink or sys.stderr, format=_LINE_FORMAT, level="DEBUG", colorize=False
        )

    def _emit(self, level: str, stage: str, event: str, context: Mapping[str, object]) -> None:
        _loguru_logger.bind(stage=stage, event=event, context=render_context(context)).log(
            level, ""
        )

    def log_stage_start(self, stage: str) -> None:
        self._emit("INFO", stage, "start", {})

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a complete event; `context` summarizes the stage result."""

        self._emit("INFO", stage, "complete", context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        self._emit("ERROR", stage, "failure", {"error_type": error_type})

"""Document input helpers.

Responsibilities:
- Read whole documents as raw bytes for decoding by the normalizer.
- Map filesystem failures to `FileAccessError`.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import FileAccessError


def read_document_bytes(path: Path) -> bytes:
    """Read the full binary content of one document."""

    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise FileAccessError(
            detail=f"Failed to open file: `{path}` does not exist.",
            hint="Verify the document path and rerun.",
        ) from exc
    except OSError as exc:
        raise FileAccessError(
            detail=f"Failed to open file: `{path}`: {exc.strerror or exc}",
            hint="Verify the path points to a readable regular file.",
        ) from exc

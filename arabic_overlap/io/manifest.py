"""Batch manifest loading.

A manifest is a YAML mapping with a `pairs` list; each entry maps `a` and `b`
to document paths. Relative paths resolve against the manifest's directory.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml

from ..models.datatypes import DocumentPair
from ..parsing import clean_token


def load_pair_manifest(path: Path) -> list[DocumentPair]:
    """Load and validate document pairs from a YAML manifest."""

    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Manifest `{path}` could not be parsed: {exc}") from exc
    if not isinstance(payload, Mapping) or "pairs" not in payload:
        raise ValueError(f"Manifest `{path}` must be a mapping with a `pairs` list.")

    raw_pairs = payload["pairs"]
    if not isinstance(raw_pairs, list) or not raw_pairs:
        raise ValueError(f"Manifest `{path}` field `pairs` must be a non-empty list.")

    root = path.parent
    pairs: list[DocumentPair] = []
    for position, entry in enumerate(raw_pairs, start=1):
        if not isinstance(entry, Mapping):
            raise ValueError(f"Manifest `{path}` pair #{position} must be a mapping.")
        first = clean_token(entry.get("a"))
        second = clean_token(entry.get("b"))
        if first is None or second is None:
            raise ValueError(
                f"Manifest `{path}` pair #{position} requires non-empty `a` and `b` paths."
            )
        pairs.append(DocumentPair(first=root / first, second=root / second))
    return pairs

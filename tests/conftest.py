"""Shared pytest fixtures for the full arabic-overlap test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

UNDECORATED_PASSAGE = "كتب الطالب الدرس في المدرسة وعاد الى البيت"
DECORATED_PASSAGE = "كَتَبَ الطَّالِبُ الدَّرْسَ فِي المَدْرَسَةِ وَعَادَ إِلَى البَيْتِ"


@pytest.fixture(autouse=True)
def _clear_detector_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient `ARABIC_OVERLAP_*` variables from leaking into config resolution."""

    for key in (
        "ARABIC_OVERLAP_NGRAM_SIZE",
        "ARABIC_OVERLAP_HASH_BASE",
        "ARABIC_OVERLAP_HASH_MODULUS",
        "ARABIC_OVERLAP_HASH_UNIT",
        "ARABIC_OVERLAP_FOLD_ALEF_MAKSURA",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str, str | bytes], Path]:
    """Return a helper writing UTF-8 text or raw bytes to a temporary document."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def undecorated_passage() -> str:
    """Provide an Arabic sentence without diacritics."""

    return UNDECORATED_PASSAGE


@pytest.fixture
def decorated_passage() -> str:
    """Provide the same sentence fully vocalized with diacritics."""

    return DECORATED_PASSAGE

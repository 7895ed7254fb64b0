"""Unit tests for rolling-hash shingle fingerprints."""

from __future__ import annotations

import pytest

from arabic_overlap.shingling import ShingleHasher


def test_window_hash_is_polynomial_in_base() -> None:
    hasher = ShingleHasher(3)

    assert hasher.window_hash(b"abc") == 97 * 256**2 + 98 * 256 + 99


def test_window_hash_reduces_modulo() -> None:
    hasher = ShingleHasher(3, base=10, modulus=7)

    assert hasher.window_hash([1, 2, 3]) == 123 % 7


def test_fingerprint_has_one_hash_per_distinct_window() -> None:
    hasher = ShingleHasher(3)

    assert hasher.fingerprint("abcdef") == frozenset(
        hasher.window_hash(window.encode()) for window in ("abc", "bcd", "cde", "def")
    )


def test_fingerprint_collapses_repeated_windows() -> None:
    assert len(ShingleHasher(2).fingerprint("ababab")) == 2


def test_fingerprint_shorter_than_window_is_empty() -> None:
    hasher = ShingleHasher(3)

    assert hasher.fingerprint("ab") == frozenset()
    assert hasher.fingerprint("") == frozenset()


def test_fingerprint_unit_controls_window_length() -> None:
    """UTF-8 windows span bytes while codepoint windows span characters."""

    assert len(ShingleHasher(2, unit="codepoint").fingerprint("اب")) == 1
    assert len(ShingleHasher(2, unit="utf8").fingerprint("اب")) == 3
    assert ShingleHasher(5, unit="codepoint").fingerprint("كتاب") == frozenset()


def test_colliding_windows_share_one_hash() -> None:
    """Windows equal under the modulus are indistinguishable in the fingerprint."""

    hasher = ShingleHasher(1, modulus=2, unit="codepoint")

    assert hasher.fingerprint("a") == hasher.fingerprint("c")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"ngram_size": 0},
        {"ngram_size": -1},
        {"ngram_size": True},
        {"base": 0},
        {"modulus": 1},
        {"unit": "utf16"},
    ],
)
def test_hasher_rejects_invalid_parameters(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        ShingleHasher(**kwargs)

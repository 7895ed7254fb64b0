"""Shingle fingerprint construction.

Responsibilities:
- Hash every fixed-width window of normalized text with a polynomial rolling hash.
- Collect the hashes into an immutable fingerprint set.

Windows whose hashes collide under the modulus are treated as the same
shingle. With the default prime modulus this is rare but possible; widen the
modulus (or hash shingles with a digest) when stronger guarantees are needed.
"""

from __future__ import annotations

from collections.abc import Sequence

from .config import (
    DEFAULT_HASH_BASE,
    DEFAULT_HASH_MODULUS,
    DEFAULT_HASH_UNIT,
    DEFAULT_NGRAM_SIZE,
    SUPPORTED_HASH_UNITS,
)

Fingerprint = frozenset[int]


class ShingleHasher:
    """Build fingerprints of overlapping `ngram_size`-wide windows."""

    def __init__(
        self,
        ngram_size: int = DEFAULT_NGRAM_SIZE,
        *,
        base: int = DEFAULT_HASH_BASE,
        modulus: int = DEFAULT_HASH_MODULUS,
        unit: str = DEFAULT_HASH_UNIT,
    ) -> None:
        """Initialize and validate window width and hash parameters."""

        for name, value in (("ngram_size", ngram_size), ("base", base), ("modulus", modulus)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"`{name}` must be a positive integer.")
        if modulus < 2:
            raise ValueError("`modulus` must be greater than 1.")
        if unit not in SUPPORTED_HASH_UNITS:
            supported = ", ".join(sorted(SUPPORTED_HASH_UNITS))
            raise ValueError(f"Unsupported hash unit `{unit}`; supported: {supported}.")

        self.ngram_size = ngram_size
        self.base = base
        self.modulus = modulus
        self.unit = unit

    def code_units(self, text: str) -> Sequence[int]:
        """Return the integer code units hashed for `text`."""

        if self.unit == "utf8":
            return text.encode("utf-8")
        return [ord(character) for character in text]

    def window_hash(self, units: Sequence[int]) -> int:
        """Return the polynomial hash of one window of code units."""

        value = 0
        for unit in units:
            value = (value * self.base + unit) % self.modulus
        return value

    def fingerprint(self, text: str) -> Fingerprint:
        """Return the set of window hashes for normalized `text`.

        Text shorter than `ngram_size` code units yields an empty fingerprint.
        """

        units = self.code_units(text)
        width = self.ngram_size
        if len(units) < width:
            return frozenset()
        return frozenset(
            self.window_hash(units[start : start + width])
            for start in range(len(units) - width + 1)
        )

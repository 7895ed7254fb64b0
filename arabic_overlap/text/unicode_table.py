"""Locale-independent character classification.

Responsibilities:
- Classify codepoints as punctuation or decimal digits from Unicode general
  categories, never from process locale state.

Only `P*` and `Nd` are excluded. Symbol categories (`Sm`, `Sc`, `Sk`, `So`)
pass through, so `$+<=>^|~` survive normalization. C `iswpunct` drops those
ASCII symbols too; widen `excluded_categories` to match that behavior.
"""

from __future__ import annotations

from functools import lru_cache
import unicodedata


PUNCTUATION_CATEGORIES = frozenset({"Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po"})
DECIMAL_DIGIT_CATEGORIES = frozenset({"Nd"})


class UnicodePropertyTable:
    """Explicit general-category lookup used to drop punctuation and digits.

    The table reads the Unicode database bundled with the interpreter, so the
    same codepoint classifies identically regardless of `LANG`/`LC_*` settings.
    """

    def __init__(
        self,
        excluded_categories: frozenset[str] = PUNCTUATION_CATEGORIES | DECIMAL_DIGIT_CATEGORIES,
    ) -> None:
        """Initialize the table with the general categories to exclude."""

        self._excluded_categories = frozenset(excluded_categories)
        self._is_excluded = lru_cache(maxsize=4096)(self._lookup)

    @property
    def unicode_version(self) -> str:
        """Return the Unicode database version backing the table."""

        return unicodedata.unidata_version

    @property
    def excluded_categories(self) -> frozenset[str]:
        """Return the general categories treated as excluded."""

        return self._excluded_categories

    def is_excluded(self, character: str) -> bool:
        """Return whether a single codepoint is punctuation or a decimal digit."""

        return self._is_excluded(character)

    def _lookup(self, character: str) -> bool:
        return unicodedata.category(character) in self._excluded_categories


DEFAULT_PROPERTY_TABLE = UnicodePropertyTable()

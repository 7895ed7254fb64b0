"""Arabic text normalization stage.

Responsibilities:
- Decode raw document bytes strictly under UTF-8.
- Strip diacritics, tatweel, punctuation and digits.
- Fold alef, alef maksura and taa marbuta variants to canonical letters.
"""

from __future__ import annotations

from ..errors import DecodingError
from .unicode_table import DEFAULT_PROPERTY_TABLE, UnicodePropertyTable


DOCUMENT_ENCODING = "utf-8"

DIACRITIC_FIRST = 0x064B  # FATHATAN
DIACRITIC_LAST = 0x0652  # SUKUN
TATWEEL = "\u0640"

ALEF = "\u0627"
YAA = "\u064a"
HAA = "\u0647"
ALEF_MAKSURA = "\u0649"
TAA_MARBUTA = "\u0629"

_BASE_FOLDS = {
    "\u0622": ALEF,  # alef with madda above
    "\u0623": ALEF,  # alef with hamza above
    "\u0625": ALEF,  # alef with hamza below
    "\u0671": ALEF,  # alef wasla
    TAA_MARBUTA: HAA,
}


def decode_document(raw: bytes, *, label: str = "document") -> str:
    """Decode raw document bytes and map malformed input to `DecodingError`.

    Args:
        raw: Full byte content of one document.
        label: Human-readable document name used in diagnostics.

    Raises:
        DecodingError: If `raw` is not a valid UTF-8 byte sequence.
    """

    try:
        return raw.decode(DOCUMENT_ENCODING, errors="strict")
    except UnicodeDecodeError as exc:
        raise DecodingError(
            detail=(
                f"Failed to decode `{label}` as UTF-8: invalid byte sequence "
                f"at offset {exc.start}."
            ),
            hint="Re-save the document with UTF-8 encoding and rerun.",
        ) from exc


def ensure_encodable(text: str, *, label: str = "document") -> str:
    """Return `text` unchanged if it round-trips through UTF-8.

    Already decoded text can still hold lone surrogates, which no UTF-8 byte
    sequence represents.

    Raises:
        DecodingError: If `text` contains a codepoint UTF-8 cannot encode.
    """

    try:
        text.encode(DOCUMENT_ENCODING, errors="strict")
    except UnicodeEncodeError as exc:
        raise DecodingError(
            detail=(
                f"`{label}` is not valid UTF-8 text: unencodable codepoint "
                f"U+{ord(exc.object[exc.start]):04X} at position {exc.start}."
            ),
            hint="Remove lone surrogates from the text and rerun.",
        ) from exc
    return text


class ArabicNormalizer:
    """Normalize decoded Arabic text into the form compared by shingling."""

    def __init__(
        self,
        *,
        fold_alef_maksura: bool = True,
        property_table: UnicodePropertyTable | None = None,
    ) -> None:
        """Initialize letter folds and the punctuation/digit classification table."""

        self._folds = dict(_BASE_FOLDS)
        if fold_alef_maksura:
            self._folds[ALEF_MAKSURA] = YAA
        self._property_table = property_table or DEFAULT_PROPERTY_TABLE

    def normalize(self, text: str) -> str:
        """Return `text` with excluded codepoints dropped and letter variants folded.

        Codepoints keep their original relative order; the result is never
        longer than the input.
        """

        kept: list[str] = []
        for character in text:
            if DIACRITIC_FIRST <= ord(character) <= DIACRITIC_LAST:
                continue
            if character == TATWEEL:
                continue
            character = self._folds.get(character, character)
            if self._property_table.is_excluded(character):
                continue
            kept.append(character)
        return "".join(kept)

"""Text decoding and normalization stages."""

from .normalizer import ArabicNormalizer, decode_document, ensure_encodable
from .unicode_table import UnicodePropertyTable

__all__ = ["ArabicNormalizer", "UnicodePropertyTable", "decode_document", "ensure_encodable"]

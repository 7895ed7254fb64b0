"""Public model exports for arabic-overlap."""

from .datatypes import ComparisonResult, DocumentPair, PairOutcome

__all__ = ["ComparisonResult", "DocumentPair", "PairOutcome"]

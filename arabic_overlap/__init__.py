"""Top-level package for arabic-overlap.

This package estimates textual overlap between two Arabic documents by
normalizing orthographic variation, hashing character shingles, and scoring
the Jaccard overlap of the resulting fingerprints. The main entry point is
`PlagiarismDetector`.
"""

from .config import DetectorConfig
from .detector import PlagiarismDetector, compare_pairs
from .errors import ComparisonError, DecodingError, EmptyInputError, FileAccessError

__all__ = [
    "ComparisonError",
    "DecodingError",
    "DetectorConfig",
    "EmptyInputError",
    "FileAccessError",
    "PlagiarismDetector",
    "__version__",
    "compare_pairs",
]

__version__ = "0.1.0"

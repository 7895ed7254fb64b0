"""Input helpers for reading documents and batch manifests."""

from .manifest import load_pair_manifest
from .reader import read_document_bytes

__all__ = ["load_pair_manifest", "read_document_bytes"]

"""Telemetry and observability helpers.

This package emits stage events for deterministic auditing of comparisons.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]

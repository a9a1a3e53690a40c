"""Shared utilities for cournot_ga."""

from .rng_manager import RNGManager
from .validation import StatisticsExportError, ValidationError

__all__ = [
    'RNGManager',
    'StatisticsExportError',
    'ValidationError',
]

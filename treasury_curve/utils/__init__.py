"""
Utility modules for alignment and time sources.
"""

from .clock import FixedClock, SystemClock
from .data_alignment import find_duplicate, is_strictly_monotonic, sort_pairs

__all__ = [
    "FixedClock",
    "SystemClock",
    "find_duplicate",
    "is_strictly_monotonic",
    "sort_pairs",
]

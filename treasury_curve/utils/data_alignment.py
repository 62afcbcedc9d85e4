"""
Data alignment utilities for paired time series arrays

This module keeps parallel sequences (for example dates and the records
observed on those dates) in step while they are reordered or checked.
"""

from typing import Any, Hashable, List, Optional, Sequence, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def sort_pairs(primary: Sequence[K], secondary: Sequence[V],
               ascending: bool = True) -> Tuple[List[K], List[V]]:
    """
    Sort two parallel sequences by the values of the first one

    The secondary sequence is permuted identically. The sort is stable, so
    equal keys keep their input order.

    Args:
        primary: sort keys
        secondary: values travelling with each key
        ascending: sort direction

    Returns:
        (sorted primary, reordered secondary) as lists
    """
    if len(primary) != len(secondary):
        raise ValueError(
            f"cannot align sequences of different length: {len(primary)} != {len(secondary)}"
        )

    order = sorted(range(len(primary)), key=lambda i: primary[i], reverse=not ascending)
    return [primary[i] for i in order], [secondary[i] for i in order]


def find_duplicate(keys: Sequence[Hashable]) -> Optional[int]:
    """Index of the first key that already appeared earlier, or None"""
    seen = set()
    for i, key in enumerate(keys):
        if key in seen:
            return i
        seen.add(key)
    return None


def is_strictly_monotonic(keys: Sequence[Any], descending: bool = False) -> bool:
    """True when every neighbouring pair is strictly increasing (or decreasing)"""
    if descending:
        return all(a > b for a, b in zip(keys, keys[1:]))
    return all(a < b for a, b in zip(keys, keys[1:]))

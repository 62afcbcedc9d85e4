"""
Column resolution for yearly Treasury CSV headers

The set of published tenors changes over the years (the 1 Mo bill starts in
2001, 2 Mo in 2018, 4 Mo in 2022), so every header is mapped onto the fixed
canonical slots before any row is decoded.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..errors import DecodeFailure, MissingLabel
from .labels import CURVE_LABELS, CURVE_LENGTH, search_label
from .reader import read_line


def clean_field(field: str) -> str:
    """Strip outer whitespace and one pair of surrounding double quotes from a CSV field"""
    text = field.strip()
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    return text


@dataclass(frozen=True)
class ColumnMask:
    """
    Canonical slots present in one year's CSV header

    Attributes:
        slots: canonical slot for each value column, in CSV order (date column excluded)
    """
    slots: Tuple[int, ...]

    @property
    def present(self) -> Tuple[bool, ...]:
        """One flag per canonical slot, True where the header carries that tenor"""
        present = set(self.slots)
        return tuple(slot in present for slot in range(CURVE_LENGTH))

    @property
    def count(self) -> int:
        return len(self.slots)

    @property
    def is_complete(self) -> bool:
        return self.count == CURVE_LENGTH

    def missing_labels(self) -> List[str]:
        return [CURVE_LABELS[slot].value for slot, flag in enumerate(self.present) if not flag]


def resolve_columns(header_fields: Sequence[str]) -> ColumnMask:
    """
    Map header labels onto canonical slots

    Args:
        header_fields: header row split on commas; the first field is the date
            column and is ignored

    Returns:
        ColumnMask in CSV field order

    Raises:
        MissingLabel: a field is not one of the canonical labels
        DecodeFailure: the same tenor is listed twice
    """
    slots = []
    for raw in list(header_fields)[1:]:
        label = clean_field(raw)
        slot = search_label(label)
        if slot is None:
            raise MissingLabel(label)
        if slot in slots:
            raise DecodeFailure(f"header lists {label} more than once", 1)
        slots.append(slot)
    return ColumnMask(tuple(slots))


def parse_header(line: str) -> ColumnMask:
    """Resolve columns straight from the raw header line"""
    return resolve_columns(read_line(line))

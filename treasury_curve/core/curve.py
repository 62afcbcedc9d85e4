"""
Single-day Treasury curve and the row decoder that produces it.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..errors import DecodeFailure, MissingLabel
from .columns import ColumnMask, clean_field
from .labels import CURVE_LENGTH, MaturityLabel, label_texts, search_label
from .reader import read_line

DATE_FORMAT = "%m/%d/%Y"


@dataclass(frozen=True)
class CurveSnapshot:
    """Yields (percent) for one trading day, one slot per canonical tenor"""
    values: Tuple[Optional[float], ...]

    def __post_init__(self):
        if len(self.values) != CURVE_LENGTH:
            raise DecodeFailure(
                f"curve holds {len(self.values)} values, expected {CURVE_LENGTH}"
            )
        object.__setattr__(self, "values", tuple(self.values))

    def get(self, label: Union[str, MaturityLabel]) -> Optional[float]:
        """
        Yield for one maturity

        Returns None when the tenor was not published that day.

        Raises:
            MissingLabel: label is not a canonical tenor
        """
        slot = search_label(label)
        if slot is None:
            raise MissingLabel(str(label))
        return self.values[slot]

    def items(self) -> List[Tuple[str, Optional[float]]]:
        return list(zip(label_texts(), self.values))

    def to_series(self, name: Optional[date] = None) -> pd.Series:
        data = np.array([np.nan if v is None else v for v in self.values], dtype=float)
        return pd.Series(data, index=list(label_texts()), name=name)

    def __len__(self) -> int:
        return CURVE_LENGTH

    def __iter__(self) -> Iterator[Optional[float]]:
        return iter(self.values)


def _parse_yield(field: str, line_number: Optional[int]) -> Optional[float]:
    text = clean_field(field)
    # blank cell: tenor listed in the header but not published on this day
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        raise DecodeFailure(f"malformed yield value {text!r}", line_number) from None
    if not np.isfinite(value):
        raise DecodeFailure(f"malformed yield value {text!r}", line_number)
    return value


def decode_fields(fields: Sequence[str], mask: ColumnMask,
                  line_number: Optional[int] = None) -> CurveSnapshot:
    """
    Convert the cells of one CSV data row into a CurveSnapshot

    Values are read in header order and placed at their canonical slots;
    slots the header does not list are left as None.

    Args:
        fields: row cells, date field first
        mask: resolved header columns
        line_number: 1-based line number used in error messages

    Raises:
        DecodeFailure: wrong field count or malformed numeric text
    """
    values_text = list(fields)[1:]
    if len(values_text) != mask.count:
        raise DecodeFailure(
            f"row has {len(values_text)} values but header lists {mask.count} maturities",
            line_number,
        )

    values: List[Optional[float]] = [None] * CURVE_LENGTH
    for slot, field in zip(mask.slots, values_text):
        values[slot] = _parse_yield(field, line_number)
    return CurveSnapshot(tuple(values))


def decode_row(line: str, mask: ColumnMask, line_number: Optional[int] = None) -> CurveSnapshot:
    """Decode a raw CSV data line; see decode_fields"""
    return decode_fields(read_line(line), mask, line_number)


def parse_date(field: str, line_number: Optional[int] = None) -> date:
    """Parse a MM/DD/YYYY date field"""
    text = clean_field(field)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise DecodeFailure(f"malformed date {text!r}, expected MM/DD/YYYY", line_number) from None


def load_date(line: str, line_number: Optional[int] = None) -> date:
    """Date of a CSV data line (its first field)"""
    fields = read_line(line)
    return parse_date(fields[0] if fields else "", line_number)

"""
Parsing, alignment and date resolution for Treasury curve CSVs.
"""

from .columns import ColumnMask, parse_header, resolve_columns
from .curve import CurveSnapshot, decode_fields, decode_row, parse_date
from .history import CurveHistory, build_history
from .labels import CURVE_LABELS, CURVE_LENGTH, MaturityLabel, search_label
from .reader import read_rows

__all__ = [
    "ColumnMask",
    "parse_header",
    "resolve_columns",
    "CurveSnapshot",
    "decode_fields",
    "decode_row",
    "parse_date",
    "CurveHistory",
    "build_history",
    "CURVE_LABELS",
    "CURVE_LENGTH",
    "MaturityLabel",
    "search_label",
    "read_rows",
]

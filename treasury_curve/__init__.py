"""
treasury_curve: US Treasury Par Yield Curve Retrieval

Fetches the daily par yield curve CSV published by the US Treasury for a
year, parses it into a date-ordered history and answers latest, as-of-date
and single maturity queries against it.
"""

__version__ = "1.0.0"

from .api import TreasuryCurveClient, fetch_date, fetch_latest, fetch_year
from .config import TreasuryCurveConfig
from .core.columns import ColumnMask, resolve_columns
from .core.curve import CurveSnapshot, decode_row
from .core.history import CurveHistory, build_history
from .core.labels import CURVE_LABELS, MaturityLabel
from .data.collectors.treasury_collector import TreasuryCollector
from .errors import (
    DecodeFailure,
    DuplicateDate,
    FetchFailure,
    InvalidYear,
    MissingLabel,
    NoData,
    OutsideDateRange,
    TreasuryCurveError,
)

__all__ = [
    # Query API
    "TreasuryCurveClient",
    "fetch_latest",
    "fetch_date",
    "fetch_year",

    # Curve data
    "CurveHistory",
    "CurveSnapshot",
    "ColumnMask",
    "MaturityLabel",
    "CURVE_LABELS",
    "build_history",
    "decode_row",
    "resolve_columns",

    # Data collection
    "TreasuryCollector",
    "TreasuryCurveConfig",

    # Errors
    "TreasuryCurveError",
    "MissingLabel",
    "InvalidYear",
    "OutsideDateRange",
    "FetchFailure",
    "DecodeFailure",
    "DuplicateDate",
    "NoData",
]

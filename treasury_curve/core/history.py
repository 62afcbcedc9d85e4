"""
Treasury Curve History

Builds a year of daily par yield curves from the published CSV and resolves
requested calendar dates to the trading day that should answer them.

Dates are held most recent first. A request that falls on a weekend or
holiday resolves to the closest earlier trading day; a request up to
MAX_FORWARD_DAYS past the last published date resolves to the latest curve.
"""

import logging
from datetime import date, timedelta
from typing import Iterator, List, Sequence, Tuple, Union

import pandas as pd

from ..config import MAX_FORWARD_DAYS
from ..errors import DecodeFailure, DuplicateDate, MissingLabel, NoData, OutsideDateRange
from ..utils.data_alignment import find_duplicate, is_strictly_monotonic, sort_pairs
from .columns import resolve_columns
from .curve import CurveSnapshot, decode_fields, parse_date
from .labels import MaturityLabel, label_texts, search_label
from .reader import read_rows

logger = logging.getLogger(__name__)


class CurveHistory:
    """
    Ordered (date, CurveSnapshot) pairs for one year, latest first

    Instances are immutable; build them with build_history() or
    CurveHistory.from_csv().
    """

    def __init__(self, dates: Sequence[date], snapshots: Sequence[CurveSnapshot],
                 max_forward_days: int = MAX_FORWARD_DAYS):
        if not dates:
            raise NoData()
        if len(dates) != len(snapshots):
            raise DecodeFailure(
                f"history has {len(dates)} dates but {len(snapshots)} curves"
            )
        if not is_strictly_monotonic(list(dates), descending=True):
            raise DecodeFailure("history dates must be strictly descending")
        self._dates: Tuple[date, ...] = tuple(dates)
        self._snapshots: Tuple[CurveSnapshot, ...] = tuple(snapshots)
        self._max_forward_days = max_forward_days

    @classmethod
    def from_csv(cls, csv_text: str, max_forward_days: int = MAX_FORWARD_DAYS) -> "CurveHistory":
        return build_history(csv_text, max_forward_days=max_forward_days)

    @property
    def dates(self) -> Tuple[date, ...]:
        return self._dates

    @property
    def snapshots(self) -> Tuple[CurveSnapshot, ...]:
        return self._snapshots

    @property
    def start_date(self) -> date:
        return self._dates[-1]

    @property
    def end_date(self) -> date:
        return self._dates[0]

    def __len__(self) -> int:
        return len(self._dates)

    def __iter__(self) -> Iterator[Tuple[date, CurveSnapshot]]:
        return iter(zip(self._dates, self._snapshots))

    def __repr__(self) -> str:
        return f"CurveHistory({self.start_date} to {self.end_date}, {len(self)} curves)"

    def latest(self) -> Tuple[date, CurveSnapshot]:
        """Most recent published curve"""
        return self._dates[0], self._snapshots[0]

    def as_of(self, request_date: date) -> Tuple[date, CurveSnapshot]:
        """
        Curve for a requested date, or the closest trading day before it

        Up to max_forward_days past the latest published date is answered
        with the latest curve.

        Raises:
            OutsideDateRange: request is before the first date or beyond the
                forward grace window
        """
        if (request_date < self._dates[-1]
                or request_date > self._dates[0] + timedelta(days=self._max_forward_days)):
            raise OutsideDateRange(request_date)
        index = self.closest_index(request_date)
        return self._dates[index], self._snapshots[index]

    def closest_index(self, request_date: date) -> int:
        """Index of the exact date, or the closest one working backwards in time"""
        if request_date >= self._dates[0]:
            return 0
        if request_date <= self._dates[-1]:
            return len(self._dates) - 1
        index = 0
        while self._dates[index] > request_date:
            index += 1
        return index

    def series(self, label: Union[str, MaturityLabel]) -> pd.Series:
        """One tenor across the whole history, NaN where not published"""
        slot = search_label(label)
        if slot is None:
            raise MissingLabel(str(label))
        name = label.value if isinstance(label, MaturityLabel) else label
        return self.to_frame().iloc[:, slot].rename(name)

    def to_frame(self) -> pd.DataFrame:
        """History as a DataFrame, date index (latest first) and one column per tenor"""
        return pd.DataFrame(
            [snapshot.to_series().to_numpy() for snapshot in self._snapshots],
            columns=list(label_texts()),
            index=pd.DatetimeIndex(pd.to_datetime(list(self._dates)), name="Date"),
        )


def build_history(csv_text: str, max_forward_days: int = MAX_FORWARD_DAYS) -> CurveHistory:
    """
    Parse a yearly Treasury CSV into a CurveHistory

    Row order in the payload is not assumed; the result is sorted latest first.

    Raises:
        MissingLabel: header lists an unrecognized tenor
        DecodeFailure: a row has a malformed date or yield, or the wrong width
        DuplicateDate: two rows carry the same date
        NoData: no header, or no data rows
    """
    rows = read_rows(csv_text)
    if not rows or rows[0][0] != 1:
        raise NoData("csv payload is empty")

    mask = resolve_columns(rows[0][1])
    logger.debug(f"Resolved {mask.count} maturity columns, missing: {mask.missing_labels()}")

    dates: List[date] = []
    curves: List[CurveSnapshot] = []
    line_numbers: List[int] = []
    for line_number, fields in rows[1:]:
        row_date = parse_date(fields[0] if fields else "", line_number)
        curves.append(decode_fields(fields, mask, line_number))
        dates.append(row_date)
        line_numbers.append(line_number)

    if not dates:
        raise NoData("csv payload has a header but no curve rows")

    duplicate = find_duplicate(dates)
    if duplicate is not None:
        raise DuplicateDate(dates[duplicate], line_numbers[duplicate])

    dates, curves = sort_pairs(dates, curves, ascending=False)
    logger.debug(f"Parsed {len(dates)} curves from {dates[-1]} to {dates[0]}")
    return CurveHistory(dates, curves, max_forward_days=max_forward_days)

"""
Error taxonomy for Treasury curve retrieval and parsing

Every failure in the package is raised as a subclass of TreasuryCurveError so
callers can catch the whole family with a single except clause. None of these
errors are retried or logged by the library itself.
"""

from datetime import date
from typing import Optional


class TreasuryCurveError(Exception):
    """Base class for all Treasury curve errors"""

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class NoData(TreasuryCurveError):
    """The CSV payload contained no curve rows"""

    def __init__(self, detail: str = "no data in curve"):
        super().__init__(detail)


class MissingLabel(TreasuryCurveError):
    """A header or query referenced a maturity label that is not recognized"""

    def __init__(self, label: str):
        super().__init__(label)
        self.label = label

    def __str__(self):
        return f"data label not recognized: {self.label}"


class InvalidYear(TreasuryCurveError):
    """Requested year is before the first published year or after the current year"""

    def __init__(self, year: int, min_year: Optional[int] = None, max_year: Optional[int] = None):
        super().__init__(year)
        self.year = year
        self.min_year = min_year
        self.max_year = max_year

    def __str__(self):
        if self.min_year is None or self.max_year is None:
            return f"year outside the published range, using: {self.year}"
        return (
            f"no data before the year {self.min_year} or after {self.max_year}, "
            f"using: {self.year}"
        )


class OutsideDateRange(TreasuryCurveError):
    """Requested date is not covered by the history, even with the forward grace window"""

    def __init__(self, request_date: date):
        super().__init__(request_date)
        self.request_date = request_date

    def __str__(self):
        return f"date outside of available curve history: {self.request_date.isoformat()}"


class FetchFailure(TreasuryCurveError):
    """Transport, HTTP status or text decoding failure while fetching a CSV"""


class DecodeFailure(TreasuryCurveError):
    """Malformed numeric or date field, or a row that does not fit the header"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message, line_number)
        self.message = message
        self.line_number = line_number

    def __str__(self):
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class DuplicateDate(DecodeFailure):
    """The same trading date appears on more than one row"""

    def __init__(self, duplicate: date, line_number: Optional[int] = None):
        super().__init__(f"duplicate curve date {duplicate.isoformat()}", line_number)
        self.date = duplicate

"""
CSV tokenising for Treasury curve payloads.
"""

import csv
import re
from io import StringIO
from typing import List, Tuple

import pandas as pd

from ..errors import DecodeFailure

_PARSER_LINE = re.compile(r"line (\d+)")


def read_rows(csv_text: str) -> List[Tuple[int, List[str]]]:
    """
    Split a CSV payload into string cells

    Blank lines are dropped. Quotes are left in place for the field
    cleaners; embedded commas are not supported.

    Returns:
        (1-based line number in csv_text, cells) for every non-blank line
    """
    numbered = [(i, line) for i, line in enumerate(csv_text.splitlines(), start=1) if line.strip()]
    if not numbered:
        return []

    try:
        frame = pd.read_csv(
            StringIO("\n".join(line for _, line in numbered)),
            header=None,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            quoting=csv.QUOTE_NONE,
        )
    except pd.errors.ParserError as e:
        line_number = None
        match = _PARSER_LINE.search(str(e))
        if match and 0 < int(match.group(1)) <= len(numbered):
            line_number = numbered[int(match.group(1)) - 1][0]
        raise DecodeFailure(f"row does not fit the header: {str(e).strip()}", line_number) from None

    rows = []
    for (line_number, _), cells in zip(numbered, frame.itertuples(index=False, name=None)):
        # rows shorter than the header are padded with NaN, never with strings
        fields: List[str] = []
        for cell in cells:
            if not isinstance(cell, str):
                break
            fields.append(cell)
        rows.append((line_number, fields))
    return rows


def read_line(line: str) -> List[str]:
    """Cells of a single CSV line"""
    rows = read_rows(line)
    return rows[0][1] if rows else []

"""
Canonical maturity labels for the US Treasury par yield curve.
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Union


class MaturityLabel(Enum):
    """Tenors published in the daily Treasury par yield curve CSV"""
    MONTH_1 = "1 Mo"
    MONTH_2 = "2 Mo"
    MONTH_3 = "3 Mo"
    MONTH_4 = "4 Mo"
    MONTH_6 = "6 Mo"
    YEAR_1 = "1 Yr"
    YEAR_2 = "2 Yr"
    YEAR_3 = "3 Yr"
    YEAR_5 = "5 Yr"
    YEAR_7 = "7 Yr"
    YEAR_10 = "10 Yr"
    YEAR_20 = "20 Yr"
    YEAR_30 = "30 Yr"


# Canonical storage order; every snapshot is indexed by position in this table
CURVE_LABELS: Tuple[MaturityLabel, ...] = (
    MaturityLabel.MONTH_1,
    MaturityLabel.MONTH_2,
    MaturityLabel.MONTH_3,
    MaturityLabel.MONTH_4,
    MaturityLabel.MONTH_6,
    MaturityLabel.YEAR_1,
    MaturityLabel.YEAR_2,
    MaturityLabel.YEAR_3,
    MaturityLabel.YEAR_5,
    MaturityLabel.YEAR_7,
    MaturityLabel.YEAR_10,
    MaturityLabel.YEAR_20,
    MaturityLabel.YEAR_30,
)

CURVE_LENGTH = len(CURVE_LABELS)

_SLOT_BY_TEXT: Dict[str, int] = {label.value: slot for slot, label in enumerate(CURVE_LABELS)}


def search_label(label: Union[str, MaturityLabel]) -> Optional[int]:
    """Return the canonical slot for a label, or None when it is not recognized"""
    if isinstance(label, MaturityLabel):
        return CURVE_LABELS.index(label)
    return _SLOT_BY_TEXT.get(label)


def label_texts() -> Tuple[str, ...]:
    """Published label text for every slot, in canonical order"""
    return tuple(label.value for label in CURVE_LABELS)

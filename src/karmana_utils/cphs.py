"""
cphs.py

Data munging helpers for the CMIE Consumer Pyramids Household Survey (CPHS).

CPHS tags homogeneous regions with labels such as ``"HR 12"``; the helpers
here extract the integer part, passing missing values through.
"""
from typing import Optional
import logging

import pandas as pd

from karmana_utils.errors import ParseError

logger = logging.getLogger(__name__)


def get_hr_number(hr) -> Optional[int]:
    """Extract the number from a string of the form ``"HR ???"``.

    Returns None for missing input (None, NaN or pandas.NA).
    Raises `ParseError` for non-string input, a label with no space, or a
    suffix that is not an integer.
    """
    if hr is None or (not isinstance(hr, str) and pd.api.types.is_scalar(hr) and pd.isna(hr)):
        return None
    if not isinstance(hr, str):
        raise ParseError(f"HR label must be a string, got {type(hr).__name__} {hr!r}")

    _, sep, number = hr.partition(' ')
    if not sep:
        raise ParseError(f"HR label {hr!r} has no space-separated number")
    try:
        return int(number)
    except ValueError as e:
        raise ParseError(f"HR label {hr!r} does not end in an integer") from e


def hr_numbers(series: pd.Series) -> pd.Series:
    """Vectorised `get_hr_number` returning a nullable ``Int64`` series."""
    out = series.map(get_hr_number, na_action='ignore')
    n_missing = int(out.isna().sum())
    if n_missing:
        logger.debug('%d of %d HR labels missing', n_missing, len(out))
    return out.astype('Int64')

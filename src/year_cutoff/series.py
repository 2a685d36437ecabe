"""
Bulk year interpretation for pandas columns.

Legacy exports often carry two-digit year columns. ``interpret_series``
normalizes a whole column with one interpreter and reports the rows that
could not be parsed instead of failing on the first one.
"""

import numbers
from typing import Any, Hashable, List, Optional, Tuple

import numpy as np
import pandas as pd

from year_cutoff.exceptions import ParseError
from year_cutoff.interpreter import YearInterpreter
from year_cutoff.utils.logging import get_logger

logger = get_logger(__name__)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _as_text(value: Any) -> str:
    # Spreadsheet numbers have already lost any leading zeros
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise ParseError(value)
    if isinstance(value, numbers.Integral):
        return str(int(value))
    # Integer columns with missing values are upcast to float64
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return str(int(value))
    raise ParseError(value)


def interpret_series(
    series: pd.Series, interpreter: Optional[YearInterpreter] = None
) -> Tuple[pd.Series, List[Hashable]]:
    """
    Interpret every value of a Series as a possibly short year.

    Args:
        series: Column of year strings (or integers)
        interpreter: Interpreter to use; defaults to ``YearInterpreter.from_settings()``

    Returns:
        Tuple of (nullable Int64 Series aligned with the input, index labels
        of values that could not be parsed). Blank values become <NA>
        without being reported.

    Example:
        >>> years, invalid = interpret_series(pd.Series(["05", "1850", "x"]),
        ...                                   YearInterpreter(2020))
        >>> years.tolist()
        [2005, 1850, <NA>]
        >>> invalid
        [2]
    """
    interpreter = interpreter or YearInterpreter.from_settings()

    parsed_values: List[Any] = []
    invalid_rows: List[Hashable] = []
    for idx, value in series.items():
        if _is_blank(value):
            parsed_values.append(pd.NA)
            continue

        try:
            parsed_values.append(interpreter.interpret(_as_text(value)))
        except ParseError:
            parsed_values.append(pd.NA)
            invalid_rows.append(idx)

    result = pd.Series(parsed_values, index=series.index, dtype="Int64", name=series.name)

    logger.info(
        "series.interpreted",
        column=series.name,
        total=len(series),
        invalid=len(invalid_rows),
        cutoff_year=interpreter.cutoff_year,
    )
    if invalid_rows:
        logger.warning(
            "series.invalid_rows",
            column=series.name,
            count=len(invalid_rows),
            sample=[str(idx) for idx in invalid_rows[:10]],
        )
    return result, invalid_rows

"""
Comparison of a short year against the cutoff year.

Only the cutoff's offset within its epoch matters: a short year already lies
in ``[0, CUTOFF_RANGE)`` and is compared to that offset directly.
"""

from enum import Enum

from year_cutoff.year_value import YearValue


class CutoffComparison(str, Enum):
    """Position of a short year relative to the cutoff year's epoch offset."""

    BEFORE = "before"
    ON = "on"
    AFTER = "after"


def compare_to_cutoff(cutoff_year: int, candidate: YearValue) -> CutoffComparison:
    """
    Classify a short year against the cutoff year.

    Args:
        cutoff_year: The interpreter's current cutoff year
        candidate: The short year being interpreted

    Returns:
        BEFORE, ON or AFTER

    Example:
        >>> compare_to_cutoff(2020, YearValue.parse("10"))
        <CutoffComparison.BEFORE: 'before'>
    """
    cutoff_offset = YearValue.from_int(cutoff_year).epoch_offset()
    if candidate.value < cutoff_offset:
        return CutoffComparison.BEFORE
    if candidate.value > cutoff_offset:
        return CutoffComparison.AFTER
    return CutoffComparison.ON

"""
Cutoff year helpers.

The interpreter stores a single cutoff year. The functions below turn the
other ways of describing the window ("first valid year", "last invalid
year", ...) into that cutoff year, so no second value is ever stored.
"""

from datetime import date
from typing import Optional

from year_cutoff.constants import CUTOFF_RANGE, DEFAULT_CUTOFF_OFFSET


def cutoff_from_last_valid_year(value: int) -> int:
    """The last valid year is the cutoff year itself."""
    return value


def cutoff_from_first_invalid_year(value: int) -> int:
    """The year before the first invalid year is the cutoff year."""
    return value - 1


def cutoff_from_last_invalid_year(value: int) -> int:
    """
    Convert the last year that should be invalid into a cutoff year.

    Short years wrap into the future once they pass this year.

    Example:
        >>> cutoff_from_last_invalid_year(1920)
        2020
    """
    return value + CUTOFF_RANGE


def cutoff_from_first_valid_year(value: int) -> int:
    """
    Convert the first year that should be valid into a cutoff year.

    Example:
        >>> cutoff_from_first_valid_year(1920)
        2019
    """
    return cutoff_from_last_invalid_year(value - 1)


def default_cutoff_year(today: Optional[date] = None) -> int:
    """
    Get the default cutoff year from the current date.

    Args:
        today: Date to use instead of the system clock

    Returns:
        Current year plus DEFAULT_CUTOFF_OFFSET
    """
    today = today or date.today()
    return today.year + DEFAULT_CUTOFF_OFFSET

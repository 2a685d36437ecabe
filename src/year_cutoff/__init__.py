"""
year-cutoff - Short year interpretation with a configurable cutoff year.

Resolves abbreviated year strings such as ``"05"`` or ``"97"`` into full
years using a sliding window that ends at a cutoff year.

Usage:
    >>> from year_cutoff import YearInterpreter
    >>> interpreter = YearInterpreter(cutoff_year=2020)
    >>> interpreter.interpret("10")
    2010
    >>> interpreter.interpret("30")
    1930

Whole pandas columns are handled by ``interpret_series``.
"""

from year_cutoff.comparator import CutoffComparison, compare_to_cutoff
from year_cutoff.constants import (
    CUTOFF_RANGE,
    DEFAULT_CUTOFF_OFFSET,
    MAX_SHORT_YEAR_DIGITS,
)
from year_cutoff.exceptions import ParseError, YearCutoffError
from year_cutoff.interpreter import ShortYearInterpreter, YearInterpreter
from year_cutoff.series import interpret_series
from year_cutoff.strategies import (
    DEFAULT_STRATEGY,
    ResolutionStrategy,
    SlidingWindowStrategy,
)
from year_cutoff.year_value import YearValue

__version__ = "0.1.0"

__all__ = [
    "CUTOFF_RANGE",
    "DEFAULT_CUTOFF_OFFSET",
    "DEFAULT_STRATEGY",
    "MAX_SHORT_YEAR_DIGITS",
    "CutoffComparison",
    "ParseError",
    "ResolutionStrategy",
    "ShortYearInterpreter",
    "SlidingWindowStrategy",
    "YearCutoffError",
    "YearInterpreter",
    "YearValue",
    "compare_to_cutoff",
    "interpret_series",
]

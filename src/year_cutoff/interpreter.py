"""
Short year interpretation against a configurable cutoff year.

``YearInterpreter`` turns text that may contain a short year into a full
year. Short years are placed relative to a cutoff year, which acts as a
border: by default a short year resolves into the window of
``CUTOFF_RANGE`` years ending at the cutoff year, both ends inclusive.

Flow:
    text -> YearValue -> short year test -> compare_to_cutoff -> strategy

Examples:
    >>> interpreter = YearInterpreter(cutoff_year=2020)
    >>> interpreter.interpret("10")
    2010
    >>> interpreter.interpret("20")
    2020
    >>> interpreter.interpret("30")
    1930
    >>> interpreter.interpret("05")
    2005
    >>> interpreter.interpret("0005")
    5

Thread safety:
    The cutoff year and strategy are plain mutable attributes. Instances
    shared between threads must not be reconfigured while ``interpret`` is
    running elsewhere; configure a ``copy()`` instead.
"""

from __future__ import annotations

import numbers
from typing import Optional, Protocol, runtime_checkable

from year_cutoff.comparator import compare_to_cutoff
from year_cutoff.config import Settings, get_settings
from year_cutoff.constants import CUTOFF_RANGE, MAX_SHORT_YEAR_DIGITS
from year_cutoff.cutoff import (
    cutoff_from_first_invalid_year,
    cutoff_from_first_valid_year,
    cutoff_from_last_invalid_year,
    cutoff_from_last_valid_year,
    default_cutoff_year,
)
from year_cutoff.exceptions import ParseError
from year_cutoff.strategies import DEFAULT_STRATEGY, ResolutionStrategy
from year_cutoff.utils.logging import get_logger
from year_cutoff.year_value import YearValue

logger = get_logger(__name__)


@runtime_checkable
class ShortYearInterpreter(Protocol):
    """Anything that can turn a possible short year string into a full year."""

    def interpret(self, text: str) -> int: ...


def is_int_short_year(value: int) -> bool:
    """Check that a value lies in ``[0, CUTOFF_RANGE)``."""
    return 0 <= value < CUTOFF_RANGE


def is_text_short_year(text: str) -> bool:
    """
    Check that trimmed text has at most MAX_SHORT_YEAR_DIGITS characters.

    "0005" and "5" have the same value, but only "5" is an abbreviation;
    "0005" is a padded year 5.
    """
    return len(text.strip()) <= MAX_SHORT_YEAR_DIGITS


def is_short_year(year: YearValue) -> bool:
    """Check both the numeric range and the text length of a year."""
    return is_int_short_year(year.value) and is_text_short_year(year.text)


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a year; numpy integers are accepted
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return int(value)


class YearInterpreter:
    """
    Interprets strings that may contain a short year and returns full years.

    The interpreter owns two pieces of state: the cutoff year and an optional
    resolution strategy. The convenience setters (``set_last_valid_year``,
    ``set_first_invalid_year``, ...) all write the cutoff year and nothing
    else.

    Args:
        cutoff_year: Cutoff year; defaults to current year + DEFAULT_CUTOFF_OFFSET
        strategy: Resolution strategy; None uses DEFAULT_STRATEGY
    """

    def __init__(
        self,
        cutoff_year: Optional[int] = None,
        strategy: Optional[ResolutionStrategy] = None,
    ) -> None:
        if cutoff_year is None:
            cutoff_year = default_cutoff_year()
        self._cutoff_year = _require_int("cutoff_year", cutoff_year)
        self._strategy: Optional[ResolutionStrategy] = None
        self.strategy = strategy

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> YearInterpreter:
        """
        Create an interpreter from application settings.

        Args:
            settings: Settings to use; defaults to ``get_settings()``

        Returns:
            Interpreter using ``settings.cutoff_year``, or the clock default
            when it is unset
        """
        if settings is None:
            settings = get_settings()
        return cls(cutoff_year=settings.cutoff_year)

    def interpret(self, text: str) -> int:
        """
        Interpret a string that may contain a short year.

        Args:
            text: The possible short year, e.g. "05", "1850"

        Returns:
            The full year; years that aren't short are returned unchanged

        Raises:
            ParseError: If the trimmed text is not an integer literal
        """
        try:
            year = YearValue.parse(text)
        except ParseError:
            logger.debug("year.parse_failed", text=text)
            raise

        if not is_short_year(year):
            return year.value

        outcome = compare_to_cutoff(self._cutoff_year, year)
        result = self.strategy.resolve(outcome, self, year)
        logger.debug(
            "year.interpreted",
            text=year.text,
            cutoff_year=self._cutoff_year,
            outcome=outcome.value,
            year=result,
        )
        return result

    # Cutoff year

    @property
    def cutoff_year(self) -> int:
        """The year that acts as the border of the window."""
        return self._cutoff_year

    @cutoff_year.setter
    def cutoff_year(self, value: int) -> None:
        self._cutoff_year = _require_int("cutoff_year", value)
        logger.debug("cutoff.changed", cutoff_year=self._cutoff_year)

    @property
    def last_valid_year(self) -> int:
        """Last year a short year can resolve to with the default strategy."""
        return self._cutoff_year

    @property
    def first_valid_year(self) -> int:
        """First year a short year can resolve to with the default strategy."""
        return self._cutoff_year - CUTOFF_RANGE + 1

    def set_last_valid_year(self, value: int) -> None:
        """Same as setting ``cutoff_year``."""
        self.cutoff_year = cutoff_from_last_valid_year(_require_int("value", value))

    def set_first_valid_year(self, value: int) -> None:
        """
        Set the first year that should be valid.

        ``set_first_valid_year(v)`` equals ``cutoff_year = v + CUTOFF_RANGE - 1``.
        """
        self.cutoff_year = cutoff_from_first_valid_year(_require_int("value", value))

    def set_last_invalid_year(self, value: int) -> None:
        """
        Set the last year that should be invalid, so short years at or
        below its offset wrap into the next epoch.

        ``set_last_invalid_year(v)`` equals ``cutoff_year = v + CUTOFF_RANGE``.
        """
        self.cutoff_year = cutoff_from_last_invalid_year(_require_int("value", value))

    def set_first_invalid_year(self, value: int) -> None:
        """``set_first_invalid_year(v)`` equals ``cutoff_year = v - 1``."""
        self.cutoff_year = cutoff_from_first_invalid_year(_require_int("value", value))

    # Strategy

    @property
    def strategy(self) -> ResolutionStrategy:
        """The strategy in effect, never None."""
        if self._strategy is None:
            return DEFAULT_STRATEGY
        return self._strategy

    @strategy.setter
    def strategy(self, value: Optional[ResolutionStrategy]) -> None:
        if value is not None and not isinstance(value, ResolutionStrategy):
            raise TypeError(
                f"strategy must be a ResolutionStrategy or None, "
                f"got {type(value).__name__}"
            )
        self._strategy = value
        logger.debug("strategy.changed", strategy=repr(self.strategy))

    @property
    def has_custom_strategy(self) -> bool:
        """True when a strategy was set explicitly."""
        return self._strategy is not None

    def copy(self) -> YearInterpreter:
        """Return an independent interpreter with the same configuration."""
        return type(self)(cutoff_year=self._cutoff_year, strategy=self._strategy)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(cutoff_year={self._cutoff_year}, "
            f"strategy={self.strategy!r})"
        )

"""
Resolution strategies for short years.

A strategy maps the outcome of the cutoff comparison to a full year. The
interpreter holds at most one strategy and falls back to the shared
``DEFAULT_STRATEGY`` when none is set. Strategies are replaced as a whole,
never per outcome.

Example:
    >>> class AlwaysCurrentEpoch(ResolutionStrategy):
    ...     def handle_before(self, interpreter, candidate):
    ...         return YearValue.from_int(interpreter.cutoff_year).epoch() + candidate.value
    ...     handle_on = handle_after = handle_before
    >>> interpreter.strategy = AlwaysCurrentEpoch()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from year_cutoff.comparator import CutoffComparison
from year_cutoff.constants import CUTOFF_RANGE
from year_cutoff.year_value import YearValue

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from year_cutoff.interpreter import YearInterpreter


class ResolutionStrategy(ABC):
    """
    Abstract base class for short year resolution.

    Each handler receives the interpreter (for its cutoff year) and the short
    year candidate, and returns the resolved full year.
    """

    @abstractmethod
    def handle_before(self, interpreter: YearInterpreter, candidate: YearValue) -> int:
        """Resolve a short year below the cutoff's epoch offset."""
        pass

    @abstractmethod
    def handle_on(self, interpreter: YearInterpreter, candidate: YearValue) -> int:
        """Resolve a short year equal to the cutoff's epoch offset."""
        pass

    @abstractmethod
    def handle_after(self, interpreter: YearInterpreter, candidate: YearValue) -> int:
        """Resolve a short year above the cutoff's epoch offset."""
        pass

    def resolve(
        self,
        outcome: CutoffComparison,
        interpreter: YearInterpreter,
        candidate: YearValue,
    ) -> int:
        """Dispatch a comparison outcome to the matching handler."""
        if outcome is CutoffComparison.BEFORE:
            return self.handle_before(interpreter, candidate)
        if outcome is CutoffComparison.AFTER:
            return self.handle_after(interpreter, candidate)
        if outcome is CutoffComparison.ON:
            return self.handle_on(interpreter, candidate)
        raise ValueError(f"Unknown cutoff comparison: {outcome!r}")


class SlidingWindowStrategy(ResolutionStrategy):
    """
    Place short years in the window of CUTOFF_RANGE years ending at the cutoff.

    Both ends are inclusive: with cutoff year 2020 the window is 1921-2020.

    Example:
        >>> YearInterpreter(2020, strategy=SlidingWindowStrategy()).interpret("30")
        1930
    """

    def handle_before(self, interpreter: YearInterpreter, candidate: YearValue) -> int:
        return self._cutoff_epoch(interpreter) + candidate.value

    def handle_on(self, interpreter: YearInterpreter, candidate: YearValue) -> int:
        return self._cutoff_epoch(interpreter) + candidate.value

    def handle_after(self, interpreter: YearInterpreter, candidate: YearValue) -> int:
        # Wrapped past the cutoff: belongs to the previous epoch
        return self._cutoff_epoch(interpreter) - CUTOFF_RANGE + candidate.value

    @staticmethod
    def _cutoff_epoch(interpreter: YearInterpreter) -> int:
        return YearValue.from_int(interpreter.cutoff_year).epoch()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DEFAULT_STRATEGY: ResolutionStrategy = SlidingWindowStrategy()

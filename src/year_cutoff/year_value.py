"""
Year value holding the original text and the parsed integer.

A ``YearValue`` is built for every interpreted string and for every cutoff
year snapshot compared against it. It is immutable once constructed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from year_cutoff.constants import CUTOFF_RANGE
from year_cutoff.exceptions import ParseError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_year_text(text: str) -> int:
    """
    Parse trimmed text as a signed base-10 integer.

    Unlike ``int()``, underscores, non-ASCII digits and inner whitespace are
    rejected.

    Raises:
        ParseError: If the text is empty or not an integer literal
    """
    if not isinstance(text, str):
        raise ParseError(text, f"Cannot parse {text!r} as year: expected str")

    stripped = text.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        raise ParseError(text)

    try:
        return int(stripped)
    except ValueError as exc:
        # Literals longer than sys.get_int_max_str_digits()
        raise ParseError(text) from exc


@dataclass(frozen=True)
class YearValue:
    """
    A year as its trimmed text and its integer value.

    Attributes:
        text: The original input after trimming whitespace
        value: The integer denoted by ``text``

    Example:
        >>> YearValue.parse(" 2020 ").epoch()
        2000
        >>> YearValue.parse("2020").epoch_offset()
        20
    """

    text: str
    value: int

    @classmethod
    def parse(cls, text: str) -> YearValue:
        """Build a YearValue from text, raising ParseError on invalid input."""
        value = parse_year_text(text)
        return cls(text=text.strip(), value=value)

    @classmethod
    def from_int(cls, value: int) -> YearValue:
        """Build a YearValue from an integer; ``text`` is its canonical rendering."""
        return cls(text=str(value), value=value)

    def epoch_offset(self) -> int:
        """Return the last digits of the year, always non-negative."""
        return self.value % CUTOFF_RANGE

    def epoch(self) -> int:
        """Return the year with its last digits zeroed out."""
        return self.value - self.epoch_offset()

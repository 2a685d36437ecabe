"""
Exception hierarchy for short year interpretation.

Interpretation has a single failure mode: text that is not a signed decimal
integer literal. Configuration never fails on integer input.
"""

from typing import Optional


class YearCutoffError(Exception):
    """Base exception for all year-cutoff errors."""

    pass


class ParseError(YearCutoffError, ValueError):
    """
    Raised when text cannot be parsed as a year.

    The text is parsed after trimming surrounding whitespace; only an optional
    sign followed by ASCII digits is accepted.

    Args:
        text: The raw text that failed to parse
        message: Optional error description overriding the default
    """

    def __init__(self, text: object, message: Optional[str] = None):
        self.text = text
        if message is None:
            message = f"Cannot parse {text!r} as year"
        super().__init__(message)

"""Shared constants for short year interpretation.

Constants used across the year value, comparator and interpreter modules.
"""

# Maximal number of digits a short year may have
MAX_SHORT_YEAR_DIGITS = 2

# Size of one epoch (10 ** MAX_SHORT_YEAR_DIGITS)
CUTOFF_RANGE = 10**MAX_SHORT_YEAR_DIGITS

# Years added to the current year for the default cutoff year
DEFAULT_CUTOFF_OFFSET = 30

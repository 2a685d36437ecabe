"""Tests for cutoff year helpers and the clock default."""

from datetime import date

import pytest

from year_cutoff.constants import CUTOFF_RANGE, DEFAULT_CUTOFF_OFFSET
from year_cutoff.cutoff import (
    cutoff_from_first_invalid_year,
    cutoff_from_first_valid_year,
    cutoff_from_last_invalid_year,
    cutoff_from_last_valid_year,
    default_cutoff_year,
)


@pytest.mark.unit
@pytest.mark.parametrize("value", [-150, 0, 1920, 2020, 9999])
def test_cutoff_transforms(value):
    assert cutoff_from_last_valid_year(value) == value
    assert cutoff_from_first_invalid_year(value) == value - 1
    assert cutoff_from_last_invalid_year(value) == value + CUTOFF_RANGE
    assert cutoff_from_first_valid_year(value) == value + CUTOFF_RANGE - 1


@pytest.mark.unit
def test_default_cutoff_year_uses_given_date():
    assert default_cutoff_year(date(2024, 6, 1)) == 2024 + DEFAULT_CUTOFF_OFFSET


@pytest.mark.unit
def test_default_cutoff_year_uses_clock():
    assert default_cutoff_year() == date.today().year + DEFAULT_CUTOFF_OFFSET


@pytest.mark.unit
def test_constants():
    assert CUTOFF_RANGE == 100
    assert DEFAULT_CUTOFF_OFFSET == 30

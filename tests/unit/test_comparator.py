"""Tests for compare_to_cutoff."""

import pytest

from year_cutoff.comparator import CutoffComparison, compare_to_cutoff
from year_cutoff.year_value import YearValue


@pytest.mark.unit
@pytest.mark.parametrize(
    "cutoff_year,text,expected",
    [
        (2020, "10", CutoffComparison.BEFORE),
        (2020, "20", CutoffComparison.ON),
        (2020, "30", CutoffComparison.AFTER),
        (2000, "0", CutoffComparison.ON),
        (2000, "1", CutoffComparison.AFTER),
        (2099, "98", CutoffComparison.BEFORE),
        (2099, "99", CutoffComparison.ON),
        (-50, "49", CutoffComparison.BEFORE),
        (-50, "51", CutoffComparison.AFTER),
    ],
)
def test_compare_to_cutoff(cutoff_year, text, expected):
    assert compare_to_cutoff(cutoff_year, YearValue.parse(text)) is expected


@pytest.mark.unit
def test_only_cutoff_offset_matters():
    candidate = YearValue.parse("15")
    results = {compare_to_cutoff(year, candidate) for year in (1720, 1820, 2020, 2120)}
    assert results == {CutoffComparison.BEFORE}

from datetime import date

import pytest

from climate.models import CARBON_EMISSION_FACTORS, calculate_emissions
from climate.services.carbon_service import _shift_month
from climate.services.errors import ValidationError
from climate.services.validation import parse_date, parse_number, parse_pagination


@pytest.mark.parametrize(
    "category, value, expected",
    [
        ("transport", 10, 2.0),
        ("food", 2, 3.0),
        ("energy", 100, 50.0),
        ("flights", 7.5, 7.5),
    ],
)
def test_calculate_emissions(category, value, expected):
    assert calculate_emissions(category, value) == pytest.approx(expected)


def test_factor_table_covers_known_categories():
    assert set(CARBON_EMISSION_FACTORS) == {"transport", "food", "energy"}


def test_shift_month_crosses_year_boundary():
    assert _shift_month(date(2026, 2, 17), -5) == date(2025, 9, 1)
    assert _shift_month(date(2026, 12, 31), 0) == date(2026, 12, 1)


def test_parse_pagination_defaults_and_clamping():
    assert parse_pagination({}) == (20, 0)
    assert parse_pagination({"limit": "5", "offset": "10"}) == (5, 10)
    assert parse_pagination({"limit": "1000"}) == (100, 0)
    assert parse_pagination({"limit": "0"}) == (1, 0)


@pytest.mark.parametrize("args", [{"limit": "abc"}, {"limit": "-5"}, {"offset": "-1"}])
def test_parse_pagination_rejects_invalid_values(args):
    with pytest.raises(ValidationError):
        parse_pagination(args)


def test_parse_number_rejects_non_numeric():
    assert parse_number("12.5", "value") == 12.5
    for bad in (None, True, "dieci", float("nan")):
        with pytest.raises(ValidationError):
            parse_number(bad, "value")


def test_parse_date():
    assert parse_date("2026-03-04") == date(2026, 3, 4)
    assert parse_date("2026-03-04T10:00:00.000Z") == date(2026, 3, 4)
    assert parse_date(None, default=date(2026, 1, 1)) == date(2026, 1, 1)
    with pytest.raises(ValidationError):
        parse_date("04/03/2026")

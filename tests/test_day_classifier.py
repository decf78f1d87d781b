"""Tests for day classification."""

from datetime import date, datetime

import pytest

from train_timetable.application.services import classify_day
from train_timetable.domain.models import DayType, ValidityWindow

WINDOW_2024 = ValidityWindow(start_date=date(2024, 1, 1), end_date=date(2024, 12, 31))
HOLIDAYS = ["01-05-2024", "14-07-2024", "25-12-2024"]


@pytest.mark.parametrize(
    "reference_date",
    [date(2024, 1, 1), date(2024, 6, 12), date(2024, 12, 31)],
)
def test_dates_inside_window_are_valid_period(reference_date: date) -> None:
    """Given a date within the window (bounds included), when classifying, then the period is valid."""
    result = classify_day(reference_date, WINDOW_2024, HOLIDAYS)

    assert result.is_valid_period is True


@pytest.mark.parametrize("reference_date", [date(2023, 12, 31), date(2025, 1, 1)])
def test_dates_one_day_outside_window_are_not_valid_period(reference_date: date) -> None:
    """Given a date one day outside the window, when classifying, then the period is not valid."""
    result = classify_day(reference_date, WINDOW_2024, HOLIDAYS)

    assert result.is_valid_period is False
    assert result.is_valid is False


def test_out_of_window_date_keeps_its_day_type() -> None:
    """Given a Wednesday after the window, when classifying, then day type stays ordinary."""
    result = classify_day(date(2025, 1, 8), WINDOW_2024, HOLIDAYS)

    assert result.day_type == DayType.ORDINARY
    assert result.is_valid_period is False


def test_wednesday_is_ordinary() -> None:
    """Given a non-holiday Wednesday, when classifying, then day type is ordinary and valid."""
    result = classify_day(date(2024, 6, 12), WINDOW_2024, HOLIDAYS)

    assert result.day_type == DayType.ORDINARY
    assert result.is_weekend is False
    assert result.is_holiday is False
    assert result.is_valid is True


@pytest.mark.parametrize("reference_date", [date(2024, 6, 15), date(2024, 6, 16)])
def test_saturday_and_sunday_are_weekend(reference_date: date) -> None:
    """Given a Saturday or Sunday, when classifying, then day type is weekend."""
    result = classify_day(reference_date, WINDOW_2024, HOLIDAYS)

    assert result.day_type == DayType.WEEKEND
    assert result.is_weekend is True


def test_holiday_takes_precedence_over_weekend() -> None:
    """Given a holiday falling on a Sunday, when classifying, then day type is holiday."""
    result = classify_day(date(2024, 7, 14), WINDOW_2024, HOLIDAYS)

    assert result.day_type == DayType.HOLIDAY
    assert result.is_holiday is True
    assert result.is_weekend is True


def test_weekday_holiday_is_holiday() -> None:
    """Given Christmas 2024 (a Wednesday), when classifying, then day type is holiday."""
    result = classify_day(date(2024, 12, 25), WINDOW_2024, HOLIDAYS)

    assert result.day_type == DayType.HOLIDAY
    assert result.is_weekend is False


def test_holiday_match_is_exact_string() -> None:
    """Given a holiday written without zero padding, when classifying, then it does not match."""
    result = classify_day(date(2024, 5, 1), WINDOW_2024, ["1-5-2024", "2024-05-01"])

    assert result.is_holiday is False
    assert result.day_type == DayType.ORDINARY


def test_datetime_reference_is_compared_by_date() -> None:
    """Given a datetime late on the last valid day, when classifying, then the period is valid."""
    result = classify_day(datetime(2024, 12, 31, 23, 59), WINDOW_2024, HOLIDAYS)

    assert result.is_valid_period is True


def test_missing_validity_reports_no_data() -> None:
    """Given no validity window, when classifying, then all flags are false and type is invalid."""
    result = classify_day(date(2024, 12, 25), None, HOLIDAYS)

    assert result.day_type == DayType.INVALID
    assert result.is_holiday is False
    assert result.is_weekend is False
    assert result.is_valid_period is False
    assert result.is_valid is False

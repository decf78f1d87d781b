"""Day type and service type tags."""

from enum import StrEnum


class DayType(StrEnum):
    """Classification of a calendar day used to decide which trains run."""

    ORDINARY = "ordinary"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    INVALID = "invalid"  # No validity data available


class ServiceType(StrEnum):
    """Service type tags carried by train records in the dataset."""

    DAILY = "Q"  # Quotidien
    HOLIDAY_OR_WEEKEND = "DF"  # Dimanches et fériés
    EXCEPT_SUNDAY_AND_HOLIDAY = "SFDF"  # Sauf dimanches et fériés
    WEEKDAY_EXCEPT_HOLIDAY = "LU-VE NF"  # Lundi à vendredi, non férié

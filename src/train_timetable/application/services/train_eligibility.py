"""Train eligibility rules by day type and service type."""

from collections.abc import Iterable

from train_timetable.domain.models.day_classification import DayClassification
from train_timetable.domain.models.day_type import DayType, ServiceType
from train_timetable.domain.models.train import Train

# ISO weekday numbers, Monday to Friday
WORKING_DAYS = frozenset({1, 2, 3, 4, 5})

_NON_WORKING_DAY_SERVICES = frozenset({ServiceType.HOLIDAY_OR_WEEKEND, ServiceType.DAILY})


def is_train_eligible(train: Train, classification: DayClassification, weekday: int) -> bool:
    """Decide whether a train runs on the classified day.

    Args:
        train: The train to check.
        classification: Classification of the reference date.
        weekday: ISO weekday of the reference date (1 = Monday .. 7 = Sunday).

    Returns:
        True if the train runs that day.
    """
    if train.schedule is None:
        return False

    service_type = train.service_type
    day_type = classification.day_type

    if day_type in (DayType.HOLIDAY, DayType.WEEKEND):
        return service_type in _NON_WORKING_DAY_SERVICES

    if day_type == DayType.ORDINARY:
        if service_type == ServiceType.DAILY:
            return True
        if service_type == ServiceType.EXCEPT_SUNDAY_AND_HOLIDAY:
            return not classification.is_holiday
        if service_type == ServiceType.WEEKDAY_EXCEPT_HOLIDAY:
            # Weekday check is independent of the day type derivation
            return not classification.is_holiday and weekday in WORKING_DAYS
        return False

    return False


def filter_eligible_trains(
    trains: Iterable[Train], classification: DayClassification, weekday: int
) -> list[Train]:
    """Keep the trains running on the classified day, preserving their order."""
    return [train for train in trains if is_train_eligible(train, classification, weekday)]

"""Conversion of domain results to the JSON shapes served to clients."""

from typing import Any

from train_timetable.domain.models.day_classification import DayClassification
from train_timetable.domain.models.schedule_view import ScheduleView
from train_timetable.domain.models.validity import ValidityDates


def classification_to_dict(classification: DayClassification) -> dict[str, Any]:
    """Serialize a day classification as {isValid, isHoliday, isWeekend, dayType}."""
    return {
        "isValid": classification.is_valid,
        "isHoliday": classification.is_holiday,
        "isWeekend": classification.is_weekend,
        "dayType": str(classification.day_type),
    }


def validity_dates_to_dict(validity: ValidityDates | None) -> dict[str, str] | None:
    """Serialize the validity block with its dataset field names."""
    if validity is None:
        return None
    return validity.model_dump()


def schedule_view_to_dict(view: ScheduleView) -> dict[str, dict[str, Any]]:
    """Serialize a schedule view keyed by station, in canonical station order.

    Field names (horaires, numeros, frequences) are the ones client
    applications already consume.
    """
    return {
        station: {
            "horaires": list(timetable.times),
            "numeros": list(timetable.train_numbers),
            "frequences": list(timetable.service_types),
            "line": timetable.line,
        }
        for station, timetable in view.stations.items()
    }

"""Domain layer - core models, errors and ports."""

from train_timetable.domain.errors import (
    DataUnavailableError,
    ScheduleNotFoundError,
    TimetableError,
    UnknownDirectionError,
    UnknownLineError,
)
from train_timetable.domain.models import (
    DayClassification,
    DayType,
    ScheduleDataset,
    ScheduleView,
    ServiceType,
    StationTimetable,
    Train,
    ValidityWindow,
)
from train_timetable.domain.ports import ScheduleRepository, TimetableService

__all__ = [
    "DataUnavailableError",
    "DayClassification",
    "DayType",
    "ScheduleDataset",
    "ScheduleNotFoundError",
    "ScheduleRepository",
    "ScheduleView",
    "ServiceType",
    "StationTimetable",
    "TimetableError",
    "TimetableService",
    "Train",
    "UnknownDirectionError",
    "UnknownLineError",
    "ValidityWindow",
]

"""Domain models for the train timetable service."""

from train_timetable.domain.models.day_classification import DayClassification
from train_timetable.domain.models.day_type import DayType, ServiceType
from train_timetable.domain.models.schedule_dataset import ScheduleDataset, TrainRecord
from train_timetable.domain.models.schedule_view import ScheduleView, StationTimetable
from train_timetable.domain.models.train import Train
from train_timetable.domain.models.validity import (
    DATASET_DATE_FORMAT,
    ValidityDates,
    ValidityWindow,
    parse_dataset_date,
)

__all__ = [
    "DATASET_DATE_FORMAT",
    "DayClassification",
    "DayType",
    "ScheduleDataset",
    "ScheduleView",
    "ServiceType",
    "StationTimetable",
    "Train",
    "TrainRecord",
    "ValidityDates",
    "ValidityWindow",
    "parse_dataset_date",
]

"""Application services."""

from train_timetable.application.services.day_classifier import classify_day
from train_timetable.application.services.schedule_projector import project_schedule
from train_timetable.application.services.station_sequence import build_station_sequence
from train_timetable.application.services.timetable_service import TimetableService
from train_timetable.application.services.train_eligibility import (
    filter_eligible_trains,
    is_train_eligible,
)

__all__ = [
    "TimetableService",
    "build_station_sequence",
    "classify_day",
    "filter_eligible_trains",
    "is_train_eligible",
    "project_schedule",
]

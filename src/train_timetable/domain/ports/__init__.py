"""Ports (interfaces) for the ports-and-adapters architecture."""

from train_timetable.domain.ports.schedule_repository import ScheduleRepository
from train_timetable.domain.ports.timetable_service import TimetableService

__all__ = [
    "ScheduleRepository",
    "TimetableService",
]

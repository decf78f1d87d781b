"""Application layer - use cases and orchestration."""

from train_timetable.application.services import TimetableService

__all__ = ["TimetableService"]

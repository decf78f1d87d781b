"""JSON dataset storage adapters."""

from train_timetable.adapters.json_store.json_schedule_repository import JsonScheduleRepository

__all__ = ["JsonScheduleRepository"]

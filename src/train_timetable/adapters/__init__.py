"""Adapters layer - configuration, storage and web integrations."""

from train_timetable.adapters.config import AppConfig
from train_timetable.adapters.json_store import JsonScheduleRepository
from train_timetable.adapters.logging_observer import LoggingScheduleObserver

__all__ = [
    "AppConfig",
    "JsonScheduleRepository",
    "LoggingScheduleObserver",
]

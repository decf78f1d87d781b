"""Web adapter for serving timetables over HTTP."""

from train_timetable.adapters.web.app import create_app

__all__ = ["create_app"]

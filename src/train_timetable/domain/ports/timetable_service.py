"""Timetable service port."""

from datetime import date
from typing import Any, Protocol

from train_timetable.domain.models.day_classification import DayClassification
from train_timetable.domain.models.schedule_view import ScheduleView
from train_timetable.domain.models.validity import ValidityDates


class TimetableService(Protocol):
    """Port for the timetable queries served to client applications."""

    async def compute_validity(self, now: date | None = None) -> DayClassification:
        """Classify the reference date (today when omitted)."""
        ...

    async def load_validity_dates(self) -> ValidityDates | None:
        """Return the dataset validity block, or None when absent."""
        ...

    async def compute_schedules(
        self, line: str, direction: str, now: date | None = None
    ) -> ScheduleView:
        """Build the per-station view of the trains running on the reference date."""
        ...

    async def load_announcements(self) -> list[Any]:
        """Return the dataset announcements unchanged."""
        ...

    async def load_stations(self) -> dict[str, Any]:
        """Return the dataset station metadata unchanged."""
        ...

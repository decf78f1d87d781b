"""Timetable service."""

from collections.abc import Callable
from datetime import date, datetime
from typing import Any

from train_timetable.application.services.day_classifier import classify_day
from train_timetable.application.services.schedule_projector import project_schedule
from train_timetable.application.services.station_sequence import build_station_sequence
from train_timetable.application.services.train_eligibility import filter_eligible_trains
from train_timetable.domain.contracts.schedule_observer import (
    NullScheduleObserver,
    ScheduleObserverProtocol,
)
from train_timetable.domain.errors import UnknownDirectionError, UnknownLineError
from train_timetable.domain.models.day_classification import DayClassification
from train_timetable.domain.models.schedule_dataset import ScheduleDataset
from train_timetable.domain.models.schedule_view import ScheduleView
from train_timetable.domain.models.train import Train
from train_timetable.domain.models.validity import ValidityDates
from train_timetable.domain.ports.schedule_repository import ScheduleRepository


class TimetableService:
    """Serves validity and per-station timetables from the schedule dataset.

    Every call reloads the dataset from the repository; nothing is cached
    between calls.
    """

    def __init__(
        self,
        schedule_repository: ScheduleRepository,
        clock: Callable[[], date] = date.today,
        observer: ScheduleObserverProtocol | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            schedule_repository: Source of the schedule dataset.
            clock: Returns today's date, used when no reference date is given.
            observer: Receives events for each computation step.
        """
        self._schedule_repository = schedule_repository
        self._clock = clock
        self._observer = observer or NullScheduleObserver()

    async def compute_validity(self, now: date | None = None) -> DayClassification:
        """Classify the reference date (today when omitted)."""
        dataset = await self._schedule_repository.load_dataset()
        return self._classify(dataset, self._reference_date(now))

    async def load_validity_dates(self) -> ValidityDates | None:
        """Return the dataset validity block, or None when absent."""
        dataset = await self._schedule_repository.load_dataset()
        return dataset.validity

    async def compute_schedules(
        self, line: str, direction: str, now: date | None = None
    ) -> ScheduleView:
        """Build the per-station view of the trains running on the reference date.

        Raises:
            UnknownLineError: If the line is absent from the dataset.
            UnknownDirectionError: If the line has no such direction.
            DataUnavailableError: If the dataset cannot be loaded.
        """
        dataset = await self._schedule_repository.load_dataset()
        trains = self._trains_for(dataset, line, direction)

        reference_date = self._reference_date(now)
        classification = self._classify(dataset, reference_date)

        eligible = filter_eligible_trains(trains, classification, reference_date.isoweekday())
        self._observer.trains_filtered(line, direction, len(trains), eligible)

        stations = build_station_sequence(eligible)
        self._observer.stations_ordered(line, direction, stations)

        view = project_schedule(stations, eligible, line, direction)
        self._observer.schedule_projected(view)
        return view

    async def load_announcements(self) -> list[Any]:
        """Return the dataset announcements unchanged."""
        dataset = await self._schedule_repository.load_dataset()
        return dataset.announcements

    async def load_stations(self) -> dict[str, Any]:
        """Return the dataset station metadata unchanged."""
        dataset = await self._schedule_repository.load_dataset()
        return dataset.stations

    def _reference_date(self, now: date | None) -> date:
        if now is None:
            return self._clock()
        if isinstance(now, datetime):
            return now.date()
        return now

    def _classify(self, dataset: ScheduleDataset, reference_date: date) -> DayClassification:
        window = dataset.validity.to_window() if dataset.validity else None
        classification = classify_day(reference_date, window, dataset.feries)
        self._observer.day_classified(reference_date, classification)
        return classification

    def _trains_for(self, dataset: ScheduleDataset, line: str, direction: str) -> list[Train]:
        """Look up the trains of a line and direction, dropping null records."""
        line_data = dataset.lines.get(line)
        if line_data is None:
            raise UnknownLineError(line)
        records = line_data.get(direction)
        if records is None:
            raise UnknownDirectionError(line, direction)
        return [record.to_train() for record in records if record is not None]

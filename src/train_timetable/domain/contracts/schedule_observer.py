"""Protocol for observing timetable computations."""

from datetime import date
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from train_timetable.domain.models.day_classification import DayClassification
    from train_timetable.domain.models.schedule_view import ScheduleView
    from train_timetable.domain.models.train import Train


class ScheduleObserverProtocol(Protocol):
    """Hooks called at each step of a timetable computation."""

    def day_classified(self, reference_date: date, classification: "DayClassification") -> None:
        """Called once the reference date has been classified.

        Args:
            reference_date: The date that was classified.
            classification: The resulting classification.
        """
        ...

    def trains_filtered(
        self, line: str, direction: str, total: int, eligible: list["Train"]
    ) -> None:
        """Called after filtering the trains of a line and direction.

        Args:
            line: Line identifier.
            direction: Direction identifier.
            total: Number of train records before filtering.
            eligible: Trains running on the reference date.
        """
        ...

    def stations_ordered(self, line: str, direction: str, stations: list[str]) -> None:
        """Called once the canonical station sequence is built.

        Args:
            line: Line identifier.
            direction: Direction identifier.
            stations: Stations in canonical travel order.
        """
        ...

    def schedule_projected(self, view: "ScheduleView") -> None:
        """Called with the final per-station view.

        Args:
            view: The projected schedule view.
        """
        ...


class NullScheduleObserver(ScheduleObserverProtocol):
    """Observer that ignores every event."""

    def day_classified(self, reference_date: date, classification: "DayClassification") -> None:
        pass

    def trains_filtered(
        self, line: str, direction: str, total: int, eligible: list["Train"]
    ) -> None:
        pass

    def stations_ordered(self, line: str, direction: str, stations: list[str]) -> None:
        pass

    def schedule_projected(self, view: "ScheduleView") -> None:
        pass

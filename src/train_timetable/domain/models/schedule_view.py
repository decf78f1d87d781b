"""Per-station schedule view domain models."""

from dataclasses import dataclass, field


@dataclass
class StationTimetable:
    """Times, train numbers and service types at one station.

    The three lists are parallel and aligned with the filtered train list:
    index i always refers to the same train, with None in times where that
    train does not stop here.
    """

    line: str
    times: list[str | None] = field(default_factory=list)
    train_numbers: list[str] = field(default_factory=list)
    service_types: list[str] = field(default_factory=list)


@dataclass
class ScheduleView:
    """Timetable of one line and direction, keyed by station in canonical order."""

    line: str
    direction: str
    stations: dict[str, StationTimetable] = field(default_factory=dict)

    @property
    def station_order(self) -> list[str]:
        """Stations in canonical travel order."""
        return list(self.stations)

    @property
    def train_count(self) -> int:
        """Number of trains in the view."""
        first = next(iter(self.stations.values()), None)
        return len(first.train_numbers) if first else 0

    def is_empty(self) -> bool:
        """True when no station is listed (no train runs today)."""
        return not self.stations

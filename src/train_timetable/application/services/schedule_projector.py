"""Projection of filtered trains onto the canonical station sequence."""

from collections.abc import Sequence

from train_timetable.domain.models.schedule_view import ScheduleView, StationTimetable
from train_timetable.domain.models.train import Train


def project_schedule(
    stations: Sequence[str], trains: Sequence[Train], line: str, direction: str
) -> ScheduleView:
    """Build the per-station view of the given trains.

    Every station row lists one entry per train, in train order. Trains that
    do not stop at a station get a None time but keep their number and
    service type, so a train's itinerary is read by taking the same index
    across all stations.
    """
    view = ScheduleView(line=line, direction=direction)
    for station in stations:
        timetable = StationTimetable(line=line)
        for train in trains:
            timetable.times.append((train.schedule or {}).get(station) or None)
            timetable.train_numbers.append(train.train_number)
            timetable.service_types.append(train.service_type)
        view.stations[station] = timetable
    return view

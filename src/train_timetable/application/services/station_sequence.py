"""Canonical station sequence built from the trains' partial station lists."""

from collections.abc import Sequence

from train_timetable.domain.models.train import Train


def build_station_sequence(trains: Sequence[Train]) -> list[str]:
    """Merge each train's station order into one canonical travel order.

    The first train's stations seed the sequence. Every other station is
    then inserted, in order of first appearance across the trains, next to
    its neighbours in the first train that serves it:

    - both neighbours placed: after the predecessor if it comes before the
      successor, otherwise at the successor's position;
    - only the predecessor placed: right after it;
    - only the successor placed: right before it;
    - neither placed: at the end.

    When trains disagree on the relative order of two stations, the result
    depends on the order of ``trains``; the output is deterministic for a
    given input order.

    Args:
        trains: Trains running on the reference date, in dataset order.

    Returns:
        Unique station names in canonical order, empty when there are no trains.
    """
    if not trains:
        return []

    sequence = trains[0].stations
    # dict keeps first-appearance order, unlike set
    discovered = dict.fromkeys(station for train in trains for station in train.stations)

    for station in discovered:
        if station in sequence:
            continue
        sequence.insert(_insertion_index(station, trains, sequence), station)

    return sequence


def _insertion_index(station: str, trains: Sequence[Train], sequence: list[str]) -> int:
    """Find where a new station goes, using its neighbours in the first train serving it."""
    anchor_train = next((train for train in trains if train.serves(station)), None)
    own_stations = anchor_train.stations if anchor_train else []
    own_index = own_stations.index(station) if station in own_stations else -1

    previous_station = own_stations[own_index - 1] if own_index > 0 else None
    next_station = own_stations[own_index + 1] if 0 <= own_index < len(own_stations) - 1 else None

    previous_index = _index_or_none(sequence, previous_station)
    next_index = _index_or_none(sequence, next_station)

    if previous_index is not None and next_index is not None:
        if previous_index < next_index:
            return previous_index + 1
        return next_index
    if previous_index is not None:
        return previous_index + 1
    if next_index is not None:
        return next_index
    return len(sequence)


def _index_or_none(sequence: list[str], station: str | None) -> int | None:
    if station is None or station not in sequence:
        return None
    return sequence.index(station)

"""Domain contracts (protocols) shared across layers."""

from train_timetable.domain.contracts.schedule_observer import (
    NullScheduleObserver,
    ScheduleObserverProtocol,
)

__all__ = ["NullScheduleObserver", "ScheduleObserverProtocol"]

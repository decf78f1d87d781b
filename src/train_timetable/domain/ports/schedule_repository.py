"""Schedule repository port."""

from typing import Protocol

from train_timetable.domain.models.schedule_dataset import ScheduleDataset


class ScheduleRepository(Protocol):
    """Port for loading the schedule dataset."""

    async def load_dataset(self) -> ScheduleDataset:
        """Load the full dataset.

        Raises:
            DataUnavailableError: If the dataset cannot be read or parsed.
        """
        ...

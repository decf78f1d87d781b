"""JSON file schedule repository adapter."""

import asyncio
import logging
from pathlib import Path

from pydantic import ValidationError

from train_timetable.domain.errors import DataUnavailableError
from train_timetable.domain.models.schedule_dataset import ScheduleDataset
from train_timetable.domain.ports.schedule_repository import ScheduleRepository

logger = logging.getLogger(__name__)


class JsonScheduleRepository(ScheduleRepository):
    """Reads the schedule dataset from a JSON file on every call."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the dataset file path."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the dataset file."""
        return self._path

    async def load_dataset(self) -> ScheduleDataset:
        """Read and validate the dataset file.

        Raises:
            DataUnavailableError: If the file is missing, unreadable or not a valid dataset.
        """
        logger.debug(f"Reading schedule dataset from {self._path}")
        try:
            raw = await asyncio.to_thread(self._path.read_bytes)
        except OSError as e:
            logger.error(f"Failed to read schedule dataset {self._path}: {e}")
            raise DataUnavailableError(str(self._path), str(e)) from e

        try:
            dataset = ScheduleDataset.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Invalid schedule dataset {self._path}: {e.error_count()} error(s)")
            raise DataUnavailableError(str(self._path), f"invalid dataset: {e}") from e

        logger.debug(
            f"Schedule dataset loaded: {len(dataset.lines)} line(s), "
            f"{len(dataset.feries)} holiday(s), validity={'yes' if dataset.validity else 'no'}"
        )
        return dataset

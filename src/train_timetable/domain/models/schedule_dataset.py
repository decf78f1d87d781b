"""Schedule dataset document model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from train_timetable.domain.models.train import Train
from train_timetable.domain.models.validity import ValidityDates


class TrainRecord(BaseModel):
    """A train entry as stored in the dataset."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    train_number: str = ""
    type: str | None = None  # None is an unknown tag; such a train never runs
    schedule: dict[str, str | None] | None = None

    @field_validator("train_number", mode="before")
    @classmethod
    def coerce_train_number(cls, v: Any) -> Any:
        """Spreadsheet exports may store train numbers as numbers."""
        if v is None:
            return ""
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        if isinstance(v, int | float):
            return str(v)
        return v

    @field_validator("schedule", mode="before")
    @classmethod
    def coerce_schedule_times(cls, v: Any) -> Any:
        """Turn numeric times into strings and unreadable ones into None, keeping key order."""
        if not isinstance(v, dict):
            return None
        return {station: _coerce_time(time) for station, time in v.items()}

    def to_train(self) -> Train:
        """Convert to the Train domain model."""
        return Train(
            train_number=self.train_number,
            service_type=self.type or "",
            schedule=dict(self.schedule) if self.schedule is not None else None,
        )


def _coerce_time(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, str):
        return value
    return None


def _parse_record(raw: Any) -> TrainRecord | None:
    """Validate one train entry; an unreadable entry counts as a null record."""
    if raw is None:
        return None
    try:
        return TrainRecord.model_validate(raw)
    except ValidationError:
        return None


class ScheduleDataset(BaseModel):
    """Pre-built schedule dataset.

    Only ``validity``, ``feries`` and ``lines`` feed the timetable computation;
    ``announcements`` and ``stations`` are passed through unchanged. A malformed
    train entry is kept as a null record so the rest of the dataset stays usable.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    validity: ValidityDates | None = None
    feries: list[str] = Field(default_factory=list)  # Holidays, dd-mm-yyyy
    lines: dict[str, dict[str, list[TrainRecord | None] | None] | None] = Field(
        default_factory=dict
    )
    announcements: list[Any] = Field(default_factory=list)
    stations: dict[str, Any] = Field(default_factory=dict)

    @field_validator("feries", "announcements", mode="before")
    @classmethod
    def null_as_empty_list(cls, v: Any) -> Any:
        """Treat an explicit null as an empty list."""
        return [] if v is None else v

    @field_validator("lines", "stations", mode="before")
    @classmethod
    def null_as_empty_dict(cls, v: Any) -> Any:
        """Treat an explicit null as an empty mapping."""
        return {} if v is None else v

    @field_validator("lines", mode="before")
    @classmethod
    def skip_malformed_trains(cls, v: Any) -> Any:
        """Replace train entries that fail validation with null records."""
        if not isinstance(v, dict):
            return v
        lines: dict[str, Any] = {}
        for line, directions in v.items():
            if not isinstance(directions, dict):
                lines[line] = directions
                continue
            lines[line] = {
                direction: (
                    [_parse_record(raw) for raw in records]
                    if isinstance(records, list)
                    else records
                )
                for direction, records in directions.items()
            }
        return lines

"""Validity window domain models."""

from dataclasses import dataclass
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, field_validator

DATASET_DATE_FORMAT = "%d-%m-%Y"


def parse_dataset_date(value: str) -> date:
    """Parse a dd-mm-yyyy date string as used throughout the dataset."""
    return datetime.strptime(value.strip(), DATASET_DATE_FORMAT).date()


@dataclass(frozen=True)
class ValidityWindow:
    """Inclusive calendar date range during which the timetable applies.

    A window whose start is after its end contains no date.
    """

    start_date: date
    end_date: date

    def contains(self, day: date) -> bool:
        """Check whether a date falls inside the window, bounds included."""
        return self.start_date <= day <= self.end_date


class ValidityDates(BaseModel):
    """Raw validity block as found in the dataset (dd-mm-yyyy strings)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    date_debut: str
    date_fin: str

    @field_validator("date_debut", "date_fin")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Validate that the date is a dd-mm-yyyy string."""
        try:
            parse_dataset_date(v)
        except ValueError as e:
            raise ValueError(f"date must use the dd-mm-yyyy format, got {v!r}") from e
        return v

    def to_window(self) -> ValidityWindow:
        """Convert the raw strings into a ValidityWindow."""
        return ValidityWindow(
            start_date=parse_dataset_date(self.date_debut),
            end_date=parse_dataset_date(self.date_fin),
        )

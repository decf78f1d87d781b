"""Day classification domain model."""

from dataclasses import dataclass

from train_timetable.domain.models.day_type import DayType


@dataclass(frozen=True)
class DayClassification:
    """Result of classifying a reference date against a validity window and holidays."""

    day_type: DayType
    is_holiday: bool
    is_weekend: bool
    is_valid_period: bool

    @property
    def is_valid(self) -> bool:
        """Overall validity: inside the validity window and a known day type."""
        return self.is_valid_period and self.day_type != DayType.INVALID

    @classmethod
    def no_data(cls) -> "DayClassification":
        """Classification reported when the dataset carries no validity block."""
        return cls(
            day_type=DayType.INVALID,
            is_holiday=False,
            is_weekend=False,
            is_valid_period=False,
        )

"""Errors raised by the timetable service."""


class TimetableError(Exception):
    """Base class for timetable service errors."""


class DataUnavailableError(TimetableError):
    """The schedule dataset is missing, unreadable or malformed."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize with the dataset location and a short reason."""
        super().__init__(f"Schedule data unavailable from {source}: {reason}")
        self.source = source
        self.reason = reason


class ScheduleNotFoundError(TimetableError):
    """The requested line or direction does not exist in the dataset."""

    def __init__(self, message: str, line: str, direction: str | None = None) -> None:
        """Initialize with a message and the offending identifiers."""
        super().__init__(message)
        self.line = line
        self.direction = direction


class UnknownLineError(ScheduleNotFoundError):
    """The requested line is absent from the dataset."""

    def __init__(self, line: str) -> None:
        """Initialize with the unknown line identifier."""
        super().__init__(f"Line {line} not found", line=line)


class UnknownDirectionError(ScheduleNotFoundError):
    """The requested direction is absent from an existing line."""

    def __init__(self, line: str, direction: str) -> None:
        """Initialize with the line and the unknown direction identifier."""
        super().__init__(
            f"Direction {direction} for line {line} not found", line=line, direction=direction
        )

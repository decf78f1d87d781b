"""Train timetable service: day classification, train filtering and station ordering."""

__version__ = "1.0.0"

"""Observer that reports timetable computations through the logging module."""

import logging
from datetime import date

from train_timetable.domain.contracts.schedule_observer import ScheduleObserverProtocol
from train_timetable.domain.models.day_classification import DayClassification
from train_timetable.domain.models.schedule_view import ScheduleView
from train_timetable.domain.models.train import Train

logger = logging.getLogger(__name__)


class LoggingScheduleObserver(ScheduleObserverProtocol):
    """Logs each computation step; step details at DEBUG, results at INFO."""

    def day_classified(self, reference_date: date, classification: DayClassification) -> None:
        """Log the classification of the reference date."""
        logger.debug(
            f"Classified {reference_date.isoformat()}: day_type={classification.day_type}, "
            f"holiday={classification.is_holiday}, weekend={classification.is_weekend}, "
            f"valid_period={classification.is_valid_period}"
        )

    def trains_filtered(self, line: str, direction: str, total: int, eligible: list[Train]) -> None:
        """Log how many trains run today."""
        logger.info(f"{line}/{direction}: {len(eligible)} of {total} train(s) running")
        if not eligible:
            logger.warning(f"No train running today for {line}/{direction}")

    def stations_ordered(self, line: str, direction: str, stations: list[str]) -> None:
        """Log the canonical station order."""
        logger.debug(f"Station order for {line}/{direction}: {stations}")

    def schedule_projected(self, view: ScheduleView) -> None:
        """Log the size of the projected view."""
        logger.debug(
            f"Schedule for {view.line}/{view.direction}: "
            f"{len(view.stations)} station(s) x {view.train_count} train(s)"
        )

"""Day classification against the validity window and holiday list."""

from collections.abc import Iterable
from datetime import date, datetime

from train_timetable.domain.models.day_classification import DayClassification
from train_timetable.domain.models.day_type import DayType
from train_timetable.domain.models.validity import DATASET_DATE_FORMAT, ValidityWindow

# ISO weekday numbers (date.isoweekday): 1 = Monday .. 7 = Sunday
WEEKEND_DAYS = frozenset({6, 7})


def classify_day(
    reference_date: date,
    validity: ValidityWindow | None,
    holidays: Iterable[str],
) -> DayClassification:
    """Classify a date as ordinary, weekend or holiday.

    Holidays are matched by exact dd-mm-yyyy string. The day type does not
    depend on the validity window: an out-of-window date keeps its ordinary,
    weekend or holiday type and is only reported through ``is_valid_period``.

    Args:
        reference_date: Date to classify. A datetime is reduced to its date.
        validity: Validity window of the dataset, or None when the dataset has none.
        holidays: Holiday dates as dd-mm-yyyy strings.

    Returns:
        The day classification. Without a validity window, all flags are
        false and the day type is INVALID.
    """
    if validity is None:
        return DayClassification.no_data()

    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()

    is_valid_period = validity.contains(reference_date)
    is_weekend = reference_date.isoweekday() in WEEKEND_DAYS
    is_holiday = reference_date.strftime(DATASET_DATE_FORMAT) in set(holidays)

    if is_holiday:
        day_type = DayType.HOLIDAY
    elif is_weekend:
        day_type = DayType.WEEKEND
    else:
        day_type = DayType.ORDINARY

    return DayClassification(
        day_type=day_type,
        is_holiday=is_holiday,
        is_weekend=is_weekend,
        is_valid_period=is_valid_period,
    )

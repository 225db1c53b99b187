"""Weekday markers and splitting multi-day schedule records into one record per weekday."""
import logging
from datetime import timedelta

from .dates import format_iso_date, parse_iso_date
from ..models import ScheduleRecord

logger = logging.getLogger(__name__)

FILLER = "."
WEEKDAYS = range(1, 8)  # ISO numbering, Mon=1 .. Sun=7


def has_multiple_days(marker: str) -> bool:
    return sum(1 for char in marker if char.isdecimal()) > 1


def active_weekdays(marker: str) -> list[int]:
    """Weekdays whose digit occurs anywhere in the marker, ascending.

    Presence is checked against the whole marker, not the digit's own slot,
    so ``"3......"`` activates Wednesday.
    """
    return [day for day in WEEKDAYS if str(day) in marker]


def single_day_marker(day: int) -> str:
    return FILLER * (day - 1) + str(day) + FILLER * (7 - day)


def _start_shift(day: int, start_weekday: int) -> int:
    # forward to the first occurrence of `day` on or after the start
    if day >= start_weekday:
        return day - start_weekday
    return 7 - (start_weekday - day)


def _end_shift(day: int, end_weekday: int) -> int:
    # backward (non-positive) to the last occurrence of `day` on or before the end
    if day <= end_weekday:
        return -(end_weekday - day)
    return (day - end_weekday) - 7


def perform_separation(record: ScheduleRecord, days: list[int]) -> list[ScheduleRecord]:
    start = parse_iso_date(record.start_date)
    end = parse_iso_date(record.end_date)
    start_weekday = start.isoweekday()
    end_weekday = end.isoweekday()

    separated = []
    for day in days:
        new_start = start + timedelta(days=_start_shift(day, start_weekday))
        new_end = end + timedelta(days=_end_shift(day, end_weekday))
        if new_start > new_end:
            logger.debug('%s %s%s has no %d-day inside %s..%s', record.origin, record.airline,
                         record.flight_number, day, record.start_date, record.end_date)
        separated.append(record.with_window(
            format_iso_date(new_start), format_iso_date(new_end), single_day_marker(day)
        ))
    return separated


def separate_days(record: ScheduleRecord) -> list[ScheduleRecord]:
    """Expand a record operating on several weekdays into one record per active weekday.

    Each output window starts on the first and ends on the last occurrence of its weekday
    within the original window. Records with at most one digit in the marker come back as-is.
    """
    if not has_multiple_days(record.days):
        return [record]
    return perform_separation(record, active_weekdays(record.days))

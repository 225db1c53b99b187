"""Exceptions raised by the schedule conversion.

Local conditions (unknown month, unmapped operator, empty weekday marker) never raise;
they resolve to sentinel values. Everything here invalidates the whole batch.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ScheduleRecord


class ScheduleError(Exception):
    """Base class for schedule conversion failures."""


class InvalidDateFormat(ScheduleError, ValueError):
    """A date string is not in the expected ``YYYY-MM-DD`` shape."""


class MergeDateError(InvalidDateFormat):
    """A record compared during merging carries an unparseable window date."""

    def __init__(self, message: str, record: "ScheduleRecord | None" = None):
        super().__init__(message)
        self.record = record


class PayloadError(ScheduleError, ValueError):
    """The schedule JSON dump could not be decoded into flight responses."""

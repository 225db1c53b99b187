import logging
from datetime import timedelta

from .dates import parse_iso_date
from ..errors import InvalidDateFormat, MergeDateError
from ..models import ScheduleRecord

logger = logging.getLogger(__name__)

WEEK = timedelta(days=7)


def _window_date(record: ScheduleRecord, column: str):
    try:
        return parse_iso_date(getattr(record, column))
    except InvalidDateFormat as exc:
        raise MergeDateError(f"Cannot merge {record}: {exc}", record=record) from exc


def are_valid_for_merge(first: ScheduleRecord, second: ScheduleRecord) -> bool:
    """True when ``second`` continues ``first`` one week after its end with an identical flight profile.

    Raises MergeDateError when either compared date is not a calendar date.
    """
    first_end = _window_date(first, "end_date")
    second_start = _window_date(second, "start_date")
    if first.profile() != second.profile():
        return False
    return first_end + WEEK == second_start


def perform_merge(first: ScheduleRecord, second: ScheduleRecord) -> ScheduleRecord:
    return first.with_window(first.start_date, second.end_date)


def merge_records(records: list[ScheduleRecord]) -> list[ScheduleRecord]:
    """Collapse weekly-contiguous chains into single records.

    Greedy pass in input order: each unconsumed record becomes a chain head and absorbs
    every later record that continues it. Expects records sorted by start date.
    A MergeDateError from any comparison aborts the whole batch.
    """
    consumed = [False] * len(records)
    merged = []
    for i, record in enumerate(records):
        if consumed[i]:
            continue
        consumed[i] = True
        current = record
        for j in range(i + 1, len(records)):
            if consumed[j]:
                continue
            if are_valid_for_merge(current, records[j]):
                logger.debug('Merging %s..%s into %s %s%s starting %s', records[j].start_date,
                             records[j].end_date, current.origin, current.airline,
                             current.flight_number, current.start_date)
                current = perform_merge(current, records[j])
                consumed[j] = True
        merged.append(current)
    logger.debug('Merged %d records into %d', len(records), len(merged))
    return merged

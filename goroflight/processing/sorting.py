from dataclasses import fields
from functools import cmp_to_key

from .dates import parse_iso_date
from ..errors import InvalidDateFormat
from ..models import ScheduleRecord

RECORD_FIELDS = tuple(f.name for f in fields(ScheduleRecord))


def _compare_dates(first: str, second: str) -> int:
    # unparseable dates compare as equal so they never force a reorder
    try:
        first_date, second_date = parse_iso_date(first), parse_iso_date(second)
    except InvalidDateFormat:
        return 0
    return (first_date > second_date) - (first_date < second_date)


def sort_records_by_date_col(records: list, column: int | str) -> list:
    """Stable in-place ascending sort of records by a date column.

    ``column`` is a row index (6 = start, 7 = end) for flat rows or a field name for
    ScheduleRecord objects; an int index on a ScheduleRecord reads the matching row column.
    Ordering is best-effort for records whose date does not parse.
    """
    field_name = RECORD_FIELDS[column] if isinstance(column, int) and column < len(RECORD_FIELDS) else column

    def date_of(record) -> str:
        if isinstance(record, ScheduleRecord):
            return getattr(record, field_name)
        return record[column]

    records.sort(key=cmp_to_key(lambda a, b: _compare_dates(date_of(a), date_of(b))))
    return records

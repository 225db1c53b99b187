import csv
from datetime import date
from typing import Iterable, TextIO

from .models import CSV_HEADER, ScheduleRecord


def build_csv_filename(carrier: str, today: date | None = None) -> str:
    today = today or date.today()
    return f"{today:%Y%m%d}_{carrier}.csv"


def write_schedule_csv(records: Iterable[ScheduleRecord], stream: TextIO, delimiter: str = ",") -> int:
    """Write the header and one row per record; returns the number of data rows."""
    writer = csv.writer(stream, delimiter=delimiter)
    writer.writerow(CSV_HEADER)
    count = 0
    for record in records:
        writer.writerow(record.to_row())
        count += 1
    return count

from abc import ABC, abstractmethod

from .merging import merge_records
from .sorting import sort_records_by_date_col
from ..models import ScheduleRecord


class BaseScheduleProcessor(ABC):
    """Common sort/merge steps for the concrete schedule processors."""
    sort_column = "start_date"

    def sort(self, records: list[ScheduleRecord]) -> list[ScheduleRecord]:
        return sort_records_by_date_col(records, self.sort_column)

    def merge(self, records: list[ScheduleRecord]) -> list[ScheduleRecord]:
        merged = merge_records(self.sort(list(records)))
        return self.sort(merged)

    @abstractmethod
    def process_records(self, records: list[ScheduleRecord]) -> list[ScheduleRecord]:  # pragma: no cover
        raise NotImplementedError

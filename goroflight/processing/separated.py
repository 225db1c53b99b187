import logging
from typing import Iterable

from tqdm import tqdm

from .base import BaseScheduleProcessor
from .weekdays import separate_days
from ..models import ScheduleRecord

logger = logging.getLogger(__name__)


class SeparatedScheduleProcessor(BaseScheduleProcessor):
    """Split every record into single-weekday records, then merge weekly chains back together."""

    @staticmethod
    def separate(records: Iterable[ScheduleRecord]) -> list[ScheduleRecord]:
        separated = []
        for record in tqdm(records, desc='Separating weekdays', leave=False):
            separated.extend(separate_days(record))
        return separated

    def process_records(self, records: list[ScheduleRecord]) -> list[ScheduleRecord]:
        separated = self.separate(records)
        merged = self.merge(separated)
        logger.info('Separated mode: %d records -> %d single-day -> %d merged',
                    len(records), len(separated), len(merged))
        return merged

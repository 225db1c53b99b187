import logging

from .base import BaseScheduleProcessor
from ..models import ScheduleRecord

logger = logging.getLogger(__name__)


class CompactScheduleProcessor(BaseScheduleProcessor):
    """Merge records as received from the API, keeping multi-day weekday markers intact."""

    def process_records(self, records: list[ScheduleRecord]) -> list[ScheduleRecord]:
        merged = self.merge(records)
        logger.info('Compact mode: %d records -> %d', len(records), len(merged))
        return merged

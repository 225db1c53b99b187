from .base import BaseScheduleProcessor
from .compact import CompactScheduleProcessor
from .separated import SeparatedScheduleProcessor


def get_processor(separate: bool) -> BaseScheduleProcessor:
    return SeparatedScheduleProcessor() if separate else CompactScheduleProcessor()

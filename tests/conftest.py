import pytest

from goroflight.models import ScheduleRecord


def make_record(start: str, end: str, days: str = "1234567", **overrides) -> ScheduleRecord:
    values = dict(
        origin="KRK", destination="FRA", airline="LH", flight_number="1365",
        departure="10:20", arrival="12:05", start_date=start, end_date=end,
        days=days, aircraft="320", operator="DLH", service_type="J",
    )
    values.update(overrides)
    return ScheduleRecord(**values)


@pytest.fixture
def record_factory():
    return make_record

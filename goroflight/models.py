from dataclasses import astuple, dataclass, field, fields, replace

CSV_HEADER: tuple[str, ...] = (
    "Z", "Do", "Linia", "Numer", "Odlot", "Przylot", "Od", "Do", "Dni", "Samolot", "Operator", "Typ",
)

# Column positions of the window dates in a flat row
DATE_COLUMNS = {"start_date": 6, "end_date": 7}


@dataclass(frozen=True, slots=True)
class ScheduleRecord:
    """One schedule row: a route flown on some weekdays between two dates (inclusive).

    Dates are ISO ``YYYY-MM-DD`` strings, times local ``HH:MM``. ``days`` is the 7-char
    weekday marker where position i holds digit i+1 when the flight operates that day
    and a filler (``.``) otherwise. Records are values: every transformation returns a copy.
    """
    origin: str
    destination: str
    airline: str
    flight_number: str
    departure: str
    arrival: str
    start_date: str
    end_date: str
    days: str
    aircraft: str
    operator: str
    service_type: str

    @classmethod
    def from_row(cls, row) -> "ScheduleRecord":
        row = list(row)
        if len(row) != len(CSV_HEADER):
            raise ValueError(f"Schedule row needs {len(CSV_HEADER)} columns, got {len(row)}: {row}")
        return cls(*(str(value) for value in row))

    def to_row(self) -> list[str]:
        return list(astuple(self))

    def profile(self) -> tuple[str, ...]:
        """Every field except the window dates; two records with equal profiles describe the same flight."""
        return tuple(getattr(self, f.name) for f in fields(self) if f.name not in DATE_COLUMNS)

    def with_window(self, start_date: str, end_date: str, days: str | None = None) -> "ScheduleRecord":
        if days is None:
            return replace(self, start_date=start_date, end_date=end_date)
        return replace(self, start_date=start_date, end_date=end_date, days=days)


# ---------------- remote payload -----------------
@dataclass(slots=True)
class Leg:
    sequence_number: int = 0
    origin: str = ""
    destination: str = ""
    service_type: str = ""
    aircraft_owner: str = ""
    aircraft_type: str = ""
    aircraft_configuration_version: str = ""
    registration: str = ""
    op: bool = False
    aircraft_departure_time_utc: int = 0
    aircraft_departure_time_date_diff_utc: int = 0
    aircraft_departure_time_lt: int = 0
    aircraft_departure_time_date_diff_lt: int = 0
    aircraft_departure_time_variation: int = 0
    aircraft_arrival_time_utc: int = 0
    aircraft_arrival_time_date_diff_utc: int = 0
    aircraft_arrival_time_lt: int = 0
    aircraft_arrival_time_date_diff_lt: int = 0
    aircraft_arrival_time_variation: int = 0


@dataclass(slots=True)
class DataElement:
    start_leg_sequence_number: int = 0
    end_leg_sequence_number: int = 0
    id: int = 0
    value: str = ""


@dataclass(slots=True)
class PeriodOfOperation:
    """Period as sent by the API: SSIM dates (``4JUL24``) and a space-filled weekday pattern."""
    start_date: str = ""
    end_date: str = ""
    days_of_operation: str = ""


@dataclass(slots=True)
class FlightResponse:
    airline: str = ""
    flight_number: int = 0
    suffix: str = ""
    period_of_operation_utc: PeriodOfOperation = field(default_factory=PeriodOfOperation)
    period_of_operation_lt: PeriodOfOperation = field(default_factory=PeriodOfOperation)
    legs: list[Leg] = field(default_factory=list)
    data_elements: list[DataElement] = field(default_factory=list)


@dataclass(slots=True)
class ErrorMessage:
    text: str = ""
    level: str = ""


@dataclass(slots=True)
class ErrorResponse:
    http_status: int = 0
    messages: list[ErrorMessage] = field(default_factory=list)

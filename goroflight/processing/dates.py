"""Conversions between the API's SSIM-style encodings and the ISO strings used in schedule rows."""
from datetime import date, datetime
from types import MappingProxyType

from ..errors import InvalidDateFormat

ISO_FORMAT = "%Y-%m-%d"

MONTHS = MappingProxyType({
    "JAN": "01", "FEB": "02", "MAR": "03", "APR": "04", "MAY": "05", "JUN": "06",
    "JUL": "07", "AUG": "08", "SEP": "09", "OCT": "10", "NOV": "11", "DEC": "12",
})
MONTH_NAMES = MappingProxyType({number: name for name, number in MONTHS.items()})


def ssim_to_date(ssim: str) -> str:
    """``4JUL24`` / ``19JUL24`` -> ``2024-07-04`` / ``2024-07-19``.

    Returns an empty string when the length is not 6 or 7 or the month is unknown.
    """
    if len(ssim) == 6:
        day, month, year = "0" + ssim[:1], ssim[1:4], ssim[4:]
    elif len(ssim) == 7:
        day, month, year = ssim[:2], ssim[2:5], ssim[5:]
    else:
        return ""
    if (month_number := MONTHS.get(month)) is None:
        return ""
    return f"20{year}-{month_number}-{day}"


def date_to_ssim(iso_date: str) -> str:
    """``2024-07-04`` -> ``04JUL24``; empty string for a month number outside the table."""
    if len(iso_date) != 10:
        raise InvalidDateFormat(f"Date '{iso_date}' is not in YYYY-MM-DD form")
    year, month, day = iso_date[2:4], iso_date[5:7], iso_date[8:10]
    if (month_name := MONTH_NAMES.get(month)) is None:
        return ""
    return f"{day}{month_name}{year}"


def parse_iso_date(date_str: str) -> date:
    try:
        return datetime.strptime(date_str, ISO_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise InvalidDateFormat(f"Date '{date_str}' is not a valid {ISO_FORMAT} date") from exc


def format_iso_date(value: date) -> str:
    return value.isoformat()


def number_to_time(minutes: int) -> str:
    """Minutes after local midnight as ``HH:MM``; hours are not wrapped at 24."""
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def days_of_operation(pattern: str) -> str:
    return pattern.replace(" ", ".")

"""Decoding of the flight-schedules JSON dump into schedule records.

The dump is whatever the fetcher concatenated from the paged API responses, so
several JSON arrays may be glued together (``[...][...]``).
"""
import json
import logging
import re
from types import MappingProxyType

import dacite

from .errors import PayloadError
from .models import ErrorResponse, FlightResponse, ScheduleRecord
from .processing.dates import days_of_operation, number_to_time, ssim_to_date

logger = logging.getLogger(__name__)

OPERATOR_ICAO = MappingProxyType({
    "2L": "OAW",
    "BT": "BTI",
    "LX": "SWR",
    "CL": "CLH",
    "EN": "DLA",
    "LH": "DLH",
    "OS": "AUA",
    "SN": "BEL",
})

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')


def flatten_json(data: str) -> str:
    return data.replace("][", ",")


def operator_to_icao(operator: str) -> str:
    return OPERATOR_ICAO.get(operator, operator)


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub(r'_\1', key).lower()


def _snake_keys(value):
    if isinstance(value, dict):
        return {_snake_case(k): _snake_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_snake_keys(v) for v in value]
    return value


def _is_error_response(item: dict) -> bool:
    return "http_status" in item and "legs" not in item


def parse_flight_responses(data: str) -> list[FlightResponse]:
    if not data.strip():
        return []
    try:
        loaded = json.loads(flatten_json(data))
    except json.JSONDecodeError as exc:
        raise PayloadError(f"Schedule dump is not valid JSON: {exc}") from exc
    if not isinstance(loaded, list):
        raise PayloadError(f"Schedule dump must be a JSON array, got {type(loaded).__name__}")

    responses = []
    for item in _snake_keys(loaded):
        if not isinstance(item, dict):
            raise PayloadError(f"Unexpected schedule entry: {item!r}")
        try:
            if _is_error_response(item):
                error = dacite.from_dict(data_class=ErrorResponse, data=item)
                logger.warning('API error %s: %s', error.http_status, '; '.join(m.text for m in error.messages))
                continue
            responses.append(dacite.from_dict(data_class=FlightResponse, data=item))
        except dacite.DaciteError as exc:
            raise PayloadError(f"Cannot decode schedule entry: {exc}") from exc
    logger.info('Decoded %d flight responses', len(responses))
    return responses


def flight_response_to_records(response: FlightResponse) -> list[ScheduleRecord]:
    period = response.period_of_operation_lt
    start_date = ssim_to_date(period.start_date)
    end_date = ssim_to_date(period.end_date)
    if not start_date or not end_date:
        logger.warning('Unrecognised period %s-%s for %s%s', period.start_date, period.end_date,
                       response.airline, response.flight_number)
    return [
        ScheduleRecord(
            origin=leg.origin,
            destination=leg.destination,
            airline=response.airline,
            flight_number=str(response.flight_number),
            departure=number_to_time(leg.aircraft_departure_time_lt),
            arrival=number_to_time(leg.aircraft_arrival_time_lt),
            start_date=start_date,
            end_date=end_date,
            days=days_of_operation(period.days_of_operation),
            aircraft=leg.aircraft_type,
            operator=operator_to_icao(leg.aircraft_owner),
            service_type=leg.service_type,
        )
        for leg in response.legs
    ]

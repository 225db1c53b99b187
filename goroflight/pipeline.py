"""High-level orchestration: schedule JSON dump -> processed records -> CSV file.

Usage patterns:

1. Compact export, multi-day markers kept as received:
   run_pipeline(Path("schedules.json"), carrier="LH")

2. Weekday-separated export (one row per weekday, weekly chains merged):
   run_pipeline(Path("schedules.json"), carrier="LH", separate=True)
"""
import argparse
import io
import logging
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from goroflight.config import settings
from goroflight.csv_writer import build_csv_filename, write_schedule_csv
from goroflight.logging_config import setup_logging
from goroflight.models import ScheduleRecord
from goroflight.payload import flight_response_to_records, parse_flight_responses
from goroflight.processing.factory import get_processor


def convert_payload(data: str, separate: bool = False) -> list[ScheduleRecord]:
    responses = parse_flight_responses(data)
    records: list[ScheduleRecord] = []
    for response in tqdm(responses, desc='Mapping flight responses', leave=False):
        records.extend(flight_response_to_records(response))
    logging.info(f"Mapped {len(responses)} flight responses to {len(records)} records")
    return get_processor(separate).process_records(records)


def run_pipeline(
        input_path: Path,
        carrier: str,
        separate: bool = False,
        output_dir: Path = Path("."),
        delimiter: str = ",",
) -> Path:
    if not input_path.exists():
        raise FileNotFoundError(f"Schedule dump {input_path} not found.")
    logging.info(f"Loading schedule dump {input_path}")
    records = convert_payload(input_path.read_text(encoding="utf-8"), separate=separate)

    # nothing is written unless the whole batch converted
    buffer = io.StringIO()
    rows = write_schedule_csv(records, buffer, delimiter=delimiter)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / build_csv_filename(carrier)
    output_path.write_text(buffer.getvalue(), encoding="utf-8", newline="")
    logging.info(f"{rows} rows written to {output_path}")
    return output_path


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Flight schedule CSV export")
    p.add_argument("--input", type=Path, default=settings.schedule_json, help="Schedule JSON dump from the fetcher")
    p.add_argument("--carrier", default=settings.carrier, help="Two-letter carrier code used in the file name")
    p.add_argument("--separate", action="store_true", default=settings.separate_days,
                   help="Split multi-day entries into one row per weekday before merging")
    p.add_argument("--output-dir", type=Path, default=settings.output_dir)
    p.add_argument("--delimiter", default=settings.csv_delimiter)
    p.add_argument("--log-level", default=settings.log_level)
    p.add_argument("--log-file", type=Path, default=settings.log_file, help="Also write the log to this file")
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level, log_file=args.log_file)

    mode = "separated" if args.separate else "compact"
    logging.info(f"Exporting {args.carrier} schedule from {args.input} ({mode} mode)")
    try:
        output = run_pipeline(
            input_path=args.input,
            carrier=args.carrier,
            separate=args.separate,
            output_dir=args.output_dir,
            delimiter=args.delimiter,
        )
    except Exception:  # noqa: BLE001
        logging.exception("Schedule export failed")
        return 1
    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())

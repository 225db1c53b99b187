"""Configuration utilities.

Central place to load environment driven settings (input dump, output directory, defaults).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


@dataclass(slots=True)
class Settings:
    schedule_json: Path = Path(os.getenv("SCHEDULE_JSON", "schedules.json"))
    output_dir: Path = Path(os.getenv("OUTPUT_DIR", "."))
    carrier: str = os.getenv("CARRIER", "LH")
    separate_days: bool = _env_flag("SEPARATE_DAYS")
    csv_delimiter: str = os.getenv("CSV_DELIMITER", ",")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Path | None = Path(os.environ["LOG_FILE"]) if os.getenv("LOG_FILE") else None


settings = Settings()

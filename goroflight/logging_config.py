import logging
import sys
from pathlib import Path

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class _ColoredFormatter(logging.Formatter):
    _COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    _RESET = '\033[0m'
    _BOLD = '\033[1m'

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        # the record is shared with other handlers (e.g. the log file)
        plain = record.levelname
        record.levelname = f"{color}{self._BOLD}{plain}{self._RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def setup_logging(level: int | str = logging.INFO, log_file: Path | None = None) -> None:
    """Console logging (coloured on a TTY) plus an optional plain-text log file."""
    level = _resolve_level(level)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        _ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        if sys.stdout.isatty()
        else logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    )
    handlers: list[logging.Handler] = [console]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        root_logger.addHandler(handler)

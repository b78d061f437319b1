"""
UroStrat logging setup.

Classification, scheduling and the API all log through the root logger
configured here: one console line per record (UTC timestamp, level, module),
plus an optional plain-text log file set by UROSTRAT_LOG_FILE.
"""
import logging
import sys
from typing import Optional
from datetime import datetime, timezone

FILE_LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'

_ANSI_RESET = '\033[0m'
LEVEL_COLORS = {
    'DEBUG': '\033[36m',     # Cyan
    'INFO': '\033[32m',      # Green
    'WARNING': '\033[33m',   # Yellow
    'ERROR': '\033[31m',     # Red
    'CRITICAL': '\033[35m',  # Magenta
}


class StructuredFormatter(logging.Formatter):
    """
    Console formatter: `[<utc iso time>] LEVEL    [module] message`.

    Level colours are applied only when writing to a terminal, so piped
    output and captured test logs stay free of escape codes.
    """

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        record.timestamp = datetime.now(timezone.utc).isoformat()

        line = f"[{record.timestamp}] {record.levelname:8} [{record.name}] {record.getMessage()}"
        if self.use_color and record.levelname in LEVEL_COLORS:
            line = f"{LEVEL_COLORS[record.levelname]}{line}{_ANSI_RESET}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger for the API process.

    Args:
        level: Level name; unknown names fall back to INFO.
        log_file: Optional path that additionally receives every record.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Re-running setup (e.g. app reload) must not duplicate output
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter(use_color=sys.stdout.isatty()))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass `__name__`."""
    return logging.getLogger(name)

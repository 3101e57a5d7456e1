"""Logger setup and coloured error output for console messages."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

COLOR_BLUE = "\033[34m"
COLOR_GREEN = "\033[32m"
COLOR_RED = "\033[31m"
RESET_COLOR = "\033[0m"

_FORMAT = "[%(levelname)s] %(asctime)s %(name)s/(%(process)d:%(thread)d): %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def log_custom_error(message: str, stream: TextIO | None = None) -> None:
    """Write a red-tagged error line to ``stream`` (standard error by default)."""
    target = sys.stderr if stream is None else stream
    target.write(f"{COLOR_RED} ✖️ [CUSTOM ERROR]:{RESET_COLOR} {message}\n")
    target.flush()


def start_logger(path: str | Path, name: str) -> logging.Logger:
    """Create an INFO-level logger writing to ``path`` and to the console.

    Raises ``OSError`` if the log file cannot be opened, after reporting it.
    """
    try:
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError:
        log_custom_error("No se pudo instanciar el nuevo_logger. (Return NULL)")
        raise

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
    file_handler.setFormatter(formatter)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    logger = logging.Logger(name, level=logging.INFO)
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.propagate = False
    return logger


def close_logger(logger: logging.Logger) -> None:
    """Flush and close every handler attached to ``logger``."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
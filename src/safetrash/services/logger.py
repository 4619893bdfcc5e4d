# Filename: logger.py
# Author: Rich Lewis @RichLewis007
# Description: Logging setup for the trash shims. Diagnostics go to stderr in the terse
#              "safe-trash: level: message" form of a Unix tool; a rotating debug log is
#              only written when debugging is requested.

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from platformdirs import PlatformDirs

from .config import APP_NAME, ORG_NAME

PROG_NAME: Final[str] = "safe-trash"
PACKAGE_LOGGER: Final[str] = "safetrash"


class ShimFormatter(logging.Formatter):
    # Render records like rm/git diagnostics: "safe-trash: warning: ...".

    def __init__(self) -> None:
        super().__init__(f"{PROG_NAME}: %(levelname)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = record.levelname.lower()
        return super().format(record)


def _get_log_path() -> Path:
    # Return the path to the rotating debug log, creating folders as needed.
    dirs = PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME)
    path = Path(dirs.user_log_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path / "safe-trash.log"


def configure(*, log_level: str = "WARNING") -> Path | None:
    """Attach shim handlers to the ``safetrash`` logger.

    The console handler writes to stderr at ``log_level``. At DEBUG a rotating
    file handler is added as well, tagging each record with the process id
    since every shim invocation is a separate process. Returns the log file
    path when one is written. Safe to call repeatedly.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ShimFormatter())
    console_handler.setLevel(level)
    package_logger.addHandler(console_handler)

    if level > logging.DEBUG:
        return None

    log_path = _get_log_path()
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=2 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] pid=%(process)d %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    file_handler.setLevel(logging.DEBUG)
    package_logger.addHandler(file_handler)
    return log_path

"""
Logging setup for the service.

The root logger writes to stdout and to a rotating file. Request lines
from ``StructuredLoggingMiddleware`` go to stdout only, without the
usual prefix, since they already carry their own timestamp.
"""

import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
REQUEST_LOGGER = "greeting_api.middleware.structured"
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")

_configured = False


def setup_logging(logfile: str, debug: bool = False) -> None:
    """Configure the root and request loggers once per process.

    Calling it again (e.g. when the app module is re-imported) is a no-op
    so handlers and open log files do not pile up.
    """
    global _configured
    if _configured:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)

    log_path = Path(logfile)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    request_logger = logging.getLogger(REQUEST_LOGGER)
    request_stdout = logging.StreamHandler(sys.stdout)
    request_stdout.setFormatter(logging.Formatter("%(message)s"))
    request_logger.addHandler(request_stdout)
    request_logger.setLevel(logging.INFO)
    request_logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True

"""Structured JSON logging for the wallet client.

Log lines go to stderr as JSON objects so that stdout carries only the
printed responses. Optional file output via the LOG_FILE env var.
"""

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

from wallet_client.config.settings import get_settings

LOGGER_NAME = "wallet_client"

# Set once per CLI invocation by main(); empty outside a run
run_id_var: ContextVar[str] = ContextVar("run_id", default="")


class JSONFormatter(logging.Formatter):
    """One JSON object per line; `log_data` extras become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": run_id_var.get(""),
        }
        if hasattr(record, "log_data"):
            log_entry.update(record.log_data)
        return json.dumps(log_entry, default=str)


def setup_logging() -> None:
    """Attach JSON handlers to the `wallet_client` logger tree.

    Level and optional log file come from LOG_LEVEL and LOG_FILE.
    """
    settings = get_settings()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.handlers.clear()

    formatter = JSONFormatter()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Root handlers would print a second, unformatted copy to stderr
    logger.propagate = False


def get_logger(name: str = "") -> logging.Logger:
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def generate_run_id() -> str:
    return uuid.uuid4().hex[:12]


class CallTimer:
    """Wall-clock duration of a block in milliseconds, read after exit as `elapsed_ms`."""

    def __init__(self):
        self.start_time: float = 0
        self.elapsed_ms: float = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed_ms = round((time.perf_counter() - self.start_time) * 1000, 2)

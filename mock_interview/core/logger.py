import logging
import sys
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from mock_interview.core.config import settings

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

LOG_FORMAT = "%(asctime)s - [%(correlation_id)s] - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class CorrelationIdFilter(logging.Filter):
    """Injects the current request's correlation ID into log records."""

    def filter(self, record):
        correlation_id = correlation_id_var.get()
        record.correlation_id = correlation_id if correlation_id else "N/A"
        return True


def setup_logger(name: str = "mock_interview", log_level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Sets up the package logger with a console handler and, when a log file is
    configured, a rotating file handler.

    Args:
        name: Logger name. Module loggers created with ``__name__`` inherit from it.
        log_level: Level name, defaults to ``settings.log_level``.
        log_file: Path of the rotating log file, defaults to ``settings.log_file``.
    """
    logger = logging.getLogger(name)
    logger.setLevel((log_level or settings.log_level).upper())

    # Prevent adding handlers multiple times
    if logger.handlers:
        return logger

    correlation_filter = CorrelationIdFilter()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(correlation_filter)
    logger.addHandler(console_handler)

    log_path = log_file or settings.log_file
    if log_path:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        # Rotate after 5MB, keep 5 backup files
        file_handler = RotatingFileHandler(log_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.addFilter(correlation_filter)
        logger.addHandler(file_handler)

    return logger


def set_correlation_id(correlation_id: str):
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    return correlation_id_var.get()

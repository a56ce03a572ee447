"""Process-wide logger writing to the console, error.log and combined.log."""
import logging
from pathlib import Path
import sys
from typing import Union

import structlog
from structlog.typing import EventDict, WrappedLogger

SERVICE_NAME = "calculator-microservice"

CONSOLE_FORMAT = "%(levelname)s: %(message)s [%(service)s]"


class ServiceFilter(logging.Filter):
    """Stamp every record with the service name."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = SERVICE_NAME
        return True


def add_service(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["service"] = SERVICE_NAME
    return event_dict


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """
    Build the formatter used by the log files.

    Each line is a JSON object holding ``level``, ``message``, ``service`` and
    ``timestamp``, plus ``exception`` when the record carries exception info.

    :return: Formatter rendering stdlib records as JSON lines
    :rtype: structlog.stdlib.ProcessorFormatter
    """
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_service,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
    )


def build_logger(log_dir: Union[str, Path], level: str = "INFO") -> logging.Logger:
    """
    Configure the service logger once at startup and return it.

    Handlers:
        - console (stdout), human readable
        - ``error.log``, error records only
        - ``combined.log``, every record at or above ``level``

    Log files are opened in append mode and never truncated. Calling this
    again replaces the previous handlers instead of stacking new ones.

    :param log_dir: Directory for the log files, created if absent
    :param str level: Minimum level name for console and combined.log

    :return: Configured logger
    :rtype: logging.Logger
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(SERVICE_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console.addFilter(ServiceFilter())

    error_file = logging.FileHandler(log_path / "error.log", mode="a", encoding="utf-8")
    error_file.setLevel(logging.ERROR)
    error_file.setFormatter(json_formatter())

    combined_file = logging.FileHandler(log_path / "combined.log", mode="a", encoding="utf-8")
    combined_file.setFormatter(json_formatter())

    for handler in (console, error_file, combined_file):
        logger.addHandler(handler)

    return logger

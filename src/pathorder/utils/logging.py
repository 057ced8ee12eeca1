"""Logging utilities for pathorder."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

FILE_HANDLER_NAME = "pathorder-file"
CONSOLE_HANDLER_NAME = "pathorder-console"
_HANDLER_NAMES = {FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME}


@dataclass
class OptimizationStats:
    """Statistics from one optimize() call."""

    feature_count: int = 0
    candidates_evaluated: int = 0
    index_queries: int = 0
    full_scans: int = 0
    obstructed_travels: int = 0
    travel_distance: float = 0.0
    start_time: float | None = None
    end_time: float | None = None

    def start(self) -> None:
        """Mark the beginning of an optimization run."""
        self.start_time = time.perf_counter()

    def finish(self) -> None:
        """Mark the end of an optimization run."""
        self.end_time = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        """Calculate optimization duration in milliseconds."""
        if self.start_time is not None and self.end_time is not None:
            return (self.end_time - self.start_time) * 1000
        return 0.0


def get_logger(name: str = "pathorder") -> structlog.stdlib.BoundLogger:
    """Return a structlog logger for the package."""
    return structlog.get_logger(name)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() in _HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger

"""Logging utilities for linebreak."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ConformanceFailure:
    """A conformance line whose breaks differ from the expectation."""

    line_index: int
    expected: tuple[str, ...]
    actual: tuple[str, ...]


@dataclass
class ConformanceStats:
    """Statistics from a conformance run."""

    passed_count: int = 0
    failed_count: int = 0
    skipped_count: int = 0
    failures: list[ConformanceFailure] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def total_count(self) -> int:
        return self.passed_count + self.failed_count + self.skipped_count

    @property
    def succeeded(self) -> bool:
        return self.failed_count == 0

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        # Replace rather than stack a handler left by an earlier call
        target = os.path.abspath(log_file)
        for handler in list(root_logger.handlers):
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
                root_logger.removeHandler(handler)
                handler.close()

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
    elif not root_logger.handlers:
        # Keeps records away from logging.lastResort (stderr)
        root_logger.addHandler(logging.NullHandler())

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

    logger = structlog.get_logger("linebreak")
    logger.debug("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class ConformanceLogger:
    """Logger for tracking conformance progress and statistics."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        max_reported_failures: int = 20,
    ) -> None:
        self._logger = logger
        self._max_reported_failures = max_reported_failures
        self._stats = ConformanceStats()

    def log_case_passed(self, line_index: int) -> None:
        """Log a passing test line."""
        self._logger.debug("Case passed", line=line_index)
        self._stats.passed_count += 1

    def log_case_skipped(self, line_index: int) -> None:
        """Log a test line skipped as a known tailoring deviation."""
        self._logger.debug("Case skipped", line=line_index, reason="tailoring")
        self._stats.skipped_count += 1

    def log_case_failed(
        self,
        line_index: int,
        expected: tuple[str, ...],
        actual: tuple[str, ...],
    ) -> None:
        """Log a failing test line."""
        self._logger.warning(
            "Case failed",
            line=line_index,
            expected=list(expected),
            actual=list(actual),
        )
        self._stats.failed_count += 1
        if len(self._stats.failures) < self._max_reported_failures:
            self._stats.failures.append(ConformanceFailure(line_index, expected, actual))

    @property
    def stats(self) -> ConformanceStats:
        """Get current conformance statistics."""
        return self._stats

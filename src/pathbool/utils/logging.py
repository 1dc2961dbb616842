"""Logging utilities for Pathbool."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from pathbool.domain import Diagnostics

# Handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class OperationStats:
    """Statistics accumulated over a series of boolean operations."""

    operation_count: int = 0
    degraded_count: int = 0
    error_count: int = 0
    candidate_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    timings_ms: list[float] = field(default_factory=list)

    @property
    def total_ms(self) -> float:
        """Total time spent in completed operations."""
        return sum(self.timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(console_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

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

    logger = structlog.get_logger("pathbool")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class OperationLogger:
    """Logger for tracking boolean operations and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OperationStats()

    def log_operation_start(self, operation: str, curves_a: int, curves_b: int) -> None:
        """Log start of a boolean operation."""
        self._logger.debug(
            "Operation started",
            operation=operation,
            curves_a=curves_a,
            curves_b=curves_b,
        )

    def log_intersections(
        self,
        operation: str,
        candidates: int,
        coincident_pairs: int,
        nodes_visited: int,
    ) -> None:
        """Log the outcome of the intersection search."""
        self._logger.debug(
            "Intersection search finished",
            operation=operation,
            candidates=candidates,
            coincident_pairs=coincident_pairs,
            nodes_visited=nodes_visited,
        )
        self._stats.candidate_count += candidates

    def log_operation_complete(self, diagnostics: Diagnostics) -> None:
        """Log a finished operation, warning when its result is degraded."""
        self._logger.info(
            "Operation complete",
            operation=diagnostics.operation.value,
            contours=diagnostics.contour_count,
            selected=diagnostics.selected_count,
            duration_ms=round(diagnostics.elapsed_ms, 2),
        )
        self._stats.operation_count += 1
        self._stats.timings_ms.append(diagnostics.elapsed_ms)

        if diagnostics.degraded:
            self._logger.warning(
                "Operation result is degraded",
                operation=diagnostics.operation.value,
                open_contours=diagnostics.open_contour_count,
                truncated=diagnostics.truncated,
                overlap_pairs=diagnostics.overlap_pairs,
                discarded_fragments=diagnostics.discarded_fragments,
            )
            self._stats.degraded_count += 1

    def log_operation_error(
        self,
        operation: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log a failed operation."""
        self._logger.error(
            "Operation failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((operation, str(error)))

    @property
    def stats(self) -> OperationStats:
        """Get accumulated operation statistics."""
        return self._stats

"""Error reporters: sinks for faults caught at isolation boundaries.

Detection never re-raises a per-class or per-stage fault. The fault is
classified, handed to a reporter, and detection continues. Reporters are
fire-and-forget: nothing they do changes the detection result.

Verbosity is fixed at construction time (AnalysisConfig.verbose),
never read from the environment.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from beanwire.domain.exceptions import DetectionError
    from beanwire.domain.model.configuration import AnalysisConfig
    from beanwire.domain.ports.error_reporter import ErrorReporterProtocol

logger = logging.getLogger(__name__)


def format_context(context: Mapping[str, object]) -> str:
    """Render context fields as key=value pairs, sorted by key."""
    return ", ".join(f"{key}={value!r}" for key, value in sorted(context.items()))


class LoggingErrorReporter:
    """Reports faults through the standard logging module.

    Every fault is logged at ERROR with its context fields.
    When verbose, the traceback of the original exception is logged at DEBUG.
    """

    __slots__ = ("_logger", "_verbose")

    def __init__(
        self,
        verbose: bool = False,
        log: logging.Logger | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            verbose: Also log tracebacks (default quiet)
            log: Logger to use, module logger if None
        """
        self._verbose = verbose
        self._logger = log or logger

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> LoggingErrorReporter:
        """Create reporter honoring config.verbose."""
        return cls(verbose=config.verbose)

    @property
    def verbose(self) -> bool:
        """Tracebacks are logged."""
        return self._verbose

    def report(self, error: DetectionError, **context: object) -> None:
        """Log fault with context."""
        details = format_context(context)
        self._logger.error(
            "%s: %s%s",
            type(error).__name__,
            error,
            f" [{details}]" if details else "",
        )

        if self._verbose:
            original = error.cause or error
            self._logger.debug(
                "Traceback for %s",
                type(error).__name__,
                exc_info=(type(original), original, original.__traceback__),
            )


@dataclass(frozen=True, slots=True)
class ReportedError:
    """One captured report.

    Attributes:
        error: Reported fault
        context: Context fields passed with it
    """

    error: DetectionError
    context: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def message(self) -> str:
        """Error message."""
        return str(self.error)


class CollectingErrorReporter:
    """Keeps every report in memory, optionally forwarding it.

    Used by the orchestrator to attach error messages to a FileAnalysis,
    and by callers that want to inspect faults after a run.

    Thread Safety:
        _lock protects _reports; a host may run detectors in parallel.
    """

    __slots__ = ("_delegate", "_lock", "_reports")

    def __init__(self, delegate: ErrorReporterProtocol | None = None) -> None:
        """Initialize collector.

        Args:
            delegate: Reporter that also receives every report (e.g., logging)
        """
        self._delegate = delegate
        self._lock = threading.Lock()
        self._reports: list[ReportedError] = []

    def report(self, error: DetectionError, **context: object) -> None:
        """Record fault, then forward to delegate."""
        with self._lock:
            self._reports.append(ReportedError(error, MappingProxyType(dict(context))))

        if self._delegate is not None:
            self._delegate.report(error, **context)

    @property
    def reports(self) -> tuple[ReportedError, ...]:
        """Snapshot of captured reports, in report order."""
        with self._lock:
            return tuple(self._reports)

    @property
    def messages(self) -> tuple[str, ...]:
        """Messages of captured reports."""
        return tuple(r.message for r in self.reports)

    @property
    def count(self) -> int:
        """Number of captured reports."""
        with self._lock:
            return len(self._reports)

    def clear(self) -> None:
        """Drop captured reports."""
        with self._lock:
            self._reports.clear()

    def drain(self, start: int = 0) -> tuple[ReportedError, ...]:
        """Remove and return reports captured from index start on.

        Args:
            start: Count of reports to keep (e.g., count before a run)

        Returns:
            Removed reports, in report order
        """
        with self._lock:
            drained = tuple(self._reports[start:])
            del self._reports[start:]
        return drained

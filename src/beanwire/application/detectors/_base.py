"""Base detector class for injection detection strategies.

Provides default implementation of DetectorProtocol plus the batch
entry point. Concrete detectors inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

from beanwire.application.detectors._template import detect_all
from beanwire.infrastructure.error_reporting import LoggingErrorReporter

if TYPE_CHECKING:
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.configuration import AnalysisConfig
    from beanwire.domain.model.injection import InjectionInfo
    from beanwire.domain.ports.error_reporter import ErrorReporterProtocol
    from beanwire.domain.ports.source_text import DocumentSourceProtocol


class BaseDetector(ABC):
    """Base class for detectors implementing DetectorProtocol.

    Concrete detectors must:
    1. Set `name` class attribute
    2. Implement `detect_for_class()` method
    3. Optionally override `from_config()` when they need more collaborators

    Example:
        class QualifierDetector(BaseDetector):
            name = "QualifierDetector"

            def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
                # ... detection logic ...
                return tuple(injections)
    """

    name: str
    """Detector name used in error context."""

    def __init__(self, reporter: ErrorReporterProtocol | None = None) -> None:
        """Initialize detector.

        Args:
            reporter: Receives caught faults, logging reporter if None
        """
        self._reporter = reporter if reporter is not None else LoggingErrorReporter()

    @property
    def reporter(self) -> ErrorReporterProtocol:
        """Error reporter used by this detector."""
        return self._reporter

    @abstractmethod
    def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        """Detect injection points declared by one class.

        Args:
            class_facts: Class to analyze (never None)

        Returns:
            Injection points in source declaration order
        """

    def detect_all_injections(self, classes: object) -> tuple[InjectionInfo, ...]:
        """Run this detector over a batch of classes.

        Args:
            classes: List or tuple of ClassFacts

        Returns:
            Injections of all classes; faults are reported, never raised
        """
        return detect_all(self, classes, self._reporter)

    @classmethod
    def from_config(
        cls,
        config: AnalysisConfig,
        reporter: ErrorReporterProtocol,
        documents: DocumentSourceProtocol | None = None,
    ) -> Self:
        """Create detector from config.

        Default: only the reporter is used.

        Args:
            config: Engine configuration
            reporter: Error reporter shared by all detectors
            documents: Open document text (field position fallback only)

        Returns:
            Detector instance
        """
        return cls(reporter)

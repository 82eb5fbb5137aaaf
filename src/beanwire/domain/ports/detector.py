"""Detector protocol for injection detection strategies.

Users extend beanwire by implementing this Protocol.
The shared driver (detect_all) supplies validation, isolation
and aggregation; a strategy only knows how to handle one class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.injection import InjectionInfo


class DetectorProtocol(Protocol):
    """Contract for injection detection strategies.

    Strategies are stateless: same ClassFacts in, same injections out.
    They may raise; the driver isolates the fault to the failing class.

    Example:
        class QualifierDetector:
            name = "QualifierDetector"

            def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
                injections: list[InjectionInfo] = []
                # ... detection logic ...
                return tuple(injections)
    """

    name: str
    """Detector name used in error context."""

    def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        """Detect injection points declared by one class.

        Args:
            class_facts: Class to analyze (never None)

        Returns:
            Injection points in source declaration order
        """
        ...

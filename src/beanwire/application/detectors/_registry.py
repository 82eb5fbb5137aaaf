"""Detector registry for injection detectors.

Central registry of all detectors with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from beanwire.application.detectors._base import BaseDetector
from beanwire.application.detectors.bean_method_detector import BeanMethodInjectionDetector
from beanwire.application.detectors.constructor_detector import ConstructorInjectionDetector
from beanwire.application.detectors.field_detector import FieldInjectionDetector
from beanwire.application.detectors.lombok_detector import LombokInjectionDetector
from beanwire.application.detectors.setter_detector import SetterInjectionDetector

if TYPE_CHECKING:
    from beanwire.domain.model.configuration import AnalysisConfig
    from beanwire.domain.ports.error_reporter import ErrorReporterProtocol
    from beanwire.domain.ports.source_text import DocumentSourceProtocol


# Registry - tuple for immutability
# Order matters: per-class results follow this order
_ALL_DETECTORS: tuple[type[BaseDetector], ...] = (
    FieldInjectionDetector,
    ConstructorInjectionDetector,
    SetterInjectionDetector,
    LombokInjectionDetector,
    BeanMethodInjectionDetector,
)


def default_detectors(
    config: AnalysisConfig,
    reporter: ErrorReporterProtocol,
    documents: DocumentSourceProtocol | None = None,
) -> tuple[BaseDetector, ...]:
    """Instantiate every detector in invocation order.

    Args:
        config: Engine configuration
        reporter: Error reporter shared by all detectors
        documents: Open document text for the field position fallback

    Returns:
        Tuple of detectors
    """
    return tuple(
        detector_cls.from_config(config, reporter, documents) for detector_cls in _ALL_DETECTORS
    )

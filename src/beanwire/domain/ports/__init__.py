"""Domain ports (Protocols) for external collaborators and strategies."""

from beanwire.domain.ports.detector import DetectorProtocol
from beanwire.domain.ports.error_reporter import ErrorReporterProtocol
from beanwire.domain.ports.source_text import (
    DocumentSourceProtocol,
    FieldPositionFinderProtocol,
)

__all__ = [
    "DetectorProtocol",
    "DocumentSourceProtocol",
    "ErrorReporterProtocol",
    "FieldPositionFinderProtocol",
]

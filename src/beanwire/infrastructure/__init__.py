"""Infrastructure adapters for domain ports.

- LoggingErrorReporter / CollectingErrorReporter: ErrorReporterProtocol
- InMemoryDocumentSource: DocumentSourceProtocol
- TextFieldPositionFinder: FieldPositionFinderProtocol
"""

from beanwire.infrastructure.error_reporting import (
    CollectingErrorReporter,
    LoggingErrorReporter,
    ReportedError,
    format_context,
)
from beanwire.infrastructure.source_text import InMemoryDocumentSource, TextFieldPositionFinder

__all__ = [
    "CollectingErrorReporter",
    "InMemoryDocumentSource",
    "LoggingErrorReporter",
    "ReportedError",
    "TextFieldPositionFinder",
    "format_context",
]

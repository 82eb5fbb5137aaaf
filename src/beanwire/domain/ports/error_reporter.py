"""Error reporter protocol.

Fire-and-forget sink for faults caught at isolation boundaries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from beanwire.domain.exceptions import DetectionError


class ErrorReporterProtocol(Protocol):
    """Contract for error reporting collaborators.

    The return value is ignored: reporting never changes control flow.
    Implementations must not raise.
    """

    def report(self, error: DetectionError, **context: object) -> None:
        """Report a caught fault.

        Args:
            error: Classified fault
            **context: Free-form fields (detector, class_name, file, ...)
        """
        ...

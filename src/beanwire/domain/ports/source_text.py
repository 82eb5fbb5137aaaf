"""Source text protocols.

Used only by the field position fallback, when the extractor
supplied no structural position for a field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from beanwire.domain.model.position import Position


class DocumentSourceProtocol(Protocol):
    """Already-open document text, keyed by file identity.

    Reads are synchronous and in-memory: never touches the file system.
    """

    def get_lines(self, file: str) -> Sequence[str] | None:
        """Get document lines.

        Args:
            file: Source file identity

        Returns:
            Lines without terminators, None if the document is not open
        """
        ...


class FieldPositionFinderProtocol(Protocol):
    """Textual search locating a field declaration."""

    def find_field_position(
        self,
        field_name: str,
        field_type: str,
        lines: Sequence[str],
    ) -> Position | None:
        """Locate field declaration in source lines.

        Args:
            field_name: Declared field name
            field_type: Declared field type
            lines: Document lines

        Returns:
            Position of the field name, None if not found
        """
        ...

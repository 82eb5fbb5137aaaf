"""Textual fallbacks over already-open documents.

Used only when the structure extractor gave a field no position.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING

from beanwire.domain.exceptions import PositionCalculationError
from beanwire.domain.model.configuration import AnalysisConfig
from beanwire.domain.model.position import Position

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class InMemoryDocumentSource:
    """Document lines keyed by file identity.

    Immutable snapshot: text is split once at construction.
    """

    __slots__ = ("_documents",)

    def __init__(self, documents: Mapping[str, str] | None = None) -> None:
        """Initialize from file identity → full document text.

        Raises:
            TypeError: If a document text is not str (FAIL-FIRST)
        """
        lines: dict[str, tuple[str, ...]] = {}
        for file, text in (documents or {}).items():
            if not isinstance(text, str):
                raise TypeError(f"document text for {file!r} must be str, got {type(text).__name__}")
            lines[file] = tuple(text.splitlines())
        self._documents = MappingProxyType(lines)

    def get_lines(self, file: str) -> Sequence[str] | None:
        """Get document lines, None if the document is not open."""
        return self._documents.get(file)

    def __contains__(self, file: object) -> bool:
        """Check if document is open."""
        return file in self._documents


class TextFieldPositionFinder:
    """Locates a field by scanning for its injection marker.

    Algorithm:
        1. Find each line containing the marker (default "@Autowired")
        2. Check the following lines inside the lookahead window
        3. First line matching `<type> <name>` wins; column of the name is returned

    The window counts the marker line itself, so the default of 5
    inspects the 4 lines after the marker.
    """

    __slots__ = ("_marker", "_window")

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        config = config or AnalysisConfig()
        self._marker = config.field_injection_marker
        self._window = config.max_field_search_lines

    def find_field_position(
        self,
        field_name: str,
        field_type: str,
        lines: Sequence[str],
    ) -> Position | None:
        """Locate field declaration following an injection marker.

        Args:
            field_name: Declared field name
            field_type: Declared field type (generic types allowed)
            lines: Document lines

        Returns:
            Position of the field name, None if not found

        Raises:
            PositionCalculationError: If name or type is empty (FAIL-FIRST)
        """
        if not field_name or not field_type:
            raise PositionCalculationError(
                "field name and type must not be empty",
                f"{field_type} {field_name}",
            )

        pattern = re.compile(rf"\b{re.escape(field_type)}\s+{re.escape(field_name)}\b")

        for index, line in enumerate(lines):
            if self._marker not in line:
                continue

            stop = min(index + self._window, len(lines))
            for next_index in range(index + 1, stop):
                candidate = lines[next_index]
                if not pattern.search(candidate):
                    continue
                column = candidate.find(field_name)
                if column >= 0:
                    return Position(next_index, column)

        return None

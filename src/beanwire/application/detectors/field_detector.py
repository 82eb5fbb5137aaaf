"""Field injection detector.

Detects @Autowired fields. Position resolution order:
    1. Field's structural position
    2. Textual fallback search over the open document
    3. Class position
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from beanwire.application.detectors._base import BaseDetector
from beanwire.domain.exceptions import PositionCalculationError
from beanwire.domain.model.enums import AnnotationKind, InjectionKind
from beanwire.domain.model.injection import InjectionInfo
from beanwire.domain.model.position import Range
from beanwire.infrastructure.source_text import TextFieldPositionFinder

if TYPE_CHECKING:
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.configuration import AnalysisConfig
    from beanwire.domain.model.field import FieldFacts
    from beanwire.domain.model.position import Position
    from beanwire.domain.ports.error_reporter import ErrorReporterProtocol
    from beanwire.domain.ports.source_text import (
        DocumentSourceProtocol,
        FieldPositionFinderProtocol,
    )


class FieldInjectionDetector(BaseDetector):
    """Emits one FIELD injection per @Autowired field.

    Range is a single-line span over the field name,
    starting at the resolved position.
    """

    name = "FieldInjectionDetector"

    def __init__(
        self,
        reporter: ErrorReporterProtocol | None = None,
        documents: DocumentSourceProtocol | None = None,
        finder: FieldPositionFinderProtocol | None = None,
    ) -> None:
        """Initialize detector.

        Args:
            reporter: Receives caught faults
            documents: Open document text, fallback search disabled if None
            finder: Textual field locator, TextFieldPositionFinder if None
        """
        super().__init__(reporter)
        self._documents = documents
        self._finder = finder if finder is not None else TextFieldPositionFinder()

    @classmethod
    def from_config(
        cls,
        config: AnalysisConfig,
        reporter: ErrorReporterProtocol,
        documents: DocumentSourceProtocol | None = None,
    ) -> Self:
        """Create detector with a finder honoring the search window."""
        return cls(reporter, documents, TextFieldPositionFinder(config))

    def detect_for_class(self, class_facts: ClassFacts) -> tuple[InjectionInfo, ...]:
        """Detect @Autowired fields of one class."""
        injections: list[InjectionInfo] = []

        for field_facts in class_facts.fields:
            if field_facts is None or not field_facts.has_annotation(AnnotationKind.AUTOWIRED):
                continue

            position = self.resolve_field_position(field_facts, class_facts)
            injections.append(
                InjectionInfo(
                    target_type=field_facts.type,
                    target_name=field_facts.name,
                    kind=InjectionKind.FIELD,
                    position=position,
                    range=Range.at(position, len(field_facts.name)),
                )
            )

        return tuple(injections)

    def resolve_field_position(self, field_facts: FieldFacts, class_facts: ClassFacts) -> Position:
        """Resolve where a field injection points to.

        Args:
            field_facts: Injected field
            class_facts: Declaring class (last-resort position)

        Returns:
            Field position, fallback search hit, or class position
        """
        if field_facts.position is not None:
            return field_facts.position

        found = self._search_source(field_facts, class_facts)
        if found is not None:
            return found

        return class_facts.position

    def _search_source(self, field_facts: FieldFacts, class_facts: ClassFacts) -> Position | None:
        """Run textual fallback; faults are reported and mean "not found"."""
        if self._documents is None:
            return None

        try:
            lines = self._documents.get_lines(class_facts.file)
            if lines is None:
                return None
            return self._finder.find_field_position(field_facts.name, field_facts.type, lines)
        except Exception as e:
            error = (
                e
                if isinstance(e, PositionCalculationError)
                else PositionCalculationError(
                    f"field position search failed: {e}",
                    f"{field_facts.type} {field_facts.name}",
                    cause=e,
                )
            )
            self._reporter.report(
                error,
                detector=self.name,
                class_name=class_facts.name,
                field_name=field_facts.name,
                file=class_facts.file,
            )
            return None

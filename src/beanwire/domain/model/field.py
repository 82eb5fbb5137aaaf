"""Field value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanwire.domain.model.annotation import find_annotation

if TYPE_CHECKING:
    from beanwire.domain.model.annotation import Annotation
    from beanwire.domain.model.enums import AnnotationKind, Visibility
    from beanwire.domain.model.position import Position, Range


@dataclass(frozen=True, slots=True)
class FieldFacts:
    """Java field declaration.

    Attributes:
        name: Field name
        type: Declared type as written
        annotations: Applied annotations, in source order
        is_final: Declared final
        is_static: Declared static
        position: Source position of the declaration, None if unavailable
        range: Source span of the declaration, None if unavailable
        visibility: Access level, None if the extractor did not report it
    """

    name: str
    type: str
    annotations: tuple[Annotation, ...] = ()
    is_final: bool = False
    is_static: bool = False
    position: Position | None = None
    range: Range | None = None
    visibility: Visibility | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("field name must not be empty")
        if not self.type:
            raise ValueError("field type must not be empty")

    def has_annotation(self, kind: AnnotationKind) -> bool:
        """Check if field carries annotation of given kind."""
        return find_annotation(self.annotations, kind) is not None

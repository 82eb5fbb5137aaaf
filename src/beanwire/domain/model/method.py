"""Method value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanwire.domain.model.annotation import find_annotation

if TYPE_CHECKING:
    from beanwire.domain.model.annotation import Annotation
    from beanwire.domain.model.enums import AnnotationKind
    from beanwire.domain.model.parameter import Parameter
    from beanwire.domain.model.position import Position, Range


@dataclass(frozen=True, slots=True)
class MethodFacts:
    """Java method declaration.

    Attributes:
        name: Method name
        return_type: Declared return type, None if the extractor could not read it
        parameters: Parameters in declaration order
        annotations: Applied annotations, in source order
        is_setter_method: Classified as a setter by the extractor
        position: Source position of the declaration
        range: Source span of the declaration
    """

    name: str
    return_type: str | None = None
    parameters: tuple[Parameter, ...] = ()
    annotations: tuple[Annotation, ...] = ()
    is_setter_method: bool = False
    position: Position | None = None
    range: Range | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")

    def has_annotation(self, kind: AnnotationKind) -> bool:
        """Check if method carries annotation of given kind."""
        return find_annotation(self.annotations, kind) is not None

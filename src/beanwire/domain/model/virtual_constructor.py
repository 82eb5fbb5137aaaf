"""Virtual (compiler-generated) constructor value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanwire.domain.model.enums import AnnotationKind, Visibility

if TYPE_CHECKING:
    from beanwire.domain.model.parameter import Parameter
    from beanwire.domain.model.position import Position, Range

LOMBOK_CONSTRUCTOR_KINDS = frozenset(
    {
        AnnotationKind.LOMBOK_REQUIRED_ARGS_CONSTRUCTOR,
        AnnotationKind.LOMBOK_ALL_ARGS_CONSTRUCTOR,
    }
)


@dataclass(frozen=True, slots=True)
class VirtualConstructor:
    """Constructor that never appears in source, synthesized by Lombok.

    Position and range are inherited from the enclosing class.

    Attributes:
        parameters: Simulated parameter list
        annotation_kind: Lombok annotation that produced the constructor
        visibility: Access level from the annotation's access parameter
        position: Enclosing class position
        range: Enclosing class range
        is_virtual: Always True
    """

    parameters: tuple[Parameter, ...]
    annotation_kind: AnnotationKind
    visibility: Visibility
    position: Position
    range: Range
    is_virtual: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.annotation_kind not in LOMBOK_CONSTRUCTOR_KINDS:
            raise ValueError(
                f"annotation_kind must be a Lombok constructor annotation, got {self.annotation_kind}"
            )
        if not self.is_virtual:
            raise ValueError("virtual constructor must have is_virtual=True")

    @property
    def annotation_source(self) -> str:
        """Simple name of the producing annotation (e.g., "RequiredArgsConstructor")."""
        return self.annotation_kind.value

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Parameter names in simulated order."""
        return tuple(p.name for p in self.parameters)

"""Annotation value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from beanwire.domain.model.enums import AnnotationKind

if TYPE_CHECKING:
    from beanwire.domain.model.position import Position


@dataclass(frozen=True, slots=True)
class Annotation:
    """Java annotation applied to class, field, method or constructor.

    Attributes:
        name: Simple annotation name as written (e.g., "Autowired")
        kind: Recognized kind, UNKNOWN for annotations outside the closed set
        parameters: Annotation parameter name → raw string value
            (e.g., {"value": '"userService"'}). Order is irrelevant.
        position: Source position, None if the extractor had none
    """

    name: str
    kind: AnnotationKind = AnnotationKind.UNKNOWN
    parameters: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    position: Position | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("annotation name must not be empty")
        if self.kind is None:
            raise TypeError("kind must not be None")
        if not isinstance(self.parameters, MappingProxyType):
            # frozen dataclass: bypass __setattr__ to store read-only view
            object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @classmethod
    def of(cls, name: str, /, **parameters: str) -> Annotation:
        """Create annotation with kind derived from its name.

        Example:
            Annotation.of("Service", value='"userService"')
        """
        return cls(name=name, kind=AnnotationKind.from_name(name), parameters=parameters)

    def get(self, key: str) -> str | None:
        """Get parameter value by name, None if absent."""
        return self.parameters.get(key)

    def has_parameter(self, key: str) -> bool:
        """Check if parameter is present."""
        return key in self.parameters


def find_annotation(
    annotations: tuple[Annotation, ...] | None,
    kind: AnnotationKind,
) -> Annotation | None:
    """Find first annotation of given kind.

    Args:
        annotations: Annotations to search (None treated as empty)
        kind: Kind to look for

    Returns:
        First matching annotation or None
    """
    if not annotations:
        return None
    for annotation in annotations:
        if annotation is not None and annotation.kind is kind:
            return annotation
    return None

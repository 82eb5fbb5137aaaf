"""Class entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanwire.domain.model.annotation import find_annotation

if TYPE_CHECKING:
    from beanwire.domain.model.annotation import Annotation
    from beanwire.domain.model.constructor import ConstructorFacts
    from beanwire.domain.model.enums import AnnotationKind
    from beanwire.domain.model.field import FieldFacts
    from beanwire.domain.model.method import MethodFacts
    from beanwire.domain.model.position import Position, Range


@dataclass(frozen=True, slots=True)
class ClassFacts:
    """Java class as reported by the upstream structure extractor.

    Field, method and constructor tuples keep declaration order:
    Lombok constructor simulation depends on it.

    Attributes:
        name: Simple class name
        fully_qualified_name: package.Name (equals name for the default package)
        file: Source file identity (path or URI) the class was read from
        position: Position of the class declaration
        range: Span of the class declaration
        package: Package name, None for the default package
        annotations: Class-level annotations, in source order
        fields: Declared fields
        methods: Declared methods
        constructors: Hand-written constructors
        interfaces: Implemented interface names
        imports: Import statements of the enclosing file
    """

    name: str
    fully_qualified_name: str
    file: str
    position: Position
    range: Range
    package: str | None = None
    annotations: tuple[Annotation, ...] = ()
    fields: tuple[FieldFacts, ...] = ()
    methods: tuple[MethodFacts, ...] = ()
    constructors: tuple[ConstructorFacts, ...] = ()
    interfaces: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")

        if not self.fully_qualified_name:
            raise ValueError("fully_qualified_name must not be empty")

        if not self.fully_qualified_name.endswith(self.name):
            raise ValueError(
                f"fully_qualified_name '{self.fully_qualified_name}' must end with name '{self.name}'"
            )

        if self.position is None:
            raise TypeError("position must not be None")
        if self.range is None:
            raise TypeError("range must not be None")

    def find_annotation(self, kind: AnnotationKind) -> Annotation | None:
        """Find first class-level annotation of given kind."""
        return find_annotation(self.annotations, kind)

    def has_annotation(self, kind: AnnotationKind) -> bool:
        """Check if class carries annotation of given kind."""
        return self.find_annotation(kind) is not None

    def find_field(self, name: str, type_: str) -> FieldFacts | None:
        """Find declared field by name and type.

        Args:
            name: Field name
            type_: Declared field type

        Returns:
            First matching field or None. Missing field facts are skipped.
        """
        for field_facts in self.fields:
            if field_facts is None:
                continue
            if field_facts.name == name and field_facts.type == type_:
                return field_facts
        return None

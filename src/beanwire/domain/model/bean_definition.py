"""Bean definition value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanwire.domain.model.enums import AnnotationKind, DefinitionKind
    from beanwire.domain.model.position import Position


@dataclass(frozen=True, slots=True)
class BeanDefinition:
    """Declaration recognized as producing an injectable component.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        name: Canonical bean name
        type: Declared type (simple class name, or factory return type)
        implementation_class: Implementation type (FQN for class beans)
        annotation: Annotation kind that defines the bean
        kind: CLASS for stereotype classes, METHOD for @Bean factory methods
        file: Source file identity
        position: Position of the defining declaration
        interfaces: Interfaces implemented by a class bean
    """

    name: str
    type: str
    implementation_class: str
    annotation: AnnotationKind
    kind: DefinitionKind
    file: str
    position: Position | None
    interfaces: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("bean name must not be empty")
        if not self.type:
            raise ValueError("bean type must not be empty")
        if not self.implementation_class:
            raise ValueError("implementation_class must not be empty")

    @property
    def bean_name(self) -> str:
        """Alias of name."""
        return self.name

    @property
    def class_name(self) -> str:
        """Simple type name without package."""
        return self.type.rsplit(".", 1)[-1]

    @property
    def fully_qualified_name(self) -> str:
        """Alias of implementation_class."""
        return self.implementation_class

    def implements_interface(self, interface: str) -> bool:
        """Check if bean class declares given interface."""
        return interface in self.interfaces

    def __str__(self) -> str:
        """Format as name: implementation (@Annotation)."""
        return f"{self.name}: {self.implementation_class} (@{self.annotation.value})"

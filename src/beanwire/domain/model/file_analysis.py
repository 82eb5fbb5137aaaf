"""Per-file analysis result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanwire.domain.model.enums import InjectionKind

if TYPE_CHECKING:
    from beanwire.domain.model.bean_definition import BeanDefinition
    from beanwire.domain.model.class_ import ClassFacts
    from beanwire.domain.model.injection import InjectionInfo


@dataclass(frozen=True, slots=True)
class FileAnalysis:
    """Beans and injection points found in one source file.

    Attributes:
        file: Source file identity
        classes: Analyzed classes
        bean_definitions: Beans declared in the file
        injections: Injection points, per class in detector order
        errors: Messages of faults reported while analyzing the file
    """

    file: str
    classes: tuple[ClassFacts, ...] = ()
    bean_definitions: tuple[BeanDefinition, ...] = ()
    injections: tuple[InjectionInfo, ...] = ()
    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.file:
            raise ValueError("file must not be empty")

    @property
    def has_errors(self) -> bool:
        """Any fault was reported during analysis."""
        return bool(self.errors)

    def injections_of(self, kind: InjectionKind) -> tuple[InjectionInfo, ...]:
        """Injection points produced by one pattern."""
        return tuple(i for i in self.injections if i.kind is kind)

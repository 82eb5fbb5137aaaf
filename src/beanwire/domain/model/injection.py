"""Injection point value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanwire.domain.model.bean_definition import BeanDefinition
    from beanwire.domain.model.enums import InjectionKind
    from beanwire.domain.model.position import Position, Range


@dataclass(frozen=True, slots=True)
class InjectionInfo:
    """Place where the framework supplies a collaborator.

    resolved_bean and candidate_beans are left unset by the detectors;
    an external resolver fills them in.

    Attributes:
        target_type: Type to inject (never empty)
        target_name: Field or parameter name receiving the collaborator
        kind: Injection pattern that produced this point
        position: Position of the injection point
        range: Span of the injection point
        resolved_bean: Bean chosen by the resolver
        candidate_beans: All beans the resolver considered
    """

    target_type: str
    target_name: str
    kind: InjectionKind
    position: Position
    range: Range
    resolved_bean: BeanDefinition | None = None
    candidate_beans: tuple[BeanDefinition, ...] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target_type:
            raise ValueError("target_type must not be empty")
        if not self.target_name:
            raise ValueError("target_name must not be empty")
        if self.kind is None:
            raise TypeError("kind must not be None")
        if self.position is None:
            raise TypeError("position must not be None")
        if self.range is None:
            raise TypeError("range must not be None")

    def __str__(self) -> str:
        """Format as kind target_type target_name @ position."""
        return f"{self.kind.value} {self.target_type} {self.target_name} @ {self.position}"

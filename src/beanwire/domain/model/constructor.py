"""Constructor value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanwire.domain.model.parameter import Parameter
    from beanwire.domain.model.position import Position, Range


@dataclass(frozen=True, slots=True)
class ConstructorFacts:
    """Hand-written Java constructor.

    Attributes:
        parameters: Parameters in declaration order
        has_autowired_annotation: Marked with @Autowired
        position: Source position of the declaration
        range: Source span of the declaration
    """

    parameters: tuple[Parameter, ...] = ()
    has_autowired_annotation: bool = False
    position: Position | None = None
    range: Range | None = None

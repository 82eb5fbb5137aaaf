"""Constructor/method parameter value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanwire.domain.model.position import Position, Range


@dataclass(frozen=True, slots=True)
class Parameter:
    """Constructor or method parameter.

    Attributes:
        name: Parameter name
        type: Declared type as written (e.g., "List<User>")
        position: Source position, None if unavailable
        range: Source span, None if unavailable
    """

    name: str
    type: str
    position: Position | None = None
    range: Range | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")
        if not self.type:
            raise ValueError("parameter type must not be empty")

"""Source position value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Exact position in source text.

    Attributes:
        line: Line number (0-based, must be >= 0)
        character: Column number (0-based, must be >= 0)
    """

    line: int
    character: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if self.character < 0:
            raise ValueError(f"character must be >= 0, got {self.character}")

    def is_before(self, other: Position) -> bool:
        """Check if this position comes strictly before other."""
        return self.line < other.line or (
            self.line == other.line and self.character < other.character
        )

    def is_after(self, other: Position) -> bool:
        """Check if this position comes strictly after other."""
        return self.line > other.line or (
            self.line == other.line and self.character > other.character
        )

    def __str__(self) -> str:
        """Format as line:character (1-based line for humans)."""
        return f"{self.line + 1}:{self.character}"


@dataclass(frozen=True, slots=True)
class Range:
    """Span between two positions.

    Attributes:
        start: First position of the span
        end: Position after the span, never before start
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start is None:
            raise TypeError("start must not be None")
        if self.end is None:
            raise TypeError("end must not be None")
        if self.end.is_before(self.start):
            raise ValueError(f"end ({self.end}) must not be before start ({self.start})")

    @classmethod
    def at(cls, position: Position, length: int = 0) -> Range:
        """Create single-line range of given length starting at position.

        Raises:
            ValueError: If length is negative (FAIL-FIRST)
        """
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        return cls(start=position, end=Position(position.line, position.character + length))

    def contains(self, position: Position) -> bool:
        """Check if position lies within [start, end]."""
        return not position.is_before(self.start) and not position.is_after(self.end)

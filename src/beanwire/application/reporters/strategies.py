"""Group strategies for console reporter.

GroupStrategy Protocol defines interface for grouping and rendering injections.
Built-in strategies: ByKindStrategy, ByTargetStrategy.
User can implement custom strategies with same Protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from rich.markup import escape
from rich.table import Table

from beanwire.domain.model.enums import InjectionKind

if TYPE_CHECKING:
    from rich.console import Console

    from beanwire.domain.model.injection import InjectionInfo


class GroupStrategy(Protocol):
    """Protocol for injection grouping and rendering.

    Built-in strategies are NOT special - same interface, same status.
    """

    def group(self, injections: tuple[InjectionInfo, ...]) -> dict[str, list[InjectionInfo]]:
        """Group injections by strategy-specific key.

        Args:
            injections: Injections to group.

        Returns:
            Dict mapping group key to list of injections.
        """
        ...

    def render(self, console: Console, grouped: dict[str, list[InjectionInfo]]) -> None:
        """Render grouped injections to console.

        Args:
            console: Rich console for output.
            grouped: Injections grouped by key.
        """
        ...


@dataclass(frozen=True, slots=True)
class ByKindStrategy:
    """Group injections by InjectionKind (FIELD, CONSTRUCTOR, ...).

    Attributes:
        show_range: Show the span of each injection point.
    """

    show_range: bool = False

    def group(self, injections: tuple[InjectionInfo, ...]) -> dict[str, list[InjectionInfo]]:
        """Group injections by kind."""
        by_kind: dict[str, list[InjectionInfo]] = {}
        for injection in injections:
            by_kind.setdefault(injection.kind.value, []).append(injection)
        return by_kind

    def render(self, console: Console, grouped: dict[str, list[InjectionInfo]]) -> None:
        """Render one table per kind, in InjectionKind order."""
        for kind in InjectionKind:
            injections = grouped.get(kind.value, [])
            if not injections:
                continue

            console.print(f"[bold]{kind.value.upper()} INJECTIONS[/bold] ({len(injections)})")
            table = Table(show_header=True, header_style="bold", box=None)
            table.add_column("Position", style="cyan")
            table.add_column("Type", style="yellow")
            table.add_column("Name")
            if self.show_range:
                table.add_column("Range", style="dim")

            for injection in injections:
                row = [
                    str(injection.position),
                    escape(injection.target_type),
                    escape(injection.target_name),
                ]
                if self.show_range:
                    row.append(f"{injection.range.start}-{injection.range.end}")
                table.add_row(*row)

            console.print(table)
            console.print()


@dataclass(frozen=True, slots=True)
class ByTargetStrategy:
    """Group injections by injected type."""

    def group(self, injections: tuple[InjectionInfo, ...]) -> dict[str, list[InjectionInfo]]:
        """Group injections by target type."""
        by_type: dict[str, list[InjectionInfo]] = {}
        for injection in injections:
            by_type.setdefault(injection.target_type, []).append(injection)
        return by_type

    def render(self, console: Console, grouped: dict[str, list[InjectionInfo]]) -> None:
        """Render injections grouped by target type."""
        for target_type, injections in sorted(grouped.items()):
            console.print(f"[bold]{escape(target_type)}[/bold] ({len(injections)} injections)")
            for injection in injections:
                console.print(
                    f"  {injection.kind.value:18} {escape(injection.target_name)} @ {injection.position}"
                )
            console.print()

"""Console reporter: FileAnalysis → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from beanwire.application.reporters.strategies import ByKindStrategy, GroupStrategy

if TYPE_CHECKING:
    from beanwire.domain.model.enums import InjectionKind
    from beanwire.domain.model.file_analysis import FileAnalysis


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_beans: Show bean definitions table.
        show_errors: Show reported fault messages.
        group_by: Strategy for grouping injections. None = ByKindStrategy().
        include_kinds: Injection kinds to include. None = all kinds.
        width: Console width in characters.
    """

    show_beans: bool = True
    show_errors: bool = True
    group_by: GroupStrategy | None = None
    include_kinds: frozenset[InjectionKind] | None = None
    width: int = 120


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, analysis: FileAnalysis) -> str:
        """Format file analysis as rich formatted string.

        Args:
            analysis: Analysis result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        injections = tuple(
            i
            for i in analysis.injections
            if self._config.include_kinds is None or i.kind in self._config.include_kinds
        )

        self._render_header(console, analysis, len(injections))

        if self._config.show_beans and analysis.bean_definitions:
            self._render_beans(console, analysis)

        strategy = self._config.group_by or ByKindStrategy()
        strategy.render(console, strategy.group(injections))

        if self._config.show_errors and analysis.errors:
            self._render_errors(console, analysis)

        return output.getvalue()

    def report_all(self, analyses: tuple[FileAnalysis, ...]) -> str:
        """Format several file analyses, in order."""
        return "".join(self.report(analysis) for analysis in analyses)

    def _render_header(self, console: Console, analysis: FileAnalysis, injection_count: int) -> None:
        """Render header with summary."""
        console.print()
        console.rule(f"[bold]{escape(analysis.file)}[/bold]")
        console.print()
        console.print(
            f"[bold]Classes:[/bold] {len(analysis.classes)}  "
            f"[bold]Beans:[/bold] {len(analysis.bean_definitions)}  "
            f"[bold]Injections:[/bold] {injection_count}"
        )
        console.print()

    def _render_beans(self, console: Console, analysis: FileAnalysis) -> None:
        """Render bean definitions table."""
        console.print(f"[bold]BEANS[/bold] ({len(analysis.bean_definitions)})")
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Name", style="green")
        table.add_column("Type", style="yellow")
        table.add_column("Annotation")
        table.add_column("Kind", style="dim")
        table.add_column("Position", style="cyan")

        for bean in analysis.bean_definitions:
            table.add_row(
                escape(bean.name),
                escape(bean.type),
                f"@{bean.annotation.value}",
                bean.kind.value,
                str(bean.position) if bean.position is not None else "-",
            )

        console.print(table)
        console.print()

    def _render_errors(self, console: Console, analysis: FileAnalysis) -> None:
        """Render reported fault messages."""
        console.print(f"[bold red]ERRORS[/bold red] ({len(analysis.errors)})")
        console.print()

        for message in analysis.errors:
            console.print(f"  {message}", markup=False)

        console.print()

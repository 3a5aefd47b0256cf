"""Console reporter: expansions → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from optargs.application.reporters._base import describe_call_forms

if TYPE_CHECKING:
    from optargs.domain.model.expansion import Expansion


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_branches: Show the call-form table of each expansion.
        max_branches: Max rows per table. None = unlimited.
        width: Console width in characters.
    """

    show_branches: bool = True
    max_branches: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_branches is not None and self.max_branches < 0:
            raise ValueError(f"max_branches must be >= 0, got {self.max_branches}")


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

    def report(self, expansions: tuple[Expansion, ...]) -> str:
        """Format expansions as rich formatted string.

        Args:
            expansions: Expansions in source order

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, expansions)
        for expansion in expansions:
            self._render_expansion(console, expansion)

        return output.getvalue()

    def _render_header(self, console: Console, expansions: tuple[Expansion, ...]) -> None:
        """Render header with summary."""
        console.print()
        console.rule("[bold]OPTIONAL ARGUMENT EXPANSION[/bold]")
        console.print()
        console.print(
            f"[bold]Declarations:[/bold] {len(expansions)}  "
            f"[bold]Branches:[/bold] {sum(e.branch_count for e in expansions)}"
        )
        console.print()

    def _render_expansion(self, console: Console, expansion: Expansion) -> None:
        """Render one expansion: title line and call-form table."""
        config = expansion.config
        export = "" if config.export else " [dim](not exported)[/dim]"
        console.print(
            f"[yellow]{expansion.declaration.name}[/yellow] → "
            f"[bold]{expansion.name}[/bold] "
            f"[dim]{config.ordering.value}, {config.strategy.value}[/dim]{export}"
        )

        for opt in expansion.signature.optional:
            marker = " [dim](zero value)[/dim]" if opt.implicit else ""
            console.print(f"  {opt.name} = {escape(opt.default)}{marker}")

        if not self._config.show_branches:
            console.print()
            return

        rows = describe_call_forms(expansion)
        shown = rows if self._config.max_branches is None else rows[: self._config.max_branches]

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Call form", style="cyan")
        table.add_column("Expands to")
        for i, (form, target) in enumerate(shown, start=1):
            table.add_row(str(i), escape(form), escape(target))

        console.print(table)
        if len(shown) < len(rows):
            console.print(f"  [dim]... {len(rows) - len(shown)} more[/dim]")
        console.print()

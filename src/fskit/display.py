"""Console output for the fskit command line."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class Display:
    """Formats command results for the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize display.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def show_value(self, value: str) -> None:
        """Print a bare value, e.g. a path, without styling."""
        self.console.print(value, markup=False, highlight=False, soft_wrap=True)

    def show_predicates(self, path: str, results: dict[str, bool]) -> None:
        """Display predicate results for a path.

        Args:
            path: The path that was inspected.
            results: Predicate name to result.
        """
        table = Table(title=escape(path))
        table.add_column("Check", style="cyan")
        table.add_column("Result")

        for name, value in results.items():
            table.add_row(name, "[green]yes[/green]" if value else "[red]no[/red]")

        self.console.print(table)

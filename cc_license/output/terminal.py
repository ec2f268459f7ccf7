"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cc_license.models.result import ResolutionError, ResolutionResult


class TerminalFormatter:
    """Format resolution results for terminal display using Rich.

    Resolved licenses are shown in a table; URLs that failed to parse are
    listed below it in red.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_results(self, results: list[ResolutionResult]) -> None:
        """Display resolution results.

        Args:
            results: Results in the order the URLs were given.
        """
        if not results:
            self._console.print("[yellow]No URLs given[/yellow]")
            return

        resolved = [(r.url, r.license) for r in results if r.license is not None]
        failed = [(r.url, r.error) for r in results if r.error is not None]

        if resolved:
            table = Table(title="Creative Commons Licenses")
            table.add_column("URL", style="cyan", overflow="fold")
            table.add_column("License", style="green", no_wrap=True)
            table.add_column("SPDX", style="magenta", no_wrap=True)
            table.add_column("Description")

            for url, license in resolved:
                spdx = license.spdx_id() or "[yellow]-[/yellow]"
                table.add_row(escape(url), license.short(), spdx, str(license))

            self._console.print(table)

        if failed:
            self._print_failures(failed)

        self._console.print(
            f"\n[bold]Resolved:[/bold] {len(resolved)}/{len(results)}"
        )

    def _print_failures(self, failed: list[tuple[str, ResolutionError]]) -> None:
        self._console.print("")
        self._console.print(f"[bold red]Unresolved URLs ({len(failed)})[/bold red]")
        for url, error in failed:
            self._console.print(
                f"  [red]![/red] {escape(url)} "
                f"([yellow]{error.kind}[/yellow]): {escape(error.message)}",
                highlight=False,
            )

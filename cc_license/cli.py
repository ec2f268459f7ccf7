"""CLI entry point for cc-license."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape

from cc_license import __version__
from cc_license.config import load_resolver
from cc_license.constants import EXIT_ERROR, EXIT_PARSE_FAILURES, EXIT_SUCCESS
from cc_license.exceptions import CCLicenseError
from cc_license.models.result import ResolutionResult
from cc_license.output.results_json import ResultsJsonFormatter
from cc_license.output.terminal import TerminalFormatter
from cc_license.resolver import resolve_urls

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Creative Commons License Resolver - Parse CC license URLs.

    Turns Creative Commons license URLs into their full names,
    rights codes and SPDX identifiers.

    \b
    Examples:
        cc-license parse https://creativecommons.org/licenses/by-sa/4.0/
        cc-license parse --format json URL [URL ...]
    """
    pass


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for results (default: terminal).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.argument("urls", nargs=-1, required=True)
def parse(output_format: str, config_path: str | None, urls: tuple[str, ...]) -> None:
    """Parse one or more Creative Commons license URLs.

    Exits with 0 when every URL resolved and 1 when any did not.

    \b
    Examples:
        cc-license parse https://creativecommons.org/licenses/by-nc/4.0/
        cc-license parse https://creativecommons.org/publicdomain/zero/1.0/
        cc-license parse --format json URL [URL ...]
        cc-license parse --config custom-config.yaml URL
    """
    format_value = output_format.lower()

    try:
        resolver = load_resolver(config_path)
    except CCLicenseError as e:
        _display_error(e, format_value)
        sys.exit(EXIT_ERROR)

    results = resolve_urls(urls, resolver)
    _display_results(results, format_value)

    if all(result.ok for result in results):
        sys.exit(EXIT_SUCCESS)
    sys.exit(EXIT_PARSE_FAILURES)


def _display_results(results: list[ResolutionResult], format_type: str) -> None:
    """Display resolution results in the specified format.

    Args:
        results: The results to display.
        format_type: Output format (terminal, json).
    """
    if format_type == "json":
        click.echo(ResultsJsonFormatter().format_results(results))
    else:
        TerminalFormatter(console=_console).format_results(results)


def _display_error(error: CCLicenseError, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    message = f"Error: {type(error).__name__}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]", highlight=False)
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()

"""
DateGetter CLI - Command Line Interface.
"""

import sys
from typing import Optional

import click
from loguru import logger
from rich.console import Console
from rich.table import Table

from dategetter import __version__
from dategetter.config import get_settings
from dategetter.core.formatter import DateFormatter
from dategetter.dialects import PatternDialect, TOKEN_DIRECTIVES

console = Console()


def _configure_logging(verbose: bool):
    level = "DEBUG" if verbose else get_settings().log_level
    logger.remove()
    logger.add(sys.stderr, level=level)


@click.group()
@click.version_option(version=__version__)
def main():
    """DateGetter - Format timestamps through a format pattern."""
    pass


@main.command(name="format")
@click.option("--pattern", "-p", type=str, default=None, help="Format pattern (defaults to settings)")
@click.option("--at", "-a", type=int, default=None, help="Epoch seconds to format (defaults to now)")
@click.option(
    "--dialect", "-d",
    type=click.Choice([d.value for d in PatternDialect]),
    default=None,
    help="Pattern dialect",
)
@click.option("--tz", "-z", type=str, default=None, help="IANA timezone name")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def format_command(
    pattern: Optional[str],
    at: Optional[int],
    dialect: Optional[str],
    tz: Optional[str],
    verbose: bool,
):
    """Format a timestamp, or the current time."""
    try:
        _configure_logging(verbose)
        formatter = DateFormatter()
        result = formatter.format_date(pattern, at, dialect=dialect, tz=tz)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    
    # Plain output keeps the result pipeable
    click.echo(result)


@main.command()
def tokens():
    """List the tokens of the default pattern dialect."""
    table = Table(title="Pattern Tokens")
    table.add_column("Token", style="cyan")
    table.add_column("strftime", style="green")
    table.add_column("Meaning")
    
    for token, directive, meaning in TOKEN_DIRECTIVES:
        table.add_row(token, directive, meaning)
    
    console.print(table)
    console.print("Wrap literal text in [bold]\\[brackets][/bold] to keep it verbatim.")


if __name__ == "__main__":
    main()

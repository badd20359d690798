"""Output helpers for the CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import GeneratorSettings
from ..parsed_version import ParsedVersion

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(
        f"[red]✗ Error:[/red] {escape(message)}", highlight=False, soft_wrap=True
    )


def version_table(raw: str, version: ParsedVersion) -> Table:
    """Build a table describing a parsed version.

    Args:
        raw: The version string as given.
        version: The parsed version.

    Returns:
        Table with one row per version component.
    """
    table = Table(title=f"Version {raw}")
    table.add_column("Component", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("major", str(version.major))
    table.add_row("minor", str(version.minor))
    table.add_row("micro", str(version.micro))
    table.add_row("snapshot", str(version.is_snapshot).lower())
    return table


def settings_table(settings: GeneratorSettings) -> Table:
    """Build a table of resolved generator settings."""
    table = Table(title="Generator Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name, value in settings.model_dump().items():
        table.add_row(name.replace("_", "-"), str(value))
    return table

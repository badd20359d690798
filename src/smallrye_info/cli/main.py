"""Command-line interface for smallrye-info."""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from .._logging import setup_logging
from ..config import load_settings
from ..exceptions import ConfigError, MalformedVersionError, OutputWriteError
from ..info_generator import InfoExporter
from ..parsed_version import ParsedVersion
from ._helpers import (
    console,
    print_error,
    print_success,
    settings_table,
    version_table,
)

app = typer.Typer(help="Generate static version information classes")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or smallrye-info.toml)",
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", "-V", help="Enable debug logging")
    ] = False,
) -> None:
    """Generate static version information classes."""
    setup_logging("DEBUG" if verbose else "WARNING")


@app.command()
def generate(  # noqa: PLR0913
    spec_version: Annotated[
        str | None,
        typer.Option(..., "--spec-version", "-s", help="Specification version"),
    ] = None,
    impl_version: Annotated[
        str | None,
        typer.Option(
            ...,
            "--impl-version",
            "-i",
            help="Implementation version (default: the project version)",
        ),
    ] = None,
    package_name: Annotated[
        str | None,
        typer.Option(..., "--package", "-p", help="Package of the generated class"),
    ] = None,
    class_name: Annotated[
        str | None,
        typer.Option(..., "--class-name", "-n", help="Name of the generated class"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(..., "--output", "-o", help="Generated sources directory"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Generate the version information class.

    Examples:
        # Use settings from [tool.smallrye-info] in pyproject.toml
        smallrye-info generate

        # Override settings on the command line
        smallrye-info generate -s 2.1 -i 1.4.0-SNAPSHOT -p myapp -o src
    """
    try:
        settings = load_settings(
            config,
            overrides={
                "spec_version": spec_version,
                "implementation_version": impl_version,
                "package_name": package_name,
                "class_name": class_name,
                "source_output": output,
            },
        )
        written = InfoExporter().generate(
            settings.spec_version,
            settings.implementation_version,
            settings.package_name,
            class_name=settings.class_name,
            output_root=settings.source_output,
        )

        print_success(f"Generated {settings.package_name}.{settings.class_name}")
        console.print(f"[dim]Output written to: {written}[/dim]", soft_wrap=True)

    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except MalformedVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except ValidationError as e:
        print_error("Invalid generation request:")
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            console.print(f"  • {field}: {error['msg']}", soft_wrap=True)
        raise typer.Exit(1) from e
    except OutputWriteError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def parse(
    version: Annotated[str, typer.Argument(..., help="Version string to parse")],
) -> None:
    """Show how a version string is parsed."""
    try:
        parsed = ParsedVersion.parse(version)
    except MalformedVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    console.print(version_table(version, parsed))


@app.command(name="config")
def show_config(config: ConfigOption = None) -> None:
    """Show the resolved generator settings."""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    console.print(settings_table(settings))


if __name__ == "__main__":
    app()

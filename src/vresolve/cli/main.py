"""Command-line interface for vresolve."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..exceptions import (
    ConfigError,
    MalformedVersionError,
    VersionConflictError,
)
from ..resolver import all_resolutions, determine_version
from ._helpers import (
    OUTPUT_FORMATS,
    console,
    display,
    parse_argument,
    prepare,
    print_error,
    print_success,
)

app = typer.Typer(help="Resolve semantic versions for versioned artifacts")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or vresolve.toml)",
    ),
]

LogLevelOption = Annotated[
    str | None,
    typer.Option(
        ...,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
]

FormatOption = Annotated[
    str | None,
    typer.Option(
        ...,
        "--format",
        help="Output format (text, json)",
    ),
]


def _output_format(requested: str | None, configured: str) -> str:
    output_format = requested or configured
    if output_format not in OUTPUT_FORMATS:
        print_error(f"Unknown format: {output_format}")
        console.print(f"Supported formats: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)
    return output_format


@app.command()
def resolve(
    requested: Annotated[
        str,
        typer.Argument(..., help="Requested version, partial version, or 'auto'"),
    ] = "auto",
    existing: Annotated[
        str | None,
        typer.Option(
            ...,
            "--existing",
            "-e",
            help="Highest version already on record (default: none)",
        ),
    ] = None,
    format: FormatOption = None,
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Determine the version to assign for a request."""
    try:
        settings = prepare(config, log_level)
        output_format = _output_format(format, settings.output_format)

        requested_ver = parse_argument(requested)
        existing_ver = parse_argument(existing)
        resolved = determine_version(requested_ver, existing_ver)

        if output_format == "json":
            console.print(
                json.dumps(
                    {
                        "requested": str(requested_ver),
                        "existing": str(existing_ver),
                        "resolved": str(resolved),
                    },
                    indent=2,
                )
            )
        else:
            console.print(str(resolved))

    except VersionConflictError as e:
        print_error(f"{e}. Request a different version or a pre-release.")
        raise typer.Exit(1) from e
    except MalformedVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def candidates(
    version: Annotated[str, typer.Argument(..., help="Version to look up")],
    format: FormatOption = None,
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """List the lookup keys for a version, most specific first."""
    try:
        settings = prepare(config, log_level)
        output_format = _output_format(format, settings.output_format)

        keys = all_resolutions(parse_argument(version))

        if output_format == "json":
            console.print(json.dumps([str(key) for key in keys], indent=2))
            return

        title = f"Lookup keys for {str(keys[0]) or '<any>'}"
        table = Table(title=title, min_width=len(title))
        table.add_column("#", style="dim", justify="right")
        table.add_column("Version", style="cyan")

        for rank, key in enumerate(keys, start=1):
            table.add_row(str(rank), display(key))

        console.print(table)
        if keys[0].is_pre_release:
            console.print("[dim]Pre-releases only match exactly.[/dim]")

    except MalformedVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command("inspect")
def inspect_version(
    version: Annotated[str, typer.Argument(..., help="Version to inspect")],
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Show the components of a version."""
    try:
        prepare(config, log_level)
        parsed = parse_argument(version)

        title = f"Version {str(parsed) or '<any>'}"
        table = Table(title=title, min_width=len(title))
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        for field, value in (
            ("major", parsed.major),
            ("minor", parsed.minor),
            ("patch", parsed.patch),
            ("pre-release", parsed.pre_release),
        ):
            table.add_row(field, "-" if value is None else str(value))
        table.add_row("specificity", parsed.specificity.name.lower())

        console.print(table)
        if parsed.is_release:
            print_success(f"{parsed} is a release")

    except MalformedVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

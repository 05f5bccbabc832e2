"""CLI interface for checkpoint using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from checkpoint import __description__, __version__
from checkpoint.config import CheckpointConfig, LogLevel, load_config
from checkpoint.definition import load_data, load_definition
from checkpoint.exceptions import CheckpointError
from checkpoint.form import FormInspector
from checkpoint.inspector import REQUIRED_RULE
from checkpoint.rules import default_factory
from checkpoint.utils.paths import flatten_messages

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="checkpoint",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"checkpoint version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """checkpoint - validate nested data against declarative forms."""


def _configure_logging(config: CheckpointConfig, log_level: Optional[LogLevel]) -> None:
    level = (log_level or config.logging.level).numeric
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("checkpoint").setLevel(level)


@app.command()
def validate(
    data: Annotated[
        Path,
        typer.Argument(help="JSON or YAML file holding the data to validate")
    ],
    form: Annotated[
        Path,
        typer.Option("--form", "-F", help="JSON or YAML form definition (checks, requirements, children)")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .checkpoint.json)")
    ] = None,
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option("--log-level", help="Override the configured log level")
    ] = None,
) -> None:
    """Validate a data file against a form definition."""
    valid_formats = ["table", "json"]

    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        checkpoint_config = load_config(config)
        _configure_logging(checkpoint_config, log_level)

        definition = load_definition(form)
        payload = load_data(data)
        logger.debug(f"Validating {data} against {form}")

        inspector = FormInspector.from_definition(definition, config=checkpoint_config)
        inspector.run(payload)
    except (FileNotFoundError, ValueError, CheckpointError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    messages = flatten_messages(inspector.get_messages())
    count = inspector.count_messages()

    if format == "json":
        typer.echo(jsonlib.dumps({
            "valid": count == 0,
            "count": count,
            "messages": messages
        }, indent=2))
    elif messages:
        table = Table(title=f"{count} validation message(s)")
        table.add_column("Path", style="cyan", no_wrap=True)
        table.add_column("Message", style="white")

        for path, path_messages in messages.items():
            for message in path_messages:
                table.add_row(path, message)

        console.print(table)
    else:
        console.print("[green]No validation messages - data is valid[/green]")

    raise typer.Exit(1 if count else 0)


@app.command()
def rules(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .checkpoint.json)")
    ] = None,
) -> None:
    """List the rules usable by name in form definitions."""
    try:
        checkpoint_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    errors = FormInspector(config=checkpoint_config).errors
    factory = default_factory()

    table = Table(title="Rules")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Message", style="white")

    for name in sorted(errors):
        if not factory.has(name):
            continue
        label = f"{name} (required)" if name == REQUIRED_RULE else name
        table.add_row(label, errors[name])

    console.print(table)


if __name__ == "__main__":
    app()

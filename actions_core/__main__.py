"""
CLI entry point for actions-core.

Serializes a response document from disk so webhook output can be checked
without running a fulfillment server.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from actions_core.config import get_core_settings
from actions_core.errors import SerializationError
from actions_core.io.serializer import ResponseSerializer
from actions_core.schemas.responses import parse_response


cli = typer.Typer(
    name="actions-core",
    help="Serialize conversational responses to webhook JSON",
    add_completion=False,
)

logger = logging.getLogger("actions_core")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure colorful logging using rich library.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        markup=False,
    )
    handler.setLevel(level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%Y-%m-%d %H:%M:%S]",
        handlers=[handler],
        force=True,
    )


@cli.command()
def serialize(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Response document (JSON)"
    ),
    session_id: str = typer.Option("", "--session-id", "-s", help="Dialogflow session id"),
    metadata: Optional[bool] = typer.Option(
        None, "--metadata/--no-metadata", help="Attach library version metadata"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug mode"),
) -> None:
    """Serialize a dialog or direct response document to wire JSON."""
    setup_logging(verbose, debug)

    try:
        response = parse_response(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        logger.error(f"Invalid response document {path}: {e}")
        raise typer.Exit(code=1)

    serializer = ResponseSerializer(session_id, include_version_metadata=metadata)
    try:
        output = serializer.serialize(response)
    except SerializationError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    logger.info(f"Serialized {response.kind} response from {path}")
    typer.echo(output)


@cli.command()
def version() -> None:
    """Show library version."""
    from actions_core.metadata import library_version

    typer.echo(f"actions-core version {library_version()}")


@cli.command()
def config() -> None:
    """Show current configuration."""
    settings = get_core_settings()

    typer.echo("Current Configuration:")
    typer.echo("-" * 40)
    typer.echo(json.dumps(settings.model_dump(), indent=2))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

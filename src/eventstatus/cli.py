"""eventstatus CLI - last event status lookup."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from zoneinfo import ZoneInfoNotFoundError

import click

from . import __version__
from .adapters.json_events import EventDataError, JsonEventRepository
from .config import load_config
from .workflows import CheckLastEventStatus, get_repository

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.version_option(version=__version__)
def main():
    """eventstatus - classify a group's last event as active, in review or done."""
    pass


@main.command()
@click.argument("group_id")
@click.option(
    "--events-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON events file (defaults to EVENTS_FILE from config)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def status(group_id: str, events_file: Path | None, as_json: bool, debug: bool):
    """Show the status of GROUP_ID's last event."""
    config = load_config()
    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if debug else getattr(logging, config.log_level),
    )

    if not group_id.strip():
        click.echo("Error: GROUP_ID must not be empty", err=True)
        sys.exit(1)

    try:
        if events_file:
            repository = JsonEventRepository(events_file, tz=config.timezone)
        else:
            repository = get_repository(config)
    except ZoneInfoNotFoundError:
        click.echo(f"Configuration error: unknown timezone {config.timezone!r}", err=True)
        sys.exit(1)

    try:
        result = asyncio.run(CheckLastEventStatus(repository).execute(group_id))
    except EventDataError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"group_id": group_id, "status": result.value}, indent=2))
    else:
        click.echo(result.value)

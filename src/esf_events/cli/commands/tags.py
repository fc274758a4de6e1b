"""Tags command: list event tags and their channels."""

import typer

from ...events import EVENT_CHANNELS


def tags() -> None:
    """List every event tag and the channel it is delivered on."""
    for tag, channel in EVENT_CHANNELS.items():
        typer.echo(f"{tag:<20} {channel}")

"""Terminal rendering of bus events.

``ProgressDisplay`` is an ordinary bus consumer: attach it to a bus and it
prints progress, errors and (in verbose mode) status transitions.
"""

import json
import typing as t
from collections.abc import Mapping

import typer

from ...events import BaseEventBus, ErrorEvent, ProgressEvent, StatusEvent, parse_event

_ERROR_PREFIXES = {
    "validation-error": "✗ Validation error",
    "network-error": "✗ Network error",
    "auth-error": "✗ Authentication error",
    "file-error": "✗ File error",
}

_STATUS_PREFIXES = {
    "session-status": "Session",
    "engine-status": "Engine",
}


def progress_bar(percentage: int, width: int = 30) -> str:
    """Render a fixed-width bar for a 0-100 percentage."""
    filled = min(width, max(0, width * percentage // 100))
    return "█" * filled + "░" * (width - filled)


def _as_model(event: t.Any) -> t.Any:
    """Validate plain mapping events so handlers can read model attributes."""
    if isinstance(event, Mapping):
        return parse_event(event)
    return event


class ProgressDisplay:
    """Prints bus events as they arrive.

    Counts completed projects and error events so the caller can report a
    summary and pick an exit code.

    Events emitted as plain mappings are validated into their models first;
    a malformed mapping raises ``pydantic.ValidationError``.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.total_projects = 0
        self.completed_projects = 0
        self.error_count = 0

    def attach(self, bus: BaseEventBus) -> BaseEventBus:
        """Register this display's listeners on all three channels of ``bus``."""
        return (
            bus.on_progress(self.on_progress)
            .on_error(self.on_error)
            .on_status(self.on_status)
        )

    def start(self, total_projects: int) -> None:
        self.total_projects = total_projects
        self.completed_projects = 0
        self.error_count = 0
        typer.echo(f"Processing {total_projects} project(s)...")

    def on_progress(self, event: ProgressEvent) -> None:
        event = _as_model(event)
        match event.type:
            case "project-start":
                position = f"({self.completed_projects + 1}/{self.total_projects})"
                typer.echo(f"Starting project {event.project_number} {position}")
            case "download-progress":
                current = event.progress.current
                total = event.progress.total
                percentage = event.progress.percentage
                if self.verbose:
                    bar = progress_bar(percentage)
                    typer.echo(f"  Downloading: {bar} {current}/{total} ({percentage}%)")
                elif current == total:
                    typer.echo(f"  {current}/{total} files")
            case "project-complete":
                self.completed_projects += 1
                typer.secho(
                    f"✓ Project {event.project_number} completed",
                    fg=typer.colors.GREEN,
                )
                if self.verbose and isinstance(event.data, dict):
                    downloaded = event.data.get("filesDownloaded", 0)
                    typer.echo(f"  Files downloaded: {downloaded}")

    def on_error(self, event: ErrorEvent) -> None:
        event = _as_model(event)
        self.error_count += 1
        prefix = _ERROR_PREFIXES.get(event.type, "✗ Error")
        project = f" [{event.project_number}]" if event.project_number else ""
        typer.secho(f"{prefix}{project}: {event.message}", fg=typer.colors.RED)
        if self.verbose and event.error is not None:
            typer.secho(f"  Details: {event.error}", fg=typer.colors.RED)

    def on_status(self, event: StatusEvent) -> None:
        if not self.verbose:
            return
        event = _as_model(event)
        prefix = _STATUS_PREFIXES.get(event.type, "Status")
        typer.echo(f"{prefix}: {event.status}")
        if event.data:
            typer.echo(f"  {json.dumps(event.data, default=str)}")

    def summary(self) -> None:
        color = typer.colors.GREEN if self.error_count == 0 else typer.colors.YELLOW
        typer.secho(
            f"Completed {self.completed_projects}/{self.total_projects} project(s), "
            f"{self.error_count} error(s)",
            fg=color,
        )

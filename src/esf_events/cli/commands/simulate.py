"""Simulate command: replay a download engine run through the bus."""

from typing import Optional

import typer

from ...events import BaseEventBus, Channel, EventBus, LifecycleStatus
from ...infrastructure.logging import get_logger
from ..output.progress import ProgressDisplay
from ..state import CLIState

logger = get_logger(__name__)


def simulate_run(
    bus: BaseEventBus,
    session_bus: BaseEventBus,
    projects: list[str],
    files: int,
    failing: set[str] | None = None,
) -> None:
    """Emit the events a download engine run would produce.

    The session manager publishes on its own bus; the engine bus relays
    its status and error events to the engine's listeners.

    Args:
        bus: Engine bus that listeners are attached to
        session_bus: Session manager bus, forwarded into ``bus``
        projects: Project numbers to process in order
        files: Number of files per project
        failing: Project numbers that fail with a network error
    """
    failing = failing or set()
    bus.forward_from(session_bus, Channel.STATUS, Channel.ERROR)

    session_bus.emit_session_status(LifecycleStatus.CONNECTED, {"authenticated": True})
    bus.emit_engine_status(LifecycleStatus.WORKING, {"projects": len(projects)})

    for project in projects:
        bus.emit_project_start(project)

        if project in failing:
            bus.emit_network_error(
                "Failed to load project participants",
                project,
                ConnectionError(f"Connection reset while loading {project}"),
            )
            continue

        for current in range(1, files + 1):
            bus.emit_download_progress(
                project, current, files, {"file": f"participant-{current}.pdf"}
            )

        bus.emit_project_complete(project, {"filesDownloaded": files, "errors": []})

    bus.emit_engine_status(LifecycleStatus.IDLE)
    session_bus.emit_session_status(LifecycleStatus.DISCONNECTED)


def simulate(
    ctx: typer.Context,
    projects: list[str] = typer.Argument(..., help="Project numbers to process"),
    files: int = typer.Option(
        5, "--files", "-n", min=1, help="Files downloaded per project"
    ),
    fail: Optional[list[str]] = typer.Option(
        None, "--fail", help="Project number that should fail (repeatable)"
    ),
) -> None:
    """Replay a downloader run and render its events.

    Examples:
        esf-events simulate 0008287 0008290
        esf-events -v simulate 0008287 --files 12
        esf-events simulate 0008287 0008290 --fail 0008290
    """
    state: CLIState = ctx.obj

    bus = state.create_bus()
    display = ProgressDisplay(verbose=state.verbose)
    display.attach(bus)

    display.start(len(projects))
    simulate_run(bus, EventBus(logger=logger), projects, files, set(fail or []))
    display.summary()

    logger.debug(f"Listener counts after run: {bus.get_listener_counts()}")
    bus.remove_all_listeners()

    if display.error_count:
        raise typer.Exit(code=1)

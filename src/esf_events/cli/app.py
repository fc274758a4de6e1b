"""CLI application factory."""

from typing import Optional

import typer

from ..config.settings import LogLevel, Settings, build_settings
from ..infrastructure.logging import setup_logging
from .commands.simulate import simulate
from .commands.tags import tags
from .state import CLIState


def create_cli_app(settings: Settings | None = None) -> typer.Typer:
    """Create CLI application with optional settings override.

    Args:
        settings: Optional Settings override for testing

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="esf-events",
        help="ESF event bus - inspect event tags and replay downloader runs",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging, detailed progress)",
        ),
        max_listeners: Optional[int] = typer.Option(
            None,
            "--max-listeners",
            help="Per-channel listener count that triggers a leak warning",
            min=0,
        ),
    ) -> None:
        """Global options available to all commands."""
        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                log_level=LogLevel.DEBUG if verbose else None,
                max_listeners=max_listeners,
            )

        setup_logging(resolved_settings)
        ctx.obj = CLIState(resolved_settings, verbose=verbose)

    app.command()(simulate)
    app.command()(tags)
    return app

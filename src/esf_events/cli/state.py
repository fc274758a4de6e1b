"""CLI state container."""

from ..config.settings import Settings
from ..events import EventBus
from ..infrastructure.logging import get_logger


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and builds the event bus commands publish through.
    """

    def __init__(self, settings: Settings, verbose: bool = False):
        self.settings = settings
        self.verbose = verbose

    def create_bus(self) -> EventBus:
        """Build an event bus configured from the settings."""
        return EventBus(
            logger=get_logger("esf_events.cli"),
            max_listeners=self.settings.max_listeners,
        )

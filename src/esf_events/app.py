from dataclasses import dataclass

from .config.settings import Settings
from .events import EventBus
from .infrastructure.logging import get_logger, setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the settings and the process-wide event bus that producers
    report through and consumers subscribe to.
    """

    settings: Settings
    bus: EventBus


def create_app(settings: Settings | None = None) -> App:
    """Create an `App` with provided settings or defaults.

    Configures logging from the settings before the bus is built so the
    bus's diagnostics go to the configured sinks.
    """
    settings = settings or Settings()
    setup_logging(settings)

    bus = EventBus(
        logger=get_logger("esf_events.bus"),
        max_listeners=settings.max_listeners,
    )
    return App(settings=settings, bus=bus)

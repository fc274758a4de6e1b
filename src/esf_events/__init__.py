"""esf-events - typed in-process event bus for the ESF downloader."""

from .app import App, create_app
from .events import (
    AppEvent,
    BaseEventBus,
    Channel,
    EventBus,
    LifecycleStatus,
    NullEventBus,
    Subscription,
    parse_event,
)

__all__ = [
    "App",
    "create_app",
    "AppEvent",
    "BaseEventBus",
    "Channel",
    "EventBus",
    "LifecycleStatus",
    "NullEventBus",
    "Subscription",
    "parse_event",
]

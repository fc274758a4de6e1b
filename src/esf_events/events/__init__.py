"""Event infrastructure - event bus and event types."""

from .base import (
    BaseEventBus,
    ErrorListener,
    Listener,
    ListenerCounts,
    ProgressListener,
    StatusListener,
)
from .bus import DEFAULT_MAX_LISTENERS, EventBus
from .models import (
    EVENT_CHANNELS,
    AppEvent,
    AuthErrorEvent,
    BaseEvent,
    Channel,
    DownloadProgressEvent,
    EngineStatusEvent,
    ErrorEvent,
    EventTag,
    FileErrorEvent,
    LifecycleStatus,
    NetworkErrorEvent,
    ProgressEvent,
    ProgressInfo,
    ProjectCompleteEvent,
    ProjectStartEvent,
    SessionStatusEvent,
    StatusEvent,
    ValidationErrorEvent,
    classify,
    parse_event,
)
from .null import NullEventBus
from .subscription import Subscription

__all__ = [
    # Base and implementations
    "BaseEventBus",
    "EventBus",
    "NullEventBus",
    "Subscription",
    "DEFAULT_MAX_LISTENERS",
    # Listener types
    "Listener",
    "ListenerCounts",
    "ProgressListener",
    "ErrorListener",
    "StatusListener",
    # Channels
    "Channel",
    "EventTag",
    "EVENT_CHANNELS",
    "classify",
    # Events
    "BaseEvent",
    "AppEvent",
    "ProgressEvent",
    "ErrorEvent",
    "StatusEvent",
    "ProgressInfo",
    "ProjectStartEvent",
    "DownloadProgressEvent",
    "ProjectCompleteEvent",
    "ValidationErrorEvent",
    "NetworkErrorEvent",
    "AuthErrorEvent",
    "FileErrorEvent",
    "LifecycleStatus",
    "SessionStatusEvent",
    "EngineStatusEvent",
    "parse_event",
]

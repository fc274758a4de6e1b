"""Event data models."""

from .base import BaseEvent
from .channels import EVENT_CHANNELS, Channel, EventTag, classify, event_tag
from .errors import AuthErrorEvent, FileErrorEvent, NetworkErrorEvent, ValidationErrorEvent
from .progress import (
    DownloadProgressEvent,
    ProgressInfo,
    ProjectCompleteEvent,
    ProjectStartEvent,
    round_half_up,
)
from .status import EngineStatusEvent, LifecycleStatus, SessionStatusEvent
from .union import AppEvent, ErrorEvent, ProgressEvent, StatusEvent, parse_event

__all__ = [
    "BaseEvent",
    # Channels
    "Channel",
    "EventTag",
    "EVENT_CHANNELS",
    "classify",
    "event_tag",
    # Progress family
    "ProgressInfo",
    "ProjectStartEvent",
    "DownloadProgressEvent",
    "ProjectCompleteEvent",
    "round_half_up",
    # Error family
    "ValidationErrorEvent",
    "NetworkErrorEvent",
    "AuthErrorEvent",
    "FileErrorEvent",
    # Status family
    "LifecycleStatus",
    "SessionStatusEvent",
    "EngineStatusEvent",
    # Unions
    "AppEvent",
    "ProgressEvent",
    "ErrorEvent",
    "StatusEvent",
    "parse_event",
]

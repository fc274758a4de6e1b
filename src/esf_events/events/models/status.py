"""Status family events."""

import enum
import typing as t

from pydantic import Field

from .base import BaseEvent


class LifecycleStatus(enum.StrEnum):
    """States reported by the session manager and download engine."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    IDLE = "idle"
    WORKING = "working"


class SessionStatusEvent(BaseEvent):
    """Browser session connected, disconnected, or changed auth state."""

    type: t.Literal["session-status"] = "session-status"
    status: LifecycleStatus
    data: t.Any = Field(default=None, description="Opaque producer payload")


class EngineStatusEvent(BaseEvent):
    """Download engine started or stopped working."""

    type: t.Literal["engine-status"] = "engine-status"
    status: LifecycleStatus
    data: t.Any = Field(default=None, description="Opaque producer payload")

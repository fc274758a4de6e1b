"""Channel taxonomy: which event tag goes to which listener group."""

import enum
import typing as t
from collections.abc import Mapping


class Channel(enum.StrEnum):
    """Listener groups that partition every event tag."""

    PROGRESS = "progress"
    ERROR = "error"
    STATUS = "status"


EventTag = t.Literal[
    "project-start",
    "download-progress",
    "project-complete",
    "validation-error",
    "network-error",
    "auth-error",
    "file-error",
    "session-status",
    "engine-status",
]

EVENT_CHANNELS: t.Final[Mapping[str, Channel]] = {
    "project-start": Channel.PROGRESS,
    "download-progress": Channel.PROGRESS,
    "project-complete": Channel.PROGRESS,
    "validation-error": Channel.ERROR,
    "network-error": Channel.ERROR,
    "auth-error": Channel.ERROR,
    "file-error": Channel.ERROR,
    "session-status": Channel.STATUS,
    "engine-status": Channel.STATUS,
}


def event_tag(event: t.Any) -> t.Any:
    """Read the ``type`` discriminant from a model or a plain mapping.

    Returns None when the event has no tag.
    """
    if isinstance(event, Mapping):
        return event.get("type")
    return getattr(event, "type", None)


def classify(tag: t.Any) -> Channel | None:
    """Return the channel for a tag, or None if the tag is not recognized."""
    if not isinstance(tag, str):
        return None
    return EVENT_CHANNELS.get(tag)

"""Null object implementation of the event bus."""

import typing as t

from .base import BaseEventBus, ListenerCounts, Listener
from .models import Channel, ErrorEvent, ProgressEvent, StatusEvent


class NullEventBus(BaseEventBus):
    """Event bus that delivers nothing.

    Use when a producer needs a bus but nobody listens, e.g. a download
    engine run from a script. Emits return False and registrations are
    dropped.
    """

    def emit_progress(self, event: ProgressEvent) -> bool:
        return False

    def emit_error(self, event: ErrorEvent) -> bool:
        return False

    def emit_status(self, event: StatusEvent) -> bool:
        return False

    def on(self, channel: Channel | str, listener: Listener) -> t.Self:
        return self

    def off(self, channel: Channel | str, listener: Listener) -> t.Self:
        return self

    def remove_all_listeners(self) -> t.Self:
        return self

    def get_listener_counts(self) -> ListenerCounts:
        return ListenerCounts(progress=0, error=0, status=0, total=0)

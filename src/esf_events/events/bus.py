"""In-process event bus with one ordered listener list per channel."""

import threading
import typing as t

from ..infrastructure.logging import get_logger
from .base import BaseEventBus, ListenerCounts, Listener
from .models import Channel, ErrorEvent, ProgressEvent, StatusEvent

if t.TYPE_CHECKING:
    import loguru

DEFAULT_MAX_LISTENERS = 20


class _Registration:
    """One entry in a channel list; compared by identity."""

    __slots__ = ("listener",)

    def __init__(self, listener: Listener):
        self.listener = listener


class EventBus(BaseEventBus):
    """Synchronous publish/subscribe bus for progress, error and status events.

    Producers report through ``emit`` (or a channel emitter, or one of the
    per-tag convenience methods). Every listener registered on the event's
    channel is called in-line, in registration order, before ``emit``
    returns.

    Dispatch iterates a snapshot of the channel taken when it starts, so a
    listener that registers or unregisters others only affects later
    dispatches. Listener exceptions are not caught: the first one stops the
    dispatch and propagates to the producer.

    Usage:
        bus = EventBus()
        bus.on_progress(display.on_progress).on_error(display.on_error)

        bus.emit_project_start("CZ.02.02.XX/00/24_034/0008287")
        bus.emit_download_progress("CZ.02.02.XX/00/24_034/0008287", 3, 10)

        bus.get_listener_counts()
        # {"progress": 1, "error": 1, "status": 0, "total": 2}
    """

    def __init__(
        self,
        logger: "loguru.Logger" = get_logger(__name__),
        max_listeners: int = DEFAULT_MAX_LISTENERS,
    ):
        """Initialize a bus with empty channels.

        Args:
            logger: Logger for diagnostics (unknown tags, listener leaks).
                   Defaults to a module-specific logger if not provided.
            max_listeners: Per-channel registration count above which a
                   leak warning is logged. 0 disables the warning.
        """
        if max_listeners < 0:
            raise ValueError(f"max_listeners must be >= 0, got {max_listeners}")

        self._logger = logger
        self._max_listeners = max_listeners
        self._listeners: dict[Channel, list[_Registration]] = {
            channel: [] for channel in Channel
        }
        self._leak_warned: set[Channel] = set()
        self._lock = threading.RLock()

        self._logger.debug("EventBus initialized")

    @property
    def max_listeners(self) -> int:
        return self._max_listeners

    def set_max_listeners(self, max_listeners: int) -> t.Self:
        """Change the per-channel leak warning threshold (0 disables it)."""
        if max_listeners < 0:
            raise ValueError(f"max_listeners must be >= 0, got {max_listeners}")
        with self._lock:
            self._max_listeners = max_listeners
        return self

    def emit_progress(self, event: ProgressEvent) -> bool:
        return self._dispatch(Channel.PROGRESS, event)

    def emit_error(self, event: ErrorEvent) -> bool:
        return self._dispatch(Channel.ERROR, event)

    def emit_status(self, event: StatusEvent) -> bool:
        return self._dispatch(Channel.STATUS, event)

    def _dispatch(self, channel: Channel, event: t.Any) -> bool:
        with self._lock:
            listeners = tuple(self._listeners[channel])

        for registration in listeners:
            registration.listener(event)

        return len(listeners) > 0

    def _handle_unknown_event(self, tag: t.Any) -> None:
        self._logger.warning(f"Unknown event type: {tag}")

    def on(self, channel: Channel | str, listener: Listener) -> t.Self:
        """Append a listener to a channel.

        The same callable may be registered more than once; it is then
        called once per registration.

        Raises:
            ValueError: If ``channel`` is not a known channel name
        """
        self._register(Channel(channel), listener)
        return self

    def _register(self, channel: Channel, listener: Listener) -> _Registration:
        registration = _Registration(listener)

        with self._lock:
            listeners = self._listeners[channel]
            listeners.append(registration)
            count = len(listeners)
            leaking = (
                self._max_listeners > 0
                and count > self._max_listeners
                and channel not in self._leak_warned
            )
            if leaking:
                self._leak_warned.add(channel)

        if leaking:
            self._logger.warning(
                f"Possible listener leak: {count} listeners registered on "
                f"channel '{channel}' (max {self._max_listeners})"
            )
        return registration

    def off(self, channel: Channel | str, listener: Listener) -> t.Self:
        """Remove the most recent registration of ``listener`` on a channel.

        Logs a warning and leaves the channel unchanged if the listener is
        not registered there.
        """
        channel = Channel(channel)

        with self._lock:
            listeners = self._listeners[channel]
            for index in range(len(listeners) - 1, -1, -1):
                if listeners[index].listener == listener:
                    del listeners[index]
                    return self

        self._logger.warning(f"Listener {listener} not found for channel {channel}")
        return self

    def remove_registration(self, channel: Channel | str, registration: object) -> t.Self:
        """Remove exactly the entry ``registration`` refers to.

        Does nothing if the entry is already gone (removed by ``off`` or
        ``remove_all_listeners``).
        """
        channel = Channel(channel)

        with self._lock:
            listeners = self._listeners[channel]
            for index, entry in enumerate(listeners):
                if entry is registration:
                    del listeners[index]
                    break
        return self

    def remove_all_listeners(self) -> t.Self:
        """Clear the progress, error and status channels. Safe to repeat."""
        with self._lock:
            for listeners in self._listeners.values():
                listeners.clear()
            self._leak_warned.clear()

        self._logger.debug("All event bus listeners removed")
        return self

    def get_listener_counts(self) -> ListenerCounts:
        with self._lock:
            progress = len(self._listeners[Channel.PROGRESS])
            error = len(self._listeners[Channel.ERROR])
            status = len(self._listeners[Channel.STATUS])

        return ListenerCounts(
            progress=progress,
            error=error,
            status=status,
            total=progress + error + status,
        )

"""Abstract base class for event buses.

The base owns what every bus shares: classifying an event by its tag,
routing it to the channel emitter, and the per-tag convenience
constructors. Subclasses supply the channel emitters and the listener
registry.
"""

import typing as t
from abc import ABC, abstractmethod

from .models import (
    AppEvent,
    AuthErrorEvent,
    Channel,
    DownloadProgressEvent,
    EngineStatusEvent,
    ErrorEvent,
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
    event_tag,
)
from .subscription import Subscription

Listener = t.Callable[[t.Any], object]
ProgressListener = t.Callable[[ProgressEvent], object]
ErrorListener = t.Callable[[ErrorEvent], object]
StatusListener = t.Callable[[StatusEvent], object]


class ListenerCounts(t.TypedDict):
    """Registrations per channel; ``total`` is the sum of the three."""

    progress: int
    error: int
    status: int
    total: int


class BaseEventBus(ABC):
    """Abstract base class for event buses."""

    @abstractmethod
    def emit_progress(self, event: ProgressEvent) -> bool:
        """Deliver a progress event; True if any listener was invoked."""
        pass

    @abstractmethod
    def emit_error(self, event: ErrorEvent) -> bool:
        """Deliver an error event; True if any listener was invoked."""
        pass

    @abstractmethod
    def emit_status(self, event: StatusEvent) -> bool:
        """Deliver a status event; True if any listener was invoked."""
        pass

    @abstractmethod
    def on(self, channel: Channel | str, listener: Listener) -> t.Self:
        """Register a listener on a channel."""
        pass

    @abstractmethod
    def off(self, channel: Channel | str, listener: Listener) -> t.Self:
        """Remove the most recent registration of a listener."""
        pass

    @abstractmethod
    def remove_all_listeners(self) -> t.Self:
        """Drop every registration on the three channels."""
        pass

    @abstractmethod
    def get_listener_counts(self) -> ListenerCounts:
        """Current number of registrations per channel."""
        pass

    def emit(self, event: AppEvent) -> bool:
        """Classify an event by its ``type`` tag and deliver it on its channel.

        Plain mappings carrying a ``type`` key are routed the same way and
        passed to listeners unchanged. An unrecognized or missing tag never
        raises: it is reported through ``_handle_unknown_event`` and the
        call returns False.

        Returns:
            True if at least one listener was invoked, False otherwise
        """
        tag = event_tag(event)
        channel = classify(tag)

        match channel:
            case Channel.PROGRESS:
                return self.emit_progress(event)  # type: ignore[arg-type]
            case Channel.ERROR:
                return self.emit_error(event)  # type: ignore[arg-type]
            case Channel.STATUS:
                return self.emit_status(event)  # type: ignore[arg-type]
            case None:
                self._handle_unknown_event(tag)
                return False
            case _:
                t.assert_never(channel)

    def _handle_unknown_event(self, tag: t.Any) -> None:
        """Hook for events whose tag matches no channel."""
        pass

    def _channel_emitter(self, channel: Channel) -> t.Callable[[t.Any], bool]:
        return {
            Channel.PROGRESS: self.emit_progress,
            Channel.ERROR: self.emit_error,
            Channel.STATUS: self.emit_status,
        }[Channel(channel)]

    def on_progress(self, listener: ProgressListener) -> t.Self:
        return self.on(Channel.PROGRESS, listener)

    def on_error(self, listener: ErrorListener) -> t.Self:
        return self.on(Channel.ERROR, listener)

    def on_status(self, listener: StatusListener) -> t.Self:
        return self.on(Channel.STATUS, listener)

    def off_progress(self, listener: ProgressListener) -> t.Self:
        return self.off(Channel.PROGRESS, listener)

    def off_error(self, listener: ErrorListener) -> t.Self:
        return self.off(Channel.ERROR, listener)

    def off_status(self, listener: StatusListener) -> t.Self:
        return self.off(Channel.STATUS, listener)

    def subscribe(self, channel: Channel | str, listener: Listener) -> Subscription:
        """Register a listener and return a handle that can unregister it.

        Example:
            sub = bus.subscribe(Channel.ERROR, report_error)
            ...
            sub.unsubscribe()
        """
        channel = Channel(channel)
        registration = self._register(channel, listener)
        return Subscription(self, channel, listener, registration)

    def _register(self, channel: Channel, listener: Listener) -> object | None:
        """Register a listener and return a token identifying the entry.

        Buses that cannot tell registrations apart return None, and their
        subscriptions fall back to ``off``.
        """
        self.on(channel, listener)
        return None

    def remove_registration(self, channel: Channel | str, registration: object) -> t.Self:
        """Remove the single entry a registration token refers to."""
        return self

    def forward_from(self, source: "BaseEventBus", *channels: Channel | str) -> t.Self:
        """Re-publish events emitted on ``source`` through this bus.

        Args:
            source: Bus of a collaborator whose events should be relayed
            channels: Channels to relay; all three when none are given

        Raises:
            ValueError: If ``source`` is this bus
        """
        if source is self:
            raise ValueError("A bus cannot forward events from itself")

        for channel in channels or tuple(Channel):
            channel = Channel(channel)
            source.on(channel, self._channel_emitter(channel))
        return self

    # Convenience constructors, one per event tag

    def emit_project_start(self, project_number: str, data: t.Any = None) -> bool:
        return self.emit_progress(
            ProjectStartEvent(project_number=project_number, data=data)
        )

    def emit_download_progress(
        self, project_number: str, current: int, total: int, data: t.Any = None
    ) -> bool:
        """Report that ``current`` of ``total`` files of a project are done.

        The percentage is derived here, rounding halves up.

        Raises:
            ValueError: If total is not positive
        """
        return self.emit_progress(
            DownloadProgressEvent(
                project_number=project_number,
                progress=ProgressInfo.from_counts(current, total),
                data=data,
            )
        )

    def emit_project_complete(self, project_number: str, data: t.Any = None) -> bool:
        return self.emit_progress(
            ProjectCompleteEvent(project_number=project_number, data=data)
        )

    def emit_validation_error(
        self,
        message: str,
        project_number: str | None = None,
        error: t.Any = None,
    ) -> bool:
        return self.emit_error(
            ValidationErrorEvent(
                message=message, project_number=project_number, error=error
            )
        )

    def emit_network_error(
        self,
        message: str,
        project_number: str | None = None,
        error: t.Any = None,
    ) -> bool:
        return self.emit_error(
            NetworkErrorEvent(message=message, project_number=project_number, error=error)
        )

    def emit_auth_error(self, message: str, error: t.Any = None) -> bool:
        return self.emit_error(AuthErrorEvent(message=message, error=error))

    def emit_file_error(
        self,
        message: str,
        project_number: str | None = None,
        error: t.Any = None,
    ) -> bool:
        return self.emit_error(
            FileErrorEvent(message=message, project_number=project_number, error=error)
        )

    def emit_session_status(
        self, status: LifecycleStatus | str, data: t.Any = None
    ) -> bool:
        return self.emit_status(SessionStatusEvent(status=status, data=data))

    def emit_engine_status(self, status: LifecycleStatus | str, data: t.Any = None) -> bool:
        return self.emit_status(EngineStatusEvent(status=status, data=data))

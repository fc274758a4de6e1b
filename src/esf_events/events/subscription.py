"""Handle for a single listener registration."""

import typing as t

from .models import Channel

if t.TYPE_CHECKING:
    from .base import BaseEventBus, Listener


class Subscription:
    """One registration of a listener on a bus channel.

    ``unsubscribe()`` removes that registration; further calls do nothing.
    When the bus handed out a registration token, removal targets exactly
    that entry, so other registrations of the same callable are untouched.
    """

    def __init__(
        self,
        bus: "BaseEventBus",
        channel: Channel,
        listener: "Listener",
        registration: object | None = None,
    ):
        self._bus = bus
        self._channel = channel
        self._listener = listener
        self._registration = registration
        self._active = True

    @property
    def channel(self) -> Channel:
        return self._channel

    @property
    def is_active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False
        if self._registration is None:
            self._bus.off(self._channel, self._listener)
        else:
            self._bus.remove_registration(self._channel, self._registration)

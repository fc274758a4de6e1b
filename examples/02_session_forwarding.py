#!/usr/bin/env python3
"""
02_session_forwarding.py - Relaying a collaborator's events

Demonstrates:
- A session manager publishing on its own bus
- forward_from() re-publishing its status and error events on the engine bus
- subscribe() handles for temporary listeners
"""

from esf_events import Channel, EventBus, LifecycleStatus
from esf_events.events import StatusEvent


class SessionManager:
    """Stand-in for the browser session collaborator."""

    def __init__(self) -> None:
        self.events = EventBus()

    def connect(self) -> None:
        self.events.emit_session_status(LifecycleStatus.CONNECTED, {"chromePort": 9222})

    def disconnect(self) -> None:
        self.events.emit_network_error("Max reconnection attempts reached")
        self.events.emit_session_status(LifecycleStatus.DISCONNECTED)


def main() -> None:
    session = SessionManager()
    engine_bus = EventBus().forward_from(session.events, Channel.STATUS, Channel.ERROR)

    def on_status(event: StatusEvent) -> None:
        print(f"[engine bus] {event.type}: {event.status}")

    engine_bus.on_status(on_status)
    errors = engine_bus.subscribe(Channel.ERROR, lambda e: print(f"[engine bus] {e.message}"))

    session.connect()
    engine_bus.emit_engine_status(LifecycleStatus.WORKING)
    engine_bus.emit_engine_status(LifecycleStatus.IDLE)

    errors.unsubscribe()
    session.disconnect()  # the error is relayed but nobody prints it

    print(f"\nEngine bus listeners: {engine_bus.get_listener_counts()}")
    print(f"Session bus listeners: {session.events.get_listener_counts()}")


if __name__ == "__main__":
    main()

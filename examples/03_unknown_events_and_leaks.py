#!/usr/bin/env python3
"""
03_unknown_events_and_leaks.py - Diagnostics the bus logs

Demonstrates:
- Unknown event tags are logged and dropped, never raised
- The per-channel listener leak warning
- parse_event() validating a wire payload before emitting it
"""

from esf_events import create_app, parse_event
from esf_events.config import Environment, Settings


def main() -> None:
    app = create_app(Settings(environment=Environment.DEVELOPMENT, max_listeners=3))
    bus = app.bus

    received = []
    bus.on_progress(received.append)

    # A producer from a newer release sends a tag this bus doesn't know
    delivered = bus.emit({"type": "project-archived", "projectNumber": "0008287"})
    print(f"Unknown tag delivered: {delivered}")

    # Wire payloads can be validated into models first
    event = parse_event({"type": "project-start", "projectNumber": "0008287"})
    print(f"Parsed tag delivered: {bus.emit(event)} ({type(event).__name__})")

    # Registering the same listener repeatedly trips the leak warning once
    for _ in range(5):
        bus.on_status(print)
    print(f"Listener counts: {bus.get_listener_counts()}")

    bus.remove_all_listeners()
    print(f"After reset: {bus.get_listener_counts()}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
01_basic_subscription.py - Listening on the three channels

Demonstrates:
- Chained registration with on_progress()/on_error()/on_status()
- Convenience emitters for each event tag
- The delivered/not-delivered return value of emit
"""

from esf_events import EventBus, LifecycleStatus
from esf_events.events import DownloadProgressEvent, ErrorEvent, ProgressEvent


def on_progress(event: ProgressEvent) -> None:
    """Print project lifecycle and a progress bar."""
    if isinstance(event, DownloadProgressEvent):
        pct = event.progress.percentage
        bar_width = 20
        filled = bar_width * pct // 100
        bar = "█" * filled + "░" * (bar_width - filled)
        print(f"  [{bar}] {pct:3d}% ({event.progress.current}/{event.progress.total})")
    else:
        print(f"{event.type}: {event.project_number}")


def on_error(event: ErrorEvent) -> None:
    """Print errors with the project they belong to."""
    project = event.project_number or "-"
    print(f"ERROR {event.type} [{project}] {event.message}")


def main() -> None:
    bus = EventBus()
    bus.on_progress(on_progress).on_error(on_error)

    bus.emit_project_start("0008287")
    for current in range(1, 6):
        bus.emit_download_progress("0008287", current, 5)
    bus.emit_file_error("Could not write participant-3.pdf", "0008287")
    bus.emit_project_complete("0008287", {"filesDownloaded": 4})

    # Nobody listens on the status channel
    delivered = bus.emit_engine_status(LifecycleStatus.IDLE)
    print(f"\nEngine status delivered: {delivered}")
    print(f"Listener counts: {bus.get_listener_counts()}")


if __name__ == "__main__":
    main()

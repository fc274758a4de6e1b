"""Tests for EventBus classification and dispatch."""

from types import SimpleNamespace

import pytest

from esf_events.events import (
    AuthErrorEvent,
    DownloadProgressEvent,
    EngineStatusEvent,
    FileErrorEvent,
    LifecycleStatus,
    NetworkErrorEvent,
    ProgressInfo,
    ProjectCompleteEvent,
    ProjectStartEvent,
    SessionStatusEvent,
    ValidationErrorEvent,
)

PROGRESS_EVENTS = [
    ProjectStartEvent(project_number="0008287"),
    DownloadProgressEvent(
        project_number="0008287",
        progress=ProgressInfo(current=1, total=2, percentage=50),
    ),
    ProjectCompleteEvent(project_number="0008287", data={"filesDownloaded": 2}),
]

ERROR_EVENTS = [
    ValidationErrorEvent(message="bad project number"),
    NetworkErrorEvent(message="timed out", project_number="0008287"),
    AuthErrorEvent(message="login expired"),
    FileErrorEvent(message="disk full", project_number="0008287"),
]

STATUS_EVENTS = [
    SessionStatusEvent(status=LifecycleStatus.CONNECTED),
    EngineStatusEvent(status=LifecycleStatus.WORKING),
]


class TestEmitRouting:
    """Test that emit() routes each tag to its channel."""

    @pytest.mark.parametrize("event", PROGRESS_EVENTS, ids=lambda e: e.type)
    def test_progress_tags_reach_progress_listeners(self, bus, recorder, event):
        bus.on_progress(recorder("progress"))
        bus.on_error(recorder("error"))
        bus.on_status(recorder("status"))

        assert bus.emit(event) is True
        assert recorder.calls == [("progress", event)]

    @pytest.mark.parametrize("event", ERROR_EVENTS, ids=lambda e: e.type)
    def test_error_tags_reach_error_listeners(self, bus, recorder, event):
        bus.on_progress(recorder("progress"))
        bus.on_error(recorder("error"))
        bus.on_status(recorder("status"))

        assert bus.emit(event) is True
        assert recorder.calls == [("error", event)]

    @pytest.mark.parametrize("event", STATUS_EVENTS, ids=lambda e: e.type)
    def test_status_tags_reach_status_listeners(self, bus, recorder, event):
        bus.on_progress(recorder("progress"))
        bus.on_error(recorder("error"))
        bus.on_status(recorder("status"))

        assert bus.emit(event) is True
        assert recorder.calls == [("status", event)]

    @pytest.mark.parametrize("event", PROGRESS_EVENTS, ids=lambda e: e.type)
    def test_emit_matches_emit_progress(self, bus, recorder, event):
        """emit() on a progress event reaches the same listeners as emit_progress()."""
        bus.on_progress(recorder("a"))
        bus.on_progress(recorder("b"))

        bus.emit(event)
        via_emit = list(recorder.calls)
        recorder.calls.clear()
        bus.emit_progress(event)

        assert recorder.calls == via_emit

    def test_listener_receives_same_object(self, bus, recorder):
        """Events are passed through without copying or transformation."""
        event = ProjectStartEvent(project_number="0008287", data={"k": [1, 2]})
        bus.on_progress(recorder("progress"))

        bus.emit(event)

        assert recorder.calls[0][1] is event

    def test_mapping_events_are_routed_by_type_key(self, bus, recorder):
        """Plain dicts with a known tag are routed and passed unchanged."""
        event = {"type": "network-error", "message": "timed out"}
        bus.on_error(recorder("error"))

        assert bus.emit(event) is True
        assert recorder.calls[0][1] is event

    def test_missing_optional_fields_do_not_crash(self, bus, recorder):
        event = {"type": "project-start", "projectNumber": "0008287"}
        bus.on_progress(recorder("progress"))

        assert bus.emit(event) is True


class TestEmitReturnValue:
    """Test the delivered/not-delivered boolean."""

    def test_returns_false_without_listeners(self, bus):
        assert bus.emit(PROGRESS_EVENTS[0]) is False
        assert bus.emit(ERROR_EVENTS[0]) is False
        assert bus.emit(STATUS_EVENTS[0]) is False

    def test_returns_false_when_only_other_channels_have_listeners(self, bus, recorder):
        bus.on_progress(recorder("progress"))

        assert bus.emit(ERROR_EVENTS[0]) is False
        assert recorder.calls == []

    def test_channel_emitters_return_false_without_listeners(self, bus):
        assert bus.emit_progress(PROGRESS_EVENTS[0]) is False
        assert bus.emit_error(ERROR_EVENTS[0]) is False
        assert bus.emit_status(STATUS_EVENTS[0]) is False

    def test_error_channel_without_listeners_does_not_raise(self, bus):
        """An error event nobody listens to is not itself an error."""
        assert bus.emit_network_error("timed out") is False


class TestUnknownEvents:
    """Test the soft-fail path for unrecognized tags."""

    def test_unknown_tag_returns_false_and_warns_once(self, bus, recorder, mock_logger):
        bus.on_progress(recorder("progress"))
        bus.on_error(recorder("error"))
        bus.on_status(recorder("status"))

        result = bus.emit(SimpleNamespace(type="bogus-event"))

        assert result is False
        assert recorder.calls == []
        mock_logger.warning.assert_called_once_with("Unknown event type: bogus-event")

    def test_unknown_tag_in_mapping(self, bus, mock_logger):
        assert bus.emit({"type": "future-event"}) is False
        mock_logger.warning.assert_called_once_with("Unknown event type: future-event")

    def test_event_without_tag_is_unknown(self, bus, mock_logger):
        assert bus.emit(object()) is False
        mock_logger.warning.assert_called_once_with("Unknown event type: None")

    def test_channel_name_is_not_an_event_tag(self, bus, recorder, mock_logger):
        bus.on_progress(recorder("progress"))

        assert bus.emit({"type": "progress"}) is False
        assert recorder.calls == []


class TestDispatchOrdering:
    """Test registration-order delivery."""

    def test_listeners_called_in_registration_order(self, bus, recorder):
        bus.on_status(recorder("L1"))
        bus.on_status(recorder("L2"))
        bus.on_status(recorder("L3"))

        bus.emit(STATUS_EVENTS[0])

        assert [name for name, _ in recorder.calls] == ["L1", "L2", "L3"]

    def test_duplicate_registration_called_once_per_registration(self, bus):
        calls = []

        def listener(event):
            calls.append(event)

        bus.on_progress(listener).on_progress(listener)
        bus.emit(PROGRESS_EVENTS[0])

        assert len(calls) == 2


class TestDispatchSnapshot:
    """Test that dispatch iterates the listener set captured at its start."""

    def test_listener_added_during_dispatch_runs_next_time(self, bus, recorder):
        late = recorder("late")

        def registering(event):
            recorder.calls.append(("registering", event))
            bus.on_progress(late)

        bus.on_progress(registering)

        bus.emit(PROGRESS_EVENTS[0])
        assert [name for name, _ in recorder.calls] == ["registering"]

        recorder.calls.clear()
        bus.emit(PROGRESS_EVENTS[0])
        assert [name for name, _ in recorder.calls] == ["registering", "late"]

    def test_listener_removed_during_dispatch_still_runs_this_time(self, bus, recorder):
        second = recorder("second")

        def removing(event):
            recorder.calls.append(("removing", event))
            bus.off_progress(second)

        bus.on_progress(removing).on_progress(second)

        bus.emit(PROGRESS_EVENTS[0])
        assert [name for name, _ in recorder.calls] == ["removing", "second"]

        recorder.calls.clear()
        bus.emit(PROGRESS_EVENTS[0])
        assert [name for name, _ in recorder.calls] == ["removing"]

    def test_clear_during_dispatch_does_not_stop_current_dispatch(self, bus, recorder):
        def clearing(event):
            recorder.calls.append(("clearing", event))
            bus.remove_all_listeners()

        bus.on_error(clearing).on_error(recorder("after"))

        assert bus.emit(ERROR_EVENTS[0]) is True
        assert [name for name, _ in recorder.calls] == ["clearing", "after"]
        assert bus.emit(ERROR_EVENTS[0]) is False


class TestListenerFailures:
    """Test that listener exceptions propagate to the producer."""

    def test_exception_propagates_to_caller(self, bus):
        def broken(event):
            raise RuntimeError("listener broke")

        bus.on_error(broken)

        with pytest.raises(RuntimeError, match="listener broke"):
            bus.emit(ERROR_EVENTS[0])

    def test_exception_stops_later_listeners(self, bus, recorder):
        def broken(event):
            raise ValueError("boom")

        bus.on_progress(recorder("before"))
        bus.on_progress(broken)
        bus.on_progress(recorder("after"))

        with pytest.raises(ValueError):
            bus.emit_project_start("0008287")

        assert [name for name, _ in recorder.calls] == ["before"]

    def test_exception_is_not_logged_by_bus(self, bus, mock_logger):
        def broken(event):
            raise ValueError("boom")

        bus.on_status(broken)

        with pytest.raises(ValueError):
            bus.emit(STATUS_EVENTS[0])

        mock_logger.warning.assert_not_called()
        mock_logger.exception.assert_not_called()

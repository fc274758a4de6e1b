"""Discriminated unions over the event models and boundary parsing."""

import typing as t
from collections.abc import Mapping

from pydantic import Field, TypeAdapter

from .errors import AuthErrorEvent, FileErrorEvent, NetworkErrorEvent, ValidationErrorEvent
from .progress import DownloadProgressEvent, ProjectCompleteEvent, ProjectStartEvent
from .status import EngineStatusEvent, SessionStatusEvent

ProgressEvent = t.Annotated[
    ProjectStartEvent | DownloadProgressEvent | ProjectCompleteEvent,
    Field(discriminator="type"),
]

ErrorEvent = t.Annotated[
    ValidationErrorEvent | NetworkErrorEvent | AuthErrorEvent | FileErrorEvent,
    Field(discriminator="type"),
]

StatusEvent = t.Annotated[
    SessionStatusEvent | EngineStatusEvent,
    Field(discriminator="type"),
]

AppEvent = t.Annotated[
    ProjectStartEvent
    | DownloadProgressEvent
    | ProjectCompleteEvent
    | ValidationErrorEvent
    | NetworkErrorEvent
    | AuthErrorEvent
    | FileErrorEvent
    | SessionStatusEvent
    | EngineStatusEvent,
    Field(discriminator="type"),
]

_APP_EVENT_ADAPTER: TypeAdapter[AppEvent] = TypeAdapter(AppEvent)


def parse_event(payload: Mapping[str, t.Any]) -> AppEvent:
    """Validate a dictionary into the event model its ``type`` names.

    Accepts camelCase wire keys or snake_case field names.

    Raises:
        pydantic.ValidationError: If the tag is unknown or a field is invalid
    """
    return _APP_EVENT_ADAPTER.validate_python(payload)

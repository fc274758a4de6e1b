"""Error family events.

The optional ``error`` is the underlying failure, usually an exception,
carried as-is for listeners that want details. Nothing in the bus inspects
or validates it.
"""

import typing as t

from pydantic import Field

from .base import BaseEvent


class _ErrorEventBase(BaseEvent):
    message: str = Field(description="Human-readable description")
    project_number: str | None = Field(
        default=None, description="Project the failure relates to, if any"
    )
    error: t.Any = Field(
        default=None, description="Underlying failure object, passed through untouched"
    )


class ValidationErrorEvent(_ErrorEventBase):
    """Input such as a project number failed validation."""

    type: t.Literal["validation-error"] = "validation-error"


class NetworkErrorEvent(_ErrorEventBase):
    """A request or connection failed."""

    type: t.Literal["network-error"] = "network-error"


class AuthErrorEvent(_ErrorEventBase):
    """Authentication with the portal failed."""

    type: t.Literal["auth-error"] = "auth-error"


class FileErrorEvent(_ErrorEventBase):
    """Writing or reading a downloaded file failed."""

    type: t.Literal["file-error"] = "file-error"

"""Progress family events: project lifecycle and per-file download progress."""

import math
import typing as t

from pydantic import BaseModel, ConfigDict, Field

from .base import BaseEvent


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (33.5 -> 34, 66.67 -> 67)."""
    return math.floor(value + 0.5)


class ProgressInfo(BaseModel):
    """Position within a project's downloads."""

    model_config = ConfigDict(frozen=True)

    current: int = Field(ge=0, description="Files processed so far")
    total: int = Field(gt=0, description="Files in the project")
    percentage: int = Field(ge=0, le=100, description="round(current / total * 100)")

    @classmethod
    def from_counts(cls, current: int, total: int) -> "ProgressInfo":
        """Build progress info, computing the percentage from the counts.

        Raises:
            ValueError: If total is not positive
        """
        if total <= 0:
            raise ValueError(f"total must be positive, got {total}")
        return cls(
            current=current,
            total=total,
            percentage=round_half_up(current / total * 100),
        )


class ProjectStartEvent(BaseEvent):
    """Fired when the engine begins processing a project."""

    type: t.Literal["project-start"] = "project-start"
    project_number: str = Field(description="Project the event belongs to")
    data: t.Any = Field(default=None, description="Opaque producer payload")


class DownloadProgressEvent(BaseEvent):
    """Fired after each file of a project is processed."""

    type: t.Literal["download-progress"] = "download-progress"
    project_number: str = Field(description="Project the event belongs to")
    progress: ProgressInfo
    data: t.Any = Field(default=None, description="Opaque producer payload")


class ProjectCompleteEvent(BaseEvent):
    """Fired when the engine finishes a project."""

    type: t.Literal["project-complete"] = "project-complete"
    project_number: str = Field(description="Project the event belongs to")
    data: t.Any = Field(default=None, description="Opaque producer payload")

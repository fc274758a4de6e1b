"""Terminal output helpers."""

from .progress import ProgressDisplay, progress_bar

__all__ = ["ProgressDisplay", "progress_bar"]

"""Runtime function-usage tracking."""

from .runtime import t, tracked_functions

__all__ = ["t", "tracked_functions"]

"""Data models for file-contents.

This module exports the core data structures used throughout the application.
"""

from filecontents.models.git_status import GitStatusEntry
from filecontents.models.selection import (
    AggregationResult,
    FileTask,
    GitMode,
    OutputMode,
    SelectionRequest,
)

__all__ = [
    "AggregationResult",
    "FileTask",
    "GitMode",
    "GitStatusEntry",
    "OutputMode",
    "SelectionRequest",
]

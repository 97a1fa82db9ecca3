"""Selection and aggregation models.

This module defines the data structures that flow through the
file selection pipeline: the request, the per-file task, and the
aggregated result.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class GitMode(str, Enum):
    """Git working-tree scope for file selection."""

    NONE = "none"
    CHANGED = "changed"
    STAGED = "staged"
    ALL = "all"


class OutputMode(str, Enum):
    """Destination for the aggregated text."""

    CONSOLE = "console"
    CLIPBOARD = "clipboard"


@dataclass(frozen=True, slots=True)
class SelectionRequest:
    """Describes which files to collect.

    Attributes:
        folder: Root folder to search (or to resolve the Git repository from).
        recursive: Whether to descend into subdirectories.
        extensions: Raw extension filters as supplied by the user.
            Empty means "match all".
        git_mode: Git working-tree scope, or GitMode.NONE for a plain scan.
    """

    folder: Path
    recursive: bool = False
    extensions: tuple[str, ...] = field(default=())
    git_mode: GitMode = GitMode.NONE


@dataclass(frozen=True, slots=True)
class FileTask:
    """A single file to report on.

    Attributes:
        path: Absolute path of the file.
        deleted: True if the file was deleted in the working tree.
            Content of deleted files is never read.
    """

    path: Path
    deleted: bool = False


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Concatenated output of a run.

    Attributes:
        text: Labeled concatenation of all processed files.
        count: Number of processed tasks, deleted entries included.
        failed: Paths whose content could not be read.
    """

    text: str
    count: int
    failed: tuple[Path, ...] = field(default=())

    @property
    def is_empty(self) -> bool:
        """Check if no files were processed."""
        return self.count == 0

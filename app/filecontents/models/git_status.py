"""Git porcelain status models.

One GitStatusEntry represents one line of ``git status --porcelain``
output: two status columns followed by a path.
"""

from dataclasses import dataclass, field

# Status characters used by the porcelain v1 format
UNMODIFIED = " "
UNTRACKED = "?"
DELETED = "D"
RENAMED = "R"

RENAME_SEPARATOR = " -> "


@dataclass(frozen=True, slots=True)
class GitStatusEntry:
    """A single parsed porcelain status line.

    Attributes:
        index_status: Status of the path in the index (first column).
        worktree_status: Status of the path in the working tree (second column).
        path: Path as reported by git, relative to the repository root.
        old_path: Source path of a rename, if any.
        new_path: Destination path of a rename, if any.
    """

    index_status: str
    worktree_status: str
    path: str
    old_path: str | None = field(default=None)
    new_path: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate status columns."""
        if len(self.index_status) != 1 or len(self.worktree_status) != 1:
            msg = "Status columns must be single characters"
            raise ValueError(msg)
        if not self.path:
            msg = "Status path cannot be empty"
            raise ValueError(msg)

    @property
    def is_staged(self) -> bool:
        """Check if the change is recorded in the index."""
        return self.index_status not in (UNMODIFIED, UNTRACKED)

    @property
    def is_unstaged(self) -> bool:
        """Check if the working tree differs from the index."""
        return self.worktree_status != UNMODIFIED

    @property
    def is_untracked(self) -> bool:
        """Check if the path is unknown to the repository."""
        return self.index_status == UNTRACKED and self.worktree_status == UNTRACKED

    @property
    def is_deleted(self) -> bool:
        """Check if either column marks the path as deleted."""
        return DELETED in (self.index_status, self.worktree_status)

    @property
    def is_renamed(self) -> bool:
        """Check if either column marks the path as renamed."""
        return RENAMED in (self.index_status, self.worktree_status)

    @property
    def effective_path(self) -> str:
        """Path the entry refers to now (the destination for renames)."""
        if self.is_renamed and self.new_path:
            return self.new_path
        return self.path

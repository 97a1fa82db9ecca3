"""Unit tests for GitStatusEntry model."""

import pytest
from filecontents.models.git_status import GitStatusEntry


class TestGitStatusEntry:
    """Tests for GitStatusEntry dataclass."""

    @pytest.mark.parametrize(
        ("index", "worktree", "staged", "unstaged", "untracked"),
        [
            ("M", " ", True, False, False),
            (" ", "M", False, True, False),
            ("M", "M", True, True, False),
            ("?", "?", False, True, True),
            ("A", " ", True, False, False),
            ("D", " ", True, False, False),
            (" ", "D", False, True, False),
        ],
    )
    def test_classification(
        self, index: str, worktree: str, staged: bool, unstaged: bool, untracked: bool
    ) -> None:
        """Status columns map to staged/unstaged/untracked flags."""
        entry = GitStatusEntry(index_status=index, worktree_status=worktree, path="f.cs")

        assert entry.is_staged is staged
        assert entry.is_unstaged is unstaged
        assert entry.is_untracked is untracked

    def test_deleted_in_either_column(self) -> None:
        """A 'D' in either column marks the entry as deleted."""
        assert GitStatusEntry("D", " ", "f.cs").is_deleted is True
        assert GitStatusEntry(" ", "D", "f.cs").is_deleted is True
        assert GitStatusEntry("M", " ", "f.cs").is_deleted is False

    def test_renamed_uses_new_path(self) -> None:
        """Renamed entries resolve to the new path."""
        entry = GitStatusEntry(
            "R", " ", "old.cs -> new.cs", old_path="old.cs", new_path="new.cs"
        )

        assert entry.is_renamed is True
        assert entry.effective_path == "new.cs"

    def test_plain_entry_uses_path(self) -> None:
        """Non-renamed entries resolve to their path."""
        assert GitStatusEntry(" ", "M", "src/a.cs").effective_path == "src/a.cs"

    def test_immutable(self) -> None:
        """Entries cannot be modified."""
        entry = GitStatusEntry("M", " ", "f.cs")

        with pytest.raises(AttributeError):
            entry.path = "other.cs"  # type: ignore[misc]

    def test_empty_path_rejected(self) -> None:
        """An empty path is invalid."""
        with pytest.raises(ValueError, match="path cannot be empty"):
            GitStatusEntry("M", " ", "")

    def test_multi_char_status_rejected(self) -> None:
        """Status columns are single characters."""
        with pytest.raises(ValueError, match="single characters"):
            GitStatusEntry("MM", " ", "f.cs")

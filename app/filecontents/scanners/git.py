"""Git working-tree scanner.

Resolves the repository root, reads ``git status --porcelain`` and turns
each status line into a FileTask according to the requested GitMode.

The git process sits behind the GitBackend interface so status parsing
can be exercised with canned output.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from filecontents.models.git_status import RENAMED, RENAME_SEPARATOR, GitStatusEntry
from filecontents.models.selection import FileTask, GitMode
from filecontents.utils.formatting import print_failure
from filecontents.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)


class GitCommandError(RuntimeError):
    """Raised when a git command cannot run or exits non-zero."""


class GitRootResolutionError(GitCommandError):
    """Raised when the search path is not inside a git repository."""


class GitBackend(ABC):
    """Abstract access to the git executable."""

    @abstractmethod
    def resolve_root(self, search_path: Path) -> Path:
        """Return the top-level directory of the repository containing search_path.

        Raises:
            GitRootResolutionError: If search_path is not inside a repository.
        """

    @abstractmethod
    def status_porcelain(self, repo_root: Path) -> str:
        """Return short-form porcelain status output for the repository.

        Raises:
            GitCommandError: If the status command fails.
        """


class SubprocessGitBackend(GitBackend):
    """GitBackend that runs the ``git`` executable."""

    def __init__(self, timeout: float = 30.0) -> None:
        self._timeout = timeout

    def is_available(self) -> bool:
        """Check if git is on the PATH."""
        return command_exists("git")

    def resolve_root(self, search_path: Path) -> Path:
        """Resolve the repository root with ``git rev-parse --show-toplevel``."""
        cwd = Path(search_path).expanduser()
        if not cwd.is_dir():
            msg = f"Cannot resolve git root: '{cwd}' is not a directory"
            raise GitRootResolutionError(msg)
        if not self.is_available():
            msg = "Git is not installed or not on PATH"
            raise GitCommandError(msg)

        result = self._run(["git", "rev-parse", "--show-toplevel"], cwd)
        root = result.stdout.strip()
        if not result.success or not root:
            stderr = result.stderr.strip() or "unknown error"
            msg = f"Not a git repository ({cwd}): {stderr}"
            raise GitRootResolutionError(msg)
        return Path(root)

    def status_porcelain(self, repo_root: Path) -> str:
        """Run ``git status --porcelain`` at the repository root."""
        result = self._run(
            ["git", "status", "--porcelain", "--untracked-files=all"],
            repo_root,
        )
        if not result.success:
            stderr = result.stderr.strip() or "unknown error"
            msg = f"Git command failed with exit code {result.returncode}: {stderr}"
            raise GitCommandError(msg)
        return result.stdout

    def _run(self, args: list[str], cwd: Path) -> CommandResult:
        try:
            return run_command(args, cwd=cwd, timeout=self._timeout)
        except FileNotFoundError as e:
            msg = f"Could not run git: {e}"
            raise GitCommandError(msg) from e
        except subprocess.TimeoutExpired as e:
            msg = f"Git command timed out after {self._timeout:.0f}s: {' '.join(args)}"
            raise GitCommandError(msg) from e
        except OSError as e:
            msg = f"Could not run git: {e}"
            raise GitCommandError(msg) from e


def _unquote(path: str) -> str:
    """Strip the double quotes git puts around paths with special characters."""
    if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
        inner = path[1:-1]
        try:
            return inner.encode("utf-8").decode("unicode_escape").encode("latin-1").decode("utf-8")
        except (UnicodeDecodeError, UnicodeEncodeError):
            return inner
    return path


def parse_status_line(line: str) -> GitStatusEntry | None:
    """Parse one porcelain status line.

    The line format is ``XY <path>`` where X is the index status and Y the
    worktree status. Renames report ``<old> -> <new>``.

    Args:
        line: Raw status line without the trailing newline.

    Returns:
        GitStatusEntry, or None for blank or malformed lines.
    """
    if not line.strip():
        return None
    if len(line) < 4 or line[2] != " ":
        logger.debug("Skipping malformed status line: %r", line[:100])
        return None

    index_status = line[0]
    worktree_status = line[1]
    raw_path = line[3:].rstrip("\r")

    old_path: str | None = None
    new_path: str | None = None
    if RENAME_SEPARATOR in raw_path and RENAMED in (index_status, worktree_status):
        old, _, new = raw_path.partition(RENAME_SEPARATOR)
        old_path = _unquote(old)
        new_path = _unquote(new)
    path = _unquote(raw_path) if new_path is None else raw_path

    if not path.strip():
        logger.debug("Skipping status line with empty path: %r", line[:100])
        return None

    return GitStatusEntry(
        index_status=index_status,
        worktree_status=worktree_status,
        path=path,
        old_path=old_path,
        new_path=new_path,
    )


def parse_status_output(output: str) -> list[GitStatusEntry]:
    """Parse full porcelain output into entries, skipping blank lines."""
    entries: list[GitStatusEntry] = []
    for line in output.splitlines():
        entry = parse_status_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def is_included(entry: GitStatusEntry, mode: GitMode) -> bool:
    """Decide whether a status entry belongs to the requested mode.

    - ALL: staged, unstaged or untracked
    - STAGED: staged only
    - CHANGED: unstaged or untracked

    Args:
        entry: Parsed status entry.
        mode: Requested git mode.

    Returns:
        True if the entry should be reported.
    """
    if mode == GitMode.ALL:
        return entry.is_staged or entry.is_unstaged or entry.is_untracked
    if mode == GitMode.STAGED:
        return entry.is_staged
    if mode == GitMode.CHANGED:
        return entry.is_unstaged or entry.is_untracked
    return False


def entries_to_tasks(
    entries: Iterable[GitStatusEntry],
    mode: GitMode,
    repo_root: Path,
) -> list[FileTask]:
    """Convert status entries to de-duplicated file tasks.

    Args:
        entries: Parsed status entries.
        mode: Requested git mode.
        repo_root: Repository top-level directory.

    Returns:
        FileTasks in first-seen order, unique by (path, deleted).
    """
    tasks: list[FileTask] = []
    seen: set[tuple[Path, bool]] = set()
    for entry in entries:
        if not is_included(entry, mode):
            continue
        task = FileTask(path=repo_root / entry.effective_path, deleted=entry.is_deleted)
        key = (task.path, task.deleted)
        if key in seen:
            continue
        seen.add(key)
        tasks.append(task)
    return tasks


@dataclass(frozen=True, slots=True)
class GitScanOutcome:
    """Result of a git scan.

    Attributes:
        tasks: File tasks collected before any failure.
        error: Failure message, or None if the scan completed.
    """

    tasks: list[FileTask] = field(default_factory=list)
    error: str | None = field(default=None)

    @property
    def success(self) -> bool:
        """Check if the scan completed without error."""
        return self.error is None


class GitStatusScanner:
    """Lists files changed in the git working tree.

    Args:
        backend: Access to git. Defaults to SubprocessGitBackend.
        report: Callback receiving user-facing failure messages.
            Defaults to printing to stderr.
    """

    def __init__(
        self,
        backend: GitBackend | None = None,
        report: Callable[[str], None] | None = None,
    ) -> None:
        self._backend = backend or SubprocessGitBackend()
        self._report = report or print_failure

    def collect(self, mode: GitMode, search_path: Path) -> GitScanOutcome:
        """Collect changed files, capturing failures in the outcome.

        Args:
            mode: Git mode; GitMode.NONE returns an empty outcome without running git.
            search_path: Any path inside the repository.

        Returns:
            GitScanOutcome with tasks and an optional error message.
        """
        if mode == GitMode.NONE:
            return GitScanOutcome()

        tasks: list[FileTask] = []
        try:
            repo_root = self._backend.resolve_root(search_path)
            logger.debug("Git repository root: %s", repo_root)
            output = self._backend.status_porcelain(repo_root)
            entries = parse_status_output(output)
            tasks = entries_to_tasks(entries, mode, repo_root)
        except GitCommandError as e:
            logger.warning("Git scan failed: %s", e)
            return GitScanOutcome(tasks=tasks, error=str(e))

        logger.debug("Git %s mode: %d file(s)", mode.value, len(tasks))
        return GitScanOutcome(tasks=tasks)

    def get_changed_files(self, mode: GitMode, search_path: Path) -> list[FileTask]:
        """Collect changed files, reporting failures instead of raising.

        Args:
            mode: Git mode.
            search_path: Any path inside the repository.

        Returns:
            FileTasks for the working-tree changes; partial or empty on failure.
        """
        outcome = self.collect(mode, search_path)
        if outcome.error is not None:
            self._report(f"Error getting git files: {outcome.error}")
        return outcome.tasks

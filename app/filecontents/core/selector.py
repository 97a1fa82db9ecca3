"""File selection.

Combines the directory or git scanner with extension filtering and
produces the ordered, de-duplicated list of FileTasks to aggregate.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from filecontents.core.extensions import glob_patterns, matches, normalize_extensions
from filecontents.models.selection import FileTask, GitMode, SelectionRequest
from filecontents.scanners.directory import DirectoryScanner
from filecontents.scanners.git import GitStatusScanner

logger = logging.getLogger(__name__)


def deduplicate(tasks: Iterable[FileTask]) -> list[FileTask]:
    """Drop later tasks for a path already seen, preserving order.

    The first occurrence's deleted flag wins.
    """
    seen: set[Path] = set()
    unique: list[FileTask] = []
    for task in tasks:
        if task.path in seen:
            continue
        seen.add(task.path)
        unique.append(task)
    return unique


class FileSelector:
    """Resolves a SelectionRequest to FileTasks.

    Args:
        directory_scanner: Scanner used when no git mode is requested.
        git_scanner: Scanner used for git modes.
    """

    def __init__(
        self,
        directory_scanner: DirectoryScanner | None = None,
        git_scanner: GitStatusScanner | None = None,
    ) -> None:
        self._directory_scanner = directory_scanner or DirectoryScanner()
        self._git_scanner = git_scanner or GitStatusScanner()

    def select(self, request: SelectionRequest) -> list[FileTask]:
        """Select the files a request refers to.

        Args:
            request: What to collect.

        Returns:
            Ordered FileTasks, unique by path.

        Raises:
            PathNotFoundError: If a plain scan's folder does not exist.
        """
        filters = normalize_extensions(request.extensions)
        logger.debug("Extension filters: %s", ", ".join(filters) or "(all)")

        if request.git_mode != GitMode.NONE:
            tasks = self._select_from_git(request, filters)
        else:
            tasks = self._select_from_directory(request, filters)

        selected = deduplicate(tasks)
        logger.debug("Selected %d file(s)", len(selected))
        return selected

    def _select_from_git(
        self,
        request: SelectionRequest,
        filters: tuple[str, ...],
    ) -> list[FileTask]:
        kept: list[FileTask] = []
        for task in self._git_scanner.get_changed_files(request.git_mode, request.folder):
            if not matches(task.path, filters):
                continue
            # Deleted files no longer exist; everything else must still be on disk
            if not task.deleted and not task.path.is_file():
                logger.debug("Skipping missing git path: %s", task.path)
                continue
            kept.append(task)
        return kept

    def _select_from_directory(
        self,
        request: SelectionRequest,
        filters: tuple[str, ...],
    ) -> list[FileTask]:
        tasks: list[FileTask] = []
        for pattern in glob_patterns(filters):
            paths = self._directory_scanner.scan(request.folder, request.recursive, pattern)
            tasks.extend(FileTask(path=path) for path in paths)
        return tasks

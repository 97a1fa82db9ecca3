"""Directory scanner.

Enumerates regular files under a root folder, optionally descending into
subdirectories, and matches file names against a glob pattern.
"""

import fnmatch
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class PathNotFoundError(FileNotFoundError):
    """Raised when the scan root is missing or is not a directory."""


class DirectoryScanner:
    """Lists files under a folder.

    Results are absolute and sorted (directories walked in name order)
    so repeated scans of an unchanged tree return the same sequence.

    Example:
        >>> scanner = DirectoryScanner()
        >>> for path in scanner.scan(Path("src"), recursive=True, pattern="*.py"):
        ...     print(path)
    """

    def scan(self, root: Path, recursive: bool = False, pattern: str = "*") -> list[Path]:
        """Collect files under root whose names match pattern.

        Args:
            root: Directory to enumerate.
            recursive: If True, include all nested subdirectories.
            pattern: Glob pattern for file names, matched case-insensitively.

        Returns:
            Absolute paths of matching regular files.

        Raises:
            PathNotFoundError: If root does not exist or is not a directory.
        """
        root = self._resolve_root(root)
        pattern = pattern.lower()

        if not recursive:
            try:
                entries = sorted(root.iterdir())
            except OSError as e:
                msg = f"Could not list directory '{root}': {e}"
                raise PathNotFoundError(msg) from e
            return [p for p in entries if p.is_file() and self._name_matches(p.name, pattern)]

        found: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if path.is_file() and self._name_matches(name, pattern):
                    found.append(path)
        return found

    @staticmethod
    def _resolve_root(root: Path) -> Path:
        """Return the absolute root, validating that it is a directory."""
        try:
            resolved = Path(root).expanduser().resolve()
        except (OSError, RuntimeError) as e:
            msg = f"Could not resolve path '{root}': {e}"
            raise PathNotFoundError(msg) from e
        if not resolved.exists():
            msg = f"Could not find a part of the path '{resolved}'."
            raise PathNotFoundError(msg)
        if not resolved.is_dir():
            msg = f"Path '{resolved}' is not a directory."
            raise PathNotFoundError(msg)
        return resolved

    @staticmethod
    def _name_matches(name: str, pattern: str) -> bool:
        return fnmatch.fnmatchcase(name.lower(), pattern)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning("Skipping unreadable directory: %s", error)

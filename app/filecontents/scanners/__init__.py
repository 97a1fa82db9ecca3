"""File sources for file-contents.

This module exports the directory and git working-tree scanners.
"""

from filecontents.scanners.directory import DirectoryScanner, PathNotFoundError
from filecontents.scanners.git import (
    GitBackend,
    GitCommandError,
    GitRootResolutionError,
    GitScanOutcome,
    GitStatusScanner,
    SubprocessGitBackend,
)

__all__ = [
    "DirectoryScanner",
    "GitBackend",
    "GitCommandError",
    "GitRootResolutionError",
    "GitScanOutcome",
    "GitStatusScanner",
    "PathNotFoundError",
    "SubprocessGitBackend",
]

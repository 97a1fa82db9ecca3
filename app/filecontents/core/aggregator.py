"""Content aggregation.

Reads each selected file and builds one labeled block of text:

    --- Contents of /abs/path/a.py ---
    <file text>

    --- /abs/path/old.py (deleted) ---

"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from filecontents.models.selection import AggregationResult, FileTask

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read a whole file as UTF-8 text, keeping its line endings.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    return path.read_bytes().decode("utf-8")


def format_header(task: FileTask) -> str:
    """Return the header line for a task."""
    if task.deleted:
        return f"--- {task.path} (deleted) ---"
    return f"--- Contents of {task.path} ---"


class ContentAggregator:
    """Concatenates file contents in task order.

    Args:
        reader: Callable returning a file's text. Raises OSError or
            UnicodeDecodeError when the file cannot be read.
    """

    def __init__(self, reader: Callable[[Path], str] | None = None) -> None:
        self._reader = reader or read_text

    def aggregate(self, tasks: Iterable[FileTask]) -> AggregationResult:
        """Read and format every task.

        A read failure is written in place of the content and does not
        stop the run. Every task counts as processed.

        Args:
            tasks: Files to include, in output order.

        Returns:
            AggregationResult with the text, count and failed paths.
        """
        parts: list[str] = []
        failed: list[Path] = []
        count = 0

        for task in tasks:
            parts.append(format_header(task) + "\n")
            if not task.deleted:
                try:
                    parts.append(self._reader(task.path) + "\n")
                except (OSError, UnicodeDecodeError) as e:
                    logger.warning("Could not read %s: %s", task.path, e)
                    parts.append(f"Error reading file: {e}\n")
                    failed.append(task.path)
            parts.append("\n")
            count += 1

        return AggregationResult(text="".join(parts), count=count, failed=tuple(failed))

"""Run pipeline.

Selects files, aggregates their contents and sends the text to the
requested output: select -> aggregate -> emit.
"""

import logging
from collections.abc import Callable

from filecontents.core.aggregator import ContentAggregator
from filecontents.core.selector import FileSelector
from filecontents.models.selection import OutputMode, SelectionRequest
from filecontents.utils.clipboard import copy_to_clipboard
from filecontents.utils.formatting import print_failure, print_info, print_success, print_text

logger = logging.getLogger(__name__)


def run(
    request: SelectionRequest,
    output: OutputMode = OutputMode.CLIPBOARD,
    *,
    selector: FileSelector | None = None,
    aggregator: ContentAggregator | None = None,
    copy: Callable[[str], bool] = copy_to_clipboard,
) -> int:
    """Collect the requested files and emit them.

    Failures that prevent selection (such as a missing folder) are
    reported as ``An error occurred: ...`` and end the run; per-file and
    git failures are handled further down and never reach here.

    Args:
        request: What to collect.
        output: Where to send the text.
        selector: File selector. Defaults to FileSelector().
        aggregator: Content aggregator. Defaults to ContentAggregator().
        copy: Clipboard sink returning False if it fell back to the console.

    Returns:
        Exit code: 0 on success (including "no files"), 1 on failure.
    """
    selector = selector or FileSelector()
    aggregator = aggregator or ContentAggregator()

    try:
        tasks = selector.select(request)
        result = aggregator.aggregate(tasks)
    except Exception as e:
        logger.debug("Run failed", exc_info=True)
        print_failure(f"An error occurred: {e}")
        return 1

    if result.is_empty:
        print_info(f"No files found matching the specified criteria in '{request.folder}'.")
        return 0

    if output == OutputMode.CLIPBOARD:
        if copy(result.text):
            print_success(f"Contents of {result.count} files copied to clipboard.")
    else:
        print_text(result.text)

    return 0

"""Clipboard output sink.

Wraps pyperclip so clipboard failures never abort a run: the text is
shown in the console instead.
"""

import logging

import pyperclip

from filecontents.utils.formatting import print_text, print_warning

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """Place text on the system clipboard.

    If no clipboard mechanism is available, a warning is printed and the
    text is written to the console instead.

    Args:
        text: Text to copy.

    Returns:
        True if the clipboard was set, False if the console fallback was used.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Clipboard unavailable: %s", e)
        print_warning(f"Could not copy to clipboard: {e}. Displaying in console instead.")
        print_text(text)
        return False
    return True

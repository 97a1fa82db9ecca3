"""Utility modules for file-contents.

This module exports commonly used utility functions.
"""

from filecontents.utils.formatting import (
    console,
    err_console,
    print_error,
    print_failure,
    print_info,
    print_success,
    print_text,
    print_warning,
)
from filecontents.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "print_failure",
    "print_info",
    "print_success",
    "print_text",
    "print_warning",
    "run_command",
]

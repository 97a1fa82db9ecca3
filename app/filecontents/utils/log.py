"""Logging setup for the CLI."""

import logging

from rich.logging import RichHandler

from filecontents.utils.formatting import err_console


def configure_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: If True, emit debug records; otherwise warnings and above.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )

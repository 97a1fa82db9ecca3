"""CLI package for file-contents.

This package contains the Typer application.
"""

from filecontents.cli.main import app

__all__ = ["app"]

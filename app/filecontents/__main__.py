"""Allow ``python -m filecontents``."""

from filecontents.cli.main import cli

cli()

"""Main CLI application entry point.

Defines the Typer application and its options.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer

from filecontents import __version__
from filecontents.core.config import ConfigError, DefaultsConfig, load_config
from filecontents.core.runner import run
from filecontents.models.selection import GitMode, OutputMode, SelectionRequest
from filecontents.utils.formatting import print_error
from filecontents.utils.log import configure_logging

EXTENSION_FLAGS = ("--extensions", "-e")

app = typer.Typer(
    name="file-contents",
    help="Display or copy the contents of all files in a folder.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"file-contents version {__version__}")
        raise typer.Exit()


def expand_extension_args(args: list[str]) -> list[str]:
    """Rewrite variadic ``-e a b c`` into ``-e a -e b -e c``.

    Values following ``--extensions``/``-e`` are consumed until the next
    argument starting with ``-``. A flag with no values selects all files.

    Args:
        args: Command-line arguments without the program name.

    Returns:
        Arguments Typer can parse.
    """
    expanded: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg.lower() not in EXTENSION_FLAGS:
            expanded.append(arg)
            i += 1
            continue

        values: list[str] = []
        i += 1
        while i < len(args) and not args[i].startswith("-"):
            values.append(args[i])
            i += 1
        for value in values or ["*"]:
            expanded.extend([EXTENSION_FLAGS[0], value])
    return expanded


def _split_extensions(values: list[str]) -> tuple[str, ...]:
    """Split comma-separated extension values."""
    return tuple(part for value in values for part in value.split(",") if part.strip())


def _load_defaults() -> DefaultsConfig:
    try:
        return load_config().defaults
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def main(
    folder: Annotated[
        Path | None,
        typer.Option(
            "--folder",
            "-f",
            help="The folder to read files from (default: current directory).",
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Search for files recursively (default: false).",
        ),
    ] = False,
    output: Annotated[
        OutputMode | None,
        typer.Option(
            "--output",
            "-o",
            help="Output destination: console or clipboard (default: clipboard).",
            case_sensitive=False,
        ),
    ] = None,
    extensions: Annotated[
        list[str] | None,
        typer.Option(
            "--extensions",
            "-e",
            help="File extensions to include without leading dot (default: cs). "
            "Accepts several values; '*' includes every file.",
        ),
    ] = None,
    git: Annotated[
        GitMode | None,
        typer.Option(
            "--git",
            "-g",
            help="Git mode: none, changed, staged, or all (default: none).",
            case_sensitive=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Display the contents of all matching files in a folder.

    Options not given on the command line fall back to
    ~/.config/file-contents/config.toml, then to built-in defaults.

    Examples:
        file-contents
        file-contents --folder /path/to/project --recursive
        file-contents -e js ts -o console
        file-contents --git changed -o console
    """
    configure_logging(verbose)
    defaults = _load_defaults()

    request = SelectionRequest(
        folder=folder if folder is not None else defaults.folder,
        recursive=recursive or defaults.recursive,
        extensions=_split_extensions(extensions) if extensions else tuple(defaults.extensions),
        git_mode=git if git is not None else defaults.git,
    )

    code = run(request, output if output is not None else defaults.output)
    if code != 0:
        raise typer.Exit(code=code)


def cli() -> None:
    """Console script entry point."""
    app(args=expand_extension_args(sys.argv[1:]), prog_name="file-contents")


if __name__ == "__main__":
    cli()

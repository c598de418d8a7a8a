"""CLI commands using Typer.

Each command is one self-contained exercise. Commands print their result
and exit 0 even when the operation failed, like the classic exercises;
``strictExit`` in the settings file turns failures into exit status 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from file_exercises import __version__, messages, operations
from file_exercises.console import Reporter, configure_logging
from file_exercises.context import AppContext, create_context
from file_exercises.settings import SettingsError
from file_exercises.types import PathReference

app = typer.Typer(
    name="file-exercises",
    help="Small exercises on creating, checking, writing and reading files",
    no_args_is_help=True,
)

console = Console()
reporter = Reporter(console)

state: dict[str, Path | None] = {"settings_file": None}

PathOption = Annotated[
    str | None, typer.Option("--path", "-p", help="File to use instead of the default")
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"file-exercises v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Settings file (JSON)")
    ] = None,
) -> None:
    """Small exercises on creating, checking, writing and reading files."""
    configure_logging(verbose)
    state["settings_file"] = config


def _resolve_context(_context: AppContext | None) -> AppContext:
    """Return the injected context or build the production one.

    Raises:
        typer.Exit: If the settings file is invalid.
    """
    if _context is not None:
        return _context
    try:
        return create_context(state["settings_file"])
    except SettingsError as e:
        reporter.show_error(str(e))
        raise typer.Exit(1) from e


def _report(ctx: AppContext, lines: list[str], success: bool) -> None:
    """Print rendered lines, then apply the exit policy."""
    if success:
        reporter.show_lines(lines)
        return
    for line in lines:
        reporter.show_error(line)
    if ctx.settings.strict_exit:
        raise typer.Exit(1)


@app.command()
def create(path: PathOption = None, _context=None) -> None:
    """Create a file if it does not exist and show its name and path."""
    ctx = _resolve_context(_context)
    target = PathReference(path or ctx.settings.new_file)
    result = operations.create_file(ctx.filesystem, target)
    _report(ctx, messages.render_create(result), result.success)


@app.command("check-exists")
def check_exists(path: PathOption = None, _context=None) -> None:
    """Create a file if needed, then check that it exists."""
    ctx = _resolve_context(_context)
    target = PathReference(path or ctx.settings.new_file)
    result = operations.check_exists(ctx.filesystem, target)
    lines = messages.render_existence(result)
    if result.success:
        reporter.show_lines(lines)
        return
    # The creation error comes first; the existence line is informational
    _report(ctx, lines[:1], success=False)
    reporter.show_lines(lines[1:])


@app.command()
def permissions(path: PathOption = None, _context=None) -> None:
    """Show whether a file can be read and written."""
    ctx = _resolve_context(_context)
    target = PathReference(path or ctx.settings.data_file)
    result = operations.check_permissions(ctx.filesystem, target)
    _report(ctx, messages.render_permissions(result), result.success)


@app.command()
def classify(_context=None) -> None:
    """Ask for a name and tell whether it is a file or a directory."""
    ctx = _resolve_context(_context)
    result = operations.classify_path(ctx.filesystem, ctx.input_source)
    _report(ctx, messages.render_classify(result), result.success)


@app.command()
def write(path: PathOption = None, _context=None) -> None:
    """Overwrite a file with a single line of text."""
    ctx = _resolve_context(_context)
    target = PathReference(path or ctx.settings.data_file)
    result = operations.write_line(
        ctx.filesystem, target, ctx.settings.line_text, encoding=ctx.settings.encoding
    )
    _report(ctx, messages.render_write(result), result.success)


@app.command()
def read(path: PathOption = None, _context=None) -> None:
    """Print a file line by line."""
    ctx = _resolve_context(_context)
    target = PathReference(path or ctx.settings.data_file)
    result = operations.read_lines(
        ctx.filesystem, target, reporter.show_raw, encoding=ctx.settings.encoding
    )
    _report(ctx, messages.render_read(result), result.success)


@app.command()
def prepare(path: PathOption = None, _context=None) -> None:
    """Create the data file used by write, read and permissions."""
    ctx = _resolve_context(_context)
    target = PathReference(path or ctx.settings.data_file)
    result = operations.create_file(ctx.filesystem, target)
    _report(ctx, messages.render_prepare(result), result.success)


if __name__ == "__main__":
    app()

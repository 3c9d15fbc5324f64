"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from fskit.context import AppContext

import typer
from rich.console import Console

from fskit import __version__
from fskit.allocator import release
from fskit.config import ConfigError
from fskit.context import create_context
from fskit.directory import mkdir
from fskit.display import Display
from fskit.paths import expand_user, join_path, to_native_path
from fskit.platform import get_cwd
from fskit.predicates import (
    exists,
    is_directory,
    is_file,
    is_readable,
    is_readable_and_writable,
    is_symlink,
    is_writable,
)
from fskit.size import measure_directory

app = typer.Typer(
    name="fskit",
    help="Cross-platform filesystem utilities",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")

console = Console()
display = Display(console)

# Capacity handed to get_cwd, terminator included
CWD_MAX_LENGTH = 4096


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"fskit v{__version__}")
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
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Cross-platform filesystem utilities."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")


def _load_context(config: Path | None = None) -> AppContext:
    """Create the application context, exiting on a bad config file."""
    try:
        return create_context(config)
    except ConfigError as e:
        display.show_error(str(e))
        raise typer.Exit(1) from e


# ============================================================================
# Size Commands
# ============================================================================


@app.command()
def size(
    path: Annotated[str, typer.Argument(help="Directory to measure")],
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-d", min=0, help="Depth cap (0 = unbounded, 1 = root only)"),
    ] = None,
    strict: Annotated[
        bool, typer.Option("--strict", help="Fail if the walk did not complete")
    ] = False,
    no_follow: Annotated[
        bool, typer.Option("--no-follow", help="Do not descend into symlinked directories")
    ] = False,
    _context=None,
) -> None:
    """Show the total size of the files below a directory."""
    ctx = _context or _load_context()
    depth = ctx.config.default_max_depth if max_depth is None else max_depth
    follow = ctx.config.follow_symlinks and not no_follow

    report = measure_directory(
        path, depth, ctx.allocator, follow_symlinks=follow, lister=ctx.lister
    )
    display.show_value(str(report.total))

    if report.complete:
        return
    if strict:
        display.show_error(f"Incomplete size for {path}: {report.error}")
        raise typer.Exit(1)
    display.show_warning(f"Partial size for {path}")


@app.command()
def info(
    path: Annotated[str, typer.Argument(help="Path to inspect")],
) -> None:
    """Show what kind of path this is and its owner permissions."""
    display.show_predicates(
        path,
        {
            "exists": exists(path),
            "directory": is_directory(path),
            "file": is_file(path),
            "symlink": is_symlink(path),
            "readable": is_readable(path),
            "writable": is_writable(path),
            "readable and writable": is_readable_and_writable(path),
        },
    )


# ============================================================================
# Path Commands
# ============================================================================


@app.command("mkdir")
def mkdir_command(
    path: Annotated[str, typer.Argument(help="Absolute path of the directory")],
) -> None:
    """Create a single directory (parents are not created)."""
    if not mkdir(path):
        display.show_error(f"Could not create directory {path}")
        raise typer.Exit(1)
    display.show_success(f"Directory {path} is ready")


def _show_owned(ctx: AppContext, result: str | None, failure: str) -> None:
    """Print an owned path and release it, or exit with ``failure``."""
    if result is None:
        display.show_error(failure)
        raise typer.Exit(1)
    display.show_value(str(result))
    release(result, ctx.allocator)


@app.command()
def join(
    left: Annotated[str, typer.Argument(help="Leading path")],
    right: Annotated[str, typer.Argument(help="Trailing path")],
    _context=None,
) -> None:
    """Join two paths with the native delimiter."""
    ctx = _context or _load_context()
    _show_owned(ctx, join_path(left, right, ctx.allocator), "Failed to join paths")


@app.command()
def native(
    path: Annotated[str, typer.Argument(help="Path with '/' separators")],
    _context=None,
) -> None:
    """Convert '/' separators to the native delimiter."""
    ctx = _context or _load_context()
    _show_owned(ctx, to_native_path(path, ctx.allocator), "Failed to convert path")


@app.command()
def expand(
    path: Annotated[str, typer.Argument(help="Path that may start with '~'")],
    _context=None,
) -> None:
    """Expand a leading '~' to the home directory."""
    ctx = _context or _load_context()
    _show_owned(ctx, expand_user(path, ctx.allocator), "Home directory is not set")


@app.command()
def cwd() -> None:
    """Show the current working directory."""
    current = get_cwd(CWD_MAX_LENGTH)
    if current is None:
        display.show_error("Could not determine the working directory")
        raise typer.Exit(1)
    display.show_value(current)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or _load_context()

    console.print("\n[bold]Configuration[/bold]")
    console.print(f"  Config file: {ctx.config_path}")
    console.print(f"  Default max depth: {ctx.config.default_max_depth}")
    console.print(f"  Follow symlinks: {ctx.config.follow_symlinks}")


if __name__ == "__main__":
    app()

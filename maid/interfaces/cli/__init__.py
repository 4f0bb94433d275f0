"""CLI interface for maid using Typer.

Usage:
    maid roll todo.md            # Pick a task to work on
    maid reorder todo.md         # Sort the checklist into sections
    maid toggle todo.md 12       # Complete / reopen the task on line 12
    maid config set default_priority 1

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (task, config)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from maid import __version__
from maid.interfaces.cli.commands import config, task
from maid.interfaces.cli.common import DocumentArg, LineArg
from maid.logging_setup import setup_logging

app = typer.Typer(
    name="maid",
    help="Priority rolls and reordering for Markdown checklists",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"maid version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """maid - keep a Markdown checklist in priority order.

    Tag tasks with %prio=N (and optionally %due=YYYY-MM-DD), then roll a
    weighted-random task to work on or reorder the whole list.
    """
    setup_logging(verbose)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")
app.add_typer(config.app, name="config")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("roll")
def roll(
    file: DocumentArg,
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the roll"),
) -> None:
    """Roll a weighted-random task (shortcut for 'task roll')."""
    task.roll(file, seed=seed)


@app.command("reorder")
def reorder(
    file: DocumentArg,
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Print instead of writing"),
    force: bool = typer.Option(False, "--force", "-f", help="Allow dropping non-task lines"),
    median_split: Optional[bool] = typer.Option(
        None, "--median-split/--no-median-split", help="Split at the median priority"
    ),
) -> None:
    """Reorder the checklist (shortcut for 'task reorder')."""
    task.reorder(file, dry_run=dry_run, force=force, median_split=median_split)


@app.command("toggle")
def toggle(file: DocumentArg, line: LineArg) -> None:
    """Toggle completion (shortcut for 'task toggle')."""
    task.toggle(file, line)


@app.command("status")
def status(file: DocumentArg) -> None:
    """Show counts (shortcut for 'task status')."""
    task.status(file)


__all__ = ["app"]

"""Shared utilities for maid CLI commands.

This module provides common utilities used across CLI commands:
- Formatted output helpers (error, success, info, warning)
- Loaders that turn Err results into a clean exit
- Line number conversion between the user's 1-based lines and positions
"""

from pathlib import Path
from typing import Annotated

import typer

from maid.application import load_forest
from maid.domain.shared import Err
from maid.domain.task import TaskForest
from maid.global_config import MaidSettings
from maid.infrastructure.storage import DocumentRepository, SettingsRepository

# Reusable document argument for CLI commands
# Usage: def my_command(file: DocumentArg) -> None:
DocumentArg = Annotated[
    Path,
    typer.Argument(help="Markdown document containing the checklist", show_default=False),
]

# Reusable 1-based line argument
LineArg = Annotated[int, typer.Argument(help="Line number (1-based)", min=1)]


def print_error(msg: str) -> None:
    """Print a formatted error message to stderr."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message to stderr."""
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_separator(char: str = "=", width: int = 60) -> None:
    typer.echo(char * width)


def line_to_position(line: int) -> int:
    """Convert a 1-based line number to a 0-based task position."""
    return line - 1


def position_to_line(position: int) -> int:
    """Convert a 0-based task position to a 1-based line number."""
    return position + 1


def load_settings() -> MaidSettings:
    """Load user settings or exit with status 1."""
    result = SettingsRepository().load()
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def load_document(path: Path) -> str:
    """Read a document or exit with status 1."""
    result = DocumentRepository().load(path)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def save_document(path: Path, text: str) -> None:
    """Write a document or exit with status 1."""
    result = DocumentRepository().save(path, text)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)


def build_document_forest(text: str, settings: MaidSettings) -> TaskForest:
    """Build the task forest of a document or exit with status 1."""
    result = load_forest(text, settings.scheduling())
    if isinstance(result, Err):
        print_error(str(result.error))
        raise typer.Exit(1)
    return result.value


__all__ = [
    "DocumentArg",
    "LineArg",
    "print_error",
    "print_success",
    "print_info",
    "print_warning",
    "print_separator",
    "line_to_position",
    "position_to_line",
    "load_settings",
    "load_document",
    "save_document",
    "build_document_forest",
]

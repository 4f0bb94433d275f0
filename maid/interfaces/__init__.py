"""Interfaces layer for maid.

Adapters for user interaction. The CLI (Typer) accepts input, calls the
application services, and formats output.
"""

from maid.interfaces.cli import app

__all__ = ["app"]

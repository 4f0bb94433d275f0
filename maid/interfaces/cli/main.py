"""Entry point for the maid CLI.

Usage:
    python -m maid.interfaces.cli.main

Or via installed entry point:
    maid <command>
"""

from maid.interfaces.cli import app


def main() -> None:
    """Run the maid CLI application."""
    app()


if __name__ == "__main__":
    main()

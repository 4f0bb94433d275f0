"""maid CLI.

Re-exports the CLI from maid.interfaces.cli so ``python -m maid.cli`` works.
"""

from maid.interfaces.cli import app
from maid.interfaces.cli.main import main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()

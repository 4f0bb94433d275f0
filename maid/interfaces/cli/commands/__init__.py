"""CLI command groups for maid.

Command groups:
- task: Checklist operations (roll, reorder, toggle, priority, status)
- config: Settings (show, set)

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from maid.interfaces.cli.commands import config, task

__all__ = ["task", "config"]

"""Settings CLI commands.

Show and change the values stored in the maid settings file.
"""

import json

import typer
from pydantic import ValidationError

from maid.domain.shared import Err
from maid.global_config import MaidSettings
from maid.infrastructure.storage import SettingsRepository
from maid.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Settings commands")


def _decode_value(key: str, value: str) -> str:
    """Translate shell-friendly escapes for the indent setting."""
    if key == "indent":
        return value.replace("\\t", "\t")
    return value


@app.command("show")
def show() -> None:
    """Print all settings and where they are stored."""
    repo = SettingsRepository()
    result = repo.load()
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    typer.echo(f"# {repo.path}")
    for key, value in result.value.model_dump().items():
        typer.echo(f"{key} = {json.dumps(value)}")


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Setting name, e.g. default_priority"),
    value: str = typer.Argument(..., help="New value, e.g. 3 or true"),
) -> None:
    """Change one setting.

    Example:
        maid config set priority_inheritance true
    """
    if key not in MaidSettings.model_fields:
        print_error(f"Unknown setting: {key}")
        typer.echo(f"Known settings: {', '.join(MaidSettings.model_fields)}", err=True)
        raise typer.Exit(1)

    repo = SettingsRepository()
    current = repo.load()
    if isinstance(current, Err):
        print_error(current.error)
        raise typer.Exit(1)

    try:
        updated = MaidSettings(**{**current.value.model_dump(), key: _decode_value(key, value)})
    except ValidationError as e:
        print_error(f"Invalid value for {key}: {e.errors()[0]['msg']}")
        raise typer.Exit(1)

    save_result = repo.save(updated)
    if isinstance(save_result, Err):
        print_error(save_result.error)
        raise typer.Exit(1)

    print_success(f"{key} = {json.dumps(getattr(updated, key))}")

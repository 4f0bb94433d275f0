"""Task CLI commands.

Commands that operate on a checklist document: rolling a task to work
on, reordering the document, toggling completion, and inspecting
priorities and progress.
"""

import random
from datetime import date
from typing import Optional

import typer

from maid.application import (
    get_forest_stats,
    priority_of,
    reorder_forest,
    roll_task,
    toggle_task,
)
from maid.domain.shared import Err
from maid.domain.task import SECTION_HEADERS, Bucket, detect_newline
from maid.infrastructure.markdown import count_foreign_lines
from maid.interfaces.cli.common import (
    DocumentArg,
    LineArg,
    build_document_forest,
    line_to_position,
    load_document,
    load_settings,
    position_to_line,
    print_error,
    print_info,
    print_separator,
    print_success,
    print_warning,
    save_document,
)

app = typer.Typer(help="Checklist task commands")


# =============================================================================
# Commands
# =============================================================================


@app.command("roll")
def roll(
    file: DocumentArg,
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the roll for a reproducible pick",
    ),
) -> None:
    """Roll a random open task, weighted by priority.

    Tasks with higher resolved priority are proportionally more likely.
    Priority 0 tasks are never picked; negative priority pauses a task.
    """
    settings = load_settings()
    forest = build_document_forest(load_document(file), settings)

    rng = random.Random(seed) if seed is not None else None
    result = roll_task(forest, rng)
    if isinstance(result, Err):
        print_info(str(result.error))
        return

    position, event = result.value
    task = forest.get(position)
    typer.echo(f"line {position_to_line(position)}: {task.raw_text if task else ''}")
    print_info(f"weight {event.weight} of {event.total_weight} across {event.candidates} tasks")


@app.command("reorder")
def reorder(
    file: DocumentArg,
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the result instead of writing it"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Reorder even if non-task lines would be dropped"
    ),
    median_split: Optional[bool] = typer.Option(
        None,
        "--median-split/--no-median-split",
        help="Split prioritized tasks at the median priority (default from settings)",
    ),
) -> None:
    """Rewrite the document as priority-ordered sections.

    Top-level tasks are grouped into unprioritized, prioritized and done
    sections (plus triage for anything unexpected). Subtasks move with
    their parent. Must be enabled first:

        maid config set reorder_enabled true
    """
    settings = load_settings()
    if not settings.reorder_enabled:
        print_error("Reorder is disabled.")
        typer.echo("Enable it with: maid config set reorder_enabled true", err=True)
        raise typer.Exit(1)

    text = load_document(file)
    foreign = count_foreign_lines(text)
    if foreign and not force:
        print_error(f"{foreign} non-task line(s) in {file} would be dropped by reorder.")
        typer.echo("Move them elsewhere or pass --force.", err=True)
        raise typer.Exit(1)

    forest = build_document_forest(text, settings)
    split = settings.median_split if median_split is None else median_split
    result = reorder_forest(
        forest, median_split=split, indent=settings.indent, newline=detect_newline(text)
    )
    if isinstance(result, Err):
        print_error(str(result.error))
        typer.echo("The document was not modified.", err=True)
        raise typer.Exit(1)

    new_text, event = result.value
    if dry_run:
        typer.echo(new_text, nl=False)
        return

    if foreign:
        print_warning(f"Dropped {foreign} non-task line(s)")
    save_document(file, new_text)
    print_success(f"Reordered {event.task_count} tasks in {file}")


@app.command("toggle")
def toggle(file: DocumentArg, line: LineArg) -> None:
    """Toggle a task between open and done.

    Completing a task stamps it with "(Done at YYYY-MM-DD)"; reopening it
    removes the stamp.
    """
    text = load_document(file)
    result = toggle_task(text, line_to_position(line), date.today())
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    new_text, event = result.value
    save_document(file, new_text)
    print_success(f"Line {line} is now {event.state.value}")


@app.command("priority")
def priority(file: DocumentArg, line: LineArg) -> None:
    """Show the resolved priority of the task on a line."""
    settings = load_settings()
    forest = build_document_forest(load_document(file), settings)

    result = priority_of(forest, line_to_position(line))
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    task = forest.get(line_to_position(line))
    explicit = "explicit" if task is not None and task.priority is not None else "resolved"
    typer.echo(f"{result.value} ({explicit})")


@app.command("status")
def status(file: DocumentArg) -> None:
    """Show task counts by state and by reorder section."""
    settings = load_settings()
    forest = build_document_forest(load_document(file), settings)
    stats = get_forest_stats(forest)

    typer.echo(f"Tasks: {stats.total}")
    for state, count in stats.by_state.items():
        typer.echo(f"  {state:<12} {count}")

    typer.echo("")
    typer.echo("Top-level sections:")
    for bucket in Bucket:
        header = SECTION_HEADERS[bucket].lstrip("# ")
        typer.echo(f"  {header:<14} {stats.bucket_sizes[bucket.value]}")

    print_separator("-", 30)
    typer.echo(f"Rollable: {stats.eligible} tasks, total weight {stats.total_weight}")

"""Comparison commands: change statistics and diff reports."""

import typer
from rich.syntax import Syntax

from ..output import get_output_context
from .workspace import handle_errors, open_service


def compare(
    from_id: str = typer.Argument(..., help="Version to compare from"),
    to_id: str | None = typer.Argument(
        None, help="Version to compare to (defaults to comparing FROM with its predecessor)"
    ),
) -> None:
    """Show the patch and change statistics between two versions."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        if to_id is None:
            diff = service.compare_previous(from_id)
        else:
            diff = service.compare(from_id, to_id)

    if ctx.json_mode:
        ctx.print_json(diff)
        return

    changes = diff.changes
    ctx.console.print(f"[bold]{diff.from_} -> {diff.to}[/bold]")
    ctx.console.print(
        f"[green]+{changes.additions}[/green] [red]-{changes.deletions}[/red] "
        f"({changes.total_changes} total)"
    )
    ctx.console.print(Syntax(diff.patch, "diff", theme="ansi_dark", word_wrap=True))


def diff(
    from_id: str = typer.Argument(..., help="Version to compare from"),
    to_id: str = typer.Argument(..., help="Version to compare to"),
) -> None:
    """Print a plain-text report with both contents and the patch."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        report = service.formatted_diff(from_id, to_id)

    if ctx.json_mode:
        ctx.print_json({"from": from_id, "to": to_id, "report": report})
        return
    typer.echo(report)

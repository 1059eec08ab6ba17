"""Publish workflow commands."""

import typer
from rich.markup import escape
from rich.table import Table

from ..output import get_output_context
from .workspace import handle_errors, open_service


def publish(
    version_id: str = typer.Argument(..., help="Version id to publish"),
    by: str | None = typer.Option(
        None, "--by", "-b", help="Publisher name (defaults to [publish] default_publisher)"
    ),
) -> None:
    """Publish a version, replacing the currently published one."""
    ctx = get_output_context()
    config, service = open_service()

    with handle_errors():
        record = service.publish(version_id, by or config.publish.default_publisher)

    ctx.success(f"Published version {record.version_id} by {record.published_by}", record)


def unpublish(
    version_id: str = typer.Argument(..., help="Version id to unpublish"),
) -> None:
    """Return a published version to draft."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        version = service.unpublish(version_id)

    ctx.success(f"Unpublished version {version.id}", version)


def history() -> None:
    """Show the publish history."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        records = service.get_publish_history()

    if ctx.json_mode:
        ctx.print_json(records)
        return
    if not records:
        ctx.console.print("[yellow]Nothing published yet[/yellow]")
        return

    table = Table(title="Publish history")
    table.add_column("Version", justify="right")
    table.add_column("Published")
    table.add_column("By")
    table.add_column("Unpublished")
    for record in records:
        table.add_row(
            str(record.version_id),
            record.published_at.strftime("%Y-%m-%d %H:%M"),
            escape(record.published_by),
            record.unpublished_at.strftime("%Y-%m-%d %H:%M") if record.unpublished_at else "",
        )
    ctx.console.print(table)

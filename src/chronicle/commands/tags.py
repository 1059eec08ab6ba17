"""Tag registry commands."""

import typer
from rich.markup import escape
from rich.table import Table

from ..completions import complete_tag_name
from ..output import get_output_context
from .workspace import handle_errors, open_service


def tag_add(
    version_id: str = typer.Argument(..., help="Version id to tag"),
    name: str = typer.Argument(..., help="Tag name"),
) -> None:
    """Tag a version."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        tag = service.create_tag(version_id, name)

    ctx.success(f"Tagged version {tag.version_id} as {tag.name}", tag)


def tag_rename(
    old_name: str = typer.Argument(..., help="Current tag name", autocompletion=complete_tag_name),
    new_name: str = typer.Argument(..., help="New tag name"),
) -> None:
    """Rename a tag."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        tag = service.rename_tag(old_name, new_name)

    ctx.success(f"Renamed tag {old_name} to {tag.name}", tag)


def tag_delete(
    name: str = typer.Argument(..., help="Tag name", autocompletion=complete_tag_name),
) -> None:
    """Delete a tag."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        tag = service.delete_tag(name)

    ctx.success(f"Tag {tag.name} deleted successfully", {"deleted": tag.name})


def tag_list(
    version_id: str | None = typer.Option(
        None, "--version", help="Only list tags of this version"
    ),
) -> None:
    """List tags."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        tags = service.list_tags() if version_id is None else service.list_tags_for_version(
            version_id
        )

    if ctx.json_mode:
        ctx.print_json(tags)
        return
    if not tags:
        ctx.console.print("[yellow]No tags found[/yellow]")
        return

    table = Table(title="Tags")
    table.add_column("Name")
    table.add_column("Version", justify="right")
    table.add_column("Created")
    table.add_column("Renamed")
    for tag in tags:
        table.add_row(
            escape(tag.name),
            str(tag.version_id),
            tag.created_at.strftime("%Y-%m-%d %H:%M"),
            tag.updated_at.strftime("%Y-%m-%d %H:%M") if tag.updated_at else "",
        )
    ctx.console.print(table)

"""Version ledger commands: create, show, list, delete, current, revert."""

import sys
from pathlib import Path

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..completions import complete_status
from ..errors import InvalidArgumentError
from ..models import Version, VersionStatus
from ..output import get_output_context
from .workspace import handle_errors, open_service


def _read_content(file: Path | None, text: str | None) -> str:
    """Read version content from exactly one of --file or --text."""
    if (file is None) == (text is None):
        raise InvalidArgumentError("Provide exactly one of --file or --text")
    if text is not None:
        return text
    assert file is not None
    if str(file) == "-":
        return sys.stdin.read()
    try:
        return file.read_text()
    except OSError as e:
        raise InvalidArgumentError(f"Cannot read {file}: {e.strerror or e}") from None


def print_version(version: Version) -> None:
    """Render a version with its content."""
    ctx = get_output_context()
    title = f"Version {version.id} [{version.status.value}]"
    ctx.console.print(Panel(escape(version.content), title=title, title_align="left"))
    ctx.console.print(f"[bold]Created:[/bold] {version.timestamp.isoformat()}")
    if version.message:
        ctx.console.print(f"[bold]Message:[/bold] {escape(version.message)}")
    if version.diff is not None:
        changes = version.diff.changes
        ctx.console.print(
            f"[bold]Changes:[/bold] +{changes.additions} -{changes.deletions} "
            f"({changes.total_changes} total)"
        )


def version_create(
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Read content from file ('-' for stdin)"
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Content text"),
    message: str = typer.Option("", "--message", "-m", help="Version message"),
) -> None:
    """Create a new version and make it current."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        content = _read_content(file, text)
        version = service.create_version(content, message)

    ctx.success(f"Created version {version.id}", version)


def version_show(
    version_id: str = typer.Argument(..., help="Version id"),
) -> None:
    """Show a version with its content."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        version = service.get_version(version_id)

    if ctx.json_mode:
        ctx.print_json(version)
        return
    print_version(version)


def version_current() -> None:
    """Show the current version."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        version = service.get_current()

    if ctx.json_mode:
        ctx.print_json(version)
        return
    if version is None:
        ctx.console.print("[yellow]No current version[/yellow]")
        return
    print_version(version)


def version_list(
    status: VersionStatus | None = typer.Option(
        None, "--status", "-s", help="Only list versions with this status",
        autocompletion=complete_status,
    ),
    full: bool = typer.Option(False, "--full", help="Include content and diffs (JSON only)"),
) -> None:
    """List versions in creation order."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        versions = service.list_versions() if full else service.list_version_summaries()
        current = service.get_state().current_version

    if status is not None:
        versions = [v for v in versions if v.status == status]

    if ctx.json_mode:
        ctx.print_json(versions)
        return
    if not versions:
        ctx.console.print("[yellow]No versions found[/yellow]")
        return

    table = Table(title="Versions")
    table.add_column("ID", justify="right")
    table.add_column("Status")
    table.add_column("Created")
    table.add_column("Message")
    for v in versions:
        marker = " *" if v.id == current else ""
        table.add_row(
            f"{v.id}{marker}",
            v.status.value,
            v.timestamp.strftime("%Y-%m-%d %H:%M"),
            escape(v.message),
        )
    ctx.console.print(table)


def version_delete(
    version_id: str = typer.Argument(..., help="Version id"),
) -> None:
    """Delete a version with its tags and publish records."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        version = service.delete_version(version_id)

    ctx.success(f"Deleted version {version.id}", {"deleted": version.id})


def revert(
    version_id: str = typer.Argument(..., help="Version id to restore"),
) -> None:
    """Create a new version with the content of an older one."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        version = service.revert(version_id)

    ctx.success(f"Created version {version.id}: {version.message}", version)

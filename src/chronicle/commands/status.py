"""Status command for a content overview."""

from ..core import get_published
from ..output import get_output_context
from .workspace import handle_errors, open_service


def status() -> None:
    """Show the current and published versions of the content."""
    ctx = get_output_context()
    _, service = open_service()

    with handle_errors():
        state = service.get_state()

    published = get_published(state)
    ctx.print_json(
        {
            "content_id": service.content_id,
            "current_version": state.current_version,
            "published_version": published.id if published else None,
            "versions": len(state.versions),
            "tags": len(state.tags),
            "publish_records": len(state.publish_history),
        }
    )
    if ctx.json_mode:
        return

    ctx.console.print(f"\n[bold]Content:[/bold] {service.content_id}")
    if not state.versions:
        ctx.console.print("[yellow]No versions yet[/yellow]")
        ctx.console.print("  Next: chronicle version create --text <content>")
        return

    current = f"version {state.current_version}" if state.current_version else "none"
    ctx.console.print(f"[bold]Current:[/bold] {current}")
    ctx.console.print(
        f"[bold]Published:[/bold] {f'version {published.id}' if published else 'none'}"
    )
    ctx.console.print(
        f"[bold]Versions:[/bold] {len(state.versions)}  "
        f"[bold]Tags:[/bold] {len(state.tags)}  "
        f"[bold]Publish records:[/bold] {len(state.publish_history)}"
    )

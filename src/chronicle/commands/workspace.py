"""Shared plumbing for commands: workspace lookup and error mapping."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from ..config import ChronicleConfig, load_config
from ..core import find_chronicle_dir
from ..errors import ChronicleError
from ..output import get_output_context
from ..services import ContentService, FileStore

# Content id selected with the global --content option (set by cli.py main callback)
_content_id: str | None = None


def set_content_id(content_id: str | None) -> None:
    """Select the content id for this invocation."""
    global _content_id
    _content_id = content_id


@contextmanager
def handle_errors() -> Iterator[None]:
    """Report chronicle errors and exit with the code of their kind."""
    try:
        yield
    except ChronicleError as e:
        get_output_context().error(str(e), {"kind": e.kind})
        raise typer.Exit(e.exit_code) from None


def open_workspace() -> tuple[ChronicleConfig, FileStore]:
    """Load config and file store of the enclosing .chronicle directory.

    Exits with code 1 if no workspace is initialized.
    """
    ctx = get_output_context()
    chronicle_dir = find_chronicle_dir()
    if chronicle_dir is None:
        ctx.error("Chronicle not initialized. Run 'chronicle init' first.")
        raise typer.Exit(1)

    with handle_errors():
        config = load_config(chronicle_dir)
    store = FileStore(config.store_root(chronicle_dir), lock_timeout=config.store.lock_timeout)
    return config, store


def open_service() -> tuple[ChronicleConfig, ContentService]:
    """Open the content service for the selected content id."""
    config, store = open_workspace()
    with handle_errors():
        service = ContentService(
            store,
            _content_id or config.content.default_id,
            diff_context=config.diff.context_lines,
        )
    return config, service

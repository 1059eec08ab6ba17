"""Init command implementation."""

from pathlib import Path

import typer

from ..config import load_config, write_config_template
from ..core import get_chronicle_dir
from ..output import get_output_context
from .workspace import handle_errors


def init(
    name: str | None = typer.Option(
        None, "--name", "-n", help="Project name (defaults to the directory name)"
    ),
) -> None:
    """Initialize a chronicle workspace in the current directory."""
    ctx = get_output_context()

    chronicle_dir = get_chronicle_dir(Path.cwd())
    config_path = chronicle_dir / "config.toml"
    chronicle_dir.mkdir(parents=True, exist_ok=True)

    if not config_path.exists():
        write_config_template(chronicle_dir, project_name=name or Path.cwd().name)
        ctx.print(f"[green]Created config template:[/green] {config_path}")
    else:
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")

    with handle_errors():
        config = load_config(chronicle_dir)
    store_root = config.store_root(chronicle_dir)
    store_root.mkdir(parents=True, exist_ok=True)

    ctx.result(
        {"chronicle_dir": str(chronicle_dir), "store": str(store_root)},
        "\n[bold green]Chronicle initialized successfully![/bold green]",
    )

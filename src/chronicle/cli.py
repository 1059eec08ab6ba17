"""Chronicle CLI: version history for content documents."""

import typer
from rich.console import Console

from chronicle import __version__

from .commands import (
    compare,
    diff,
    history,
    init,
    publish,
    revert,
    status,
    tag_add,
    tag_delete,
    tag_list,
    tag_rename,
    unpublish,
    version_create,
    version_current,
    version_delete,
    version_list,
    version_show,
)
from .commands.workspace import set_content_id
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"chronicle {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="chronicle",
    help="Version history, tags and publishing for content documents",
    no_args_is_help=True,
)

# Sub-commands
version_app = typer.Typer(help="Version ledger commands", no_args_is_help=True)
tag_app = typer.Typer(help="Tag commands", no_args_is_help=True)

app.add_typer(version_app, name="version")
app.add_typer(tag_app, name="tag")


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    content: str | None = typer.Option(
        None,
        "--content",
        "-c",
        help="Content id to operate on (defaults to [content] default_id)",
    ),
) -> None:
    """Chronicle - version history for content documents."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    console = Console(force_terminal=not no_color, no_color=no_color)
    set_output_context(OutputContext(console=console, json_mode=json_output))
    set_content_id(content)


app.command()(init)
app.command()(status)
app.command()(revert)
app.command()(publish)
app.command()(unpublish)
app.command()(history)
app.command()(compare)
app.command()(diff)

version_app.command("create")(version_create)
version_app.command("show")(version_show)
version_app.command("list")(version_list)
version_app.command("delete")(version_delete)
version_app.command("current")(version_current)

tag_app.command("add")(tag_add)
tag_app.command("rename")(tag_rename)
tag_app.command("delete")(tag_delete)
tag_app.command("list")(tag_list)


if __name__ == "__main__":
    app()

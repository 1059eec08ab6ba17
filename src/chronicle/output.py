"""Output formatting for chronicle CLI."""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape

from .models import DocumentModel


def to_data(value: Any) -> Any:
    """Convert models (or lists of models) to JSON-compatible data."""
    if isinstance(value, DocumentModel):
        return value.to_document()
    if isinstance(value, list):
        return [to_data(item) for item in value]
    return value


@dataclass
class OutputContext:
    """Context for output formatting."""

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print message respecting output mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: Any) -> None:
        """Print JSON data."""
        if self.json_mode:
            print(json.dumps(to_data(data), indent=2, default=str))

    def result(self, data: Any, message: str = "") -> None:
        """Print result in appropriate format."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error in appropriate format."""
        if self.json_mode and data:
            self.print_json({"error": message, **data})
        elif self.json_mode:
            self.print_json({"error": message})
        else:
            self.console.print(f"[red]Error: {escape(message)}[/red]")

    def success(self, message: str, data: Any = None) -> None:
        """Print success message in appropriate format."""
        if self.json_mode and data is not None:
            self.print_json(data)
        elif self.json_mode:
            self.print_json({"success": message})
        else:
            self.console.print(f"[green]{escape(message)}[/green]")


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx

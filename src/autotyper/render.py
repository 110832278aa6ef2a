"""Console messages shown around the demo."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class Renderer:
    """Writes status and error lines to stderr, away from the typed output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console(stderr=True, highlight=False)

    def info(self, message: str) -> None:
        self.console.print(escape(message), soft_wrap=True)

    def error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def create_renderer() -> Renderer:
    """Create and return a Renderer instance."""
    return Renderer()

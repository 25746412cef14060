"""Rich-rendered trace sink for the CLI."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.markup import escape

from statesync.contracts.action import Action, ActionKind
from statesync.engine.trace import TraceSink


class RichTraceSink(TraceSink):
    """Prints one colored line per action to the terminal (stderr by default)."""

    _KIND_LABELS: ClassVar[dict[ActionKind, str]] = {
        ActionKind.CREATE: "[green]Create[/]",
        ActionKind.UPDATE: "[yellow]Update[/]",
        ActionKind.DELETE: "[red]Delete[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def record(self, action: Action) -> None:
        label = self._KIND_LABELS.get(action.kind, str(action.kind))
        self._console.print(f"{label} [bold]{escape(action.key)}[/]  [dim]{escape(action.reason)}[/]")

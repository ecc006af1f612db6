from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rich.console import Console

    from ...binding import ValidationIssue


class IssuesPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, source: Path, issues: Sequence[ValidationIssue]) -> None:
        if not issues:
            self.console.print(f"[green]✓[/green] {escape(str(source))}: no issues", soft_wrap=True)
            return
        table = Table(title=f"Binding Issues: {escape(source.name)}")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind", style="yellow")
        table.add_column("Path", style="cyan")
        table.add_column("Message")
        table.add_column("Raw", style="dim")
        for index, issue in enumerate(issues, start=1):
            table.add_row(
                str(index),
                str(issue.kind),
                escape(issue.path),
                escape(issue.message),
                escape(issue.raw or ""),
            )
        self.console.print(table)
        self.console.print(
            f"[red]✗[/red] {escape(str(source))}: {len(issues)} issue(s)", soft_wrap=True
        )

from enum import IntEnum
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._stats: dict[str, int] = {
            "documents_marshaled": 0,
            "documents_unmarshaled": 0,
            "elements_skipped": 0,
            "warnings": 0,
            "errors": 0,
        }

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            self.console.print(escape(message))

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            self.console.print(f"[dim cyan]{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_document_start(self, operation: str, root: str) -> None:
        self.debug(f"{operation.capitalize()} {root}")

    @override
    def log_document_complete(
        self, operation: str, root: str, *, issue_count: int = 0
    ) -> None:
        key = f"documents_{operation}ed"
        if key in self._stats:
            self._stats[key] += 1
        msg = f"{operation.capitalize()}ed {root}"
        if issue_count:
            msg += f" with {issue_count} issue(s)"
        self.verbose(msg)

    @override
    def log_element_skipped(self, path: str, name: str) -> None:
        self._stats["elements_skipped"] += 1
        self.debug(f"  Skipping unknown element {name} in {path}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Codec Statistics:[/dim]")
            self.console.print(
                f"[dim]  Documents marshaled: {self._stats['documents_marshaled']}[/dim]"
            )
            self.console.print(
                f"[dim]  Documents unmarshaled: {self._stats['documents_unmarshaled']}[/dim]"
            )
            self.console.print(
                f"[dim]  Unknown elements skipped: {self._stats['elements_skipped']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

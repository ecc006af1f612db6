from typing import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_document_start(self, operation: str, root: str) -> None:
        return None

    @override
    def log_document_complete(
        self, operation: str, root: str, *, issue_count: int = 0
    ) -> None:
        return None

    @override
    def log_element_skipped(self, path: str, name: str) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None

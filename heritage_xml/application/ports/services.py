from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_document_start(self, operation: str, root: str) -> None: ...

    def log_document_complete(
        self, operation: str, root: str, *, issue_count: int = 0
    ) -> None: ...

    def log_element_skipped(self, path: str, name: str) -> None: ...

    def log_final_stats(self) -> None: ...

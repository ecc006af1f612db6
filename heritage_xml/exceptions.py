from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .binding.report import ValidationIssue


class HeritageXMLError(Exception):
    pass


class BindingDefinitionError(HeritageXMLError):
    """Raised when a record declaration cannot be turned into a descriptor table."""


class LexicalError(HeritageXMLError, ValueError):
    """Raised when text does not conform to the grammar of its schema type."""

    def __init__(self, type_name: str, raw: str, *, path: str | None = None) -> None:
        self.type_name = type_name
        self.raw = raw
        self.path = path
        location = f" at {path}" if path else ""
        super().__init__(f"Invalid {type_name} value{location}: {raw!r}")

    def at(self, path: str) -> LexicalError:
        return LexicalError(self.type_name, self.raw, path=path)


class MarshalError(HeritageXMLError):
    pass


class UnmarshalError(HeritageXMLError):
    pass


class StructuralError(UnmarshalError):
    """Raised when the input is not well-formed XML."""


class CardinalityError(UnmarshalError):
    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class ValidationError(UnmarshalError):
    """Raised when a document bound with issues; carries the partial result."""

    def __init__(self, issues: list[ValidationIssue], partial: Any = None) -> None:
        self.issues = issues
        self.partial = partial
        summary = "; ".join(issue.describe() for issue in issues[:3])
        more = f" (+{len(issues) - 3} more)" if len(issues) > 3 else ""
        super().__init__(f"{len(issues)} binding issue(s): {summary}{more}")

"""Issue reporting for lax unmarshaling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from ..exceptions import ValidationError


class IssueKind(StrEnum):
    LEXICAL = "lexical"
    CARDINALITY = "cardinality"


class ValidationIssue(BaseModel):
    """A problem found while binding a document.

    Attributes:
        kind: Lexical (bad primitive text) or cardinality (missing or
            repeated content)
        path: Slash separated element path, ``/@name`` for attributes
        message: Human readable description
        raw: Offending lexical value, when there is one
    """

    model_config = ConfigDict(frozen=True)

    kind: IssueKind
    path: str
    message: str
    raw: str | None = None

    def describe(self) -> str:
        return f"{self.path}: {self.message} ({self.kind})"


@dataclass(slots=True)
class UnmarshalResult[T]:
    """Bound record plus every issue collected while binding it."""

    record: T
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def raise_for_issues(self) -> T:
        if self.issues:
            raise ValidationError(self.issues, partial=self.record)
        return self.record


__all__ = ["IssueKind", "UnmarshalResult", "ValidationIssue"]

"""Declarative XML binding engine.

Records declare their XML shape with the field specifiers from
:mod:`.descriptors`; :func:`binding_for` turns a declaration into a cached
descriptor table which the marshaler and unmarshaler walk.
"""

from .descriptors import (
    Cardinality,
    Kind,
    attribute,
    chardata,
    choice,
    element,
    group,
    is_record,
    record,
)
from .marshal import Marshaler
from .report import IssueKind, UnmarshalResult, ValidationIssue
from .table import FieldBinding, RecordBinding, binding_for
from .unmarshal import Unmarshaler

__all__ = [
    "Cardinality",
    "FieldBinding",
    "IssueKind",
    "Kind",
    "Marshaler",
    "RecordBinding",
    "UnmarshalResult",
    "Unmarshaler",
    "ValidationIssue",
    "attribute",
    "binding_for",
    "chardata",
    "choice",
    "element",
    "group",
    "is_record",
    "record",
]

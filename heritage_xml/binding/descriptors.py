"""Declarative field specifiers for bound records.

A bound record is a dataclass whose fields each carry a binding descriptor::

    @record(LIDO_NS, "actor")
    class Actor:
        type: str | None = attribute(LIDO_NS, "type")
        actor_ids: list[Identifier] = element(LIDO_NS, "actorID")
        vital_dates: DateSpan | None = element(LIDO_NS, "vitalDatesActor")

Element and choice cardinality is read from the annotation when the record's
descriptor table is built: ``list[X]`` is repeated, ``X | None`` optional and
a bare ``X`` required. Field declaration order is serialization order.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, dataclass_transform, overload

from .. import xsdt
from ..namespaces import QName

BINDING_KEY = "heritage_xml.binding"
RECORD_ATTR = "__xml_record__"


class Kind(Enum):
    ATTRIBUTE = "attribute"
    ELEMENT = "element"
    CHARDATA = "chardata"
    GROUP = "group"
    CHOICE = "choice"


class Cardinality(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATED = "repeated"


class _Unset:
    """Placeholder default replaced once the annotation has been resolved."""

    def __repr__(self) -> str:
        return "<unset>"


UNSET: Any = _Unset()


@dataclass(frozen=True, slots=True)
class FieldSpec:
    kind: Kind
    namespace: str | None = None
    name: str | None = None
    simple: xsdt.SimpleType | None = None
    required: bool = False
    omit_empty: bool = True
    group: type | None = None
    alternatives: tuple[QName, ...] = ()


@dataclass(frozen=True, slots=True)
class RecordOptions:
    qname: QName | None
    mixed: bool = False


def attribute(
    namespace: str | None,
    name: str,
    type_: xsdt.SimpleType = xsdt.STRING,
    *,
    required: bool = False,
    omit_empty: bool | None = None,
    default: Any = None,
) -> Any:
    """Declare an XML attribute field.

    Args:
        namespace: Attribute namespace URI, None for unqualified attributes
        name: Attribute local name
        type_: Primitive adapter for the attribute value
        required: Whether the schema requires the attribute
        omit_empty: Skip empty values when marshaling; defaults to
            ``not required``
        default: Default field value
    """
    if omit_empty is None:
        omit_empty = not required
    spec = FieldSpec(
        Kind.ATTRIBUTE,
        namespace,
        name,
        simple=type_,
        required=required,
        omit_empty=omit_empty,
    )
    return field(default=default, metadata={BINDING_KEY: spec})


def chardata(type_: xsdt.SimpleType = xsdt.STRING, *, default: Any = None) -> Any:
    """Declare the field holding the element's character content."""
    return field(default=default, metadata={BINDING_KEY: FieldSpec(Kind.CHARDATA, simple=type_)})


def element(
    namespace: str | None,
    name: str,
    type_: xsdt.SimpleType | None = None,
) -> Any:
    """Declare a child element field.

    ``type_`` is given for simple-content elements only; for record-typed
    children the record class is taken from the annotation.
    """
    spec = FieldSpec(Kind.ELEMENT, namespace, name, simple=type_)
    return field(default=UNSET, metadata={BINDING_KEY: spec})


def group(group_type: type) -> Any:
    """Compose an attribute or element group into the host record.

    The group's own fields are spliced into the host's binding table at
    this position; no wrapper element is written.
    """
    spec = FieldSpec(Kind.GROUP, group=group_type)
    return field(default_factory=group_type, metadata={BINDING_KEY: spec})


def choice(*alternatives: tuple[str | None, str]) -> Any:
    """Declare a substitution-group / choice field.

    Each ``(namespace, name)`` pair is matched positionally with the record
    types of the annotation union, e.g. ``LinearRing | Ring | None``.
    """
    names = tuple(QName(namespace, local) for namespace, local in alternatives)
    spec = FieldSpec(Kind.CHOICE, alternatives=names)
    return field(default=UNSET, metadata={BINDING_KEY: spec})


def spec_of(dc_field: dataclasses.Field[Any]) -> FieldSpec | None:
    return dc_field.metadata.get(BINDING_KEY)


def is_record(cls: Any) -> bool:
    return isinstance(cls, type) and RECORD_ATTR in cls.__dict__


def record_options(cls: type) -> RecordOptions:
    return cls.__dict__[RECORD_ATTR]


def _fill_defaults(self: Any) -> None:
    # Imported lazily: the table module needs the descriptors defined first.
    from .table import binding_for

    binding = binding_for(type(self))
    for name, cardinality, factory in binding.own_defaults:
        if getattr(self, name) is UNSET:
            if cardinality is Cardinality.REPEATED:
                setattr(self, name, [])
            elif cardinality is Cardinality.REQUIRED and factory is not None:
                setattr(self, name, factory())
            else:
                setattr(self, name, None)


@overload
def record[T](namespace: type[T], /) -> type[T]: ...


@overload
def record[T](
    namespace: str | None = None, name: str | None = None, *, mixed: bool = False
) -> Callable[[type[T]], type[T]]: ...


@dataclass_transform(field_specifiers=(attribute, chardata, element, group, choice))
def record(
    namespace: Any = None, name: str | None = None, *, mixed: bool = False
) -> Any:
    """Turn a class into a bound record.

    Args:
        namespace: Namespace of the record's own element name
        name: Local element name; records without one can only be
            marshaled as children, as groups, or with an explicit name
        mixed: Allow character content alongside child elements
    """

    def wrap(cls: type) -> type:
        qname = QName(namespace, name) if name else None
        setattr(cls, RECORD_ATTR, RecordOptions(qname, mixed))
        if "__post_init__" not in cls.__dict__:
            cls.__post_init__ = _fill_defaults
        return dataclass(cls)

    if isinstance(namespace, type):
        cls, namespace = namespace, None
        return wrap(cls)
    return wrap


__all__ = [
    "UNSET",
    "Cardinality",
    "FieldSpec",
    "Kind",
    "RecordOptions",
    "attribute",
    "chardata",
    "choice",
    "element",
    "group",
    "is_record",
    "record",
    "record_options",
    "spec_of",
]

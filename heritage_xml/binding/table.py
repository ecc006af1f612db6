"""Descriptor tables derived from bound record declarations."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import cache
import types
from typing import Any, Union, get_args, get_origin, get_type_hints

from .. import xsdt
from ..exceptions import BindingDefinitionError
from ..namespaces import QName
from .descriptors import (
    Cardinality,
    Kind,
    is_record,
    record_options,
    spec_of,
)


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """One resolved descriptor.

    ``path`` is the chain of attribute names from the host record down to the
    field, passing through any composed groups; ``group_types`` holds the
    group classes along that chain so missing groups can be created.
    """

    path: tuple[str, ...]
    group_types: tuple[type, ...]
    kind: Kind
    cardinality: Cardinality
    qname: QName | None = None
    simple: xsdt.SimpleType | None = None
    record_type: type | None = None
    required: bool = False
    omit_empty: bool = True
    alternatives: tuple[tuple[QName, type], ...] = ()

    @property
    def name(self) -> str:
        return ".".join(self.path)

    def owner(self, instance: Any) -> Any:
        for attr, group_type in zip(self.path[:-1], self.group_types, strict=True):
            nested = getattr(instance, attr)
            if nested is None:
                nested = group_type()
                setattr(instance, attr, nested)
            instance = nested
        return instance

    def get(self, instance: Any) -> Any:
        for attr in self.path:
            if instance is None:
                return None
            instance = getattr(instance, attr)
        return instance

    def set(self, instance: Any, value: Any) -> None:
        setattr(self.owner(instance), self.path[-1], value)

    def assign(self, instance: Any, value: Any) -> None:
        """Store an unmarshaled value, appending for repeated fields."""
        if self.cardinality is not Cardinality.REPEATED:
            self.set(instance, value)
            return
        owner = self.owner(instance)
        items = getattr(owner, self.path[-1])
        if items is None:
            items = []
            setattr(owner, self.path[-1], items)
        items.append(value)

    def values(self, instance: Any) -> list[Any]:
        """Return the present values of the field as a list."""
        value = self.get(instance)
        if value is None:
            return []
        if self.cardinality is Cardinality.REPEATED:
            return [item for item in value if item is not None]
        return [value]

    def alternative_for(self, value: Any) -> QName | None:
        for qname, alt_type in self.alternatives:
            if type(value) is alt_type:
                return qname
        for qname, alt_type in self.alternatives:
            if isinstance(value, alt_type):
                return qname
        return None


@dataclass(slots=True)
class RecordBinding:
    cls: type
    qname: QName | None
    mixed: bool
    attributes: list[FieldBinding] = field(default_factory=list)
    content: list[FieldBinding] = field(default_factory=list)
    text: FieldBinding | None = None
    attribute_index: dict[QName, FieldBinding] = field(default_factory=dict)
    element_index: dict[QName, tuple[FieldBinding, type | None]] = field(default_factory=dict)
    own_defaults: list[tuple[str, Cardinality, type | None]] = field(default_factory=list)

    @property
    def required(self) -> list[FieldBinding]:
        attrs = [fb for fb in self.attributes if fb.required]
        elements = [fb for fb in self.content if fb.cardinality is Cardinality.REQUIRED]
        return attrs + elements

    def add_attribute(self, fb: FieldBinding) -> None:
        assert fb.qname is not None
        if fb.qname in self.attribute_index:
            raise BindingDefinitionError(
                f"{self.cls.__name__}: attribute {fb.qname} bound twice "
                f"({self.attribute_index[fb.qname].name}, {fb.name})"
            )
        self.attribute_index[fb.qname] = fb
        self.attributes.append(fb)

    def add_content(self, fb: FieldBinding) -> None:
        if fb.kind is Kind.CHOICE:
            entries = [(qname, alt_type) for qname, alt_type in fb.alternatives]
        else:
            assert fb.qname is not None
            entries = [(fb.qname, fb.record_type)]
        for qname, target in entries:
            if qname in self.element_index:
                raise BindingDefinitionError(
                    f"{self.cls.__name__}: element {qname} bound twice "
                    f"({self.element_index[qname][0].name}, {fb.name})"
                )
            self.element_index[qname] = (fb, target)
        self.content.append(fb)

    def set_text(self, fb: FieldBinding) -> None:
        if self.text is not None:
            raise BindingDefinitionError(
                f"{self.cls.__name__}: character data bound twice ({self.text.name}, {fb.name})"
            )
        self.text = fb


def _members(tp: Any) -> tuple[Any, ...]:
    if get_origin(tp) in (Union, types.UnionType):
        return get_args(tp)
    return (tp,)


def cardinality_of(hint: Any) -> tuple[Cardinality, tuple[Any, ...]]:
    """Split an annotation into a cardinality and its member types."""
    if get_origin(hint) is list:
        (inner,) = get_args(hint)
        return Cardinality.REPEATED, _members(inner)
    members = _members(hint)
    present = tuple(m for m in members if m is not type(None))
    if len(present) < len(members):
        return Cardinality.OPTIONAL, present
    return Cardinality.REQUIRED, present


def _nest(fb: FieldBinding, attr: str, group_type: type) -> FieldBinding:
    return FieldBinding(
        path=(attr, *fb.path),
        group_types=(group_type, *fb.group_types),
        kind=fb.kind,
        cardinality=fb.cardinality,
        qname=fb.qname,
        simple=fb.simple,
        record_type=fb.record_type,
        required=fb.required,
        omit_empty=fb.omit_empty,
        alternatives=fb.alternatives,
    )


@cache
def binding_for(cls: type) -> RecordBinding:
    """Build (once) the descriptor table of a bound record class.

    Raises:
        BindingDefinitionError: If ``cls`` is not a record or its
            declaration is inconsistent
    """
    if not is_record(cls):
        raise BindingDefinitionError(f"{cls!r} is not a bound record")
    options = record_options(cls)
    binding = RecordBinding(cls, options.qname, options.mixed)
    try:
        hints = get_type_hints(cls)
    except NameError as exc:
        raise BindingDefinitionError(f"{cls.__name__}: unresolvable annotation: {exc}") from exc

    for dc_field in fields(cls):
        spec = spec_of(dc_field)
        if spec is None:
            continue
        name = dc_field.name
        hint = hints[name]

        if spec.kind is Kind.ATTRIBUTE:
            binding.add_attribute(
                FieldBinding(
                    path=(name,),
                    group_types=(),
                    kind=Kind.ATTRIBUTE,
                    cardinality=Cardinality.REQUIRED if spec.required else Cardinality.OPTIONAL,
                    qname=QName(spec.namespace, spec.name or name),
                    simple=spec.simple,
                    required=spec.required,
                    omit_empty=spec.omit_empty,
                )
            )
        elif spec.kind is Kind.CHARDATA:
            binding.set_text(
                FieldBinding(
                    path=(name,),
                    group_types=(),
                    kind=Kind.CHARDATA,
                    cardinality=Cardinality.OPTIONAL,
                    simple=spec.simple,
                )
            )
        elif spec.kind is Kind.GROUP:
            assert spec.group is not None
            nested = binding_for(spec.group)
            for fb in nested.attributes:
                binding.add_attribute(_nest(fb, name, spec.group))
            for fb in nested.content:
                binding.add_content(_nest(fb, name, spec.group))
            if nested.text is not None:
                binding.set_text(_nest(nested.text, name, spec.group))
        elif spec.kind is Kind.ELEMENT:
            cardinality, members = cardinality_of(hint)
            target: type | None = None
            if spec.simple is None:
                if len(members) != 1 or not is_record(members[0]):
                    raise BindingDefinitionError(
                        f"{cls.__name__}.{name}: element needs a record type or a simple type"
                    )
                target = members[0]
            binding.add_content(
                FieldBinding(
                    path=(name,),
                    group_types=(),
                    kind=Kind.ELEMENT,
                    cardinality=cardinality,
                    qname=QName(spec.namespace, spec.name or name),
                    simple=spec.simple,
                    record_type=target,
                )
            )
            factory = target if cardinality is Cardinality.REQUIRED else None
            binding.own_defaults.append((name, cardinality, factory))
        elif spec.kind is Kind.CHOICE:
            cardinality, members = cardinality_of(hint)
            if cardinality is Cardinality.REQUIRED:
                cardinality = Cardinality.OPTIONAL
            if len(members) != len(spec.alternatives):
                raise BindingDefinitionError(
                    f"{cls.__name__}.{name}: {len(spec.alternatives)} names for "
                    f"{len(members)} alternative types"
                )
            for member in members:
                if not is_record(member):
                    raise BindingDefinitionError(
                        f"{cls.__name__}.{name}: choice alternative {member!r} is not a record"
                    )
            binding.add_content(
                FieldBinding(
                    path=(name,),
                    group_types=(),
                    kind=Kind.CHOICE,
                    cardinality=cardinality,
                    alternatives=tuple(zip(spec.alternatives, members, strict=True)),
                )
            )
            binding.own_defaults.append((name, cardinality, None))

    if binding.text is not None and binding.content and not binding.mixed:
        raise BindingDefinitionError(
            f"{cls.__name__}: character data and child elements require mixed=True"
        )
    return binding


__all__ = ["FieldBinding", "RecordBinding", "binding_for", "cardinality_of"]

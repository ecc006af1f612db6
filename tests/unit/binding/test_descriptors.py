"""Unit tests for record declarations and descriptor tables."""

from __future__ import annotations

import pytest

from heritage_xml import xsdt
from heritage_xml.binding import (
    Cardinality,
    Kind,
    attribute,
    binding_for,
    chardata,
    choice,
    element,
    group,
    is_record,
    record,
)
from heritage_xml.binding.table import cardinality_of
from heritage_xml.exceptions import BindingDefinitionError
from heritage_xml.namespaces import QName

NS = "urn:example:test"


@record
class Audit:
    created_by: str | None = attribute(None, "createdBy")
    note: str | None = element(NS, "note", xsdt.STRING)


@record(NS, "leaf")
class Leaf:
    value: str | None = chardata()
    code: str | None = attribute(None, "code")


@record(NS, "other")
class Other:
    pass


@record(NS, "host")
class Host:
    id: str | None = attribute(None, "id", required=True)
    audit: Audit = group(Audit)
    leaves: list[Leaf] = element(NS, "leaf")
    first: Leaf = element(NS, "first")
    maybe: Leaf | None = element(NS, "maybe")
    either: Leaf | Other | None = choice((NS, "pick"), (NS, "other"))


@record(NS, "derived")
class Derived(Leaf):
    extra: str | None = attribute(None, "extra")


@record(NS, "dup")
class DuplicateElement:
    a: str | None = element(NS, "x", xsdt.STRING)
    b: str | None = element(NS, "x", xsdt.STRING)


@record(NS, "dupattr")
class DuplicateAttribute:
    a: str | None = attribute(None, "x")
    b: str | None = attribute(None, "x")


@record(NS, "mixedup")
class TextAndChildren:
    value: str | None = chardata()
    child: str | None = element(NS, "child", xsdt.STRING)


@record(NS, "badchoice")
class BadChoice:
    item: Leaf | Other | None = choice((NS, "only"))


@record(NS, "unresolved")
class Unresolved:
    thing: Missing | None = element(NS, "thing")  # noqa: F821


class NotARecord:
    pass


class TestRecordDecorator:
    def test_record_is_a_dataclass_with_defaults(self):
        host = Host()
        assert host.leaves == []
        assert host.first == Leaf()
        assert host.maybe is None
        assert host.either is None
        assert isinstance(host.audit, Audit)

    def test_instances_do_not_share_lists(self):
        a, b = Host(), Host()
        a.leaves.append(Leaf(value="x"))
        assert b.leaves == []

    def test_explicit_values_are_kept(self):
        leaf = Leaf(value="v")
        host = Host(first=leaf, maybe=leaf)
        assert host.first is leaf
        assert host.maybe is leaf

    def test_is_record(self):
        assert is_record(Host)
        assert is_record(Audit)
        assert not is_record(NotARecord)
        assert not is_record(Host())


class TestBindingTable:
    def test_flattens_groups_in_declaration_order(self):
        binding = binding_for(Host)
        assert [fb.name for fb in binding.attributes] == ["id", "audit.created_by"]
        assert [fb.name for fb in binding.content] == [
            "audit.note",
            "leaves",
            "first",
            "maybe",
            "either",
        ]

    def test_cardinality_from_annotations(self):
        binding = binding_for(Host)
        by_name = {fb.name: fb for fb in binding.content}
        assert by_name["leaves"].cardinality is Cardinality.REPEATED
        assert by_name["first"].cardinality is Cardinality.REQUIRED
        assert by_name["maybe"].cardinality is Cardinality.OPTIONAL
        assert by_name["either"].kind is Kind.CHOICE

    def test_required_fields(self):
        names = [fb.name for fb in binding_for(Host).required]
        assert names == ["id", "first"]

    def test_element_index_covers_choice_alternatives(self):
        index = binding_for(Host).element_index
        assert index[QName(NS, "pick")][1] is Leaf
        assert index[QName(NS, "other")][1] is Other
        assert index[QName(NS, "note")][1] is None

    def test_group_values_are_reachable(self):
        fb = binding_for(Host).attribute_index[QName(None, "createdBy")]
        host = Host()
        fb.set(host, "me")
        assert host.audit.created_by == "me"
        assert fb.get(host) == "me"

    def test_missing_group_is_created(self):
        fb = binding_for(Host).attribute_index[QName(None, "createdBy")]
        host = Host()
        host.audit = None
        fb.set(host, "me")
        assert host.audit == Audit(created_by="me")

    def test_subclass_fields_follow_base_fields(self):
        binding = binding_for(Derived)
        assert binding.qname == QName(NS, "derived")
        assert [fb.name for fb in binding.attributes] == ["code", "extra"]
        assert binding.text is not None

    def test_table_is_cached(self):
        assert binding_for(Host) is binding_for(Host)

    def test_alternative_prefers_exact_type(self):
        fb = binding_for(Host).element_index[QName(NS, "pick")][0]
        assert fb.alternative_for(Leaf()) == QName(NS, "pick")
        assert fb.alternative_for(Derived()) == QName(NS, "pick")
        assert fb.alternative_for(Host()) is None


class TestDefinitionErrors:
    def test_duplicate_element(self):
        with pytest.raises(BindingDefinitionError, match="bound twice"):
            binding_for(DuplicateElement)

    def test_duplicate_attribute(self):
        with pytest.raises(BindingDefinitionError, match="bound twice"):
            binding_for(DuplicateAttribute)

    def test_text_and_children_need_mixed(self):
        with pytest.raises(BindingDefinitionError, match="mixed=True"):
            binding_for(TextAndChildren)

    def test_choice_names_must_match_types(self):
        with pytest.raises(BindingDefinitionError, match="alternative types"):
            binding_for(BadChoice)

    def test_unresolvable_annotation(self):
        with pytest.raises(BindingDefinitionError, match="unresolvable"):
            binding_for(Unresolved)

    def test_plain_class_is_rejected(self):
        with pytest.raises(BindingDefinitionError, match="not a bound record"):
            binding_for(NotARecord)


class TestCardinalityOf:
    def test_list_is_repeated(self):
        assert cardinality_of(list[int]) == (Cardinality.REPEATED, (int,))

    def test_optional(self):
        assert cardinality_of(int | None) == (Cardinality.OPTIONAL, (int,))

    def test_bare_type_is_required(self):
        assert cardinality_of(int) == (Cardinality.REQUIRED, (int,))

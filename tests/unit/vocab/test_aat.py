"""Unit tests for the Getty AAT subject binding."""

from __future__ import annotations

import pytest

from heritage_xml import decode, marshal, unmarshal
from heritage_xml.namespaces import GVP_NS, RDF_NS, SKOS_NS
from heritage_xml.vocab.aat import (
    CONCEPT_URI,
    GUIDE_TERM_URI,
    SKOS_CONCEPT_URI,
    GVPSubject,
    Term,
)
from heritage_xml.vocab.rdf import ResourceAttr, Type
from heritage_xml.vocab.rdfs import Label


@pytest.fixture
def surrealism(fixtures_dir):
    return (fixtures_dir / "surrealism.rdf").read_bytes()


class TestSurrealismDump:
    def test_binds_without_issues(self, surrealism):
        result = decode(surrealism, Term)

        assert result.ok
        assert result.record.subject.about == "http://vocab.getty.edu/aat/300021512"

    def test_concept_types(self, surrealism):
        term = unmarshal(surrealism, Term)

        assert [t.resource for t in term.subject.types] == [SKOS_CONCEPT_URI, CONCEPT_URI]
        assert term.is_concept()
        assert term.is_type(SKOS_CONCEPT_URI)
        assert not term.is_guide_term()

    def test_labels(self, surrealism):
        term = unmarshal(surrealism, Term)

        assert [(label.lang, label.value) for label in term.subject.labels] == [
            ("en", "Surrealism"),
            ("de", "Surrealismus"),
            ("es", "surrealismo"),
        ]
        assert term.preferred_label() == "Surrealism"
        assert term.preferred_label("de") == "Surrealismus"
        assert term.preferred_label("fr") == "Surrealism"

    def test_broader(self, surrealism):
        term = unmarshal(surrealism, Term)

        assert term.broader() == ["http://vocab.getty.edu/aat/300021494"]

    def test_statements(self, surrealism):
        term = unmarshal(surrealism, Term)

        assert len(term.statements) == 3
        assert term.statements[1].predicate.resource == SKOS_NS + "broader"
        assert term.statements[0].object.resource == "http://vocab.getty.edu/aat/300021494"

    def test_round_trip(self, surrealism):
        term = unmarshal(surrealism, Term)

        assert unmarshal(marshal(term), Term) == term


class TestTermHelpers:
    def test_guide_term(self):
        term = Term(
            subject=GVPSubject(
                about="http://vocab.getty.edu/aat/300264092",
                types=[Type(resource=GUIDE_TERM_URI)],
            )
        )

        assert term.is_guide_term()
        assert not term.is_concept()

    def test_empty_term(self):
        term = Term()

        assert not term.is_concept()
        assert term.preferred_label() is None
        assert term.broader() == []

    def test_broader_falls_back_to_all_broader_terms(self):
        term = Term(
            subject=GVPSubject(
                about="x",
                broader_terms=[ResourceAttr(resource="a"), ResourceAttr(resource="b")],
            )
        )

        assert term.broader() == ["a", "b"]

    def test_labels_without_language(self):
        term = Term(subject=GVPSubject(about="x", labels=[Label(value="only")]))

        assert term.preferred_label() == "only"

    def test_missing_about_is_reported(self):
        xml = (
            f'<rdf:RDF xmlns:rdf="{RDF_NS}" xmlns:gvp="{GVP_NS}">'
            f'<gvp:Subject><rdf:type rdf:resource="{CONCEPT_URI}"/></gvp:Subject>'
            "</rdf:RDF>"
        )

        result = decode(xml, Term)

        assert result.issues[0].path == "RDF/Subject"
        assert result.issues[0].message == "missing required @about"
        assert result.record.is_concept()

"""LIDO concepts: controlled terms identified by authority IDs."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, chardata, element, record
from ...namespaces import LIDO_NS, XML_NS
from . import crm
from .common import URI_TYPE, AddedSearchTerm, Identifier

AAT_SOURCE = "AAT"


@record
class Term:
    value: str | None = chardata()
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE)
    pref: str | None = attribute(LIDO_NS, "pref")
    added_search_term: AddedSearchTerm | None = attribute(
        LIDO_NS, "addedSearchTerm", xsdt.Enumeration(AddedSearchTerm)
    )
    encoding_analog: str | None = attribute(LIDO_NS, "encodinganalog")
    label: str | None = attribute(LIDO_NS, "label")


@record
class Concept:
    concept_ids: list[Identifier] = element(LIDO_NS, "conceptID")
    terms: list[Term] = element(LIDO_NS, "term")


@record
class ConceptElement(Concept):
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class ClassificationElement(Concept):
    type: str | None = attribute(LIDO_NS, "type")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


def new_concept(concept_id: Identifier | None = None, term: Term | None = None) -> Concept:
    concept = Concept()
    if concept_id is not None:
        concept.concept_ids.append(concept_id)
    if term is not None:
        concept.terms.append(term)
    return concept


def new_uri_concept(uri: str, term: str, lang: str | None = None) -> Concept:
    """A concept identified by a URI, labelled with one term."""
    return new_concept(
        Identifier(value=uri, type=URI_TYPE),
        Term(value=term, lang=lang),
    )


def new_crm_concept(crm_id: str) -> Concept:
    """A concept for a CIDOC-CRM class, e.g. ``E22`` (Man-Made Object).

    Raises:
        KeyError: If ``crm_id`` is not a known CRM class
    """
    return new_uri_concept(crm.format_uri(crm_id), crm.class_name(crm_id), "en")


def new_term_concept(source: str, concept_type: str, term_id: str, term: str) -> Concept:
    return new_concept(
        Identifier(value=term_id, source=source, type=concept_type),
        Term(value=term),
    )


def new_aat_concept(concept_type: str, aat_id: str, term: str) -> Concept:
    """A concept identified by a Getty AAT ID such as ``300033618``."""
    return new_term_concept(AAT_SOURCE, concept_type, aat_id, term)


def new_concept_classification(concept: Concept) -> ClassificationElement:
    return ClassificationElement(concept_ids=concept.concept_ids, terms=concept.terms)


def new_concept_element(concept: Concept, sort_order: int | None = None) -> ConceptElement:
    return ConceptElement(concept_ids=concept.concept_ids, terms=concept.terms, sort_order=sort_order)


__all__ = [
    "AAT_SOURCE",
    "ClassificationElement",
    "Concept",
    "ConceptElement",
    "Term",
    "new_aat_concept",
    "new_concept",
    "new_concept_classification",
    "new_concept_element",
    "new_crm_concept",
    "new_term_concept",
    "new_uri_concept",
]

"""Getty vocabulary (GVP) subjects as exported in the AAT RDF/XML dumps.

A dump such as ``http://vocab.getty.edu/aat/300021512.rdf`` has an
``rdf:RDF`` root holding one ``gvp:Subject`` and a list of reified
``rdf:Statement`` relations. Only the subject's identity, types, labels and
hierarchy links are bound; the many other GVP properties are skipped.
"""

from __future__ import annotations

from ..binding import attribute, element, record
from ..namespaces import GVP_NS, RDF_NS, RDFS_NS, SKOS_NS
from .rdf import ResourceAttr, Statement, Type
from .rdfs import Label

# Place defined by administrative boundaries (TGN only).
ADMIN_PLACE_CONCEPT_URI = GVP_NS + "AdminPlaceConcept"
# Biography of a ULAN agent.
BIOGRAPHY_URI = GVP_NS + "Biography"
# Proper concept, used for indexing and cataloguing (AAT only).
CONCEPT_URI = GVP_NS + "Concept"
# One of the major divisions of a vocabulary, e.g. Objects Facet.
FACET_URI = GVP_NS + "Facet"
# People who worked together to create art (ULAN).
GROUP_CONCEPT_URI = GVP_NS + "GroupConcept"
# Place holder creating a level in the hierarchy; not used for indexing.
GUIDE_TERM_URI = GVP_NS + "GuideTerm"
# Top of a hierarchy (AAT only).
HIERARCHY_URI = GVP_NS + "Hierarchy"
# Subject moved out of the hierarchy or merged into another.
OBSOLETE_SUBJECT_URI = GVP_NS + "ObsoleteSubject"
# A single individual (ULAN).
PERSON_CONCEPT_URI = GVP_NS + "PersonConcept"
# Place that is both administrative and physical (TGN).
PHYS_ADMIN_PLACE_CONCEPT_URI = GVP_NS + "PhysAdminPlaceConcept"
# Physical feature such as a river or mountain (TGN).
PHYS_PLACE_CONCEPT_URI = GVP_NS + "PhysPlaceConcept"
# Note defining a subject or giving usage information.
SCOPE_NOTE_URI = GVP_NS + "ScopeNote"
# Any node in a GVP hierarchy.
SUBJECT_URI = GVP_NS + "Subject"
# Unknown person representing a culture (ULAN).
UNKNOWN_PERSON_CONCEPT_URI = GVP_NS + "UnknownPersonConcept"

SKOS_CONCEPT_URI = SKOS_NS + "Concept"
SKOS_COLLECTION_URI = SKOS_NS + "Collection"


@record(GVP_NS, "Subject")
class GVPSubject:
    about: str | None = attribute(RDF_NS, "about", required=True)
    types: list[Type] = element(RDF_NS, "type")
    labels: list[Label] = element(RDFS_NS, "label")
    broader_terms: list[ResourceAttr] = element(GVP_NS, "broader")
    broader_preferred_terms: list[ResourceAttr] = element(GVP_NS, "broaderPreferred")
    # skos:member lists the children of a guide term, skos:narrower those of a concept.
    member_terms: list[ResourceAttr] = element(SKOS_NS, "member")
    narrower_terms: list[ResourceAttr] = element(SKOS_NS, "narrower")


@record(RDF_NS, "RDF")
class Term:
    subject: GVPSubject | None = element(GVP_NS, "Subject")
    statements: list[Statement] = element(RDF_NS, "Statement")

    def is_type(self, type_uri: str) -> bool:
        if self.subject is None:
            return False
        return any(t.resource == type_uri for t in self.subject.types)

    def is_concept(self) -> bool:
        return self.is_type(CONCEPT_URI)

    def is_guide_term(self) -> bool:
        return self.is_type(GUIDE_TERM_URI)

    def preferred_label(self, lang: str = "en") -> str | None:
        """Return the first label in ``lang``, or the first label at all."""
        if self.subject is None or not self.subject.labels:
            return None
        for label in self.subject.labels:
            if label.lang == lang:
                return label.value
        return self.subject.labels[0].value

    def broader(self) -> list[str]:
        """URIs of the preferred broader subjects, falling back to all broader ones."""
        if self.subject is None:
            return []
        terms = self.subject.broader_preferred_terms or self.subject.broader_terms
        return [term.resource for term in terms if term.resource]


__all__ = [
    "ADMIN_PLACE_CONCEPT_URI",
    "BIOGRAPHY_URI",
    "CONCEPT_URI",
    "FACET_URI",
    "GROUP_CONCEPT_URI",
    "GUIDE_TERM_URI",
    "HIERARCHY_URI",
    "OBSOLETE_SUBJECT_URI",
    "PERSON_CONCEPT_URI",
    "PHYS_ADMIN_PLACE_CONCEPT_URI",
    "PHYS_PLACE_CONCEPT_URI",
    "SCOPE_NOTE_URI",
    "SKOS_COLLECTION_URI",
    "SKOS_CONCEPT_URI",
    "SUBJECT_URI",
    "UNKNOWN_PERSON_CONCEPT_URI",
    "GVPSubject",
    "Term",
]

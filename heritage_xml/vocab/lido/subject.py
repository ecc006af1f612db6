"""What a work depicts and how it relates to other works."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, element, record
from ...namespaces import LIDO_NS
from .actor import SubjectActor
from .common import DateSet, Text
from .concept import Concept, ConceptElement
from .event import EventSet
from .objects import ObjectSet, ThingPresent
from .place import PlaceSet


@record
class Subject:
    extents: list[Text] = element(LIDO_NS, "extentSubject")
    concepts: list[ConceptElement] = element(LIDO_NS, "subjectConcept")
    actors: list[SubjectActor] = element(LIDO_NS, "subjectActor")
    dates: list[DateSet] = element(LIDO_NS, "subjectDate")
    events: list[EventSet] = element(LIDO_NS, "subjectEvent")
    places: list[PlaceSet] = element(LIDO_NS, "subjectPlace")
    objects: list[ThingPresent] = element(LIDO_NS, "subjectObject")
    type: str | None = attribute(LIDO_NS, "type")


@record
class SubjectSet:
    display_subjects: list[Text] = element(LIDO_NS, "displaySubject")
    subject: Subject | None = element(LIDO_NS, "subject")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class SubjectWrap:
    subject_sets: list[SubjectSet] = element(LIDO_NS, "subjectSet")


@record
class RelatedWorkSet:
    related_work: ObjectSet | None = element(LIDO_NS, "relatedWork")
    rel_type: Concept | None = element(LIDO_NS, "relatedWorkRelType")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class RelatedWorksWrap:
    related_work_sets: list[RelatedWorkSet] = element(LIDO_NS, "relatedWorkSet")


@record
class ObjectRelationWrap:
    subject_wrap: SubjectWrap | None = element(LIDO_NS, "subjectWrap")
    related_works_wrap: RelatedWorksWrap | None = element(LIDO_NS, "relatedWorksWrap")


__all__ = [
    "ObjectRelationWrap",
    "RelatedWorkSet",
    "RelatedWorksWrap",
    "Subject",
    "SubjectSet",
    "SubjectWrap",
]

"""RDF/XML reification terms."""

from __future__ import annotations

from ..binding import attribute, element, record
from ..namespaces import RDF_NS


@record
class ResourceAttr:
    resource: str | None = attribute(RDF_NS, "resource", required=True)


@record
class Type(ResourceAttr):
    pass


@record
class Subject(ResourceAttr):
    pass


@record
class Predicate(ResourceAttr):
    pass


@record
class Object(ResourceAttr):
    pass


@record(RDF_NS, "Statement")
class Statement:
    subject: Subject | None = element(RDF_NS, "subject")
    predicate: Predicate | None = element(RDF_NS, "predicate")
    object: Object | None = element(RDF_NS, "object")


__all__ = ["Object", "Predicate", "ResourceAttr", "Statement", "Subject", "Type"]

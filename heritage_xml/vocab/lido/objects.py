"""References to other objects or works."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, element, record
from ...namespaces import LIDO_NS
from .common import Identifier, Note, Text, WebResource


@record
class Object:
    web_resources: list[WebResource] = element(LIDO_NS, "objectWebResource")
    object_ids: list[Identifier] = element(LIDO_NS, "objectID")
    notes: list[Note] = element(LIDO_NS, "objectNote")


@record
class ObjectSet:
    display_objects: list[Text] = element(LIDO_NS, "displayObject")
    object: Object | None = element(LIDO_NS, "object")


@record
class ThingPresent(ObjectSet):
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


__all__ = ["Object", "ObjectSet", "ThingPresent"]

"""Events in the life of an object: creation, finding, acquisition and so on.

Event types are usually CIDOC-CRM classes such as ``E12`` (Production).
"""

from __future__ import annotations

from datetime import UTC, datetime

from ... import xsdt
from ...binding import attribute, element, record
from ...namespaces import LIDO_NS
from .actor import EventActor
from .appellation import Appellation
from .common import Date, DateSet, DateSpan, DescriptiveNote, Identifier, Text
from .concept import ClassificationElement, Concept, ConceptElement, new_crm_concept
from .objects import ThingPresent
from .place import EventPlace

DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_date(moment: datetime) -> str:
    """Format ``moment`` in UTC; naive datetimes are taken to be UTC already."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).strftime(DATE_FORMAT)


@record(LIDO_NS, "materialsTech")
class MaterialsTech:
    terms: list[ClassificationElement] = element(LIDO_NS, "termMaterialsTech")
    extents: list[Text] = element(LIDO_NS, "extentMaterialsTech")
    sources: list[Text] = element(LIDO_NS, "sourceMaterialsTech")


@record
class EventMaterialsTech:
    display_materials_techs: list[Text] = element(LIDO_NS, "displayMaterialsTech")
    materials_tech: MaterialsTech | None = element(LIDO_NS, "materialsTech")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record(LIDO_NS, "event")
class Event:
    event_ids: list[Identifier] = element(LIDO_NS, "eventID")
    event_types: list[Concept] = element(LIDO_NS, "eventType")
    roles_in_event: list[Concept] = element(LIDO_NS, "roleInEvent")
    names: list[Appellation] = element(LIDO_NS, "eventName")
    actors: list[EventActor] = element(LIDO_NS, "eventActor")
    cultures: list[ConceptElement] = element(LIDO_NS, "culture")
    date: DateSet | None = element(LIDO_NS, "eventDate")
    period_names: list[ClassificationElement] = element(LIDO_NS, "periodName")
    places: list[EventPlace] = element(LIDO_NS, "eventPlace")
    methods: list[ConceptElement] = element(LIDO_NS, "eventMethod")
    materials_techs: list[EventMaterialsTech] = element(LIDO_NS, "eventMaterialsTech")
    things_present: list[ThingPresent] = element(LIDO_NS, "thingPresent")
    related_events: list[RelatedEvent] = element(LIDO_NS, "relatedEventSet")
    descriptions: list[DescriptiveNote] = element(LIDO_NS, "eventDescriptionSet")

    def append_crm_type(self, crm_id: str) -> None:
        """Add a CIDOC-CRM event type.

        Raises:
            KeyError: If ``crm_id`` is not a known CRM class
        """
        self.event_types.append(new_crm_concept(crm_id))

    def set_date(self, earliest: datetime, latest: datetime) -> None:
        """Set the event date span, written as UTC timestamps."""
        self.date = DateSet(
            date=DateSpan(
                earliest_date=Date(value=format_date(earliest)),
                latest_date=Date(value=format_date(latest)),
            )
        )


@record
class EventSet:
    display_events: list[Text] = element(LIDO_NS, "displayEvent")
    event: Event | None = element(LIDO_NS, "event")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class RelatedEvent:
    related_event: EventSet | None = element(LIDO_NS, "relatedEvent")
    rel_type: ConceptElement | None = element(LIDO_NS, "relatedEventRelType")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class EventWrap:
    event_sets: list[EventSet] = element(LIDO_NS, "eventSet")

    def append_event(self, event: Event) -> EventSet:
        event_set = EventSet(event=event)
        self.event_sets.append(event_set)
        return event_set


__all__ = [
    "DATE_FORMAT",
    "Event",
    "EventMaterialsTech",
    "EventSet",
    "EventWrap",
    "MaterialsTech",
    "RelatedEvent",
    "format_date",
]

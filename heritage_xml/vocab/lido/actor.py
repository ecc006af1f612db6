"""Persons, groups and institutions and the roles they play in events."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, element, record
from ...namespaces import LIDO_NS
from .appellation import Appellation
from .common import DateSpan, Identifier, Text
from .concept import ConceptElement

PERSON = "person"
CORPORATION = "corporation"
FAMILY = "family"
GROUP_OF_PERSONS = "group of persons"


@record(LIDO_NS, "actor")
class Actor:
    actor_ids: list[Identifier] = element(LIDO_NS, "actorID")
    names: list[Appellation] = element(LIDO_NS, "nameActorSet")
    nationalities: list[ConceptElement] = element(LIDO_NS, "nationalityActor")
    vital_dates: DateSpan | None = element(LIDO_NS, "vitalDatesActor")
    genders: list[Text] = element(LIDO_NS, "genderActor")
    type: str | None = attribute(LIDO_NS, "type")


@record
class ActorInRole:
    actor: Actor | None = element(LIDO_NS, "actor")
    roles: list[ConceptElement] = element(LIDO_NS, "roleActor")
    attribution_qualifiers: list[Text] = element(LIDO_NS, "attributionQualifierActor")
    extents: list[Text] = element(LIDO_NS, "extentActor")


@record
class EventActor:
    display_actors_in_role: list[Text] = element(LIDO_NS, "displayActorInRole")
    actor_in_role: ActorInRole | None = element(LIDO_NS, "actorInRole")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class SubjectActor:
    display_actors: list[Text] = element(LIDO_NS, "displayActor")
    actor: Actor | None = element(LIDO_NS, "actor")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


__all__ = [
    "CORPORATION",
    "FAMILY",
    "GROUP_OF_PERSONS",
    "PERSON",
    "Actor",
    "ActorInRole",
    "EventActor",
    "SubjectActor",
]

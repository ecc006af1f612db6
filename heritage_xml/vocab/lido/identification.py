"""Object identification: titles, inscriptions, repositories and descriptions."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, element, record
from ...namespaces import LIDO_NS
from .appellation import LegalBodyRef, TitleWrap
from .common import DescriptiveNote, Text, WorkID
from .measurements import MeasurementsWrap
from .place import Place


@record
class Inscription:
    transcriptions: list[Text] = element(LIDO_NS, "inscriptionTranscription")
    descriptions: list[DescriptiveNote] = element(LIDO_NS, "inscriptionDescription")
    type: str | None = attribute(LIDO_NS, "type")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class InscriptionsWrap:
    inscriptions: list[Inscription] = element(LIDO_NS, "inscriptions")


@record
class Repository:
    name: LegalBodyRef | None = element(LIDO_NS, "repositoryName")
    work_ids: list[WorkID] = element(LIDO_NS, "workID")
    location: Place | None = element(LIDO_NS, "repositoryLocation")
    type: str | None = attribute(LIDO_NS, "type")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class RepositoryWrap:
    repositories: list[Repository] = element(LIDO_NS, "repositorySet")


@record
class DisplayStateEdition:
    display_states: list[Text] = element(LIDO_NS, "displayState")
    display_editions: list[Text] = element(LIDO_NS, "displayEdition")
    sources: list[Text] = element(LIDO_NS, "sourceStateEdition")


@record
class ObjectDescription:
    notes: list[DescriptiveNote] = element(LIDO_NS, "objectDescriptionSet")


@record
class ObjectIdentification:
    title_wrap: TitleWrap = element(LIDO_NS, "titleWrap")
    inscriptions_wrap: InscriptionsWrap | None = element(LIDO_NS, "inscriptionsWrap")
    repository_wrap: RepositoryWrap | None = element(LIDO_NS, "repositoryWrap")
    display_state_edition_wrap: DisplayStateEdition | None = element(
        LIDO_NS, "displayStateEditionWrap"
    )
    description_wrap: ObjectDescription | None = element(LIDO_NS, "objectDescriptionWrap")
    measurements_wrap: MeasurementsWrap | None = element(LIDO_NS, "objectMeasurementsWrap")


__all__ = [
    "DisplayStateEdition",
    "Inscription",
    "InscriptionsWrap",
    "ObjectDescription",
    "ObjectIdentification",
    "Repository",
    "RepositoryWrap",
]

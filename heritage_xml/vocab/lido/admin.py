"""Administrative metadata: rights, record provenance and digital resources."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, element, record
from ...namespaces import LIDO_NS, XML_NS
from .appellation import LegalBodyRef
from .common import DateSet, DateSpan, Identifier, LinkResource, Note, Text, WebResource
from .concept import Concept
from .measurements import AspectMeasurements


@record
class Rights:
    types: list[Concept] = element(LIDO_NS, "rightsType")
    date: DateSpan | None = element(LIDO_NS, "rightsDate")
    holders: list[LegalBodyRef] = element(LIDO_NS, "rightsHolder")
    credit_lines: list[Text] = element(LIDO_NS, "creditLine")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class RightsWorkWrap:
    rights_work_sets: list[Rights] = element(LIDO_NS, "rightsWorkSet")


@record
class RecordInfo:
    ids: list[Identifier] = element(LIDO_NS, "recordInfoID")
    links: list[WebResource] = element(LIDO_NS, "recordInfoLink")
    metadata_dates: list[Note] = element(LIDO_NS, "recordMetadataDate")
    type: str | None = attribute(LIDO_NS, "type")


@record
class RecordWrap:
    record_ids: list[Identifier] = element(LIDO_NS, "recordID")
    record_type: Concept = element(LIDO_NS, "recordType")
    record_sources: list[LegalBodyRef] = element(LIDO_NS, "recordSource")
    record_rights: list[Rights] = element(LIDO_NS, "recordRights")
    record_info_sets: list[RecordInfo] = element(LIDO_NS, "recordInfoSet")


@record
class ResourceRep:
    link_resource: LinkResource = element(LIDO_NS, "linkResource")
    measurements_sets: list[AspectMeasurements] = element(LIDO_NS, "resourceMeasurementsSet")
    type: str | None = attribute(LIDO_NS, "type")


@record
class ResourceSet:
    resource_id: Identifier | None = element(LIDO_NS, "resourceID")
    representations: list[ResourceRep] = element(LIDO_NS, "resourceRepresentation")
    resource_type: Concept | None = element(LIDO_NS, "resourceType")
    rel_types: list[Concept] = element(LIDO_NS, "resourceRelType")
    perspectives: list[Concept] = element(LIDO_NS, "resourcePerspective")
    descriptions: list[Note] = element(LIDO_NS, "resourceDescription")
    date_taken: DateSet | None = element(LIDO_NS, "resourceDateTaken")
    sources: list[LegalBodyRef] = element(LIDO_NS, "resourceSource")
    rights: list[Rights] = element(LIDO_NS, "rightsResource")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class ResourceWrap:
    resource_sets: list[ResourceSet] = element(LIDO_NS, "resourceSet")


@record
class AdministrativeMetadata:
    rights_work_wrap: RightsWorkWrap | None = element(LIDO_NS, "rightsWorkWrap")
    record_wrap: RecordWrap = element(LIDO_NS, "recordWrap")
    resource_wrap: ResourceWrap | None = element(LIDO_NS, "resourceWrap")
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE, required=True)


__all__ = [
    "AdministrativeMetadata",
    "RecordInfo",
    "RecordWrap",
    "ResourceRep",
    "ResourceSet",
    "ResourceWrap",
    "Rights",
    "RightsWorkWrap",
]

"""LIDO record roots: ``lido:lidoWrap``, ``lido:lido`` and their metadata sections."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, element, record
from ...namespaces import LIDO_NS, XML_NS
from .admin import AdministrativeMetadata
from .common import Identifier
from .concept import (
    ClassificationElement,
    Concept,
    new_aat_concept,
    new_concept_classification,
    new_crm_concept,
    new_term_concept,
)
from .event import EventWrap
from .identification import ObjectIdentification
from .subject import ObjectRelationWrap


@record
class ObjectWorkTypeWrap:
    work_types: list[ClassificationElement] = element(LIDO_NS, "objectWorkType")


@record
class ClassificationWrap:
    classifications: list[ClassificationElement] = element(LIDO_NS, "classification")


@record
class ObjectClassification:
    work_type_wrap: ObjectWorkTypeWrap = element(LIDO_NS, "objectWorkTypeWrap")
    classification_wrap: ClassificationWrap | None = element(LIDO_NS, "classificationWrap")


@record
class DescriptiveMetadata:
    """Identifying and descriptive information in one language."""

    classification_wrap: ObjectClassification = element(LIDO_NS, "objectClassificationWrap")
    identification_wrap: ObjectIdentification = element(LIDO_NS, "objectIdentificationWrap")
    event_wrap: EventWrap | None = element(LIDO_NS, "eventWrap")
    relation_wrap: ObjectRelationWrap | None = element(LIDO_NS, "objectRelationWrap")
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE, required=True)

    def append_term_work_type(
        self, term_source: str, concept_type: str, term_id: str, term: str
    ) -> None:
        """Add an object work type taken from a controlled vocabulary."""
        concept = new_term_concept(term_source, concept_type, term_id, term)
        self.classification_wrap.work_type_wrap.work_types.append(
            new_concept_classification(concept)
        )

    def append_aat_work_type(self, concept_type: str, aat_id: str, term: str) -> None:
        """Add an object work type identified by a Getty AAT ID."""
        concept = new_aat_concept(concept_type, aat_id, term)
        self.classification_wrap.work_type_wrap.work_types.append(
            new_concept_classification(concept)
        )


@record(LIDO_NS, "lido")
class Lido:
    rec_ids: list[Identifier] = element(LIDO_NS, "lidoRecID")
    published_ids: list[Identifier] = element(LIDO_NS, "objectPublishedID")
    category: Concept | None = element(LIDO_NS, "category")
    descriptive_metadata: list[DescriptiveMetadata] = element(LIDO_NS, "descriptiveMetadata")
    administrative_metadata: list[AdministrativeMetadata] = element(
        LIDO_NS, "administrativeMetadata"
    )
    related_encoding: str | None = attribute(LIDO_NS, "relatedencoding")

    def append_rec_id(self, rec_source: str, rec_type: str, rec_id: str) -> None:
        """Add a record ID from the contributor's own system."""
        self.rec_ids.append(Identifier(value=rec_id, source=rec_source, type=rec_type))

    def set_crm_category(self, crm_id: str) -> None:
        """Set the category to a CIDOC-CRM class such as ``E22``.

        Raises:
            KeyError: If ``crm_id`` is not a known CRM class
        """
        self.category = new_crm_concept(crm_id)

    def create_desc(self, lang: str) -> DescriptiveMetadata:
        """Return the descriptive metadata for ``lang``, creating it if needed.

        Descriptive metadata only repeats for language variants.
        """
        for metadata in self.descriptive_metadata:
            if metadata.lang == lang:
                return metadata
        metadata = DescriptiveMetadata(lang=lang)
        self.descriptive_metadata.append(metadata)
        return metadata

    def create_admin(self, lang: str) -> AdministrativeMetadata:
        """Return the administrative metadata for ``lang``, creating it if needed."""
        for metadata in self.administrative_metadata:
            if metadata.lang == lang:
                return metadata
        metadata = AdministrativeMetadata(lang=lang)
        self.administrative_metadata.append(metadata)
        return metadata


@record(LIDO_NS, "lidoWrap")
class LidoWrap:
    records: list[Lido] = element(LIDO_NS, "lido")


__all__ = [
    "ClassificationWrap",
    "DescriptiveMetadata",
    "Lido",
    "LidoWrap",
    "ObjectClassification",
    "ObjectWorkTypeWrap",
]

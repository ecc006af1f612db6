"""LIDO 1.0 (Lightweight Information Describing Objects) records.

LIDO attributes are written namespace-qualified (``lido:type``); when reading,
unqualified attributes are accepted as well.
"""

from .actor import (
    CORPORATION,
    FAMILY,
    GROUP_OF_PERSONS,
    PERSON,
    Actor,
    ActorInRole,
    EventActor,
    SubjectActor,
)
from .admin import (
    AdministrativeMetadata,
    RecordInfo,
    RecordWrap,
    ResourceRep,
    ResourceSet,
    ResourceWrap,
    Rights,
    RightsWorkWrap,
)
from .appellation import (
    Appellation,
    AppellationValue,
    LegalBodyRef,
    Title,
    TitleWrap,
    new_title,
)
from .common import (
    ALTERNATE,
    ALTERNATE_TITLE,
    LOCAL_RECORD_TYPE,
    PREFERRED,
    REPOSITORY_TITLE,
    URI_TYPE,
    AddedSearchTerm,
    Date,
    DateSet,
    DateSpan,
    DescriptiveNote,
    Identifier,
    LinkResource,
    Note,
    Text,
    WebResource,
    WorkID,
    to_pref,
)
from .concept import (
    AAT_SOURCE,
    ClassificationElement,
    Concept,
    ConceptElement,
    Term,
    new_aat_concept,
    new_concept,
    new_concept_classification,
    new_concept_element,
    new_crm_concept,
    new_term_concept,
    new_uri_concept,
)
from .document import (
    ClassificationWrap,
    DescriptiveMetadata,
    Lido,
    LidoWrap,
    ObjectClassification,
    ObjectWorkTypeWrap,
)
from .event import (
    Event,
    EventMaterialsTech,
    EventSet,
    EventWrap,
    MaterialsTech,
    RelatedEvent,
    format_date,
)
from .identification import (
    DisplayStateEdition,
    Inscription,
    InscriptionsWrap,
    ObjectDescription,
    ObjectIdentification,
    Repository,
    RepositoryWrap,
)
from .measurements import (
    AspectMeasurements,
    ExtentMeasurement,
    Measurements,
    MeasurementsSet,
    MeasurementsWrap,
)
from .objects import Object, ObjectSet, ThingPresent
from .place import GML, EventPlace, Place, PlaceClassification, PlaceSet
from .subject import (
    ObjectRelationWrap,
    RelatedWorkSet,
    RelatedWorksWrap,
    Subject,
    SubjectSet,
    SubjectWrap,
)

__all__ = [
    # Constants
    "AAT_SOURCE",
    "ALTERNATE",
    "ALTERNATE_TITLE",
    "CORPORATION",
    "FAMILY",
    "GROUP_OF_PERSONS",
    "LOCAL_RECORD_TYPE",
    "PERSON",
    "PREFERRED",
    "REPOSITORY_TITLE",
    "URI_TYPE",
    # Records
    "GML",
    "Actor",
    "ActorInRole",
    "AddedSearchTerm",
    "AdministrativeMetadata",
    "Appellation",
    "AppellationValue",
    "AspectMeasurements",
    "ClassificationElement",
    "ClassificationWrap",
    "Concept",
    "ConceptElement",
    "Date",
    "DateSet",
    "DateSpan",
    "DescriptiveMetadata",
    "DescriptiveNote",
    "DisplayStateEdition",
    "Event",
    "EventActor",
    "EventMaterialsTech",
    "EventPlace",
    "EventSet",
    "EventWrap",
    "ExtentMeasurement",
    "Identifier",
    "Inscription",
    "InscriptionsWrap",
    "LegalBodyRef",
    "Lido",
    "LidoWrap",
    "LinkResource",
    "MaterialsTech",
    "Measurements",
    "MeasurementsSet",
    "MeasurementsWrap",
    "Note",
    "Object",
    "ObjectClassification",
    "ObjectDescription",
    "ObjectIdentification",
    "ObjectRelationWrap",
    "ObjectSet",
    "ObjectWorkTypeWrap",
    "Place",
    "PlaceClassification",
    "PlaceSet",
    "RecordInfo",
    "RecordWrap",
    "RelatedEvent",
    "RelatedWorkSet",
    "RelatedWorksWrap",
    "Repository",
    "RepositoryWrap",
    "ResourceRep",
    "ResourceSet",
    "ResourceWrap",
    "Rights",
    "RightsWorkWrap",
    "Subject",
    "SubjectActor",
    "SubjectSet",
    "SubjectWrap",
    "Term",
    "Text",
    "ThingPresent",
    "Title",
    "TitleWrap",
    "WebResource",
    "WorkID",
    # Builders
    "format_date",
    "new_aat_concept",
    "new_concept",
    "new_concept_classification",
    "new_concept_element",
    "new_crm_concept",
    "new_term_concept",
    "new_title",
    "new_uri_concept",
    "to_pref",
]

"""heritage-xml package.

Typed data-binding schemas for the XML vocabularies used in cultural
heritage and digital preservation metadata exchange.

Features:
- LIDO records with convenience builders
- METS file sections
- GML geometry, Getty AAT subjects, XML-DSIG and XML-ENC fragments
- A generic declarative marshal/unmarshal engine over ElementTree
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("heritage-xml")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from heritage_xml.binding import (
    UnmarshalResult,
    ValidationIssue,
    attribute,
    binding_for,
    chardata,
    choice,
    element,
    group,
    record,
)
from heritage_xml.codec import XMLCodec, decode, marshal, unmarshal
from heritage_xml.config import CodecConfig, ConfigLoader
from heritage_xml.exceptions import (
    BindingDefinitionError,
    CardinalityError,
    HeritageXMLError,
    LexicalError,
    MarshalError,
    StructuralError,
    UnmarshalError,
    ValidationError,
)
from heritage_xml.namespaces import QName

__all__ = [
    "BindingDefinitionError",
    "CardinalityError",
    "CodecConfig",
    "ConfigLoader",
    "HeritageXMLError",
    "LexicalError",
    "MarshalError",
    "QName",
    "StructuralError",
    "UnmarshalError",
    "UnmarshalResult",
    "ValidationError",
    "ValidationIssue",
    "XMLCodec",
    "__version__",
    "attribute",
    "binding_for",
    "chardata",
    "choice",
    "decode",
    "element",
    "group",
    "marshal",
    "record",
    "unmarshal",
]

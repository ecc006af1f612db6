"""Namespace URIs and qualified names for the supported vocabularies.

Every bound field names its namespace through one of the constants below.
The conventional prefixes are registered with ElementTree so that marshaled
documents read the way the published examples of each standard do.
"""

from __future__ import annotations

from typing import NamedTuple
from xml.etree import ElementTree as ET

LIDO_NS = "http://www.lido-schema.org"
METS_NS = "http://www.loc.gov/METS/"
GML_NS = "http://www.opengis.net/gml"
GVP_NS = "http://vocab.getty.edu/ontology#"
SKOS_NS = "http://www.w3.org/2004/02/skos/core#"
DSIG_NS = "http://www.w3.org/2000/09/xmldsig#"
XMLENC_NS = "http://www.w3.org/2001/04/xmlenc#"
RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

# xml: is bound by definition and must not be re-registered.
PREFIXES: dict[str, str] = {
    "lido": LIDO_NS,
    "mets": METS_NS,
    "gml": GML_NS,
    "gvp": GVP_NS,
    "skos": SKOS_NS,
    "ds": DSIG_NS,
    "xenc": XMLENC_NS,
    "rdf": RDF_NS,
    "rdfs": RDFS_NS,
    "xlink": XLINK_NS,
}


class QName(NamedTuple):
    """A namespace-qualified XML name.

    ``namespace`` is ``None`` for unqualified names (for example the METS
    attributes, which live in no namespace).
    """

    namespace: str | None
    local: str

    @property
    def clark(self) -> str:
        """Return the name in Clark notation as used by ElementTree."""
        return tag(self.namespace, self.local)

    @classmethod
    def from_clark(cls, text: str) -> QName:
        if text.startswith("{"):
            namespace, _, local = text[1:].partition("}")
            return cls(namespace, local)
        return cls(None, text)

    def __str__(self) -> str:
        return self.clark


def tag(namespace: str | None, name: str) -> str:
    """Create a namespaced XML tag string.

    Args:
        namespace: The XML namespace URI, or None for an unqualified name
        name: The element or attribute name

    Returns:
        Namespaced tag string in format {namespace}name
    """
    if not namespace:
        return name
    return f"{{{namespace}}}{name}"


def register_namespaces() -> None:
    """Register the vocabulary prefixes for readable output."""
    for prefix, uri in PREFIXES.items():
        ET.register_namespace(prefix, uri)


__all__ = [
    "DSIG_NS",
    "GML_NS",
    "GVP_NS",
    "LIDO_NS",
    "METS_NS",
    "PREFIXES",
    "QName",
    "RDFS_NS",
    "RDF_NS",
    "SKOS_NS",
    "XLINK_NS",
    "XMLENC_NS",
    "XML_NS",
    "register_namespaces",
    "tag",
]

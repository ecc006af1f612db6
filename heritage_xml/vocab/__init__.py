"""Vocabulary bindings.

``DOCUMENT_TYPES`` maps a short vocabulary key to the record type used as a
document root, for tools that bind files by vocabulary name.
"""

from __future__ import annotations

from .aat import Term
from .dsig import KeyInfo
from .gml import Polygon
from .lido import Lido, LidoWrap
from .mets import Mets
from .xmlenc import EncryptedData, EncryptedKey

DOCUMENT_TYPES: dict[str, type] = {
    "lido": Lido,
    "lido-wrap": LidoWrap,
    "mets": Mets,
    "aat": Term,
    "dsig-keyinfo": KeyInfo,
    "xmlenc-data": EncryptedData,
    "xmlenc-key": EncryptedKey,
    "gml-polygon": Polygon,
}

__all__ = ["DOCUMENT_TYPES"]

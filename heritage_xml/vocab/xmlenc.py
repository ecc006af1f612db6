"""XML Encryption syntax (xmlenc-core).

``EncryptedData`` and ``EncryptedKey`` share the ``Encrypted`` group, which
stands for the schema's abstract ``EncryptedType``. The group embeds a
``ds:KeyInfo``, which keeps the XML Signature namespace inside an XML
Encryption document.
"""

from __future__ import annotations

from .. import xsdt
from ..binding import attribute, chardata, choice, element, group, record
from ..namespaces import DSIG_NS, XMLENC_NS
from .dsig import KeyInfo, Transforms

ELEMENT_TYPE_URI = XMLENC_NS + "Element"
CONTENT_TYPE_URI = XMLENC_NS + "Content"


@record(XMLENC_NS, "EncryptionMethod", mixed=True)
class EncryptionMethod:
    """Algorithm applied to the cipher data.

    When absent, the recipient must know the algorithm by other means.
    """

    key_size: int | None = element(XMLENC_NS, "KeySize", xsdt.INTEGER)
    # Used by RSA-OAEP together with ds:DigestMethod.
    oaep_params: bytes | None = element(XMLENC_NS, "OAEPparams", xsdt.BASE64_BINARY)
    algorithm: str | None = attribute(None, "Algorithm", xsdt.ANY_URI, required=True)
    text: str | None = chardata()


@record(XMLENC_NS, "CipherReference")
class CipherReference:
    transforms: Transforms | None = element(XMLENC_NS, "Transforms")
    uri: str | None = attribute(None, "URI", xsdt.ANY_URI, required=True)


@record(XMLENC_NS, "CipherData")
class CipherData:
    """Either the base64 cipher text or a reference to where it lives."""

    cipher_value: bytes | None = element(XMLENC_NS, "CipherValue", xsdt.BASE64_BINARY)
    cipher_reference: CipherReference | None = element(XMLENC_NS, "CipherReference")


@record(XMLENC_NS, "EncryptionProperty")
class EncryptionProperty:
    target: str | None = attribute(None, "Target", xsdt.ANY_URI)
    id: str | None = attribute(None, "Id", xsdt.ID)
    text: str | None = chardata()


@record(XMLENC_NS, "EncryptionProperties")
class EncryptionProperties:
    properties: list[EncryptionProperty] = element(XMLENC_NS, "EncryptionProperty")
    id: str | None = attribute(None, "Id", xsdt.ID)


@record
class Reference:
    uri: str | None = attribute(None, "URI", xsdt.ANY_URI, required=True)


@record
class DataReference(Reference):
    pass


@record
class KeyReference(Reference):
    pass


@record(XMLENC_NS, "ReferenceList")
class ReferenceList:
    """Pointers from a key to the items it encrypted."""

    references: list[DataReference | KeyReference] = choice(
        (XMLENC_NS, "DataReference"), (XMLENC_NS, "KeyReference")
    )

    @property
    def data_references(self) -> list[DataReference]:
        return [ref for ref in self.references if isinstance(ref, DataReference)]

    @property
    def key_references(self) -> list[KeyReference]:
        return [ref for ref in self.references if isinstance(ref, KeyReference)]


@record
class Encrypted:
    encryption_method: EncryptionMethod | None = element(XMLENC_NS, "EncryptionMethod")
    key_info: KeyInfo | None = element(DSIG_NS, "KeyInfo")
    cipher_data: CipherData = element(XMLENC_NS, "CipherData")
    encryption_properties: EncryptionProperties | None = element(
        XMLENC_NS, "EncryptionProperties"
    )
    id: str | None = attribute(None, "Id", xsdt.ID)
    type: str | None = attribute(None, "Type", xsdt.ANY_URI)
    mime_type: str | None = attribute(None, "MimeType")
    encoding: str | None = attribute(None, "Encoding", xsdt.ANY_URI)


@record(XMLENC_NS, "EncryptedData")
class EncryptedData:
    """The encrypted content, or the new document root replacing it."""

    encrypted: Encrypted = group(Encrypted)


@record(XMLENC_NS, "EncryptedKey")
class EncryptedKey:
    """An encrypted key for a known recipient."""

    encrypted: Encrypted = group(Encrypted)
    reference_list: ReferenceList | None = element(XMLENC_NS, "ReferenceList")
    carried_key_name: str | None = element(XMLENC_NS, "CarriedKeyName", xsdt.STRING)
    recipient: str | None = attribute(None, "Recipient")


__all__ = [
    "CONTENT_TYPE_URI",
    "ELEMENT_TYPE_URI",
    "CipherData",
    "CipherReference",
    "DataReference",
    "Encrypted",
    "EncryptedData",
    "EncryptedKey",
    "EncryptionMethod",
    "EncryptionProperties",
    "EncryptionProperty",
    "KeyReference",
    "Reference",
    "ReferenceList",
]

"""XML Signature (xmldsig-core) key information.

Only ``KeyInfo`` and what it carries are bound; ``Signature`` and
``SignedInfo`` are not part of any vocabulary handled here. Attributes are
unqualified, as the schema's attribute form default demands.
"""

from __future__ import annotations

from .. import xsdt
from ..binding import attribute, chardata, choice, element, record
from ..namespaces import DSIG_NS


@record(DSIG_NS, "Transform", mixed=True)
class Transform:
    text: str | None = chardata()
    xpaths: list[str] = element(DSIG_NS, "XPath", xsdt.STRING)
    algorithm: str | None = attribute(None, "Algorithm", xsdt.ANY_URI, required=True)


@record(DSIG_NS, "Transforms")
class Transforms:
    transforms: list[Transform] = element(DSIG_NS, "Transform")


@record(DSIG_NS, "RetrievalMethod")
class RetrievalMethod:
    transforms: Transforms | None = element(DSIG_NS, "Transforms")
    uri: str | None = attribute(None, "URI", xsdt.ANY_URI)
    type: str | None = attribute(None, "Type", xsdt.ANY_URI)


@record(DSIG_NS, "PGPData")
class PGPData:
    pgp_key_id: bytes | None = element(DSIG_NS, "PGPKeyID", xsdt.BASE64_BINARY)
    pgp_key_packet: bytes | None = element(DSIG_NS, "PGPKeyPacket", xsdt.BASE64_BINARY)


@record(DSIG_NS, "SPKIData")
class SPKIData:
    spki_sexps: list[bytes] = element(DSIG_NS, "SPKISexp", xsdt.BASE64_BINARY)


@record(DSIG_NS, "DSAKeyValue")
class DSAKeyValue:
    p: bytes | None = element(DSIG_NS, "P", xsdt.BASE64_BINARY)
    q: bytes | None = element(DSIG_NS, "Q", xsdt.BASE64_BINARY)
    g: bytes | None = element(DSIG_NS, "G", xsdt.BASE64_BINARY)
    y: bytes | None = element(DSIG_NS, "Y", xsdt.BASE64_BINARY)
    j: bytes | None = element(DSIG_NS, "J", xsdt.BASE64_BINARY)
    seed: bytes | None = element(DSIG_NS, "Seed", xsdt.BASE64_BINARY)
    pgen_counter: bytes | None = element(DSIG_NS, "PgenCounter", xsdt.BASE64_BINARY)


@record(DSIG_NS, "RSAKeyValue")
class RSAKeyValue:
    modulus: bytes | None = element(DSIG_NS, "Modulus", xsdt.BASE64_BINARY)
    exponent: bytes | None = element(DSIG_NS, "Exponent", xsdt.BASE64_BINARY)


@record(DSIG_NS, "KeyValue", mixed=True)
class KeyValue:
    key: DSAKeyValue | RSAKeyValue | None = choice(
        (DSIG_NS, "DSAKeyValue"), (DSIG_NS, "RSAKeyValue")
    )
    text: str | None = chardata()


@record(DSIG_NS, "X509IssuerSerial")
class X509IssuerSerial:
    issuer_name: str | None = element(DSIG_NS, "X509IssuerName", xsdt.STRING)
    serial_number: int | None = element(DSIG_NS, "X509SerialNumber", xsdt.INTEGER)


@record(DSIG_NS, "X509Data")
class X509Data:
    issuer_serials: list[X509IssuerSerial] = element(DSIG_NS, "X509IssuerSerial")
    skis: list[bytes] = element(DSIG_NS, "X509SKI", xsdt.BASE64_BINARY)
    subject_names: list[str] = element(DSIG_NS, "X509SubjectName", xsdt.STRING)
    certificates: list[bytes] = element(DSIG_NS, "X509Certificate", xsdt.BASE64_BINARY)
    crls: list[bytes] = element(DSIG_NS, "X509CRL", xsdt.BASE64_BINARY)


@record(DSIG_NS, "KeyInfo", mixed=True)
class KeyInfo:
    key_names: list[str] = element(DSIG_NS, "KeyName", xsdt.STRING)
    key_values: list[KeyValue] = element(DSIG_NS, "KeyValue")
    retrieval_methods: list[RetrievalMethod] = element(DSIG_NS, "RetrievalMethod")
    x509_datas: list[X509Data] = element(DSIG_NS, "X509Data")
    pgp_datas: list[PGPData] = element(DSIG_NS, "PGPData")
    spki_datas: list[SPKIData] = element(DSIG_NS, "SPKIData")
    mgmt_datas: list[str] = element(DSIG_NS, "MgmtData", xsdt.STRING)
    text: str | None = chardata()
    id: str | None = attribute(None, "Id", xsdt.ID)


__all__ = [
    "DSAKeyValue",
    "KeyInfo",
    "KeyValue",
    "PGPData",
    "RSAKeyValue",
    "RetrievalMethod",
    "SPKIData",
    "Transform",
    "Transforms",
    "X509Data",
    "X509IssuerSerial",
]

"""Unit tests for the XML Encryption bindings."""

from __future__ import annotations

from heritage_xml import decode, marshal, unmarshal
from heritage_xml.namespaces import DSIG_NS, XMLENC_NS
from heritage_xml.vocab.dsig import KeyInfo
from heritage_xml.vocab.xmlenc import (
    ELEMENT_TYPE_URI,
    CipherData,
    DataReference,
    Encrypted,
    EncryptedData,
    EncryptedKey,
    KeyReference,
)

ENCRYPTED_KEY = f"""
<xenc:EncryptedKey xmlns:xenc="{XMLENC_NS}" xmlns:ds="{DSIG_NS}" Id="ek1" Recipient="archive">
  <xenc:EncryptionMethod Algorithm="http://www.w3.org/2001/04/xmlenc#rsa-1_5"/>
  <ds:KeyInfo><ds:KeyName>archive-key</ds:KeyName></ds:KeyInfo>
  <xenc:CipherData><xenc:CipherValue>AQAB</xenc:CipherValue></xenc:CipherData>
  <xenc:ReferenceList>
    <xenc:DataReference URI="#ed1"/>
    <xenc:KeyReference URI="#ek2"/>
    <xenc:DataReference URI="#ed2"/>
  </xenc:ReferenceList>
  <xenc:CarriedKeyName>session</xenc:CarriedKeyName>
</xenc:EncryptedKey>
"""


class TestEncryptedKey:
    def test_binds_shared_encrypted_group(self):
        result = decode(ENCRYPTED_KEY, EncryptedKey)

        assert result.ok
        key = result.record
        assert key.encrypted.id == "ek1"
        assert key.recipient == "archive"
        assert key.encrypted.encryption_method.algorithm.endswith("#rsa-1_5")
        assert key.encrypted.key_info.key_names == ["archive-key"]
        assert key.encrypted.cipher_data.cipher_value == b"\x01\x00\x01"
        assert key.carried_key_name == "session"

    def test_reference_list_keeps_order_and_kinds(self):
        key = unmarshal(ENCRYPTED_KEY, EncryptedKey)

        references = key.reference_list.references
        assert [type(ref) for ref in references] == [DataReference, KeyReference, DataReference]
        assert [ref.uri for ref in key.reference_list.data_references] == ["#ed1", "#ed2"]
        assert [ref.uri for ref in key.reference_list.key_references] == ["#ek2"]

    def test_round_trip(self):
        key = unmarshal(ENCRYPTED_KEY, EncryptedKey)

        data = marshal(key)

        assert b"<xenc:KeyReference" in data
        assert unmarshal(data, EncryptedKey) == key


class TestEncryptedData:
    def test_cipher_data_is_required(self):
        xml = f'<xenc:EncryptedData xmlns:xenc="{XMLENC_NS}" Id="ed1"/>'

        result = decode(xml, EncryptedData)

        assert result.issues[0].path == "EncryptedData"
        assert result.issues[0].message == "missing required encrypted.cipher_data"

    def test_cipher_reference_requires_uri(self):
        xml = (
            f'<xenc:EncryptedData xmlns:xenc="{XMLENC_NS}"><xenc:CipherData>'
            "<xenc:CipherReference/></xenc:CipherData></xenc:EncryptedData>"
        )

        result = decode(xml, EncryptedData)

        assert result.issues[0].path == "EncryptedData/CipherData/CipherReference"
        assert result.issues[0].message == "missing required @URI"

    def test_key_size(self):
        xml = (
            f'<xenc:EncryptedData xmlns:xenc="{XMLENC_NS}">'
            '<xenc:EncryptionMethod Algorithm="http://www.w3.org/2001/04/xmlenc#aes128-cbc">'
            "<xenc:KeySize>128</xenc:KeySize></xenc:EncryptionMethod>"
            "<xenc:CipherData><xenc:CipherValue>AQAB</xenc:CipherValue></xenc:CipherData>"
            "</xenc:EncryptedData>"
        )

        data = unmarshal(xml, EncryptedData)

        assert data.encrypted.encryption_method.key_size == 128

    def test_writes_signature_namespace_inside(self):
        encrypted = EncryptedData(
            encrypted=Encrypted(
                type=ELEMENT_TYPE_URI,
                key_info=KeyInfo(key_names=["archive-key"]),
                cipher_data=CipherData(cipher_value=b"\x01\x00\x01"),
            )
        )

        data = marshal(encrypted, xml_declaration=False)

        assert data.startswith(b"<xenc:EncryptedData ")
        assert f'Type="{ELEMENT_TYPE_URI}"'.encode() in data
        assert b"<ds:KeyInfo>" in data
        assert b"<xenc:CipherValue>AQAB</xenc:CipherValue>" in data

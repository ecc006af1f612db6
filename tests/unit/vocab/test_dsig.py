"""Unit tests for the XML Signature KeyInfo binding."""

from __future__ import annotations

from heritage_xml import decode, marshal, unmarshal
from heritage_xml.binding import IssueKind
from heritage_xml.namespaces import DSIG_NS
from heritage_xml.vocab.dsig import DSAKeyValue, KeyInfo, KeyValue, RSAKeyValue

KEY_INFO = f"""
<ds:KeyInfo xmlns:ds="{DSIG_NS}" Id="k1">
  <ds:KeyName>archive-key</ds:KeyName>
  <ds:KeyValue>
    <ds:RSAKeyValue>
      <ds:Modulus>xA7SEU+e0yQH5rm9kbCDN9o3aPIo7HbP7tX6WOocLZAtNfyxSZDU16ksL6W
        jubafOqNEpcwR3RdFsT7bCqnXPBe5ELh5u4VEy19MzxkXRgrMvavzyBpVRgBUwUlV
        5foK5hhmbktQhyNdy/6LpQRhDUDsTvK+g9Ucj47es9AQJ3U=</ds:Modulus>
      <ds:Exponent>AQAB</ds:Exponent>
    </ds:RSAKeyValue>
  </ds:KeyValue>
  <ds:X509Data>
    <ds:X509IssuerSerial>
      <ds:X509IssuerName>CN=Archive CA</ds:X509IssuerName>
      <ds:X509SerialNumber>12345678901234567890</ds:X509SerialNumber>
    </ds:X509IssuerSerial>
    <ds:X509SubjectName>CN=Archive</ds:X509SubjectName>
  </ds:X509Data>
</ds:KeyInfo>
"""


def _key_info(body: str) -> str:
    return f'<ds:KeyInfo xmlns:ds="{DSIG_NS}">{body}</ds:KeyInfo>'


class TestKeyInfo:
    def test_binds_key_material(self):
        result = decode(KEY_INFO, KeyInfo)

        assert result.ok
        key_info = result.record
        assert key_info.id == "k1"
        assert key_info.key_names == ["archive-key"]
        assert key_info.text is None
        rsa = key_info.key_values[0].key
        assert isinstance(rsa, RSAKeyValue)
        assert rsa.exponent == b"\x01\x00\x01"
        assert len(rsa.modulus) == 128

    def test_x509_data(self):
        key_info = unmarshal(KEY_INFO, KeyInfo)

        x509 = key_info.x509_datas[0]
        assert x509.issuer_serials[0].issuer_name == "CN=Archive CA"
        assert x509.issuer_serials[0].serial_number == 12345678901234567890
        assert x509.subject_names == ["CN=Archive"]

    def test_round_trip(self):
        key_info = unmarshal(KEY_INFO, KeyInfo)

        assert unmarshal(marshal(key_info), KeyInfo) == key_info

    def test_key_value_text_content(self):
        key_info = unmarshal(_key_info("<ds:KeyValue>opaque key</ds:KeyValue>"), KeyInfo)

        assert key_info.key_values[0].text == "opaque key"
        assert key_info.key_values[0].key is None

    def test_key_value_holds_one_key(self):
        xml = _key_info(
            "<ds:KeyValue><ds:DSAKeyValue><ds:Y>AQAB</ds:Y></ds:DSAKeyValue>"
            "<ds:RSAKeyValue><ds:Exponent>AQAB</ds:Exponent></ds:RSAKeyValue></ds:KeyValue>"
        )

        result = decode(xml, KeyInfo)

        assert isinstance(result.record.key_values[0].key, DSAKeyValue)
        assert result.issues[0].kind is IssueKind.CARDINALITY
        assert result.issues[0].path == "KeyInfo/KeyValue/RSAKeyValue"

    def test_bad_base64_is_lexical(self):
        xml = _key_info(
            "<ds:KeyValue><ds:RSAKeyValue><ds:Modulus>not base64!</ds:Modulus>"
            "</ds:RSAKeyValue></ds:KeyValue>"
        )

        result = decode(xml, KeyInfo)

        assert result.issues[0].kind is IssueKind.LEXICAL
        assert result.issues[0].path == "KeyInfo/KeyValue/RSAKeyValue/Modulus"

    def test_transform_requires_algorithm(self):
        xml = _key_info(
            '<ds:RetrievalMethod URI="#x"><ds:Transforms><ds:Transform/>'
            "</ds:Transforms></ds:RetrievalMethod>"
        )

        result = decode(xml, KeyInfo)

        assert result.issues[0].path == "KeyInfo/RetrievalMethod/Transforms/Transform"
        assert result.issues[0].message == "missing required @Algorithm"


class TestWritingKeyInfo:
    def test_binary_values_are_base64(self):
        key_info = KeyInfo(
            id="k1",
            key_values=[KeyValue(key=RSAKeyValue(modulus=b"\x01\x00\x01"))],
        )

        data = marshal(key_info, xml_declaration=False)

        assert b'Id="k1"' in data
        assert b"<ds:Modulus>AQAB</ds:Modulus>" in data
        assert b"Exponent" not in data

    def test_mixed_text_survives_pretty_printing(self):
        key_info = KeyInfo(key_names=["archive-key"], text="abc")

        data = marshal(key_info, pretty_print=True)

        assert b"</ds:KeyName>\n</ds:KeyInfo>" in data
        assert unmarshal(data, KeyInfo) == key_info

"""Codec facade over the marshaler and unmarshaler."""

from __future__ import annotations

import dataclasses
from typing import Any
from xml.etree import ElementTree as ET

from .application.ports.services import LoggerPort
from .binding.marshal import Marshaler
from .binding.report import UnmarshalResult
from .binding.unmarshal import Unmarshaler
from .config import CodecConfig
from .infrastructure.logging import NullLogger
from .namespaces import QName


class XMLCodec:
    """Marshal and unmarshal bound records with one configuration.

    Example:
        >>> codec = XMLCodec(CodecConfig(pretty_print=True))
        >>> data = codec.marshal(lido_record)
        >>> codec.unmarshal(data, Lido) == lido_record
        True
    """

    def __init__(
        self, config: CodecConfig | None = None, logger: LoggerPort | None = None
    ) -> None:
        self.config = config or CodecConfig()
        self.logger = logger or NullLogger()
        self._marshaler = Marshaler(self.config, self.logger)
        self._unmarshaler = Unmarshaler(self.config, self.logger)

    def with_options(self, **overrides: Any) -> XMLCodec:
        """Return a codec sharing the logger with some config fields replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return XMLCodec(dataclasses.replace(self.config, **changes), self.logger)

    def marshal(self, value: Any, name: QName | None = None) -> bytes:
        return self._marshaler.to_bytes(value, name)

    def to_element(self, value: Any, name: QName | None = None) -> ET.Element:
        return self._marshaler.to_element(value, name)

    def unmarshal[T](self, data: bytes | str, cls: type[T], name: QName | None = None) -> T:
        return self._unmarshaler.unmarshal(data, cls, name)

    def decode[T](
        self, data: bytes | str, cls: type[T], name: QName | None = None
    ) -> UnmarshalResult[T]:
        return self._unmarshaler.decode(data, cls, name)


_default: XMLCodec | None = None


def default_codec() -> XMLCodec:
    global _default
    if _default is None:
        _default = XMLCodec(CodecConfig.from_env())
    return _default


def marshal(
    value: Any,
    name: QName | None = None,
    *,
    pretty_print: bool | None = None,
    xml_declaration: bool | None = None,
) -> bytes:
    """Serialize a bound record to XML bytes."""
    codec = default_codec().with_options(
        pretty_print=pretty_print, xml_declaration=xml_declaration
    )
    return codec.marshal(value, name)


def unmarshal[T](
    data: bytes | str,
    cls: type[T],
    name: QName | None = None,
    *,
    strict: bool | None = None,
) -> T:
    """Parse XML into ``cls``; raises on malformed input or binding issues."""
    return default_codec().with_options(strict=strict).unmarshal(data, cls, name)


def decode[T](
    data: bytes | str,
    cls: type[T],
    name: QName | None = None,
    *,
    strict: bool | None = None,
) -> UnmarshalResult[T]:
    """Parse XML into ``cls`` and return the record with collected issues."""
    return default_codec().with_options(strict=strict).decode(data, cls, name)


__all__ = ["XMLCodec", "decode", "default_codec", "marshal", "unmarshal"]

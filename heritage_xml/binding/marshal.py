"""Generic record-to-XML writer."""

from __future__ import annotations

from typing import Any
from xml.etree import ElementTree as ET

from ..application.ports.services import LoggerPort
from ..config import CodecConfig
from ..exceptions import MarshalError
from ..infrastructure.logging import NullLogger
from ..namespaces import QName, register_namespaces
from .descriptors import Kind
from .table import FieldBinding, binding_for


class Marshaler:
    """Write bound records as namespace-qualified ElementTree elements."""

    def __init__(
        self, config: CodecConfig | None = None, logger: LoggerPort | None = None
    ) -> None:
        self.config = config or CodecConfig()
        self.logger = logger or NullLogger()

    def to_element(self, value: Any, name: QName | None = None) -> ET.Element:
        binding = binding_for(type(value))
        qname = name or binding.qname
        if qname is None:
            raise MarshalError(
                f"{type(value).__name__} declares no element name; pass one explicitly"
            )
        return self._build(value, qname, None)

    def to_bytes(self, value: Any, name: QName | None = None) -> bytes:
        register_namespaces()
        root = self.to_element(value, name)
        self.logger.log_document_start("marshal", root.tag)
        if self.config.pretty_print:
            ET.indent(root, space=" " * self.config.indent)
        data = ET.tostring(
            root,
            encoding=self.config.encoding,
            xml_declaration=self.config.xml_declaration,
        )
        self.logger.log_document_complete("marshal", root.tag)
        return data

    def _build(self, value: Any, qname: QName, parent: ET.Element | None) -> ET.Element:
        binding = binding_for(type(value))
        if parent is None:
            node = ET.Element(qname.clark)
        else:
            node = ET.SubElement(parent, qname.clark)

        for fb in binding.attributes:
            raw = fb.get(value)
            if raw is None:
                continue
            assert fb.simple is not None and fb.qname is not None
            if fb.omit_empty and fb.simple.is_empty(raw):
                continue
            node.set(fb.qname.clark, self._format(fb, raw))

        if binding.text is not None:
            text = binding.text.get(value)
            if text is not None:
                node.text = self._format(binding.text, text)

        for fb in binding.content:
            self._write_content(node, value, fb)
        return node

    def _write_content(self, node: ET.Element, value: Any, fb: FieldBinding) -> None:
        items = fb.values(value)
        if fb.kind is Kind.CHOICE:
            for item in items:
                alternative = fb.alternative_for(item)
                if alternative is None:
                    raise MarshalError(
                        f"{type(item).__name__} is not an alternative of {fb.name}"
                    )
                self._build(item, alternative, node)
            return

        assert fb.qname is not None
        if fb.simple is not None:
            for item in items:
                child = ET.SubElement(node, fb.qname.clark)
                child.text = self._format(fb, item)
            return
        for item in items:
            self._build(item, fb.qname, node)

    @staticmethod
    def _format(fb: FieldBinding, raw: Any) -> str:
        assert fb.simple is not None
        try:
            return fb.simple.format(raw)
        except MarshalError as exc:
            raise MarshalError(f"{fb.name}: {exc}") from exc


__all__ = ["Marshaler"]

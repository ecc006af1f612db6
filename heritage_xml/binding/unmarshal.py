"""Generic XML-to-record reader.

The reader consumes start/end events from :class:`xml.etree.ElementTree.XMLPullParser`
and keeps one frame per open element. Unknown elements are skipped together
with their subtree; unknown attributes are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from xml.etree import ElementTree as ET

from ..application.ports.services import LoggerPort
from ..config import CodecConfig
from ..exceptions import (
    CardinalityError,
    LexicalError,
    StructuralError,
    UnmarshalError,
)
from ..infrastructure.logging import NullLogger
from ..namespaces import QName
from ..xsdt import SimpleType
from .descriptors import Cardinality, Kind
from .report import IssueKind, UnmarshalResult, ValidationIssue
from .table import FieldBinding, RecordBinding, binding_for

_INVALID = object()


@dataclass(slots=True)
class _Frame:
    qname: QName
    path: str
    instance: Any = None
    binding: RecordBinding | None = None
    simple_field: FieldBinding | None = None
    owner: Any = None
    populated: set[tuple[str, ...]] = field(default_factory=set)


class _Issues:
    def __init__(self, strict: bool, logger: LoggerPort) -> None:
        self.strict = strict
        self.logger = logger
        self.items: list[ValidationIssue] = []

    def lexical(self, error: LexicalError, path: str) -> None:
        if self.strict:
            raise error.at(path) from error
        self._add(ValidationIssue(kind=IssueKind.LEXICAL, path=path, message=str(error), raw=error.raw))

    def cardinality(self, path: str, message: str) -> None:
        if self.strict:
            raise CardinalityError(path, message)
        self._add(ValidationIssue(kind=IssueKind.CARDINALITY, path=path, message=message))

    def parse(self, simple: SimpleType, raw: str, path: str) -> Any:
        try:
            return simple.parse(raw)
        except LexicalError as exc:
            self.lexical(exc, path)
            return _INVALID

    def _add(self, issue: ValidationIssue) -> None:
        self.items.append(issue)
        self.logger.warning(issue.describe())


class Unmarshaler:
    """Bind XML documents to record types."""

    def __init__(
        self, config: CodecConfig | None = None, logger: LoggerPort | None = None
    ) -> None:
        self.config = config or CodecConfig()
        self.logger = logger or NullLogger()

    def unmarshal[T](self, data: bytes | str, cls: type[T], name: QName | None = None) -> T:
        """Bind ``data`` to ``cls``.

        Raises:
            StructuralError: If the input is not well-formed XML
            UnmarshalError: If the root element has the wrong name
            ValidationError: If binding reported any issue
        """
        return self.decode(data, cls, name).raise_for_issues()

    def decode[T](
        self, data: bytes | str, cls: type[T], name: QName | None = None
    ) -> UnmarshalResult[T]:
        """Bind ``data`` to ``cls`` and return the record with its issues.

        In strict mode the first issue is raised instead of collected.
        """
        root_binding = binding_for(cls)
        expected = name or root_binding.qname
        issues = _Issues(self.config.strict, self.logger)
        parser = ET.XMLPullParser(events=("start", "end"))
        stack: list[_Frame] = []
        state = {"skip": 0, "root": None}

        try:
            parser.feed(data)
            self._consume(parser, stack, state, cls, expected, issues)
            parser.close()
            self._consume(parser, stack, state, cls, expected, issues)
        except ET.ParseError as exc:
            raise StructuralError(f"Malformed XML: {exc}") from exc

        if state["root"] is None:
            raise StructuralError("Document has no root element")
        self.logger.log_document_complete(
            "unmarshal", str(expected or cls.__name__), issue_count=len(issues.items)
        )
        return UnmarshalResult(state["root"], issues.items)

    def _consume(
        self,
        parser: ET.XMLPullParser,
        stack: list[_Frame],
        state: dict[str, Any],
        cls: type,
        expected: QName | None,
        issues: _Issues,
    ) -> None:
        for event, node in parser.read_events():
            if event == "start":
                if state["skip"]:
                    state["skip"] += 1
                    continue
                qname = QName.from_clark(node.tag)
                if not stack:
                    if expected is not None and qname != expected:
                        raise UnmarshalError(
                            f"Expected root element {expected}, found {qname}"
                        )
                    self.logger.log_document_start("unmarshal", str(qname))
                    state["root"] = cls()
                    frame = _Frame(qname, qname.local, state["root"], binding_for(cls))
                    self._bind_attributes(frame, node, issues)
                    stack.append(frame)
                    continue
                frame = self._open_child(stack[-1], qname, node, issues)
                if frame is None:
                    state["skip"] = 1
                    continue
                stack.append(frame)
            else:
                if state["skip"]:
                    state["skip"] -= 1
                    continue
                self._close(stack.pop(), node, issues)

    def _open_child(
        self, parent: _Frame, qname: QName, node: ET.Element, issues: _Issues
    ) -> _Frame | None:
        path = f"{parent.path}/{qname.local}"
        if parent.binding is None:
            self.logger.log_element_skipped(parent.path, str(qname))
            return None
        match = parent.binding.element_index.get(qname)
        if match is None:
            self.logger.log_element_skipped(parent.path, str(qname))
            return None
        fb, target = match
        if fb.cardinality is not Cardinality.REPEATED and fb.path in parent.populated:
            if fb.kind is Kind.CHOICE:
                issues.cardinality(path, f"choice {fb.name} already holds a value")
            else:
                issues.cardinality(path, f"{fb.name} must not repeat")
            return None
        parent.populated.add(fb.path)
        if target is None:
            return _Frame(qname, path, simple_field=fb, owner=parent.instance)
        child = target()
        fb.assign(parent.instance, child)
        frame = _Frame(qname, path, child, binding_for(target))
        self._bind_attributes(frame, node, issues)
        return frame

    def _bind_attributes(self, frame: _Frame, node: ET.Element, issues: _Issues) -> None:
        assert frame.binding is not None
        index = frame.binding.attribute_index
        for key, raw in node.attrib.items():
            attr = QName.from_clark(key)
            fb = index.get(attr)
            if fb is None and attr.namespace is None and self.config.lax_attribute_form:
                fb = index.get(QName(frame.qname.namespace, attr.local))
            if fb is None:
                continue
            assert fb.simple is not None
            frame.populated.add(fb.path)
            value = issues.parse(fb.simple, raw, f"{frame.path}/@{attr.local}")
            if value is not _INVALID:
                fb.set(frame.instance, value)

    def _close(self, frame: _Frame, node: ET.Element, issues: _Issues) -> None:
        if frame.simple_field is not None:
            fb = frame.simple_field
            assert fb.simple is not None
            value = issues.parse(fb.simple, node.text or "", frame.path)
            if value is not _INVALID:
                fb.assign(frame.owner, value)
            return

        binding = frame.binding
        assert binding is not None
        if binding.text is not None:
            text = self._text_of(node, binding)
            if text is not None:
                assert binding.text.simple is not None
                value = issues.parse(binding.text.simple, text, frame.path)
                if value is not _INVALID:
                    binding.text.set(frame.instance, value)
        for fb in binding.required:
            if fb.path not in frame.populated:
                label = f"@{fb.qname.local}" if fb.kind is Kind.ATTRIBUTE and fb.qname else fb.name
                issues.cardinality(frame.path, f"missing required {label}")

    @staticmethod
    def _text_of(node: ET.Element, binding: RecordBinding) -> str | None:
        if not binding.content:
            return node.text
        # Whitespace-only runs between children are layout, e.g. from ET.indent.
        parts = [node.text, *(child.tail for child in node)]
        text = "".join(part for part in parts if part and part.strip())
        return text or None


__all__ = ["Unmarshaler"]

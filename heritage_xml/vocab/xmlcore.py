"""Attributes of the ``xml:`` namespace (xml:lang, xml:space, xml:base)."""

from __future__ import annotations

from enum import StrEnum

from .. import xsdt
from ..binding import attribute, group, record
from ..namespaces import XML_NS


class XMLSpace(StrEnum):
    DEFAULT = "default"
    PRESERVE = "preserve"


@record
class LangAttr:
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE)


@record
class SpaceAttr:
    space: XMLSpace | None = attribute(XML_NS, "space", xsdt.Enumeration(XMLSpace))


@record
class BaseAttr:
    base: str | None = attribute(XML_NS, "base", xsdt.ANY_URI)


@record
class SpecialAttrs:
    lang: LangAttr = group(LangAttr)
    space: SpaceAttr = group(SpaceAttr)
    base: BaseAttr = group(BaseAttr)


__all__ = ["BaseAttr", "LangAttr", "SpaceAttr", "SpecialAttrs", "XMLSpace"]

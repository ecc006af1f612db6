"""XLink 1.0 attribute groups.

Each link kind is an attribute group meant to be composed into a host record
with :func:`~heritage_xml.binding.group`. ``fixed_type()`` returns the value
the schema fixes for ``xlink:type`` on that kind; it is not filled in
automatically.
"""

from __future__ import annotations

from enum import StrEnum

from .. import xsdt
from ..binding import attribute, record
from ..namespaces import XLINK_NS


class XLinkType(StrEnum):
    SIMPLE = "simple"
    EXTENDED = "extended"
    LOCATOR = "locator"
    ARC = "arc"
    RESOURCE = "resource"
    TITLE = "title"
    NONE = "none"


class XLinkShow(StrEnum):
    NEW = "new"
    REPLACE = "replace"
    EMBED = "embed"
    OTHER = "other"
    NONE = "none"


class XLinkActuate(StrEnum):
    ON_LOAD = "onLoad"
    ON_REQUEST = "onRequest"
    OTHER = "other"
    NONE = "none"


TYPE = xsdt.Enumeration(XLinkType)
SHOW = xsdt.Enumeration(XLinkShow)
ACTUATE = xsdt.Enumeration(XLinkActuate)


@record
class SimpleLink:
    role: str | None = attribute(XLINK_NS, "role")
    arcrole: str | None = attribute(XLINK_NS, "arcrole")
    title: str | None = attribute(XLINK_NS, "title")
    show: XLinkShow | None = attribute(XLINK_NS, "show", SHOW)
    actuate: XLinkActuate | None = attribute(XLINK_NS, "actuate", ACTUATE)
    type: XLinkType | None = attribute(XLINK_NS, "type", TYPE)
    href: str | None = attribute(XLINK_NS, "href", xsdt.ANY_URI)

    @staticmethod
    def fixed_type() -> XLinkType:
        return XLinkType.SIMPLE


@record
class ExtendedLink:
    title: str | None = attribute(XLINK_NS, "title")
    type: XLinkType | None = attribute(XLINK_NS, "type", TYPE)
    role: str | None = attribute(XLINK_NS, "role")

    @staticmethod
    def fixed_type() -> XLinkType:
        return XLinkType.EXTENDED


@record
class LocatorLink:
    type: XLinkType | None = attribute(XLINK_NS, "type", TYPE)
    href: str | None = attribute(XLINK_NS, "href", xsdt.ANY_URI)
    role: str | None = attribute(XLINK_NS, "role")
    title: str | None = attribute(XLINK_NS, "title")
    label: str | None = attribute(XLINK_NS, "label")

    @staticmethod
    def fixed_type() -> XLinkType:
        return XLinkType.LOCATOR


@record
class ArcLink:
    actuate: XLinkActuate | None = attribute(XLINK_NS, "actuate", ACTUATE)
    from_: str | None = attribute(XLINK_NS, "from")
    to: str | None = attribute(XLINK_NS, "to")
    type: XLinkType | None = attribute(XLINK_NS, "type", TYPE)
    arcrole: str | None = attribute(XLINK_NS, "arcrole")
    title: str | None = attribute(XLINK_NS, "title")
    show: XLinkShow | None = attribute(XLINK_NS, "show", SHOW)

    @staticmethod
    def fixed_type() -> XLinkType:
        return XLinkType.ARC


@record
class ResourceLink:
    type: XLinkType | None = attribute(XLINK_NS, "type", TYPE, required=True)
    role: str | None = attribute(XLINK_NS, "role")
    title: str | None = attribute(XLINK_NS, "title")
    label: str | None = attribute(XLINK_NS, "label")

    @staticmethod
    def fixed_type() -> XLinkType:
        return XLinkType.RESOURCE


@record
class TitleLink:
    type: XLinkType | None = attribute(XLINK_NS, "type", TYPE)

    @staticmethod
    def fixed_type() -> XLinkType:
        return XLinkType.TITLE


@record
class EmptyLink:
    type: XLinkType | None = attribute(XLINK_NS, "type", TYPE)

    @staticmethod
    def fixed_type() -> XLinkType:
        return XLinkType.NONE


__all__ = [
    "ArcLink",
    "EmptyLink",
    "ExtendedLink",
    "LocatorLink",
    "ResourceLink",
    "SimpleLink",
    "TitleLink",
    "XLinkActuate",
    "XLinkShow",
    "XLinkType",
]

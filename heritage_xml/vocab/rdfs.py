from __future__ import annotations

from .. import xsdt
from ..binding import attribute, chardata, record
from ..namespaces import XML_NS


@record
class Label:
    value: str | None = chardata()
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE)


__all__ = ["Label"]

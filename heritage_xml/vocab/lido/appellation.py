"""Names and titles, each a set of language or preference variants."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, chardata, element, record
from ...namespaces import LIDO_NS, XML_NS
from .common import Identifier, Text, WebResource, to_pref


@record
class AppellationValue:
    value: str | None = chardata()
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE)
    pref: str | None = attribute(LIDO_NS, "pref")
    encoding_analog: str | None = attribute(LIDO_NS, "encodinganalog")
    label: str | None = attribute(LIDO_NS, "label")


@record
class Appellation:
    values: list[AppellationValue] = element(LIDO_NS, "appellationValue")
    sources: list[Text] = element(LIDO_NS, "sourceAppellation")

    def set(self, value: str, lang: str | None = None, pref: bool = True) -> None:
        """Replace all values with a single one."""
        self.values.clear()
        self.append(value, lang, pref)

    def append(self, value: str, lang: str | None = None, pref: bool = True) -> None:
        self.values.append(AppellationValue(value=value, lang=lang, pref=to_pref(pref)))


@record
class Title(Appellation):
    type: str | None = attribute(LIDO_NS, "type")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class TitleWrap:
    titles: list[Title] = element(LIDO_NS, "titleSet")

    def append(self, title: Title) -> None:
        self.titles.append(title)


def new_title(value: str, lang: str | None = None, pref: bool = True, title_type: str | None = None) -> Title:
    """Create a title with one value, e.g. ``new_title("Venus", "en", True, REPOSITORY_TITLE)``."""
    title = Title(type=title_type)
    title.set(value, lang, pref)
    return title


@record
class LegalBodyRef:
    """Reference to an institution or other legal body."""

    ids: list[Identifier] = element(LIDO_NS, "legalBodyID")
    names: list[Appellation] = element(LIDO_NS, "legalBodyName")
    weblinks: list[WebResource] = element(LIDO_NS, "legalBodyWeblink")


__all__ = [
    "Appellation",
    "AppellationValue",
    "LegalBodyRef",
    "Title",
    "TitleWrap",
    "new_title",
]

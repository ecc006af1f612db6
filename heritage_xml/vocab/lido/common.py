"""Shared LIDO value types: text, identifiers, dates, notes and web links.

LIDO qualifies its attributes (``lido:type``, ``lido:pref``) and carries
language on ``xml:lang``.
"""

from __future__ import annotations

from enum import StrEnum

from ... import xsdt
from ...binding import attribute, chardata, element, record
from ...namespaces import LIDO_NS, XML_NS

LOCAL_RECORD_TYPE = "local"
URI_TYPE = "URI"
PREFERRED = "preferred"
ALTERNATE = "alternate"
REPOSITORY_TITLE = "Repository title"
ALTERNATE_TITLE = "Alternate title"


class AddedSearchTerm(StrEnum):
    YES = "yes"
    NO = "no"


def to_pref(pref: bool) -> str:
    """Map a preferred flag to the ``lido:pref`` value."""
    return PREFERRED if pref else ALTERNATE


@record
class Text:
    value: str | None = chardata()
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE)
    encoding_analog: str | None = attribute(LIDO_NS, "encodinganalog")
    label: str | None = attribute(LIDO_NS, "label")


@record
class Identifier:
    value: str | None = chardata()
    source: str | None = attribute(LIDO_NS, "source")
    type: str | None = attribute(LIDO_NS, "type")
    pref: str | None = attribute(LIDO_NS, "pref")
    encoding_analog: str | None = attribute(LIDO_NS, "encodinganalog")
    label: str | None = attribute(LIDO_NS, "label")


@record
class Note(Text):
    type: str | None = attribute(LIDO_NS, "type")
    source: str | None = attribute(LIDO_NS, "source")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class DescriptiveNote:
    ids: list[Identifier] = element(LIDO_NS, "descriptiveNoteID")
    values: list[Text] = element(LIDO_NS, "descriptiveNoteValue")
    sources: list[Text] = element(LIDO_NS, "sourceDescriptiveNote")
    type: str | None = attribute(LIDO_NS, "type")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class Date:
    """An earliest or latest date; LIDO dates are free text, ideally ISO 8601."""

    value: str | None = chardata()
    type: str | None = attribute(LIDO_NS, "type")
    source: str | None = attribute(LIDO_NS, "source")
    encoding_analog: str | None = attribute(LIDO_NS, "encodinganalog")
    label: str | None = attribute(LIDO_NS, "label")


@record
class DateSpan:
    earliest_date: Date | None = element(LIDO_NS, "earliestDate")
    latest_date: Date | None = element(LIDO_NS, "latestDate")


@record
class DateSet:
    display_dates: list[Text] = element(LIDO_NS, "displayDate")
    date: DateSpan | None = element(LIDO_NS, "date")


@record
class WebResource:
    value: str | None = chardata(xsdt.ANY_URI)
    format_resource: str | None = attribute(LIDO_NS, "formatResource")
    pref: str | None = attribute(LIDO_NS, "pref")
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE)
    encoding_analog: str | None = attribute(LIDO_NS, "encodinganalog")
    label: str | None = attribute(LIDO_NS, "label")


@record
class LinkResource(WebResource):
    codec_resource: str | None = attribute(LIDO_NS, "codecResource")


@record
class WorkID:
    value: str | None = chardata()
    type: str | None = attribute(LIDO_NS, "type")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)
    encoding_analog: str | None = attribute(LIDO_NS, "encodinganalog")
    label: str | None = attribute(LIDO_NS, "label")


__all__ = [
    "ALTERNATE",
    "ALTERNATE_TITLE",
    "LOCAL_RECORD_TYPE",
    "PREFERRED",
    "REPOSITORY_TITLE",
    "URI_TYPE",
    "AddedSearchTerm",
    "Date",
    "DateSet",
    "DateSpan",
    "DescriptiveNote",
    "Identifier",
    "LinkResource",
    "Note",
    "Text",
    "WebResource",
    "WorkID",
    "to_pref",
]

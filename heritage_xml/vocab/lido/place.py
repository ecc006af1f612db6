"""Places with names, classifications and GML geometries."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, choice, element, record
from ...namespaces import GML_NS, LIDO_NS, XML_NS
from ..gml import LineString, Point, Polygon
from .appellation import Appellation
from .common import Identifier, Text
from .concept import Concept


@record
class PlaceClassification(Concept):
    type: str | None = attribute(LIDO_NS, "type")


@record
class GML:
    """Georeference of a place: any number of points, lines and polygons."""

    geometries: list[Point | LineString | Polygon] = choice(
        (GML_NS, "Point"), (GML_NS, "LineString"), (GML_NS, "Polygon")
    )
    lang: str | None = attribute(XML_NS, "lang", xsdt.LANGUAGE)

    @property
    def points(self) -> list[Point]:
        return [g for g in self.geometries if isinstance(g, Point)]

    @property
    def line_strings(self) -> list[LineString]:
        return [g for g in self.geometries if isinstance(g, LineString)]

    @property
    def polygons(self) -> list[Polygon]:
        return [g for g in self.geometries if isinstance(g, Polygon)]


@record(LIDO_NS, "place")
class Place:
    place_ids: list[Identifier] = element(LIDO_NS, "placeID")
    names: list[Appellation] = element(LIDO_NS, "namePlaceSet")
    gml: list[GML] = element(LIDO_NS, "gml")
    part_of_places: list[Place] = element(LIDO_NS, "partOfPlace")
    classifications: list[PlaceClassification] = element(LIDO_NS, "placeClassification")
    political_entity: str | None = attribute(LIDO_NS, "politicalEntity")
    geographical_entity: str | None = attribute(LIDO_NS, "geographicalEntity")


@record
class PlaceSet:
    display_places: list[Text] = element(LIDO_NS, "displayPlace")
    place: Place | None = element(LIDO_NS, "place")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class EventPlace(PlaceSet):
    type: str | None = attribute(LIDO_NS, "type")


__all__ = ["GML", "EventPlace", "Place", "PlaceClassification", "PlaceSet"]

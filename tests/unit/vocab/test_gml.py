"""Unit tests for the GML geometry bindings."""

from __future__ import annotations

from decimal import Decimal

import pytest

from heritage_xml import decode, marshal, unmarshal
from heritage_xml.binding import IssueKind
from heritage_xml.namespaces import GML_NS, LIDO_NS
from heritage_xml.vocab.gml import (
    AbstractRingProperty,
    Coord,
    Arc,
    ArcString,
    Circle,
    Coordinates,
    Curve,
    DirectPosition,
    LinearRing,
    LineString,
    Point,
    Polygon,
    Ring,
)
from heritage_xml.vocab.lido import GML, Place

SQUARE = [0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 0.0, 0.0]


def _polygon_xml(exterior: str) -> str:
    return (
        f'<gml:Polygon xmlns:gml="{GML_NS}" gml:id="p1" srsName="EPSG:4326">'
        f"<gml:exterior>{exterior}</gml:exterior></gml:Polygon>"
    )


class TestPolygon:
    def test_linear_ring_exterior(self):
        xml = _polygon_xml(
            "<gml:LinearRing><gml:posList>0 0 0 1 1 1 0 0</gml:posList></gml:LinearRing>"
        )

        polygon = unmarshal(xml, Polygon)

        assert polygon.id == "p1"
        assert polygon.srs.srs_name == "EPSG:4326"
        ring = polygon.exterior.ring
        assert isinstance(ring, LinearRing)
        assert ring.pos_list.values == SQUARE

    def test_ring_alternative(self):
        xml = _polygon_xml(
            "<gml:Ring><gml:curveMember><gml:LineString>"
            "<gml:posList>0 0 1 1</gml:posList>"
            "</gml:LineString></gml:curveMember></gml:Ring>"
        )

        polygon = unmarshal(xml, Polygon)

        ring = polygon.exterior.ring
        assert isinstance(ring, Ring)
        assert isinstance(ring.curve_members[0].curve, LineString)

    def test_only_one_ring_is_kept(self):
        xml = _polygon_xml(
            "<gml:LinearRing><gml:posList>0 0 0 1 1 1 0 0</gml:posList></gml:LinearRing>"
            "<gml:Ring/>"
        )

        result = decode(xml, Polygon)

        assert isinstance(result.record.exterior.ring, LinearRing)
        assert result.issues[0].kind is IssueKind.CARDINALITY
        assert result.issues[0].path == "Polygon/exterior/Ring"

    def test_bad_coordinate_is_lexical(self):
        xml = _polygon_xml(
            "<gml:LinearRing><gml:posList>0 0 north 1</gml:posList></gml:LinearRing>"
        )

        result = decode(xml, Polygon)

        assert result.issues[0].kind is IssueKind.LEXICAL
        assert result.issues[0].path == "Polygon/exterior/LinearRing/posList"

    def test_round_trip(self):
        polygon = Polygon(
            id="p1",
            exterior=AbstractRingProperty(
                ring=LinearRing(pos_list=DirectPosition(values=SQUARE))
            ),
            interiors=[
                AbstractRingProperty(ring=LinearRing(pos_list=DirectPosition(values=SQUARE)))
            ],
        )

        data = marshal(polygon, xml_declaration=False)

        assert b'gml:id="p1"' in data
        assert b"<gml:posList>0.0 0.0 0.0 1.0 1.0 1.0 0.0 0.0</gml:posList>" in data
        assert unmarshal(data, Polygon) == polygon


class TestPoint:
    def test_coord_decimals(self):
        xml = (
            f'<gml:Point xmlns:gml="{GML_NS}">'
            "<gml:coord><gml:X>11.2553</gml:X><gml:Y>43.7678</gml:Y></gml:coord>"
            "</gml:Point>"
        )

        point = unmarshal(xml, Point)

        assert point.coord == Coord(x=Decimal("11.2553"), y=Decimal("43.7678"))

    @pytest.mark.parametrize(
        ("coordinates", "expected"),
        [
            (Coordinates(value="1,2 3,4"), [["1", "2"], ["3", "4"]]),
            (Coordinates(value="1;2|3;4", cs=";", ts="|"), [["1", "2"], ["3", "4"]]),
            (Coordinates(), []),
        ],
    )
    def test_coordinates_tuples(self, coordinates, expected):
        assert coordinates.tuples() == expected


class TestCurveSegments:
    XML = (
        f'<gml:Curve xmlns:gml="{GML_NS}"><gml:segments>'
        '<gml:ArcString numArc="2"><gml:posList>0 0 1 1 2 0 3 1 4 0</gml:posList></gml:ArcString>'
        '<gml:Arc numArc="1"><gml:posList>0 0 1 1 2 0</gml:posList></gml:Arc>'
        '<gml:Circle interpolation="circularArc3Points"><gml:pos>0 0</gml:pos></gml:Circle>'
        "</gml:segments></gml:Curve>"
    )

    def test_segments_keep_their_element_types(self):
        curve = unmarshal(self.XML, Curve)

        assert [type(segment) for segment in curve.segments.segments] == [
            ArcString,
            Arc,
            Circle,
        ]
        arc = curve.segments.segments[1]
        assert arc.num_arc == 1
        assert arc.pos_list == DirectPosition(values=[0.0, 0.0, 1.0, 1.0, 2.0, 0.0])

    def test_arc_shares_the_arc_string_content(self):
        assert issubclass(Arc, ArcString)
        assert issubclass(Circle, Arc)

    def test_round_trip_writes_each_segment_name(self):
        curve = unmarshal(self.XML, Curve)

        data = marshal(curve, xml_declaration=False)

        positions = [data.index(name) for name in (b"<gml:ArcString", b"<gml:Arc ", b"<gml:Circle")]
        assert positions == sorted(positions)
        assert unmarshal(data, Curve) == curve


class TestLidoPlaceGeometry:
    def test_geometries_by_kind(self):
        xml = (
            f'<lido:place xmlns:lido="{LIDO_NS}" xmlns:gml="{GML_NS}"><lido:gml>'
            "<gml:Point><gml:pos>1 2</gml:pos></gml:Point>"
            "<gml:LineString><gml:posList>0 0 1 1</gml:posList></gml:LineString>"
            "<gml:Point><gml:pos>3 4</gml:pos></gml:Point>"
            "</lido:gml></lido:place>"
        )

        place = unmarshal(xml, Place)

        gml = place.gml[0]
        assert [p.pos.values for p in gml.points] == [[1.0, 2.0], [3.0, 4.0]]
        assert len(gml.line_strings) == 1
        assert gml.polygons == []
        assert isinstance(gml.geometries[1], LineString)

    def test_geometry_order_is_kept(self):
        gml = GML(geometries=[LineString(), Point(), Polygon()])

        data = marshal(Place(gml=[gml]), xml_declaration=False)

        positions = [data.index(tag) for tag in (b"gml:LineString", b"gml:Point", b"gml:Polygon")]
        assert positions == sorted(positions)

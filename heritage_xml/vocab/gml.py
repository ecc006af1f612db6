"""GML 3.1 geometry subset used by LIDO place descriptions.

Type derivation by extension is expressed as subclassing: a subclass's fields
follow the inherited ones, which matches the schema's content order.
Attribute and element groups are composed with ``group()``.

Only ``gml:id`` and ``gml:remoteSchema`` are namespace-qualified attributes;
all other GML attributes are unqualified.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from .. import xsdt
from ..binding import attribute, chardata, choice, element, group, record
from ..namespaces import GML_NS
from .xlink import SimpleLink


class Sign(StrEnum):
    PLUS = "+"
    MINUS = "-"


class CurveInterpolation(StrEnum):
    NONE = "none"
    LINEAR = "linear"
    GEODESIC = "geodesic"
    CIRCULAR_ARC_3_POINTS = "circularArc3Points"
    CIRCULAR_ARC_2_POINT_WITH_BULGE = "circularArc2PointWithBulge"
    CIRCULAR_ARC_CENTER_POINT_WITH_RADIUS = "circularArcCenterPointWithRadius"
    ELLIPTICAL = "elliptical"
    CLOTHOID = "clothoid"
    CONIC = "conic"
    POLYNOMIAL_SPLINE = "polynomialSpline"
    CUBIC_SPLINE = "cubicSpline"
    RATIONAL_SPLINE = "rationalSpline"


@record
class AssociationGroup:
    link: SimpleLink = group(SimpleLink)
    remote_schema: str | None = attribute(GML_NS, "remoteSchema", xsdt.ANY_URI)


@record
class Code:
    value: str | None = chardata()
    code_space: str | None = attribute(None, "codeSpace", xsdt.ANY_URI)


@record
class StringOrRef:
    value: str | None = chardata()
    link: SimpleLink = group(SimpleLink)
    remote_schema: str | None = attribute(GML_NS, "remoteSchema", xsdt.ANY_URI)


@record(GML_NS, "metaDataProperty")
class MetaDataProperty:
    link: SimpleLink = group(SimpleLink)
    about: str | None = attribute(None, "about", xsdt.ANY_URI)
    remote_schema: str | None = attribute(GML_NS, "remoteSchema", xsdt.ANY_URI)


@record
class StandardObjectProperties:
    meta_data_properties: list[MetaDataProperty] = element(GML_NS, "metaDataProperty")
    description: StringOrRef | None = element(GML_NS, "description")
    names: list[Code] = element(GML_NS, "name")
    # Substitutes for gml:name used by the coordinate reference system schemas.
    cs_names: list[Code] = element(GML_NS, "csName")
    srs_names: list[Code] = element(GML_NS, "srsName")
    group_names: list[Code] = element(GML_NS, "groupName")
    datum_names: list[Code] = element(GML_NS, "datumName")
    meridian_names: list[Code] = element(GML_NS, "meridianName")
    ellipsoid_names: list[Code] = element(GML_NS, "ellipsoidName")
    coordinate_operation_names: list[Code] = element(GML_NS, "coordinateOperationName")
    method_names: list[Code] = element(GML_NS, "methodName")
    parameter_names: list[Code] = element(GML_NS, "parameterName")


@record
class SRSInformationGroup:
    axis_labels: list[str] | None = attribute(None, "axisLabels", xsdt.NCNAME_LIST)
    uom_labels: list[str] | None = attribute(None, "uomLabels", xsdt.NCNAME_LIST)


@record
class SRSReferenceGroup:
    srs_name: str | None = attribute(None, "srsName", xsdt.ANY_URI)
    srs_dimension: int | None = attribute(None, "srsDimension", xsdt.POSITIVE_INTEGER)
    info: SRSInformationGroup = group(SRSInformationGroup)


@record
class AbstractGML:
    standard: StandardObjectProperties = group(StandardObjectProperties)
    id: str | None = attribute(GML_NS, "id", xsdt.ID)


@record
class AbstractGeometry(AbstractGML):
    gid: str | None = attribute(None, "gid")
    srs: SRSReferenceGroup = group(SRSReferenceGroup)


@record
class DirectPosition:
    values: list[float] | None = chardata(xsdt.DOUBLE_LIST)
    srs: SRSReferenceGroup = group(SRSReferenceGroup)


@record(GML_NS, "coordinates")
class Coordinates:
    value: str | None = chardata()
    decimal: str | None = attribute(None, "decimal")
    cs: str | None = attribute(None, "cs")
    ts: str | None = attribute(None, "ts")

    def tuples(self) -> list[list[str]]:
        """Split the text into coordinate tuples using the declared separators."""
        if not self.value:
            return []
        tuple_sep = self.ts or " "
        coord_sep = self.cs or ","
        chunks = self.value.split() if tuple_sep == " " else self.value.strip().split(tuple_sep)
        return [chunk.split(coord_sep) for chunk in chunks if chunk]


@record(GML_NS, "coord")
class Coord:
    x: Decimal | None = element(GML_NS, "X", xsdt.DECIMAL)
    y: Decimal | None = element(GML_NS, "Y", xsdt.DECIMAL)
    z: Decimal | None = element(GML_NS, "Z", xsdt.DECIMAL)


@record(GML_NS, "Point")
class Point(AbstractGeometry):
    pos: DirectPosition | None = element(GML_NS, "pos")
    coordinates: Coordinates | None = element(GML_NS, "coordinates")
    coord: Coord | None = element(GML_NS, "coord")


@record(GML_NS, "pointProperty")
class PointProperty:
    point: Point | None = element(GML_NS, "Point")
    association: AssociationGroup = group(AssociationGroup)


@record(GML_NS, "LineString")
class LineString(AbstractGeometry):
    poses: list[DirectPosition] = element(GML_NS, "pos")
    point_properties: list[PointProperty] = element(GML_NS, "pointProperty")
    point_reps: list[PointProperty] = element(GML_NS, "pointRep")
    coords: list[Coord] = element(GML_NS, "coord")
    pos_list: DirectPosition | None = element(GML_NS, "posList")
    coordinates: Coordinates | None = element(GML_NS, "coordinates")


@record
class CurveSegment:
    num_derivatives_at_start: int | None = attribute(None, "numDerivativesAtStart", xsdt.INTEGER)
    num_derivatives_at_end: int | None = attribute(None, "numDerivativesAtEnd", xsdt.INTEGER)
    num_derivative_interior: int | None = attribute(None, "numDerivativeInterior", xsdt.INTEGER)


@record(GML_NS, "ArcString")
class ArcString:
    segment: CurveSegment = group(CurveSegment)
    interpolation: CurveInterpolation | None = attribute(
        None, "interpolation", xsdt.Enumeration(CurveInterpolation)
    )
    num_arc: int | None = attribute(None, "numArc", xsdt.INTEGER)
    poses: list[DirectPosition] = element(GML_NS, "pos")
    point_properties: list[PointProperty] = element(GML_NS, "pointProperty")
    point_reps: list[PointProperty] = element(GML_NS, "pointRep")
    pos_list: DirectPosition | None = element(GML_NS, "posList")
    coordinates: Coordinates | None = element(GML_NS, "coordinates")


@record(GML_NS, "Arc")
class Arc(ArcString):
    """A single circular arc; an ``ArcString`` restricted to ``numArc=1``."""


@record(GML_NS, "Circle")
class Circle(Arc):
    pass


@record(GML_NS, "segments")
class CurveSegments:
    segments: list[ArcString | Arc | Circle] = choice(
        (GML_NS, "ArcString"), (GML_NS, "Arc"), (GML_NS, "Circle")
    )


@record(GML_NS, "Curve")
class Curve(AbstractGeometry):
    segments: CurveSegments = element(GML_NS, "segments")


@record(GML_NS, "curveMember")
class CurveProperty:
    curve: LineString | CompositeCurve | Curve | OrientableCurve | None = choice(
        (GML_NS, "LineString"),
        (GML_NS, "CompositeCurve"),
        (GML_NS, "Curve"),
        (GML_NS, "OrientableCurve"),
    )
    association: AssociationGroup = group(AssociationGroup)


@record(GML_NS, "CompositeCurve")
class CompositeCurve(AbstractGeometry):
    curve_members: list[CurveProperty] = element(GML_NS, "curveMember")


@record(GML_NS, "OrientableCurve")
class OrientableCurve(AbstractGeometry):
    base_curve: CurveProperty = element(GML_NS, "baseCurve")
    orientation: Sign | None = attribute(None, "orientation", xsdt.Enumeration(Sign))


@record(GML_NS, "LinearRing")
class LinearRing(AbstractGeometry):
    poses: list[DirectPosition] = element(GML_NS, "pos")
    point_properties: list[PointProperty] = element(GML_NS, "pointProperty")
    point_reps: list[PointProperty] = element(GML_NS, "pointRep")
    pos_list: DirectPosition | None = element(GML_NS, "posList")
    coordinates: Coordinates | None = element(GML_NS, "coordinates")
    coords: list[Coord] = element(GML_NS, "coord")


@record(GML_NS, "Ring")
class Ring(AbstractGeometry):
    curve_members: list[CurveProperty] = element(GML_NS, "curveMember")


@record
class AbstractRingProperty:
    ring: LinearRing | Ring | None = choice((GML_NS, "LinearRing"), (GML_NS, "Ring"))


@record(GML_NS, "Polygon")
class Polygon(AbstractGeometry):
    exterior: AbstractRingProperty | None = element(GML_NS, "exterior")
    # Deprecated GML 2 name for exterior.
    outer_boundary_is: AbstractRingProperty | None = element(GML_NS, "outerBoundaryIs")
    interiors: list[AbstractRingProperty] = element(GML_NS, "interior")
    # Deprecated GML 2 name for interior.
    inner_boundary_ises: list[AbstractRingProperty] = element(GML_NS, "innerBoundaryIs")


__all__ = [
    "AbstractGML",
    "AbstractGeometry",
    "AbstractRingProperty",
    "Arc",
    "ArcString",
    "AssociationGroup",
    "Circle",
    "Code",
    "CompositeCurve",
    "Coord",
    "Coordinates",
    "Curve",
    "CurveInterpolation",
    "CurveProperty",
    "CurveSegment",
    "CurveSegments",
    "DirectPosition",
    "LineString",
    "LinearRing",
    "MetaDataProperty",
    "OrientableCurve",
    "Point",
    "PointProperty",
    "Polygon",
    "Ring",
    "SRSInformationGroup",
    "SRSReferenceGroup",
    "Sign",
    "StandardObjectProperties",
    "StringOrRef",
]

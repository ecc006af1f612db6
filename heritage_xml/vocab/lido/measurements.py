"""Object dimensions, format and scale."""

from __future__ import annotations

from ... import xsdt
from ...binding import attribute, element, record
from ...namespaces import LIDO_NS
from .common import Text


@record
class ExtentMeasurement(Text):
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class AspectMeasurements:
    """One measured dimension, e.g. height 84 cm."""

    types: list[Text] = element(LIDO_NS, "measurementType")
    units: list[Text] = element(LIDO_NS, "measurementUnit")
    value: Text = element(LIDO_NS, "measurementValue")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class Measurements:
    measurements_sets: list[AspectMeasurements] = element(LIDO_NS, "measurementsSet")
    extent_measurements: list[ExtentMeasurement] = element(LIDO_NS, "extentMeasurements")
    qualifier_measurements: list[ExtentMeasurement] = element(LIDO_NS, "qualifierMeasurements")
    format_measurements: list[ExtentMeasurement] = element(LIDO_NS, "formatMeasurements")
    shape_measurements: list[ExtentMeasurement] = element(LIDO_NS, "shapeMeasurements")
    scale_measurements: list[ExtentMeasurement] = element(LIDO_NS, "scaleMeasurements")


@record
class MeasurementsSet:
    display_measurements: list[Text] = element(LIDO_NS, "displayObjectMeasurements")
    measurements: Measurements | None = element(LIDO_NS, "objectMeasurements")
    sort_order: int | None = attribute(LIDO_NS, "sortorder", xsdt.INTEGER)


@record
class MeasurementsWrap:
    measurements_sets: list[MeasurementsSet] = element(LIDO_NS, "objectMeasurementsSet")


__all__ = [
    "AspectMeasurements",
    "ExtentMeasurement",
    "Measurements",
    "MeasurementsSet",
    "MeasurementsWrap",
]

"""
Construction-standard lookups: gauge, transverse joint spacing, hanger
spacing and longitudinal seam types.
"""

import logging

from utils.constants import DEFAULT_GAUGE, GAUGE_THICKEST, GAUGE_THINNEST
from utils.helpers import parse_gauge

from .errors import ParameterMissingError
from .models import PressureClass, SeamResult, Shape
from .tables import (
    GAUGE_ADJUSTMENTS, GAUGE_TABLES, HANGER_SPACING_TIERS, JOINT_SPACING_TIERS,
    SEAM_TABLES,
)

logger = logging.getLogger("duct-sizer.construction")


def _application_key(application) -> str:
    return str(getattr(application, "value", application)).strip().lower()


def table_gauge(pressure_class, size: float) -> int:
    """Gauge from the pressure-class table before any application adjustment."""
    table = GAUGE_TABLES.get(PressureClass.from_value(pressure_class))
    if not table:
        logger.warning("No gauge table for pressure class %r, using %d", pressure_class, DEFAULT_GAUGE)
        return DEFAULT_GAUGE
    for max_dimension, gauge in table:
        if max_dimension >= size:
            return gauge
    return DEFAULT_GAUGE


def determine_gauge(pressure_class, size, application) -> str:
    """Determine the minimum sheet-metal gauge for a duct.

    Args:
        pressure_class: PressureClass (or its string value)
        size: Governing dimension in inches, max(width, height) or diameter
        application: Application or free-form application label

    Returns:
        Gauge number as a string, clamped to 18..26

    Raises:
        ParameterMissingError: If any argument is None
    """
    if pressure_class is None:
        raise ParameterMissingError("pressureClass")
    if size is None:
        raise ParameterMissingError("size")
    if application is None:
        raise ParameterMissingError("application")

    gauge = table_gauge(pressure_class, size)
    # lower gauge number = thicker metal
    adjusted = gauge - GAUGE_ADJUSTMENTS.get(_application_key(application), 0)
    final = min(max(adjusted, GAUGE_THICKEST), GAUGE_THINNEST)
    logger.debug("Gauge for %.2f in (%s, %s): table %d, final %d",
                 size, pressure_class, _application_key(application), gauge, final)
    return str(final)


def _is_round(shape) -> bool:
    text = str(getattr(shape, "value", shape)).strip().lower()
    return text in (Shape.CIRCULAR.value, "round")


def calculate_joint_spacing(velocity: float, shape) -> float:
    """Maximum transverse joint spacing in ft, tiered on velocity (ft/min)."""
    for min_velocity, rectangular, round_ in JOINT_SPACING_TIERS:
        if velocity > min_velocity:
            return round_ if _is_round(shape) else rectangular
    return JOINT_SPACING_TIERS[-1][2] if _is_round(shape) else JOINT_SPACING_TIERS[-1][1]


def calculate_hanger_spacing(gauge, shape=None) -> float:
    """Maximum hanger spacing in ft, tiered on gauge. Shape does not change it."""
    gauge_number = parse_gauge(gauge)
    if gauge_number is None:
        gauge_number = 0
    for min_gauge, spacing in HANGER_SPACING_TIERS:
        if gauge_number >= min_gauge:
            return spacing
    return HANGER_SPACING_TIERS[-1][1]


def find_seam_types(shape, pressure_class, size: float) -> SeamResult:
    """Longitudinal seam types allowed for a duct size and pressure class."""
    table = SEAM_TABLES[Shape.CIRCULAR if _is_round(shape) else Shape.RECTANGULAR]
    entries = table["classes"].get(PressureClass.from_value(pressure_class), ())

    for max_size, seam_types in entries:
        if max_size >= size:
            return SeamResult(seam_types=list(seam_types), table=table["table"], notes=list(table["notes"]))

    logger.warning("No seam data for %.2f in at %s pressure class", size, pressure_class)
    return SeamResult(
        seam_types=[],
        table=table["table"],
        notes=list(table["notes"]) + ["No matching data found for the specified size."],
    )

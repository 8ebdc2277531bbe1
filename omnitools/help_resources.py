"""Help resources omnitool - lists materials, applications, pressure classes and SMACNA tables."""

import logging
from typing import Literal

from duct_sizer.config import TOOL_CONFIG
from duct_sizer.models import Application, PressureClass, Shape
from duct_sizer.tables import GAUGE_ADJUSTMENTS, GAUGE_TABLES, MATERIAL_PROPERTIES, SMACNA_REFERENCES, VELOCITY_LIMITS
from utils.json_helpers import safe_json_dumps

logger = logging.getLogger("duct-sizer.help_resources")


def get_gauge_tables() -> dict:
    """Gauge tables as lists of {max_dimension_in, gauge} buckets per pressure class."""
    return {
        pressure_class.value: [
            {"max_dimension_in": max_dimension, "gauge": gauge} for max_dimension, gauge in table
        ]
        for pressure_class, table in GAUGE_TABLES.items()
    }


def help_resources(
    resource_type: Literal[
        "materials", "applications", "pressure_classes", "gauge_tables", "velocity_limits", "config", "all"
    ] = "all",
) -> str:
    """
    List available resources for duct sizing calculations.

    Args:
        resource_type: Type of resources to list
            - "materials": Duct materials with roughness and properties
            - "applications": Applications and their gauge adjustments
            - "pressure_classes": SMACNA pressure classes
            - "gauge_tables": Gauge selection tables by pressure class
            - "velocity_limits": Velocity limits by application
            - "config": Tool name, version and feature flags
            - "all": All resources

    Returns:
        JSON string with requested resource information

    Examples:
        >>> help_resources(resource_type="gauge_tables")
    """
    result = {}

    if resource_type in ("materials", "all"):
        result["materials"] = MATERIAL_PROPERTIES

    if resource_type in ("applications", "all"):
        result["applications"] = {
            "values": [a.value for a in Application],
            "gauge_adjustments": GAUGE_ADJUSTMENTS,
            "note": "Adjustments subtract from the gauge number (heavier metal), clamped to 18-26",
        }
        result["shapes"] = [s.value for s in Shape] + ["round"]

    if resource_type in ("pressure_classes", "all"):
        result["pressure_classes"] = {
            "values": [p.value for p in PressureClass],
            "default": PressureClass.LOW.value,
            "note": "Unknown pressure classes fall back to low",
        }

    if resource_type in ("gauge_tables", "all"):
        result["gauge_tables"] = get_gauge_tables()
        result["references"] = SMACNA_REFERENCES

    if resource_type in ("velocity_limits", "all"):
        result["velocity_limits"] = VELOCITY_LIMITS

    if resource_type in ("config", "all"):
        result["config"] = TOOL_CONFIG

    if not result:
        return safe_json_dumps({"error": f"Invalid resource_type: {resource_type}"})

    return safe_json_dumps(result)

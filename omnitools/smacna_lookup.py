"""Unified SMACNA construction-standard lookups."""

from typing import Literal, Optional

from duct_sizer.construction import (
    calculate_hanger_spacing, calculate_joint_spacing, determine_gauge, find_seam_types, table_gauge,
)
from duct_sizer.errors import DuctSizingError
from duct_sizer.inputs import parse_positive, parse_shape
from duct_sizer.models import PressureClass
from duct_sizer.tables import velocity_limits_for
from utils.helpers import to_float
from utils.json_helpers import safe_json_dumps


def smacna_lookup(
    lookup_type: Literal["gauge", "joint_spacing", "hanger_spacing", "seams", "velocity_limits"] = "gauge",
    size: Optional[float] = None,            # in, largest dimension or diameter
    pressure_class: str = "low",
    application: str = "supply",
    shape: str = "rectangular",
    velocity: Optional[float] = None,        # ft/min
    gauge: Optional[str] = None,
) -> str:
    """Look up SMACNA construction requirements.

    - lookup_type='gauge': Minimum gauge for a size, pressure class and application
    - lookup_type='joint_spacing': Transverse joint spacing for a velocity and shape
    - lookup_type='hanger_spacing': Hanger spacing for a gauge
    - lookup_type='seams': Longitudinal seam types for a shape, pressure class and size
    - lookup_type='velocity_limits': Velocity limits for an application

    Args:
        lookup_type: Type of lookup
        size: Governing duct dimension in inches (gauge, seams)
        pressure_class: SMACNA pressure class (gauge, seams)
        application: Application, e.g. supply, exhaust, kitchen (gauge, velocity_limits)
        shape: Duct shape (joint_spacing, seams)
        velocity: Air velocity in ft/min (joint_spacing)
        gauge: Gauge number (hanger_spacing)

    Returns:
        JSON string with the lookup result

    Examples:
        >>> smacna_lookup(lookup_type="gauge", size=24, pressure_class="medium")
        >>> smacna_lookup(lookup_type="joint_spacing", velocity=2200, shape="round")
    """
    try:
        if lookup_type == "gauge":
            size_in = parse_positive("size", size)
            pressure = PressureClass.from_value(pressure_class)
            return safe_json_dumps({
                "gauge": determine_gauge(pressure, size_in, application),
                "table_gauge": str(table_gauge(pressure, size_in)),
                "pressure_class": pressure,
                "application": application,
                "size_in": size_in,
            })

        elif lookup_type == "joint_spacing":
            if to_float(velocity) is None:
                return safe_json_dumps({"error": "velocity is required for joint_spacing lookup"})
            duct_shape = parse_shape(shape)
            return safe_json_dumps({
                "joint_spacing_ft": calculate_joint_spacing(to_float(velocity), duct_shape),
                "velocity_fpm": velocity,
                "shape": duct_shape,
            })

        elif lookup_type == "hanger_spacing":
            if gauge is None:
                return safe_json_dumps({"error": "gauge is required for hanger_spacing lookup"})
            return safe_json_dumps({
                "hanger_spacing_ft": calculate_hanger_spacing(gauge),
                "gauge": str(gauge),
            })

        elif lookup_type == "seams":
            size_in = parse_positive("size", size)
            return safe_json_dumps(find_seam_types(parse_shape(shape), pressure_class, size_in))

        elif lookup_type == "velocity_limits":
            return safe_json_dumps({"application": application, **velocity_limits_for(application)})

        else:
            return safe_json_dumps({"error": f"Invalid lookup_type: {lookup_type}"})

    except DuctSizingError as e:
        return safe_json_dumps({"errors": [str(e)]})

"""
Air velocity from volumetric flow.
"""

import logging

from .errors import GeometryError

logger = logging.getLogger("duct-sizer.flow")


def calculate_velocity(flow_rate: float, area: float) -> float:
    """V = Q / A.

    Args:
        flow_rate: Airflow in CFM
        area: Duct cross-sectional area in ft²

    Returns:
        Velocity in ft/min
    """
    if area <= 0:
        raise GeometryError(f"Duct area must be greater than 0 (got {area})")
    velocity = flow_rate / area
    logger.debug("Velocity: %.3f CFM / %.6f ft² = %.3f ft/min", flow_rate, area, velocity)
    return velocity

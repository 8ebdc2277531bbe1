"""
Parameter sweeps over the duct sizing pipeline.
"""

import logging
from typing import Any, List, Mapping

import numpy as np

from utils.helpers import to_float

from .calculator import run_duct_sizing
from .errors import DuctSizingError, ValidationError
from .models import ComplianceStatus, SweepPoint

logger = logging.getLogger("duct-sizer.sweep")

SWEEP_VARIABLES = ("flow_rate", "length", "width", "height", "diameter")


def sweep_duct_sizing(base_inputs: Mapping[str, Any], variable: str,
                      start, stop, n: int = 10) -> List[SweepPoint]:
    """Evaluate calculate_duct_sizing over evenly spaced values of one input.

    Args:
        base_inputs: Raw duct inputs held fixed during the sweep
        variable: One of flow_rate, length, width, height, diameter
        start: First value
        stop: Last value
        n: Number of points (>= 2)

    Returns:
        One SweepPoint per value. A point whose inputs are rejected carries
        the error message instead of results.
    """
    if variable not in SWEEP_VARIABLES:
        raise ValidationError(
            f"Cannot sweep '{variable}'. Use one of: {', '.join(SWEEP_VARIABLES)}", field="variable"
        )
    start_value, stop_value = to_float(start), to_float(stop)
    if start_value is None or stop_value is None:
        raise ValidationError("Sweep start and stop must be numbers", field="start")
    if isinstance(n, bool) or not isinstance(n, int) or n < 2:
        raise ValidationError(f"Sweep needs at least 2 points (got {n!r})", field="n")

    points = []
    for value in np.linspace(start_value, stop_value, n):
        value = float(value)
        try:
            # snake_case keys take precedence over camelCase aliases
            _, result, report = run_duct_sizing({**base_inputs, variable: value})
        except DuctSizingError as e:
            logger.debug("Sweep point %s=%g rejected: %s", variable, value, e)
            points.append(SweepPoint(value=value, error=str(e)))
            continue

        points.append(SweepPoint(
            value=value,
            velocity=result.velocity,
            pressure_loss=result.pressure_loss,
            gauge=result.gauge,
            joint_spacing=result.joint_spacing,
            hanger_spacing=result.hanger_spacing,
            compliant=report.status != ComplianceStatus.NON_COMPLIANT,
        ))

    logger.info("Swept %s over %d points", variable, n)
    return points

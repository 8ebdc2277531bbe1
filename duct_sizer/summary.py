"""
One-line digests and display formatting for duct results.
"""

from typing import Dict

from utils.helpers import format_number, round_half_up

from .models import DuctInput, Shape
from .tables import velocity_limits_for


def generate_snap_summary(inputs: DuctInput, result) -> str:
    """Render a compact digest such as
    ``1000 CFM • 12"×8" • 1500 ft/min • 0.34" w.g. • 24 ga • 100' long``.

    ``result`` only needs ``velocity``, ``pressure_loss`` and ``gauge``.
    """
    if inputs.shape == Shape.RECTANGULAR:
        shape_desc = f'{format_number(inputs.width)}"×{format_number(inputs.height)}"'
    else:
        shape_desc = f'{format_number(inputs.diameter)}"⌀'

    parts = [
        f"{format_number(inputs.flow_rate)} CFM",
        shape_desc,
        f"{format_number(int(round_half_up(result.velocity)))} ft/min",
        f'{format_number(result.pressure_loss)}" w.g.',
        f"{result.gauge} ga",
        f"{format_number(inputs.length)}' long",
    ]
    return " • ".join(parts)


def format_velocity(velocity: float, application="supply") -> Dict[str, str]:
    """Velocity display value and status.

    Inside the optimal band is ``optimal``, elsewhere inside the SMACNA limits
    is ``warning``, outside them is ``error``.
    """
    limits = velocity_limits_for(application)

    if velocity < limits["min"] or velocity > limits["max"]:
        status = "error"
    elif velocity < limits["optimal_min"] or velocity > limits["optimal_max"]:
        status = "warning"
    else:
        status = "optimal"

    return {
        "value": f"{round_half_up(velocity):,.0f}",
        "unit": "ft/min",
        "status": status,
    }


def format_pressure_loss(pressure_loss: float) -> Dict[str, str]:
    """Pressure loss display value and status: good, acceptable, high or excessive."""
    if pressure_loss <= 0.05:
        status = "good"
    elif pressure_loss <= 0.08:
        status = "acceptable"
    elif pressure_loss <= 0.12:
        status = "high"
    else:
        status = "excessive"

    return {
        "value": f"{pressure_loss:.3f}",
        "unit": "in. w.g.",
        "status": status,
    }

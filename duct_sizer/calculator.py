"""
Duct sizing pipeline.

Inputs -> geometry -> velocity -> pressure loss -> construction lookup ->
SMACNA validation -> summary.
"""

import logging
from typing import Any, Mapping, Tuple, Union

from utils.helpers import round_half_up

from .compliance import validate_smacna
from .construction import calculate_hanger_spacing, calculate_joint_spacing, determine_gauge
from .flow import calculate_velocity
from .friction import calculate_pressure_loss
from .geometry import calculate_geometry
from .inputs import parse_duct_input
from .models import ComplianceInputs, ComplianceReport, DuctInput, DuctResult
from .summary import generate_snap_summary

logger = logging.getLogger("duct-sizer.calculator")


def run_duct_sizing(inputs: Union[DuctInput, Mapping[str, Any]]) -> Tuple[DuctInput, DuctResult, ComplianceReport]:
    """Run the full pipeline and also return the parsed inputs and the report."""
    duct = parse_duct_input(inputs)

    geometry = calculate_geometry(duct.shape, duct.width, duct.height, duct.diameter)
    velocity = calculate_velocity(duct.flow_rate, geometry.area)
    friction = calculate_pressure_loss(velocity, geometry.hydraulic_diameter, duct.length, duct.material)

    gauge = determine_gauge(duct.pressure_class, duct.governing_dimension, duct.application)
    joint_spacing = calculate_joint_spacing(velocity, duct.shape)
    hanger_spacing = calculate_hanger_spacing(gauge, duct.shape)

    pressure_loss = round_half_up(friction.pressure_loss, 2)

    report = validate_smacna(ComplianceInputs(
        velocity=velocity,
        pressure_loss=friction.pressure_loss,
        gauge=gauge,
        joint_spacing=joint_spacing,
        hanger_spacing=hanger_spacing,
        application=duct.application.value,
        shape=duct.shape.value,
    ))

    result = DuctResult(
        velocity=velocity,
        pressure_loss=pressure_loss,
        gauge=gauge,
        joint_spacing=joint_spacing,
        hanger_spacing=hanger_spacing,
        hydraulic_diameter=round_half_up(geometry.hydraulic_diameter, 2),
        area=round_half_up(geometry.area, 3),
        perimeter=round_half_up(geometry.perimeter, 2),
        warnings=report.warnings,
    )
    result = result.model_copy(update={"snap_summary": generate_snap_summary(duct, result)})

    logger.info("Duct sized: %s", result.snap_summary)
    return duct, result, report


def calculate_duct_sizing(inputs: Union[DuctInput, Mapping[str, Any]]) -> DuctResult:
    """Size a duct run and check it against SMACNA.

    Args:
        inputs: DuctInput, or a mapping of raw values (numbers or text,
            snake_case or camelCase names)

    Returns:
        DuctResult with velocity (ft/min, unrounded), pressure loss
        (in. w.g., 2 dp), gauge, joint and hanger spacing (ft), hydraulic
        diameter (in, 2 dp), area (ft², 3 dp), perimeter (ft, 2 dp), SMACNA
        warnings and a one-line summary

    Raises:
        ValidationError: Missing or invalid numeric input, unknown shape or application
        GeometryError: Dimensions required by the shape are missing
        InvalidMaterialError: Unknown material
    """
    _, result, _ = run_duct_sizing(inputs)
    return result

"""
Duct size selection for a target velocity or a target pressure loss.
"""

import math
import logging
from typing import Optional

from scipy.optimize import brentq

from utils.constants import DEFAULT_ASPECT_RATIO, SELECTION_DIMENSION_MAX, SELECTION_DIMENSION_MIN, SQIN_PER_SQFT

from .calculator import calculate_duct_sizing
from .errors import SelectionError, ValidationError
from .flow import calculate_velocity
from .friction import calculate_pressure_loss
from .geometry import calculate_geometry
from .inputs import parse_material, parse_positive, parse_shape
from .models import Application, DuctSelection, PressureClass, Shape

logger = logging.getLogger("duct-sizer.selection")


def _check_aspect_ratio(aspect_ratio) -> float:
    ratio = parse_positive("aspectRatio", aspect_ratio)
    if ratio < 1:
        raise ValidationError(f"aspectRatio must be at least 1 (got {aspect_ratio!r})", field="aspectRatio")
    return ratio


def _dimensions(shape: Shape, governing: float, aspect_ratio: float) -> dict:
    """Duct dimensions for a governing dimension; width is the larger side."""
    if shape == Shape.CIRCULAR:
        return {"diameter": governing}
    return {"width": governing, "height": governing / aspect_ratio}


def _round_up(dimensions: dict) -> dict:
    return {key: float(math.ceil(value - 1e-9)) for key, value in dimensions.items()}


def select_duct_for_velocity(flow_rate, target_velocity, shape,
                             aspect_ratio=DEFAULT_ASPECT_RATIO,
                             length: Optional[float] = None) -> DuctSelection:
    """Size a duct so the air velocity does not exceed a target.

    Args:
        flow_rate: Airflow in CFM
        target_velocity: Design velocity in ft/min
        shape: Duct shape
        aspect_ratio: Width:height ratio for rectangular ducts (>= 1)
        length: Optional run length in ft; when given the rounded size is
            run through calculate_duct_sizing

    Returns:
        DuctSelection with dimensions rounded up to whole inches
    """
    flow_rate = parse_positive("flow_rate", flow_rate)
    target_velocity = parse_positive("targetVelocity", target_velocity)
    shape = parse_shape(shape)
    aspect_ratio = _check_aspect_ratio(aspect_ratio)

    area_sqin = flow_rate / target_velocity * SQIN_PER_SQFT
    if shape == Shape.CIRCULAR:
        exact = math.sqrt(4 * area_sqin / math.pi)
    else:
        exact = math.sqrt(area_sqin / aspect_ratio) * aspect_ratio

    dimensions = _round_up(_dimensions(shape, exact, aspect_ratio))
    logger.debug("Velocity selection: %.1f CFM at %.0f ft/min -> %s", flow_rate, target_velocity, dimensions)

    result = None
    if length is not None:
        result = calculate_duct_sizing({"flow_rate": flow_rate, "shape": shape, "length": length, **dimensions})

    return DuctSelection(criterion="velocity", shape=shape, exact_dimension=exact,
                         target=target_velocity, result=result, **dimensions)


def select_duct_for_pressure_loss(flow_rate, length, target_pressure_loss, shape,
                                  material="galvanized", aspect_ratio=DEFAULT_ASPECT_RATIO,
                                  application=Application.SUPPLY,
                                  pressure_class=PressureClass.LOW) -> DuctSelection:
    """Size a duct so its friction loss meets a target.

    Solves for the governing dimension with brentq between 3 and 120 in, then
    rounds up to whole inches, so the selected duct's loss is at or below the
    target.

    Raises:
        SelectionError: If no size in the search range reaches the target
    """
    flow_rate = parse_positive("flow_rate", flow_rate)
    length = parse_positive("length", length)
    target = parse_positive("targetPressureLoss", target_pressure_loss)
    shape = parse_shape(shape)
    material = parse_material(material)
    aspect_ratio = _check_aspect_ratio(aspect_ratio)

    def pressure_loss_error(governing):
        dims = _dimensions(shape, governing, aspect_ratio)
        geometry = calculate_geometry(shape, **dims)
        velocity = calculate_velocity(flow_rate, geometry.area)
        loss = calculate_pressure_loss(velocity, geometry.hydraulic_diameter, length, material)
        return loss.pressure_loss - target

    low_error = pressure_loss_error(SELECTION_DIMENSION_MIN)
    high_error = pressure_loss_error(SELECTION_DIMENSION_MAX)
    if low_error * high_error > 0:
        raise SelectionError(
            f"No {shape.value} duct between {SELECTION_DIMENSION_MIN:g} and {SELECTION_DIMENSION_MAX:g} in "
            f"gives {target:g} in. w.g. over {length:g} ft at {flow_rate:g} CFM"
        )

    exact = brentq(pressure_loss_error, SELECTION_DIMENSION_MIN, SELECTION_DIMENSION_MAX, xtol=1e-6)
    dimensions = _round_up(_dimensions(shape, exact, aspect_ratio))
    logger.debug("Pressure loss selection: target %.4f in. w.g. -> %.3f in -> %s", target, exact, dimensions)

    result = calculate_duct_sizing({
        "flow_rate": flow_rate,
        "shape": shape,
        "length": length,
        "material": material,
        "application": application,
        "pressure_class": pressure_class,
        **dimensions,
    })

    return DuctSelection(criterion="pressure_loss", shape=shape, exact_dimension=exact,
                         target=target, result=result, **dimensions)

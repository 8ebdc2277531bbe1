"""
Duct cross-section geometry.

Dimensions come in inches; areas and perimeters go out in ft² and ft, the
hydraulic diameter in inches.
"""

import math
import logging
from typing import Dict, Optional

from utils.constants import IN_PER_FT, SQIN_PER_SQFT, DEFAULT_ASPECT_RATIO
from utils.helpers import round_half_up, to_float

from .errors import GeometryError
from .models import GeometryResult, Shape

logger = logging.getLogger("duct-sizer.geometry")


def _shape(shape) -> Shape:
    if isinstance(shape, Shape):
        return shape
    text = str(shape).strip().lower()
    if text == "round":
        return Shape.CIRCULAR
    try:
        return Shape(text)
    except ValueError:
        raise GeometryError(f"Unknown duct shape: '{shape}'. Use 'rectangular' or 'circular'")


def calculate_geometry(shape, width=None, height=None, diameter=None) -> GeometryResult:
    """Calculate area, perimeter and hydraulic diameter of a duct section.

    Args:
        shape: Shape.RECTANGULAR or Shape.CIRCULAR (or their string values)
        width: Rectangular width in inches
        height: Rectangular height in inches
        diameter: Round diameter in inches

    Returns:
        GeometryResult with area (ft²), perimeter (ft), hydraulic diameter (in)

    Raises:
        GeometryError: If the dimensions required by the shape are missing
    """
    shape = _shape(shape)

    if shape == Shape.RECTANGULAR:
        w, h = to_float(width), to_float(height)
        if w is None or h is None:
            raise GeometryError("Width and height required for rectangular ducts")
        area = (w * h) / SQIN_PER_SQFT
        perimeter = 2 * (w + h) / IN_PER_FT
    else:
        d = to_float(diameter)
        if d is None:
            raise GeometryError("Diameter required for circular ducts")
        area = (math.pi * d ** 2) / (4 * SQIN_PER_SQFT)
        perimeter = (math.pi * d) / IN_PER_FT

    hydraulic_diameter = calculate_hydraulic_diameter(area, perimeter)
    logger.debug("Geometry %s: area=%.6f ft², perimeter=%.6f ft, Dh=%.4f in",
                 shape.value, area, perimeter, hydraulic_diameter)
    return GeometryResult(area=area, perimeter=perimeter, hydraulic_diameter=hydraulic_diameter)


def calculate_hydraulic_diameter(area: float, perimeter: float) -> float:
    """Dh = 4·A/P, converted from ft to inches."""
    if perimeter <= 0:
        raise GeometryError("Perimeter must be greater than 0 to compute hydraulic diameter")
    return (4 * area) / perimeter * IN_PER_FT


def equivalent_diameter(width: float, height: float) -> float:
    """Equivalent round diameter of a rectangular duct for equal friction.

    Huebscher: De = 1.3·(a·b)^0.625 / (a+b)^0.25, all in inches.
    """
    if width is None or height is None or width <= 0 or height <= 0:
        raise GeometryError("Width and height required for equivalent diameter")
    return 1.3 * (width * height) ** 0.625 / (width + height) ** 0.25


def convert_duct_shape(from_shape, to_shape, dimensions: Dict[str, Optional[float]],
                       aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> Dict[str, float]:
    """Convert duct dimensions between shapes while keeping the same area.

    Args:
        from_shape: Shape of the given dimensions
        to_shape: Target shape
        dimensions: Dict with width/height or diameter, inches
        aspect_ratio: Width:height ratio used for circular -> rectangular

    Returns:
        Dict with the target dimensions rounded to 2 decimals
    """
    from_shape, to_shape = _shape(from_shape), _shape(to_shape)
    if from_shape == to_shape:
        return dict(dimensions)

    if from_shape == Shape.RECTANGULAR:
        w, h = to_float(dimensions.get("width")), to_float(dimensions.get("height"))
        if not w or not h:
            raise GeometryError("Width and height required for rectangular to circular conversion")
        area = w * h
        diameter = math.sqrt(4 * area / math.pi)
        return {"diameter": round_half_up(diameter, 2)}

    d = to_float(dimensions.get("diameter"))
    if not d:
        raise GeometryError("Diameter required for circular to rectangular conversion")
    area = math.pi * d ** 2 / 4
    height = math.sqrt(area / aspect_ratio)
    width = area / height
    return {"width": round_half_up(width, 2), "height": round_half_up(height, 2)}

"""Unified duct size selection and shape conversion."""

import logging
from typing import Literal, Optional

from duct_sizer.errors import DuctSizingError
from duct_sizer.geometry import convert_duct_shape, equivalent_diameter
from duct_sizer.inputs import parse_positive, parse_shape
from duct_sizer.models import Shape
from duct_sizer.selection import select_duct_for_pressure_loss, select_duct_for_velocity
from utils.constants import DEFAULT_ASPECT_RATIO
from utils.helpers import round_half_up
from utils.json_helpers import safe_json_dumps

logger = logging.getLogger("duct-sizer.duct_selection")


def duct_selection(
    criterion: Literal["velocity", "pressure_loss", "convert_shape"] = "velocity",
    flow_rate: Optional[float] = None,              # CFM
    shape: Literal["rectangular", "circular", "round"] = "rectangular",
    target_velocity: Optional[float] = None,        # ft/min
    target_pressure_loss: Optional[float] = None,   # in. w.g. over the run
    length: Optional[float] = None,                 # ft
    material: str = "galvanized",
    application: str = "supply",
    pressure_class: str = "low",
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    width: Optional[float] = None,                  # in, convert_shape
    height: Optional[float] = None,                 # in, convert_shape
    diameter: Optional[float] = None,               # in, convert_shape
) -> str:
    """Select a duct size for a design target, or convert between shapes.

    - criterion='velocity': Smallest whole-inch duct at or below target_velocity
    - criterion='pressure_loss': Smallest whole-inch duct whose friction loss
      over `length` is at or below target_pressure_loss (solved with brentq)
    - criterion='convert_shape': Equal-area conversion of the given dimensions
      to the other shape, with the equal-friction equivalent diameter

    Args:
        criterion: Selection criterion
        flow_rate: Airflow in CFM
        shape: Shape to select, or the shape of the given dimensions for convert_shape
        target_velocity: Design velocity in ft/min
        target_pressure_loss: Allowed pressure loss in in. w.g. for the run
        length: Run length in ft
        material: Duct material
        application: Air system served by the duct
        pressure_class: SMACNA pressure class
        aspect_ratio: Width:height ratio for rectangular ducts
        width: Rectangular width in inches (convert_shape)
        height: Rectangular height in inches (convert_shape)
        diameter: Round diameter in inches (convert_shape)

    Returns:
        JSON string with the selection, errors and log

    Examples:
        >>> duct_selection(criterion="velocity", flow_rate=2000,
        ...                target_velocity=1500, shape="round")
        >>> duct_selection(criterion="pressure_loss", flow_rate=2000, length=100,
        ...                target_pressure_loss=0.1, shape="rectangular")
    """
    log = []
    try:
        if criterion == "velocity":
            selection = select_duct_for_velocity(flow_rate, target_velocity, shape,
                                                 aspect_ratio=aspect_ratio, length=length)
            log.append(f"Selected for {target_velocity} ft/min, rounded up to whole inches")
            return safe_json_dumps({"selection": selection, "errors": [], "log": log})

        elif criterion == "pressure_loss":
            selection = select_duct_for_pressure_loss(
                flow_rate, length, target_pressure_loss, shape,
                material=material, aspect_ratio=aspect_ratio,
                application=application, pressure_class=pressure_class,
            )
            log.append(f"Solved governing dimension {selection.exact_dimension:.3f} in with brentq")
            return safe_json_dumps({"selection": selection, "errors": [], "log": log})

        elif criterion == "convert_shape":
            from_shape = parse_shape(shape)
            to_shape = Shape.CIRCULAR if from_shape == Shape.RECTANGULAR else Shape.RECTANGULAR
            dimensions = {"width": width, "height": height, "diameter": diameter}
            response = {
                "from_shape": from_shape,
                "to_shape": to_shape,
                "converted": convert_duct_shape(from_shape, to_shape, dimensions, aspect_ratio=aspect_ratio),
            }
            if from_shape == Shape.RECTANGULAR:
                response["equivalent_diameter_in"] = round_half_up(
                    equivalent_diameter(parse_positive("width", width), parse_positive("height", height)), 2
                )
            response["errors"] = []
            response["log"] = ["Equal-area conversion"]
            return safe_json_dumps(response)

        else:
            return safe_json_dumps({"error": f"Invalid criterion: {criterion}"})

    except DuctSizingError as e:
        logger.warning("duct_selection failed: %s", e)
        return safe_json_dumps({"errors": [str(e)], "log": log})

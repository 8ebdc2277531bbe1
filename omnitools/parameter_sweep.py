"""Parameter sweep over the duct sizing calculation."""

from typing import Literal, Optional

from duct_sizer.errors import DuctSizingError
from duct_sizer.sweep import sweep_duct_sizing
from utils.json_helpers import safe_json_dumps


def parameter_sweep(
    variable: Literal["flow_rate", "length", "width", "height", "diameter"],
    start: float,
    stop: float,
    n: int = 10,

    # Duct parameters held fixed
    flow_rate: Optional[float] = None,
    shape: str = "rectangular",
    length: Optional[float] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    diameter: Optional[float] = None,
    material: str = "galvanized",
    application: str = "supply",
    pressure_class: str = "low",
) -> str:
    """Sweep one duct input and report how the results respond.

    Args:
        variable: Input to sweep
        start: Start value for sweep
        stop: End value for sweep
        n: Number of points in sweep
        flow_rate, shape, length, width, height, diameter, material,
        application, pressure_class: Fixed duct inputs, as for duct_sizing

    Returns:
        JSON string with one entry per sweep point

    Examples:
        >>> parameter_sweep(variable="flow_rate", start=500, stop=2000, n=4,
        ...                 shape="rectangular", width=12, height=8, length=100)
    """
    params = locals().copy()
    for key in ("variable", "start", "stop", "n"):
        params.pop(key)
    base_inputs = {k: v for k, v in params.items() if v is not None}

    try:
        points = sweep_duct_sizing(base_inputs, variable, start, stop, n)
    except DuctSizingError as e:
        return safe_json_dumps({"errors": [str(e)]})

    return safe_json_dumps({
        "variable": variable,
        "points": points,
        "errors": [],
        "log": [f"Swept {variable} from {start} to {stop} over {n} points"],
    })

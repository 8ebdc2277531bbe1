"""
Input boundary for duct sizing.

Raw inputs arrive as numbers or text, under snake_case or camelCase names.
parse_duct_input converts them once into a strict DuctInput so the
calculation modules only ever see finite positive floats and enum members.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from utils.helpers import to_float

from .errors import GeometryError, InvalidMaterialError, ValidationError
from .models import Application, DuctInput, Material, PressureClass, Shape

logger = logging.getLogger("duct-sizer.inputs")

# canonical name -> (camelCase name used in messages, accepted keys)
FIELD_ALIASES = {
    "flow_rate": ("flowRate", ("flow_rate", "flowRate", "cfm")),
    "shape": ("shape", ("shape",)),
    "length": ("length", ("length",)),
    "width": ("width", ("width",)),
    "height": ("height", ("height",)),
    "diameter": ("diameter", ("diameter",)),
    "material": ("material", ("material",)),
    "application": ("application", ("application",)),
    "pressure_class": ("pressureClass", ("pressure_class", "pressureClass")),
}

SHAPE_ALIASES = {
    "rectangular": Shape.RECTANGULAR,
    "rect": Shape.RECTANGULAR,
    "circular": Shape.CIRCULAR,
    "round": Shape.CIRCULAR,
}


def _lookup(raw: Mapping[str, Any], name: str) -> Tuple[Optional[str], Any]:
    """Return (key used, value) for the first accepted key present in raw."""
    for key in FIELD_ALIASES[name][1]:
        if key in raw and raw[key] is not None:
            return key, raw[key]
    return None, None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_positive(name: str, value: Any) -> float:
    """Parse a required numeric field that must be finite and greater than 0."""
    field = FIELD_ALIASES[name][0] if name in FIELD_ALIASES else name
    number = to_float(value)
    if number is None or number <= 0:
        raise ValidationError(f"{field} must be greater than 0 (got {value!r})", field=field)
    return number


def parse_shape(value: Any) -> Shape:
    if isinstance(value, Shape):
        return value
    if _is_blank(value):
        raise ValidationError("shape is required: use 'rectangular' or 'circular'", field="shape")
    shape = SHAPE_ALIASES.get(str(value).strip().lower())
    if shape is None:
        raise ValidationError(f"Unknown duct shape: '{value}'. Use 'rectangular' or 'circular'", field="shape")
    return shape


def parse_material(value: Any) -> Material:
    if isinstance(value, Material):
        return value
    if _is_blank(value):
        return Material.GALVANIZED
    try:
        return Material(str(value).strip().lower())
    except ValueError:
        raise InvalidMaterialError(value)


def parse_application(value: Any) -> Application:
    if isinstance(value, Application):
        return value
    if _is_blank(value):
        return Application.SUPPLY
    try:
        return Application(str(value).strip().lower())
    except ValueError:
        raise ValidationError(
            f"Unknown application: '{value}'. Use 'supply', 'return' or 'exhaust'",
            field="application",
        )


def parse_pressure_class(value: Any) -> PressureClass:
    if _is_blank(value):
        return PressureClass.LOW
    return PressureClass.from_value(value)


def parse_duct_input(raw: Union[DuctInput, Mapping[str, Any]]) -> DuctInput:
    """Turn raw duct inputs into a validated DuctInput.

    Args:
        raw: DuctInput or mapping with flow_rate (flowRate, cfm), shape,
            length, width/height or diameter, and optional material,
            application and pressure_class (pressureClass)

    Returns:
        DuctInput carrying only the dimensions the shape uses

    Raises:
        ValidationError: Missing, non-numeric or non-positive number, unknown
            shape or application
        GeometryError: Dimensions required by the shape are missing
        InvalidMaterialError: Unknown material
    """
    if isinstance(raw, DuctInput):
        raw = raw.model_dump()
    if not isinstance(raw, Mapping):
        raise ValidationError("Duct inputs must be a mapping of field names to values")

    values = {name: _lookup(raw, name)[1] for name in FIELD_ALIASES}

    flow_rate = parse_positive("flow_rate", values["flow_rate"])
    length = parse_positive("length", values["length"])
    shape = parse_shape(values["shape"])

    width = height = diameter = None
    if shape == Shape.RECTANGULAR:
        if _is_blank(values["width"]) or _is_blank(values["height"]):
            raise GeometryError("Width and height required for rectangular ducts")
        width = parse_positive("width", values["width"])
        height = parse_positive("height", values["height"])
    else:
        if _is_blank(values["diameter"]):
            raise GeometryError("Diameter required for circular ducts")
        diameter = parse_positive("diameter", values["diameter"])

    return DuctInput(
        flow_rate=flow_rate,
        shape=shape,
        length=length,
        width=width,
        height=height,
        diameter=diameter,
        material=parse_material(values["material"]),
        application=parse_application(values["application"]),
        pressure_class=parse_pressure_class(values["pressure_class"]),
    )


class InputResolver:
    """
    Input resolution with a readable log of where each value came from.

    The omnitools return the log next to their results.
    """

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        self.results_log: List[str] = []

    def resolve(self, raw: Mapping[str, Any]) -> DuctInput:
        """Parse raw inputs, recording aliases and defaults that were applied."""
        for name, (field, _keys) in FIELD_ALIASES.items():
            key, _ = _lookup(raw, name)
            if key is not None and key != name:
                self.results_log.append(f"{field}: read from '{key}'")

        duct_input = parse_duct_input(raw)

        for name, default in (("material", Material.GALVANIZED),
                              ("application", Application.SUPPLY),
                              ("pressure_class", PressureClass.LOW)):
            if _is_blank(_lookup(raw, name)[1]):
                self.results_log.append(f"{FIELD_ALIASES[name][0]}: defaulted to '{default.value}'")

        self.results_log.append(
            f"Inputs: {duct_input.flow_rate:g} CFM, {duct_input.shape.value}, {duct_input.length:g} ft"
        )
        logger.debug("%s resolved inputs: %s", self.tool_name, duct_input)
        return duct_input

    def get_logs(self) -> Dict[str, List[str]]:
        """Get accumulated logs."""
        return {"log": self.results_log.copy()}

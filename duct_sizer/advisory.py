"""
Design guidance: educational notes, input range feedback and material
property sheets.
"""

from typing import Any, Dict, List, Mapping

from utils.helpers import to_float

from .errors import InvalidMaterialError
from .models import DuctInput, DuctResult, Material, Shape
from .tables import MATERIAL_PROPERTIES


def generate_educational_content(inputs: DuctInput, result: DuctResult) -> List[str]:
    """Explain the trade-offs behind a sized duct."""
    content = []

    if result.velocity > 2000:
        content.append("High velocity systems provide compact ductwork but may increase noise levels. "
                       "Consider acoustic treatment.")
    elif result.velocity < 1000:
        content.append("Low velocity systems are quieter but require larger ductwork. "
                       "Ensure adequate air mixing.")

    if result.pressure_loss > 0.1:
        content.append("High pressure losses increase fan energy consumption. "
                       "Consider larger duct sizes to reduce operating costs.")

    if inputs.material == Material.STAINLESS:
        content.append("Stainless steel provides excellent corrosion resistance for harsh environments "
                       "but increases material costs.")
    elif inputs.material == Material.ALUMINUM:
        content.append("Aluminum offers good corrosion resistance and lighter weight, "
                       "ideal for rooftop installations.")

    if inputs.shape == Shape.CIRCULAR:
        content.append("Circular ducts provide the lowest pressure loss per unit area "
                       "but may be more expensive to fabricate.")
    else:
        content.append("Rectangular ducts are easier to fabricate and install in tight spaces "
                       "but have higher pressure losses.")

    return content


def validate_input_ranges(partial: Mapping[str, Any]) -> Dict[str, Any]:
    """Check partially entered inputs and suggest corrections.

    Unlike parse_duct_input this never raises; it is meant for feedback while
    inputs are still being entered.

    Returns:
        Dict with ``valid``, ``errors`` and ``suggestions``
    """
    errors, suggestions = [], []

    cfm_raw = partial.get("flow_rate", partial.get("flowRate", partial.get("cfm")))
    if cfm_raw is not None:
        cfm = to_float(cfm_raw)
        if cfm is None or cfm <= 0:
            errors.append("CFM must be greater than 0")
        elif cfm > 100000:
            suggestions.append("Very high CFM values may require special consideration for duct design")
        elif cfm < 50:
            suggestions.append("Very low CFM values may not provide adequate air circulation")

    shape = str(partial.get("shape") or "").strip().lower()
    width, height = to_float(partial.get("width")), to_float(partial.get("height"))
    diameter = to_float(partial.get("diameter"))

    if shape == Shape.RECTANGULAR.value:
        if width and width > 120:
            suggestions.append('Duct widths over 120" may require special reinforcement')
        if height and height > 120:
            suggestions.append('Duct heights over 120" may require special reinforcement')
        if width and height and width / height > 8:
            suggestions.append("High aspect ratios (>8:1) may cause uneven air distribution")
    elif shape in (Shape.CIRCULAR.value, "round"):
        if diameter and diameter > 120:
            suggestions.append("Large diameter ducts may require special fabrication techniques")

    if partial.get("length") is not None:
        length = to_float(partial.get("length"))
        if length is None or length <= 0:
            errors.append("Length must be greater than 0")
        elif length > 1000:
            suggestions.append("Very long duct runs may require intermediate supports and expansion joints")

    return {"valid": not errors, "errors": errors, "suggestions": suggestions}


def get_material_properties(material) -> Dict[str, Any]:
    """Property sheet for a duct material.

    Raises:
        InvalidMaterialError: If the material is not known
    """
    key = material.value if isinstance(material, Material) else str(material).strip().lower()
    if key not in MATERIAL_PROPERTIES:
        raise InvalidMaterialError(material)
    return {"material": key, **MATERIAL_PROPERTIES[key]}

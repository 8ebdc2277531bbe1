"""Unified property lookup for air and duct materials."""

import logging
from typing import Literal, Optional

from duct_sizer.advisory import get_material_properties
from duct_sizer.errors import InvalidMaterialError
from duct_sizer.tables import MATERIAL_PROPERTIES
from utils.constants import (
    AIR_DENSITY, AIR_KINEMATIC_VISCOSITY, INWG_to_PA, P_ATM_PA, STANDARD_AIR_TEMP_F,
)
from utils.import_helpers import COOLPROP_AVAILABLE, get_air_properties
from utils.json_helpers import safe_json_dumps

logger = logging.getLogger("duct-sizer.properties")


def properties(
    lookup_type: Literal["air", "material", "list_materials"] = "air",

    # Air properties parameters
    temperature_f: float = STANDARD_AIR_TEMP_F,
    pressure_pa: Optional[float] = None,
    static_pressure_inwg: Optional[float] = None,

    # Material parameters
    material: Optional[str] = None,
) -> str:
    """Unified property lookup for air and duct materials.

    - lookup_type='air': Dry air density and viscosity at a temperature,
      compared with the standard air used by the duct calculations
    - lookup_type='material': Property sheet for a duct material
    - lookup_type='list_materials': All supported duct materials

    Args:
        lookup_type: Type of property lookup

        Air parameters:
            temperature_f: Dry-bulb temperature in °F (default: 70)
            pressure_pa: Absolute pressure in Pa (default: 101325)
            static_pressure_inwg: Duct static pressure in in. w.g. added to
                atmospheric pressure when pressure_pa is not given

        Material parameters:
            material: galvanized, stainless or aluminum

    Returns:
        JSON string with property data

    Examples:
        >>> properties(lookup_type="air", temperature_f=120)
        >>> properties(lookup_type="material", material="stainless")
    """
    if lookup_type == "air":
        if pressure_pa is None:
            pressure_pa = P_ATM_PA + (static_pressure_inwg or 0.0) * INWG_to_PA

        standard = {
            "temperature_f": STANDARD_AIR_TEMP_F,
            "density_lb_ft3": AIR_DENSITY,
            "kinematic_viscosity_ft2_s": AIR_KINEMATIC_VISCOSITY,
        }
        if not COOLPROP_AVAILABLE:
            return safe_json_dumps({
                "error": "Air property lookup is not available. The CoolProp package is not installed.",
                "standard_air": standard,
            })

        air = get_air_properties(temperature_f, pressure_pa)
        if air is None:
            return safe_json_dumps({
                "error": f"Could not compute air properties at {temperature_f}°F and {pressure_pa:.0f} Pa",
                "standard_air": standard,
            })

        return safe_json_dumps({
            "air": air,
            "standard_air": standard,
            "density_ratio": air["density_lb_ft3"] / AIR_DENSITY,
            "note": "Duct calculations use standard air; scale pressure loss by density_ratio for other conditions",
        })

    elif lookup_type == "material":
        if not material:
            return safe_json_dumps({"error": "material required for material lookup"})
        try:
            return safe_json_dumps(get_material_properties(material))
        except InvalidMaterialError as e:
            return safe_json_dumps({"error": str(e), "available_materials": list(MATERIAL_PROPERTIES)})

    elif lookup_type == "list_materials":
        return safe_json_dumps({
            "materials": [{"material": key, **props} for key, props in MATERIAL_PROPERTIES.items()],
            "count": len(MATERIAL_PROPERTIES),
        })

    else:
        return safe_json_dumps({"error": f"Invalid lookup_type: {lookup_type}"})

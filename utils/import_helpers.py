"""
Import helpers for optional dependencies.

This module provides functions to gracefully handle optional dependencies.
CoolProp is only needed for air property lookups at non-standard conditions;
the duct sizing pipeline itself uses the standard-air constants.
"""

import logging

from .constants import LBFT3_to_KGM3, M2S_to_FT2S, P_ATM_PA

logger = logging.getLogger("duct-sizer.imports")

# CoolProp availability check
COOLPROP_AVAILABLE = False
CP = None

try:
    import CoolProp.CoolProp as _CP
    COOLPROP_AVAILABLE = True
    CP = _CP
    logger.info("CoolProp package successfully imported")
except ImportError:
    logger.warning("CoolProp module not available. Air property lookups will be disabled.")


def fahrenheit_to_kelvin(temperature_f: float) -> float:
    """Convert a dry-bulb temperature from °F to K."""
    return (temperature_f - 32.0) * 5.0 / 9.0 + 273.15


def get_air_properties(temperature_f, pressure_pa=P_ATM_PA):
    """Attempt to get dry air properties from CoolProp.

    Args:
        temperature_f: Dry-bulb temperature in °F
        pressure_pa: Absolute pressure in Pa

    Returns:
        Dictionary of air properties in imperial units or None if lookup failed
    """
    if not COOLPROP_AVAILABLE:
        logger.warning("Cannot lookup air properties: CoolProp package not available")
        return None

    try:
        T_K = fahrenheit_to_kelvin(temperature_f)
        rho = CP.PropsSI("D", "T", T_K, "P", pressure_pa, "Air")
        mu = CP.PropsSI("V", "T", T_K, "P", pressure_pa, "Air")
        return {
            "temperature_f": temperature_f,
            "pressure_pa": pressure_pa,
            "density_lb_ft3": rho / LBFT3_to_KGM3,
            "dynamic_viscosity_pas": mu,
            "kinematic_viscosity_ft2_s": (mu / rho) * M2S_to_FT2S,
        }
    except Exception as e:
        logger.error("Error getting air properties at %s°F: %s", temperature_f, e)
        return None

"""
Pressure loss in straight duct runs.

Darcy-Weisbach with a laminar friction factor below Re 2300 and the
Swamee-Jain explicit approximation of Colebrook above it. Standard air
properties are used throughout.
"""

import logging

from fluids.core import Reynolds
from fluids.friction import Swamee_Jain_1976, friction_laminar

from utils.constants import (
    AIR_DENSITY, AIR_KINEMATIC_VISCOSITY, G_GRAVITY, IN_PER_FT, PSF_to_PSI,
    PSI_to_INWG, RE_FLOOR, RE_LAMINAR_MAX, RE_TURBULENT_MIN, ROUGHNESS_FT,
    SEC_PER_MIN,
)

from .errors import InvalidMaterialError
from .models import FlowRegime, Material, PressureLossResult

logger = logging.getLogger("duct-sizer.friction")


def get_roughness(material) -> float:
    """Absolute roughness of a duct material in ft."""
    key = material.value if isinstance(material, Material) else str(material).strip().lower()
    if key not in ROUGHNESS_FT:
        raise InvalidMaterialError(material)
    return ROUGHNESS_FT[key]


def classify_regime(reynolds: float) -> FlowRegime:
    if reynolds < RE_LAMINAR_MAX:
        return FlowRegime.LAMINAR
    if reynolds < RE_TURBULENT_MIN:
        return FlowRegime.TRANSITIONAL
    return FlowRegime.TURBULENT


def swamee_jain(reynolds: float, roughness: float, diameter: float) -> float:
    """Swamee-Jain friction factor, f = 0.25 / log10(ε/3.7D + 5.74/Re^0.9)²."""
    return Swamee_Jain_1976(Re=reynolds, eD=roughness / diameter)


def darcy_friction_factor(reynolds: float, roughness: float, diameter: float) -> float:
    """Darcy friction factor for duct flow.

    Below Re 2300 the laminar 64/Re applies, with Re floored at 1 so a
    zero-velocity run does not divide by zero. The floored value has no
    physical meaning near Re = 0.
    """
    if reynolds < RE_LAMINAR_MAX:
        return friction_laminar(max(reynolds, RE_FLOOR))
    return swamee_jain(reynolds, roughness, diameter)


def calculate_pressure_loss(velocity: float, hydraulic_diameter: float, length: float,
                            material=Material.GALVANIZED) -> PressureLossResult:
    """Calculate the friction pressure loss of a straight duct run.

    Args:
        velocity: Air velocity in ft/min
        hydraulic_diameter: Hydraulic diameter in inches
        length: Duct length in ft
        material: Duct material (galvanized, stainless, aluminum)

    Returns:
        PressureLossResult with pressure loss in in. w.g. and the
        intermediate Reynolds number and friction factor

    Raises:
        InvalidMaterialError: If the material has no roughness entry
    """
    roughness = get_roughness(material)

    velocity_fps = velocity / SEC_PER_MIN
    diameter_ft = hydraulic_diameter / IN_PER_FT

    reynolds = Reynolds(V=velocity_fps, D=diameter_ft, nu=AIR_KINEMATIC_VISCOSITY)
    friction_factor = darcy_friction_factor(reynolds, roughness, diameter_ft)

    # lb/ft², then psi, then in. w.g.
    dp_psf = friction_factor * (length / diameter_ft) * AIR_DENSITY * velocity_fps ** 2 / (2 * G_GRAVITY)
    pressure_loss = max(dp_psf * PSF_to_PSI * PSI_to_INWG, 0.0)

    regime = classify_regime(reynolds)
    logger.debug("Pressure loss: Re=%.1f (%s), f=%.5f, dP=%.5f in. w.g.",
                 reynolds, regime.value, friction_factor, pressure_loss)

    return PressureLossResult(
        pressure_loss=pressure_loss,
        reynolds=reynolds,
        friction_factor=friction_factor,
        regime=regime,
        roughness=roughness,
        velocity_fps=velocity_fps,
        diameter_ft=diameter_ft,
    )

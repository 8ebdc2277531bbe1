"""
SMACNA compliance validation.

Checks velocity, pressure loss, gauge, joint spacing and hanger spacing
against the SMACNA limits for the application. Problems are reported as
warnings and educational notes; validation never raises.
"""

import logging
from typing import Any, Mapping, Optional, Tuple, Union

from utils.constants import (
    PRESSURE_LOSS_LIMIT, PRESSURE_LOSS_OVERSIZED, PRESSURE_LOSS_SOFT_FRACTION,
)
from utils.helpers import format_number, parse_gauge, round_half_up, to_float

from .construction import calculate_hanger_spacing, calculate_joint_spacing
from .models import Application, ComplianceInputs, ComplianceReport, ComplianceStatus, Shape
from .tables import velocity_limits_for

logger = logging.getLogger("duct-sizer.compliance")

# (check passed, advisory condition, warnings, educational notes)
CheckResult = Tuple[bool, bool, list, list]


def _fmt(value: float) -> str:
    return format_number(round_half_up(value, 2))


def _read(values: Mapping[str, Any], name: str, alias: str, default=None):
    if name in values:
        return values[name]
    return values.get(alias, default)


def check_velocity(velocity: Optional[float], application: str) -> CheckResult:
    if velocity is None:
        return False, False, ["Velocity could not be read as a number"], []

    limits = velocity_limits_for(application)
    warnings, notes = [], []
    compliant, advisory = True, False

    if velocity < limits["min"]:
        warnings.append(f"Velocity {_fmt(velocity)} ft/min is below SMACNA minimum of "
                        f"{limits['min']} ft/min for {application} air")
        notes.append("Low velocities may cause air stratification and poor mixing")
        compliant = False
    elif velocity > limits["max"]:
        warnings.append(f"Velocity {_fmt(velocity)} ft/min exceeds SMACNA maximum of "
                        f"{limits['max']} ft/min for {application} air")
        notes.append("High velocities increase noise levels and pressure losses")
        compliant = False
    elif velocity < limits["optimal_min"] or velocity > limits["optimal_max"]:
        advisory = True
        notes.append(f"Consider optimizing velocity to {limits['optimal_min']}-{limits['optimal_max']} "
                     f"ft/min range for best performance")

    return compliant, advisory, warnings, notes


def check_pressure_loss(pressure_loss: Optional[float]) -> CheckResult:
    if pressure_loss is None:
        return False, False, ["Pressure loss could not be read as a number"], []

    warnings, notes = [], []
    compliant, advisory = True, False

    if pressure_loss > PRESSURE_LOSS_LIMIT:
        warnings.append(f"Pressure loss {_fmt(pressure_loss)} in. w.g. exceeds recommended "
                        f"{PRESSURE_LOSS_LIMIT} in. w.g. per 100 ft")
        notes.append("High pressure losses increase fan energy consumption and operating costs")
        compliant = False
    elif pressure_loss > PRESSURE_LOSS_LIMIT * PRESSURE_LOSS_SOFT_FRACTION:
        advisory = True
        notes.append("Pressure loss is approaching maximum recommended values")

    if pressure_loss < PRESSURE_LOSS_OVERSIZED:
        advisory = True
        notes.append("Very low pressure loss - verify duct sizing is not oversized")

    return compliant, advisory, warnings, notes


def check_gauge(gauge: Any, pressure_loss: Optional[float]) -> CheckResult:
    gauge_number = parse_gauge(gauge)
    if gauge_number is None:
        return False, False, [f"Gauge '{gauge}' could not be read as a gauge number"], []
    if pressure_loss is None:
        return False, False, ["Gauge cannot be checked without a numeric pressure loss"], []

    warnings, notes = [], []
    compliant = True

    if pressure_loss <= 1:
        if gauge_number < 26:
            notes.append("Lighter gauge material may be suitable for low-pressure applications")
    elif pressure_loss <= 2:
        if gauge_number > 24:
            warnings.append("Heavier gauge material recommended for medium-pressure applications")
            compliant = False
    elif pressure_loss <= 4:
        if gauge_number > 22:
            warnings.append("Heavier gauge material required for high-pressure applications")
            compliant = False
    elif gauge_number > 20:
        warnings.append("Heavy gauge material required for very high-pressure applications")
        compliant = False

    notes.append(f"{gauge} gauge material selected based on {_fmt(pressure_loss)} in. w.g. pressure loss")
    return compliant, False, warnings, notes


def check_joint_spacing(spacing: Optional[float], velocity: Optional[float], shape: str) -> CheckResult:
    if spacing is None or velocity is None:
        return False, False, ["Joint spacing cannot be checked without numeric spacing and velocity"], []

    max_spacing = calculate_joint_spacing(velocity, shape)
    warnings, notes = [], []
    compliant = True

    if spacing > max_spacing:
        warnings.append(f"Joint spacing {_fmt(spacing)} ft exceeds SMACNA maximum of {max_spacing} ft "
                        f"for {_fmt(velocity)} ft/min velocity")
        notes.append("Closer joint spacing required for high-velocity applications to prevent duct separation")
        compliant = False

    notes.append(f"Joint spacing of {_fmt(spacing)} ft recommended for {_fmt(velocity)} ft/min velocity")
    return compliant, False, warnings, notes


def check_hanger_spacing(spacing: Optional[float], gauge: Any) -> CheckResult:
    if spacing is None:
        return False, False, ["Hanger spacing could not be read as a number"], []
    if parse_gauge(gauge) is None:
        return False, False, [f"Hanger spacing cannot be checked for gauge '{gauge}'"], []

    max_spacing = calculate_hanger_spacing(gauge)
    warnings, notes = [], []
    compliant = True

    if spacing > max_spacing:
        warnings.append(f"Hanger spacing {_fmt(spacing)} ft exceeds SMACNA maximum of {max_spacing} ft "
                        f"for {gauge} gauge material")
        notes.append("Closer hanger spacing required for lighter gauge materials to prevent sagging")
        compliant = False

    notes.append(f"Hanger spacing of {_fmt(spacing)} ft appropriate for {gauge} gauge material")
    return compliant, False, warnings, notes


def validate_smacna(values: Union[ComplianceInputs, Mapping[str, Any]]) -> ComplianceReport:
    """Validate duct values against SMACNA limits.

    Args:
        values: ComplianceInputs, or a mapping with velocity, pressure_loss
            (pressureLoss), gauge, joint_spacing, hanger_spacing, application
            and shape

    Returns:
        ComplianceReport with per-check flags, warnings and educational notes
        in the order velocity, pressure, gauge, joint, hanger
    """
    if isinstance(values, ComplianceInputs):
        values = values.model_dump()
    elif not isinstance(values, Mapping):
        values = {}

    velocity = to_float(values.get("velocity"))
    pressure_loss = to_float(_read(values, "pressure_loss", "pressureLoss"))
    gauge = values.get("gauge")
    joint_spacing = to_float(_read(values, "joint_spacing", "jointSpacing"))
    hanger_spacing = to_float(_read(values, "hanger_spacing", "hangerSpacing"))
    application = str(getattr(values.get("application"), "value", values.get("application"))
                      or Application.SUPPLY.value)
    shape = str(getattr(values.get("shape"), "value", values.get("shape")) or Shape.RECTANGULAR.value)

    checks = [
        check_velocity(velocity, application),
        check_pressure_loss(pressure_loss),
        check_gauge(gauge, pressure_loss),
        check_joint_spacing(joint_spacing, velocity, shape),
        check_hanger_spacing(hanger_spacing, gauge),
    ]

    warnings, notes = [], []
    for _, _, check_warnings, check_notes in checks:
        warnings.extend(w for w in check_warnings if w)
        notes.extend(n for n in check_notes if n)

    flags = [passed for passed, _, _, _ in checks]
    if not all(flags):
        status = ComplianceStatus.NON_COMPLIANT
    elif any(advisory for _, advisory, _, _ in checks):
        status = ComplianceStatus.WARNING
    else:
        status = ComplianceStatus.COMPLIANT

    logger.debug("SMACNA validation: %s (%d warnings)", status.value, len(warnings))

    return ComplianceReport(
        velocity_compliant=flags[0],
        pressure_compliant=flags[1],
        gauge_compliant=flags[2],
        joint_spacing_compliant=flags[3],
        hanger_spacing_compliant=flags[4],
        gauge_recommendation="" if gauge is None else str(gauge),
        status=status,
        warnings=warnings,
        educational_notes=notes,
    )

"""
Results tables for display and CSV export.
"""

import csv
import io
from typing import List, Tuple

from utils.constants import PRESSURE_LOSS_LIMIT
from utils.helpers import format_number, round_half_up

from .construction import calculate_hanger_spacing, calculate_joint_spacing, find_seam_types
from .models import ComplianceReport, DuctInput, DuctResult, ResultItem, ResultsSummary, Shape
from .tables import SMACNA_REFERENCES, velocity_limits_for

CSV_HEADERS = ["Parameter", "Value", "Limit", "Status", "Reference", "Advice"]


def _duct_size(inputs: DuctInput) -> str:
    if inputs.shape == Shape.CIRCULAR:
        return f"{format_number(inputs.diameter)} in (Round)"
    return f"{format_number(inputs.width)} × {format_number(inputs.height)} in"


def build_results_table(inputs: DuctInput, result: DuctResult,
                        report: ComplianceReport) -> Tuple[List[ResultItem], ResultsSummary]:
    """Build display rows and an overall summary for a sized duct.

    Args:
        inputs: Parsed duct inputs
        result: Result of calculate_duct_sizing for those inputs
        report: SMACNA compliance report for the result

    Returns:
        (rows, summary)
    """
    rows: List[ResultItem] = []
    issues: List[str] = []

    rows.append(ResultItem(parameter="Duct Size", value=_duct_size(inputs),
                           status="info", reference="User Input"))
    rows.append(ResultItem(parameter="Airflow", value=f"{format_number(inputs.flow_rate)} CFM",
                           status="info", reference="User Input"))

    velocity = round_half_up(result.velocity)
    max_velocity = velocity_limits_for(inputs.application)["max"]
    if velocity <= max_velocity * 0.9:
        velocity_status = "success"
    elif velocity <= max_velocity:
        velocity_status = "warning"
    else:
        velocity_status = "error"
    if velocity_status != "success":
        issues.append(f"Velocity ({format_number(velocity)} ft/min) exceeds recommended maximum "
                      f"({max_velocity} ft/min)")
    rows.append(ResultItem(
        parameter="Velocity",
        value=velocity,
        limit=max_velocity,
        status=velocity_status,
        reference=SMACNA_REFERENCES["velocity"],
        advice=("Consider increasing duct size or reducing airflow to lower velocity."
                if velocity_status != "success" else None),
    ))

    pressure_status = "success" if report.pressure_compliant else "warning"
    if not report.pressure_compliant:
        issues.append(f"Pressure loss ({format_number(result.pressure_loss)} in. w.g.) exceeds "
                      f"recommended maximum ({PRESSURE_LOSS_LIMIT} in. w.g.)")
    rows.append(ResultItem(
        parameter="Pressure Loss",
        value=f"{format_number(result.pressure_loss)} in. w.g.",
        limit=f"max {PRESSURE_LOSS_LIMIT} in. w.g.",
        status=pressure_status,
        reference="Calculation",
        advice="Consider a larger duct to reduce fan energy." if not report.pressure_compliant else None,
    ))

    rows.append(ResultItem(parameter="Pressure Class", value=inputs.pressure_class.value,
                           status="info", reference="Selection"))

    gauge_reference = (SMACNA_REFERENCES["gauge_circular"] if inputs.shape == Shape.CIRCULAR
                       else SMACNA_REFERENCES["gauge_rectangular"])
    gauge_status = "success" if report.gauge_compliant else "error"
    if not report.gauge_compliant:
        issues.append(f"Material gauge ({result.gauge}) is lighter than required for the pressure loss")
    rows.append(ResultItem(
        parameter="Gauge",
        value=result.gauge,
        status=gauge_status,
        reference=gauge_reference,
        advice="Select a heavier gauge." if not report.gauge_compliant else None,
    ))

    max_joint = calculate_joint_spacing(result.velocity, inputs.shape)
    joint_status = "success" if report.joint_spacing_compliant else "error"
    if not report.joint_spacing_compliant:
        issues.append(f"Joint spacing ({format_number(result.joint_spacing)} ft) exceeds maximum "
                      f"allowed ({max_joint} ft)")
    rows.append(ResultItem(
        parameter="Joint Spacing",
        value=f"{format_number(result.joint_spacing)} ft",
        limit=f"max {max_joint} ft",
        status=joint_status,
        reference=SMACNA_REFERENCES["joints"],
        advice="Reduce transverse joint spacing." if not report.joint_spacing_compliant else None,
    ))

    seams = find_seam_types(inputs.shape, inputs.pressure_class, inputs.governing_dimension)
    seam_text = ", ".join(seams.seam_types)
    rows.append(ResultItem(
        parameter="Seam Types",
        value=seam_text or "N/A",
        status="success" if seam_text else "error",
        reference=seams.table,
        advice=None if seam_text else "No valid seam types found for the given parameters.",
    ))

    max_hanger = calculate_hanger_spacing(result.gauge)
    hanger_status = "success" if report.hanger_spacing_compliant else "error"
    if not report.hanger_spacing_compliant:
        issues.append(f"Hanger spacing ({format_number(result.hanger_spacing)} ft) exceeds maximum "
                      f"allowed ({max_hanger} ft)")
    rows.append(ResultItem(
        parameter="Hanger Spacing",
        value=f"{format_number(result.hanger_spacing)} ft",
        limit=f"max {max_hanger} ft",
        status=hanger_status,
        reference=SMACNA_REFERENCES["hangers"],
        advice="Add more supports to meet SMACNA requirements." if not report.hanger_spacing_compliant else None,
    ))

    if not issues:
        status, message = "success", "All parameters comply with SMACNA standards."
    elif len(issues) == 1:
        status, message = "warning", f"1 issue: {issues[0]}"
    else:
        status = "error" if len(issues) > 2 else "warning"
        message = f"{len(issues)} issues found."

    return rows, ResultsSummary(status=status, message=message, issues=issues)


def export_to_csv(rows: List[ResultItem]) -> str:
    """Export result rows as CSV text with every data cell quoted."""
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerow(CSV_HEADERS)

    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow([
            row.parameter,
            format_number(row.value),
            "" if row.limit is None else format_number(row.limit),
            row.status,
            row.reference,
            row.advice or "",
        ])

    return buffer.getvalue().rstrip("\n")

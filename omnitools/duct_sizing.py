"""Unified duct sizing: results, SMACNA compliance and results table."""

import logging
from typing import Literal, Optional

from duct_sizer.advisory import generate_educational_content, validate_input_ranges
from duct_sizer.calculator import run_duct_sizing
from duct_sizer.config import TOOL_CONFIG
from duct_sizer.errors import DuctSizingError
from duct_sizer.inputs import InputResolver
from duct_sizer.reporting import build_results_table, export_to_csv
from utils.json_helpers import safe_json_dumps

logger = logging.getLogger("duct-sizer.duct_sizing")


def duct_sizing(
    flow_rate: Optional[float] = None,                 # CFM
    shape: Literal["rectangular", "circular", "round"] = "rectangular",
    length: Optional[float] = None,                    # ft
    width: Optional[float] = None,                     # in
    height: Optional[float] = None,                    # in
    diameter: Optional[float] = None,                  # in
    material: Literal["galvanized", "stainless", "aluminum"] = "galvanized",
    application: Literal["supply", "return", "exhaust"] = "supply",
    pressure_class: Literal["low", "medium", "high"] = "low",
    include_table: bool = True,
    export_csv: bool = False,
) -> str:
    """Size an air duct and check it against SMACNA standards.

    Calculates velocity, friction pressure loss (Darcy-Weisbach with
    Swamee-Jain friction factor), hydraulic diameter, minimum sheet-metal
    gauge, transverse joint spacing and hanger spacing.

    Args:
        flow_rate: Airflow in CFM
        shape: Duct shape ("round" is accepted for circular)
        length: Duct run length in ft
        width: Rectangular width in inches
        height: Rectangular height in inches
        diameter: Round duct diameter in inches
        material: Duct material
        application: Air system served by the duct
        pressure_class: SMACNA pressure class used for gauge selection
        include_table: Include the tabular results and overall summary
        export_csv: Include the results table as CSV text

    Returns:
        JSON string with result, compliance, educational_notes,
        results_table, summary, errors and log

    Examples:
        >>> duct_sizing(flow_rate=1000, shape="rectangular", width=12,
        ...             height=8, length=100)

        >>> duct_sizing(flow_rate=1000, shape="round", diameter=12, length=50,
        ...             material="stainless", application="exhaust")
    """
    resolver = InputResolver("duct_sizing")
    raw = {
        "flow_rate": flow_rate,
        "shape": shape,
        "length": length,
        "width": width,
        "height": height,
        "diameter": diameter,
        "material": material,
        "application": application,
        "pressure_class": pressure_class,
    }

    try:
        duct = resolver.resolve(raw)
        _, result, report = run_duct_sizing(duct)
    except DuctSizingError as e:
        logger.warning("duct_sizing rejected inputs: %s", e)
        ranges = validate_input_ranges(raw)
        return safe_json_dumps({
            "errors": [str(e)],
            "suggestions": ranges["suggestions"],
            "log": resolver.results_log,
        })

    features = TOOL_CONFIG.features
    log = resolver.results_log
    response = {"result": result}

    if features.smacna_validation:
        response["compliance"] = report
    else:
        response["result"] = result.model_copy(update={"warnings": []})
        log.append("SMACNA validation disabled")

    if not features.snap_summary:
        response["result"] = response["result"].model_copy(update={"snap_summary": ""})

    if features.educated_mode:
        response["educational_notes"] = generate_educational_content(duct, result)

    if include_table or export_csv:
        rows, summary = build_results_table(duct, result, report)
        if include_table:
            response["results_table"] = rows
            response["summary"] = summary
        if export_csv:
            response["csv"] = export_to_csv(rows)

    suggestions = validate_input_ranges(raw)["suggestions"]
    if suggestions:
        response["suggestions"] = suggestions

    response["errors"] = []
    response["log"] = log
    return safe_json_dumps(response)

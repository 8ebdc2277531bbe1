"""
Duct sizing engine.

Pure functions from duct inputs to velocity, pressure loss, construction
requirements and SMACNA compliance.
"""

from .calculator import calculate_duct_sizing, run_duct_sizing
from .compliance import validate_smacna
from .errors import (
    DuctSizingError, GeometryError, InvalidMaterialError, ParameterMissingError,
    SelectionError, ValidationError,
)
from .inputs import parse_duct_input
from .models import (
    Application, ComplianceInputs, ComplianceReport, ComplianceStatus, DuctInput,
    DuctResult, FlowRegime, Material, PressureClass, Shape,
)
from .summary import generate_snap_summary

__all__ = [
    "calculate_duct_sizing",
    "run_duct_sizing",
    "validate_smacna",
    "generate_snap_summary",
    "parse_duct_input",
    "Application",
    "ComplianceInputs",
    "ComplianceReport",
    "ComplianceStatus",
    "DuctInput",
    "DuctResult",
    "FlowRegime",
    "Material",
    "PressureClass",
    "Shape",
    "DuctSizingError",
    "GeometryError",
    "InvalidMaterialError",
    "ParameterMissingError",
    "SelectionError",
    "ValidationError",
]

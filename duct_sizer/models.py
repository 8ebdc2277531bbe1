"""
Data model for duct sizing.

Enumerations replace the free-form strings the UI sends, and the pydantic
models carry inputs and results as plain, immutable data. Field names are
snake_case; ``model_dump(by_alias=True)`` produces the camelCase names used by
the results tables.
"""

import logging
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

logger = logging.getLogger("duct-sizer.models")


class Shape(str, Enum):
    """Duct cross-section."""
    RECTANGULAR = "rectangular"
    CIRCULAR = "circular"


class Material(str, Enum):
    """Duct sheet material."""
    GALVANIZED = "galvanized"
    STAINLESS = "stainless"
    ALUMINUM = "aluminum"


class Application(str, Enum):
    """Air system the duct serves."""
    SUPPLY = "supply"
    RETURN = "return"
    EXHAUST = "exhaust"


class PressureClass(str, Enum):
    """SMACNA static pressure class."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_value(cls, value) -> "PressureClass":
        """Resolve a pressure class, falling back to LOW for unknown values."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower() if value is not None else ""
        for member in cls:
            if member.value == text:
                return member
        logger.warning("Unknown pressure class %r, using 'low'", value)
        return cls.LOW


class FlowRegime(str, Enum):
    LAMINAR = "laminar"
    TRANSITIONAL = "transitional"
    TURBULENT = "turbulent"


class ComplianceStatus(str, Enum):
    COMPLIANT = "compliant"
    WARNING = "warning"
    NON_COMPLIANT = "non_compliant"


class DuctModel(BaseModel):
    """Base for all duct sizing models: frozen, camelCase aliases."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=False,
    )


class DuctInput(DuctModel):
    """Strictly typed duct inputs. Build with duct_sizer.inputs.parse_duct_input."""
    flow_rate: float                    # CFM
    shape: Shape
    length: float                       # ft
    width: Optional[float] = None       # in, rectangular
    height: Optional[float] = None      # in, rectangular
    diameter: Optional[float] = None    # in, circular
    material: Material = Material.GALVANIZED
    application: Application = Application.SUPPLY
    pressure_class: PressureClass = PressureClass.LOW

    @property
    def governing_dimension(self) -> Optional[float]:
        """Largest dimension, in inches, used for gauge and seam selection."""
        if self.shape == Shape.CIRCULAR:
            return self.diameter
        if self.width is None or self.height is None:
            return None
        return max(self.width, self.height)


class GeometryResult(DuctModel):
    area: float                  # ft²
    perimeter: float             # ft
    hydraulic_diameter: float    # in


class PressureLossResult(DuctModel):
    pressure_loss: float         # in. w.g., unrounded
    reynolds: float
    friction_factor: float
    regime: FlowRegime
    roughness: float             # ft
    velocity_fps: float
    diameter_ft: float


class DuctResult(DuctModel):
    velocity: float              # ft/min
    pressure_loss: float         # in. w.g.
    gauge: str
    joint_spacing: float         # ft
    hanger_spacing: float        # ft
    hydraulic_diameter: float    # in
    area: float                  # ft²
    perimeter: float             # ft
    warnings: List[str] = []
    snap_summary: str = ""


class ComplianceInputs(DuctModel):
    """Values checked by validate_smacna. A plain mapping works as well."""
    velocity: float
    pressure_loss: float
    gauge: Union[str, int]
    joint_spacing: float
    hanger_spacing: float
    application: str = Application.SUPPLY.value
    shape: str = Shape.RECTANGULAR.value


class ComplianceReport(DuctModel):
    velocity_compliant: bool
    pressure_compliant: bool
    gauge_compliant: bool
    joint_spacing_compliant: bool
    hanger_spacing_compliant: bool
    gauge_recommendation: str
    status: ComplianceStatus
    warnings: List[str] = []
    educational_notes: List[str] = []


class SeamResult(DuctModel):
    seam_types: List[str] = []
    table: str
    notes: List[str] = []


class DuctSelection(DuctModel):
    """Duct size chosen for a velocity or pressure-loss target."""
    criterion: str
    shape: Shape
    width: Optional[float] = None
    height: Optional[float] = None
    diameter: Optional[float] = None
    exact_dimension: float           # solver/closed-form value before rounding up, in
    target: float
    result: Optional[DuctResult] = None


class SweepPoint(DuctModel):
    value: float
    velocity: Optional[float] = None
    pressure_loss: Optional[float] = None
    gauge: Optional[str] = None
    joint_spacing: Optional[float] = None
    hanger_spacing: Optional[float] = None
    compliant: Optional[bool] = None
    error: Optional[str] = None


class ResultItem(DuctModel):
    """One row of a results table."""
    parameter: str
    value: Union[str, float]
    limit: Optional[Union[str, float]] = None
    status: str                      # success, warning, error, info
    reference: str
    advice: Optional[str] = None


class ResultsSummary(DuctModel):
    status: str                      # success, warning, error
    message: str
    issues: List[str] = []

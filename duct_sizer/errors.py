"""
Error taxonomy for duct sizing calculations.

All errors derive from ValueError so callers that already guard numeric input
with ``except ValueError`` keep working. The core raises these and never
catches them; the omnitools turn them into ``{"errors": [...]}`` payloads.
"""

from typing import Optional


class DuctSizingError(ValueError):
    """Base class for all duct sizing failures."""


class ValidationError(DuctSizingError):
    """A required numeric field is missing, non-numeric or not greater than 0."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class GeometryError(DuctSizingError):
    """The dimensions required by the duct shape are missing."""


class InvalidMaterialError(DuctSizingError):
    """Material is not in the supported roughness table."""

    def __init__(self, material):
        super().__init__(
            f"Unknown duct material: '{material}'. "
            f"Valid materials: galvanized, stainless, aluminum"
        )
        self.material = material


class ParameterMissingError(DuctSizingError):
    """A parameter required for a construction-standard lookup was not supplied."""

    def __init__(self, parameter: str):
        super().__init__(f"Missing required parameter for gauge selection: {parameter}")
        self.parameter = parameter


class SelectionError(DuctSizingError):
    """No duct size in the search range meets the selection target."""

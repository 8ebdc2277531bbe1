"""
Tool metadata and feature flags.
"""

from typing import List

from pydantic import BaseModel, Field


class FeatureFlags(BaseModel):
    smacna_validation: bool = Field(True, description="Run SMACNA compliance checks")
    educated_mode: bool = Field(True, description="Attach educational notes to results")
    snap_summary: bool = Field(True, description="Include the one-line summary")


class ToolConfig(BaseModel):
    name: str
    version: str
    description: str
    category: str
    tags: List[str] = []
    features: FeatureFlags = FeatureFlags()


TOOL_CONFIG = ToolConfig(
    name="Air Duct Sizer",
    version="1.0.0",
    description="Duct sizing with SMACNA compliance checks for rectangular and round ducts",
    category="HVAC",
    tags=["duct", "sizing", "smacna", "hvac", "air"],
)

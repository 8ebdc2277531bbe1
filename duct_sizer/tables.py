"""
SMACNA reference tables.

Tables are ordered tuples of range buckets, loaded once at import and never
mutated. Lookups scan them linearly; the first bucket whose upper bound covers
the dimension wins.
"""

from utils.constants import JOINT_VELOCITY_HIGH, JOINT_VELOCITY_MEDIUM

from .models import Application, PressureClass, Shape

INF = float("inf")

# (max governing dimension in inches, gauge) per pressure class
GAUGE_TABLES = {
    PressureClass.LOW: (
        (6, 26), (12, 24), (18, 24), (30, 22), (42, 20),
        (54, 18), (60, 16), (84, 14), (INF, 10),
    ),
    PressureClass.MEDIUM: (
        (6, 26), (12, 24), (18, 22), (30, 20), (42, 18),
        (54, 16), (60, 14), (84, 12), (INF, 8),
    ),
    PressureClass.HIGH: (
        (6, 26), (12, 22), (18, 20), (30, 18), (42, 16),
        (54, 14), (60, 12), (84, 10), (INF, 6),
    ),
}

# Gauge steps subtracted for applications that need heavier metal
GAUGE_ADJUSTMENTS = {
    "exhaust": 2,
    "kitchen": 2,
    "bathroom": 2,
    "commercial": 1,
}

# Velocity limits by application, ft/min
VELOCITY_LIMITS = {
    Application.SUPPLY: {"min": 800, "max": 2500, "optimal_min": 1200, "optimal_max": 2000},
    Application.RETURN: {"min": 600, "max": 2000, "optimal_min": 800, "optimal_max": 1500},
    Application.EXHAUST: {"min": 1000, "max": 3000, "optimal_min": 1500, "optimal_max": 2500},
}

# (min velocity exclusive in ft/min, rectangular spacing ft, round spacing ft)
JOINT_SPACING_TIERS = (
    (JOINT_VELOCITY_HIGH, 4, 6),
    (JOINT_VELOCITY_MEDIUM, 6, 8),
    (0, 8, 10),
)

# (min gauge inclusive, max hanger spacing ft)
HANGER_SPACING_TIERS = (
    (24, 8),
    (20, 10),
    (0, 12),
)

# Longitudinal seams: (max size in, seam types) per shape and class
SEAM_TABLES = {
    Shape.RECTANGULAR: {
        "table": "SMACNA Table 2-2",
        "description": "Rectangular duct longitudinal seam selection",
        "notes": [
            "Seams are selected on the larger duct dimension.",
            "Pittsburgh and button punch snap lock seams are limited to 4 in. w.g. static pressure.",
        ],
        "classes": {
            PressureClass.LOW: (
                (30, ("Pittsburgh Lock", "Button Punch Snap Lock")),
                (60, ("Pittsburgh Lock", "Grooved Seam")),
                (120, ("Pittsburgh Lock", "Standing Seam")),
            ),
            PressureClass.MEDIUM: (
                (30, ("Pittsburgh Lock", "Button Punch Snap Lock")),
                (60, ("Pittsburgh Lock",)),
                (120, ("Pittsburgh Lock", "Standing Seam")),
            ),
            PressureClass.HIGH: (
                (30, ("Pittsburgh Lock",)),
                (120, ("Pittsburgh Lock", "Welded Seam")),
            ),
        },
    },
    Shape.CIRCULAR: {
        "table": "SMACNA Table 3-1",
        "description": "Round duct longitudinal seam selection",
        "notes": [
            "Spiral lock seams are permitted for all pressure classes up to 10 in. w.g.",
            "Snap lock seams are limited to low pressure classes.",
        ],
        "classes": {
            PressureClass.LOW: (
                (14, ("Spiral Lock Seam", "Snap Lock Seam", "Grooved Seam")),
                (36, ("Spiral Lock Seam", "Grooved Seam")),
                (84, ("Spiral Lock Seam", "Grooved Seam", "Lap Seam Riveted")),
            ),
            PressureClass.MEDIUM: (
                (36, ("Spiral Lock Seam", "Grooved Seam")),
                (84, ("Spiral Lock Seam", "Lap Seam Riveted")),
            ),
            PressureClass.HIGH: (
                (84, ("Spiral Lock Seam", "Butt Weld")),
            ),
        },
    },
}

# Table references shown in result tables
SMACNA_REFERENCES = {
    "velocity": "SMACNA Table 1-3",
    "gauge_rectangular": "SMACNA Table 5-1",
    "gauge_circular": "SMACNA Table 6-1",
    "joints": "SMACNA Table 2-1",
    "seams": "SMACNA Table 2-2",
    "hangers": "SMACNA Table 2-3",
}

# Material property sheets
MATERIAL_PROPERTIES = {
    "galvanized": {
        "name": "Galvanized Steel",
        "roughness": 0.0003,      # ft
        "density": 490,           # lb/ft³
        "cost": 1.0,              # relative cost factor
        "corrosion_resistance": "good",
    },
    "stainless": {
        "name": "Stainless Steel",
        "roughness": 0.00015,
        "density": 500,
        "cost": 3.5,
        "corrosion_resistance": "excellent",
    },
    "aluminum": {
        "name": "Aluminum",
        "roughness": 0.00015,
        "density": 170,
        "cost": 2.0,
        "corrosion_resistance": "excellent",
    },
}


def velocity_limits_for(application) -> dict:
    """Velocity limits for an application; unknown applications use supply limits."""
    try:
        key = application if isinstance(application, Application) else Application(str(application).lower())
    except ValueError:
        key = Application.SUPPLY
    return VELOCITY_LIMITS[key]

"""
Constants used across the Duct Sizer server.

This module defines unit conversion factors, standard air properties and the
limits shared by the calculation modules.
"""

# Conversion factors for imperial duct work
IN_PER_FT = 12.0             # inches per foot
SQIN_PER_SQFT = 144.0        # in² per ft²
SEC_PER_MIN = 60.0           # seconds per minute
PSF_to_PSI = 1.0 / 144.0     # lb/ft² to psi
PSI_to_INWG = 27.68          # psi to inches water gauge

# SI conversions (property lookups only)
LBFT3_to_KGM3 = 16.0185      # lb/ft³ to kg/m³
M2S_to_FT2S = 10.7639        # m²/s to ft²/s
INWG_to_PA = 249.089         # inches water gauge to Pascal
P_ATM_PA = 101325.0          # Standard atmospheric pressure, Pa

# Standard air at 70°F, sea level
AIR_KINEMATIC_VISCOSITY = 1.62e-4   # ft²/s
AIR_DENSITY = 0.075                 # lb/ft³
G_GRAVITY = 32.2                    # ft/s²
STANDARD_AIR_TEMP_F = 70.0

# Flow regime boundaries (Reynolds number)
RE_LAMINAR_MAX = 2300.0
RE_TURBULENT_MIN = 4000.0
RE_FLOOR = 1.0               # divide-by-zero guard for the laminar branch

# Material roughness, ft
ROUGHNESS_FT = {
    "galvanized": 0.0003,
    "stainless": 0.00015,
    "aluminum": 0.00015,
}

# Velocity tiers for transverse joint spacing, ft/min
JOINT_VELOCITY_HIGH = 2500.0
JOINT_VELOCITY_MEDIUM = 2000.0

# Pressure loss guidance, in. w.g.
PRESSURE_LOSS_LIMIT = 0.1
PRESSURE_LOSS_SOFT_FRACTION = 0.8
PRESSURE_LOSS_OVERSIZED = 0.02

# Gauge limits (lower number = thicker metal)
GAUGE_THINNEST = 26
GAUGE_THICKEST = 18
DEFAULT_GAUGE = 26

# Solver bounds for duct selection, inches
SELECTION_DIMENSION_MIN = 3.0
SELECTION_DIMENSION_MAX = 120.0
DEFAULT_ASPECT_RATIO = 1.5

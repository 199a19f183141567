"""
Constants and operating conventions for induction motor performance curves.
"""

import math

# =============================================================================
# PHYSICAL / UNIT CONSTANTS
# =============================================================================

SQRT_3 = math.sqrt(3)
HP_WATTS = 745.699872      # Mechanical horsepower [W]


# =============================================================================
# SLIP SWEEP
# =============================================================================

# Uniform grid in slip from just above synchronous speed to standstill.
# s = 0 is excluded: the rotor branch R2/s is singular there.
SLIP_MIN = 1e-4
SLIP_MAX = 1.0

DEFAULT_POINTS = 800
MAX_POINTS = 100_000


# =============================================================================
# OPERATING-POINT CONVENTIONS
# =============================================================================

# 100 % load corresponds to 33 % of breakdown torque
RATED_TORQUE_FRACTION = 0.33

# No-load point: torque needed to cover friction and windage
NO_LOAD_TORQUE_FRACTION = 0.05

# Fallback speeds (fraction of synchronous speed) when the torque curve
# cannot be inverted
NO_LOAD_SPEED_FALLBACK = 0.995
LOADED_SPEED_FALLBACK = 0.98

# Input power below this is treated as zero when computing efficiency [W]
MIN_INPUT_POWER = 1e-9


class ParameterRanges:
    """Typical ranges for presentation-layer validation and sliders."""

    LOAD_PERCENT_MIN = 0.0
    LOAD_PERCENT_MAX = 150.0
    LOAD_PERCENT_RATED = 100.0

    # Rotor parameters swept by the R2/X2 sliders [Ω]
    R2_MIN = 0.05
    R2_MAX = 2.0
    X2_MIN = 0.1
    X2_MAX = 2.0

    POINTS_MIN = 50
    POINTS_MAX = 5000


# Reference machine: 460 V, 60 Hz, 4 poles
DEFAULT_MACHINE = {
    'R1': 0.5,
    'X1': 1.5,
    'R2': 0.3,
    'X2': 0.5,
    'Xm': 30.0,
    'voltage_line': 460.0,
    'frequency': 60.0,
    'poles': 4,
    'points': DEFAULT_POINTS,
}

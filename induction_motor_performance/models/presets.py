"""
NEMA design-class presets.

Each preset is a plain override of the rotor branch (R2, X2) applied on top
of an otherwise complete parameter set. Values are per phase, referred to
stator, for the 460 V / 60 Hz / 4-pole reference machine.
"""

from typing import Dict

from .machine import MachineParameters
from ..utils.errors import InvalidParameterError

NEMA_DESIGN_PRESETS: Dict[str, Dict[str, float]] = {
    # Normal starting torque, high starting current, low slip
    'A': {'R2': 0.20, 'X2': 0.40},
    # Normal starting torque, normal starting current
    'B': {'R2': 0.30, 'X2': 0.50},
    # High starting torque (double cage)
    'C': {'R2': 0.45, 'X2': 0.90},
    # Very high starting torque, high slip
    'D': {'R2': 1.20, 'X2': 0.60},
}


def apply_nema_design(params: MachineParameters, design: str) -> MachineParameters:
    """
    Return params with the rotor branch of a NEMA design class.

    Args:
        params: Base machine parameters
        design: Design class letter ('A', 'B', 'C' or 'D', case-insensitive)
    """
    key = str(design).strip().upper()
    if key not in NEMA_DESIGN_PRESETS:
        raise InvalidParameterError(
            f"Unknown NEMA design '{design}', expected one of "
            f"{', '.join(sorted(NEMA_DESIGN_PRESETS))}")
    return params.replace(**NEMA_DESIGN_PRESETS[key])

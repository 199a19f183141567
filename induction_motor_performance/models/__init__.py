"""Data models for machine parameters and performance results."""

from .machine import (
    MachineParameters,
    create_machine
)

from .presets import (
    NEMA_DESIGN_PRESETS,
    apply_nema_design
)

from .performance import (
    Curve,
    OperatingPoint
)

__all__ = [
    # Machine
    'MachineParameters',
    'create_machine',

    # Presets
    'NEMA_DESIGN_PRESETS',
    'apply_nema_design',

    # Results
    'Curve',
    'OperatingPoint'
]

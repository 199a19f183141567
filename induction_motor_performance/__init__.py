"""
Induction Motor Performance Package

Steady-state torque-speed, current and efficiency curves of three-phase
induction motors from their per-phase equivalent circuit.

Usage:
    from induction_motor_performance import analyze_motor

    result = analyze_motor(
        R1=0.5, X1=1.5, R2=0.3, X2=0.5, Xm=30,
        voltage_line=460,
        frequency=60,
        poles=4,
        load_percent=100
    )
"""

from .models import (
    # Machine
    MachineParameters,
    create_machine,
    # Presets
    NEMA_DESIGN_PRESETS,
    apply_nema_design,
    # Results
    Curve,
    OperatingPoint
)

from .calculations import (
    CircuitSolution,
    solve_circuit,
    generate_curve,
    CurveField,
    interpolate_at_speed,
    find_speed_at_torque
)

from .core import (
    resolve_operating_point,
    AnalysisResult,
    MotorAnalyzer,
    sweep_parameter,
    analyze_motor
)

from .utils import (
    DEFAULT_MACHINE,
    ParameterRanges,
    MotorModelError,
    InvalidParameterError,
    DivisionByZeroError,
    format_value
)

__version__ = "1.0.0"

__all__ = [
    # Main entry point
    'analyze_motor',
    'MotorAnalyzer',
    'AnalysisResult',
    'sweep_parameter',

    # Models
    'MachineParameters',
    'create_machine',
    'NEMA_DESIGN_PRESETS',
    'apply_nema_design',
    'Curve',
    'OperatingPoint',

    # Calculations
    'CircuitSolution',
    'solve_circuit',
    'generate_curve',
    'CurveField',
    'interpolate_at_speed',
    'find_speed_at_torque',
    'resolve_operating_point',

    # Utils
    'DEFAULT_MACHINE',
    'ParameterRanges',
    'MotorModelError',
    'InvalidParameterError',
    'DivisionByZeroError',
    'format_value'
]

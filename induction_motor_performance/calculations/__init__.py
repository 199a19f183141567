"""Calculation modules for induction motor performance."""

from .complex_ops import (
    c_add,
    c_sub,
    c_mul,
    c_div,
    c_mag,
    c_inv,
    c_par
)

from .equivalent_circuit import (
    CircuitSolution,
    solve_circuit,
    slip_grid,
    calculate_breakdown_point,
    generate_curve
)

from .curve_query import (
    CurveField,
    find_bracket,
    interpolate_at_speed,
    find_speed_at_torque
)

__all__ = [
    # Complex arithmetic
    'c_add',
    'c_sub',
    'c_mul',
    'c_div',
    'c_mag',
    'c_inv',
    'c_par',

    # Equivalent circuit
    'CircuitSolution',
    'solve_circuit',
    'slip_grid',
    'calculate_breakdown_point',
    'generate_curve',

    # Curve query
    'CurveField',
    'find_bracket',
    'interpolate_at_speed',
    'find_speed_at_torque'
]

"""
Complex arithmetic for phasors and per-phase impedances.

Thin wrappers over the built-in complex type that report zero-magnitude
divisors as DivisionByZeroError instead of returning inf/nan.
"""

import math

from ..utils.errors import DivisionByZeroError


def c_add(a: complex, b: complex) -> complex:
    return complex(a) + complex(b)


def c_sub(a: complex, b: complex) -> complex:
    return complex(a) - complex(b)


def c_mul(a: complex, b: complex) -> complex:
    return complex(a) * complex(b)


def c_mag(a: complex) -> float:
    """Euclidean norm |a|."""
    a = complex(a)
    return math.hypot(a.real, a.imag)


def c_div(a: complex, b: complex) -> complex:
    """Quotient a / b."""
    b = complex(b)
    if b == 0:
        raise DivisionByZeroError(f"Division by zero-magnitude complex {b}")
    return complex(a) / b


def c_inv(a: complex) -> complex:
    """Reciprocal 1 / a."""
    a = complex(a)
    if a == 0:
        raise DivisionByZeroError(f"Inverse of zero-magnitude complex {a}")
    return 1 / a


def c_par(a: complex, b: complex) -> complex:
    """
    Parallel combination of two impedances: 1 / (1/a + 1/b).

    Raises DivisionByZeroError if either impedance is zero or their
    admittances cancel.
    """
    return c_inv(c_add(c_inv(a), c_inv(b)))

"""Utility functions, constants and exceptions."""

from .constants import (
    SQRT_3,
    HP_WATTS,
    SLIP_MIN, SLIP_MAX,
    DEFAULT_POINTS, MAX_POINTS,
    RATED_TORQUE_FRACTION,
    NO_LOAD_TORQUE_FRACTION,
    NO_LOAD_SPEED_FALLBACK,
    LOADED_SPEED_FALLBACK,
    MIN_INPUT_POWER,
    ParameterRanges,
    DEFAULT_MACHINE
)

from .errors import (
    MotorModelError,
    InvalidParameterError,
    DivisionByZeroError
)

from .formatting import MISSING, format_value

__all__ = [
    'SQRT_3',
    'HP_WATTS',
    'SLIP_MIN', 'SLIP_MAX',
    'DEFAULT_POINTS', 'MAX_POINTS',
    'RATED_TORQUE_FRACTION',
    'NO_LOAD_TORQUE_FRACTION',
    'NO_LOAD_SPEED_FALLBACK',
    'LOADED_SPEED_FALLBACK',
    'MIN_INPUT_POWER',
    'ParameterRanges',
    'DEFAULT_MACHINE',
    'MotorModelError',
    'InvalidParameterError',
    'DivisionByZeroError',
    'MISSING',
    'format_value'
]

"""Exceptions raised by the performance engine."""


class MotorModelError(Exception):
    """Base class for all engine errors."""


class InvalidParameterError(MotorModelError, ValueError):
    """Machine parameters are malformed or physically out of range."""


class DivisionByZeroError(MotorModelError, ZeroDivisionError):
    """A complex operand or result with zero magnitude was inverted."""

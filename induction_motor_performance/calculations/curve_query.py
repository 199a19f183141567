"""
Interpolation and inversion of a swept performance curve.

Queries scan adjacent sample pairs in index order (increasing slip,
decreasing speed) and interpolate linearly inside the first bracketing
pair. A query outside the sampled range returns None; nothing is
extrapolated.
"""

from enum import Enum
from typing import List, Optional, Tuple, Union

from ..models.performance import Curve

# Queries this close to an end of the axis (relative to its span) are
# clamped onto it, absorbing round-off from speed <-> slip conversion
AXIS_TOLERANCE = 1e-9


class CurveField(Enum):
    """Curve quantities that can be interpolated at a speed."""
    TORQUE = "torque"
    CURRENT = "current"
    INPUT_POWER = "input_power"
    POWER_FACTOR = "power_factor"


# field -> (curve attribute, interpolated on the slip axis)
_FIELD_AXES = {
    CurveField.TORQUE: ('torque', False),
    CurveField.CURRENT: ('line_current', True),
    CurveField.INPUT_POWER: ('input_power', True),
    CurveField.POWER_FACTOR: ('power_factor', True),
}


def _clamp_to_axis(axis: List[float], x: float) -> Optional[float]:
    """Return x clamped onto the axis range, or None if clearly outside."""
    lo = min(axis[0], axis[-1])
    hi = max(axis[0], axis[-1])
    tol = AXIS_TOLERANCE * max(hi - lo, 1.0)
    if x < lo - tol or x > hi + tol:
        return None
    return min(max(x, lo), hi)


def find_bracket(axis: List[float], x: float) -> Optional[Tuple[int, float]]:
    """
    Locate the first adjacent pair (i, i+1) with x between axis[i] and axis[i+1].

    Returns:
        Tuple of (i, fraction of the way from axis[i] to axis[i+1]),
        or None if no pair brackets x
    """
    for i in range(len(axis) - 1):
        x0, x1 = axis[i], axis[i + 1]
        if min(x0, x1) <= x <= max(x0, x1):
            if x1 == x0:
                return i, 0.0
            return i, (x - x0) / (x1 - x0)
    return None


def interpolate_at_speed(
    curve: Curve,
    target_speed_rpm: float,
    field: Union[CurveField, str] = CurveField.TORQUE
) -> Optional[float]:
    """
    Linearly interpolate a curve quantity at a given speed.

    Torque is interpolated against speed; current, input power and power
    factor against slip (target speed converted with s = 1 - n/n_sync).
    If non-monotonic data gives several brackets, the first in index order
    wins.

    Args:
        curve: Swept curve
        target_speed_rpm: Query speed [rpm]
        field: Quantity to interpolate (CurveField or its string value)

    Returns:
        Interpolated value, or None if the speed lies outside the curve
    """
    field = CurveField(field)
    attribute, on_slip_axis = _FIELD_AXES[field]
    values = getattr(curve, attribute)

    if len(values) < 2:
        return None

    if on_slip_axis:
        axis = curve.slip
        x = 1 - target_speed_rpm / curve.rpm_sync
    else:
        axis = curve.speed_rpm
        x = target_speed_rpm

    x = _clamp_to_axis(axis, x)
    if x is None:
        return None

    bracket = find_bracket(axis, x)
    if bracket is None:
        return None
    i, fraction = bracket
    return values[i] + fraction * (values[i + 1] - values[i])


def find_speed_at_torque(curve: Curve, target_torque: float) -> Optional[float]:
    """
    Invert the torque-speed curve: speed at which target_torque is developed.

    Torque is not monotonic in slip, so a target may be reached both above
    and below breakdown speed. The first bracket in slip-ascending
    (speed-descending) order is returned, which for a normal machine is
    the stable root between synchronous and breakdown speed.

    Args:
        curve: Swept curve
        target_torque: Torque to locate [Nm]

    Returns:
        Interpolated speed [rpm], or None if the curve never reaches the target
    """
    torque = curve.torque
    speed = curve.speed_rpm
    for i in range(len(torque) - 1):
        t1, t2 = torque[i], torque[i + 1]
        if t1 <= target_torque <= t2 or t1 >= target_torque >= t2:
            n1, n2 = speed[i], speed[i + 1]
            if t1 == t2:
                return 0.5 * (n1 + n2)
            return n1 + (target_torque - t1) * (n2 - n1) / (t2 - t1)
    return None

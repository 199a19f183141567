"""
Operating-point resolution on a swept performance curve.

Maps a load percentage onto the torque-speed curve and derives the
quantities shown on a motor data sheet: speed, current, shaft power,
efficiency and speed regulation.
"""

from typing import Optional
import math

from ..calculations.curve_query import (
    CurveField, interpolate_at_speed, find_speed_at_torque
)
from ..models.performance import Curve, OperatingPoint
from ..utils.constants import (
    HP_WATTS,
    RATED_TORQUE_FRACTION,
    NO_LOAD_TORQUE_FRACTION,
    NO_LOAD_SPEED_FALLBACK,
    LOADED_SPEED_FALLBACK,
    MIN_INPUT_POWER
)


def _finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def calculate_no_load_speed(curve: Curve) -> float:
    """
    Speed at which the motor develops NO_LOAD_TORQUE_FRACTION of T_max.

    Falls back to NO_LOAD_SPEED_FALLBACK x synchronous speed when the curve
    cannot be inverted.
    """
    speed = find_speed_at_torque(curve, NO_LOAD_TORQUE_FRACTION * curve.T_max)
    if not _finite(speed):
        return NO_LOAD_SPEED_FALLBACK * curve.rpm_sync
    return speed


def calculate_loaded_speed(
    curve: Curve,
    load_percent: float,
    no_load_speed: float
) -> float:
    """
    Speed at the requested load, never above the no-load speed.

    Args:
        curve: Swept curve
        load_percent: Load as percent of rated torque (0.33 x T_max)
        no_load_speed: Previously resolved no-load speed [rpm]
    """
    if load_percent == 0:
        speed = no_load_speed
    else:
        target = load_percent / 100 * RATED_TORQUE_FRACTION * curve.T_max
        speed = None
        if target > 0:
            speed = find_speed_at_torque(curve, target)
        if not _finite(speed):
            speed = LOADED_SPEED_FALLBACK * curve.rpm_sync

    # Never report a loaded point faster than no-load
    return min(speed, no_load_speed)


def resolve_operating_point(curve: Curve, load_percent: float) -> OperatingPoint:
    """
    Resolve the no-load and loaded operating points for a load level.

    Load percentages outside the usual 0-150 % are accepted; quantities the
    curve cannot provide are returned as None.

    Args:
        curve: Swept curve from generate_curve
        load_percent: Load as percent of rated torque

    Returns:
        OperatingPoint with speeds, powers, efficiency and stall flag
    """
    rated_torque = RATED_TORQUE_FRACTION * curve.T_max
    target_torque = load_percent / 100 * rated_torque

    no_load_speed = calculate_no_load_speed(curve)
    loaded_speed = calculate_loaded_speed(curve, load_percent, no_load_speed)

    speed_at_breakdown = curve.speed_at_T_max
    stalled = loaded_speed < speed_at_breakdown

    torque = interpolate_at_speed(curve, loaded_speed, CurveField.TORQUE)
    current = interpolate_at_speed(curve, loaded_speed, CurveField.CURRENT)
    P_input = interpolate_at_speed(curve, loaded_speed, CurveField.INPUT_POWER)
    power_factor = interpolate_at_speed(curve, loaded_speed, CurveField.POWER_FACTOR)

    # Shaft power
    P_shaft = None
    horsepower = None
    if _finite(torque):
        P_shaft = torque * (2 * math.pi * loaded_speed / 60)
        horsepower = P_shaft / HP_WATTS

    # Efficiency
    efficiency = None
    if _finite(P_shaft) and _finite(P_input) and P_input > MIN_INPUT_POWER:
        efficiency = 100 * P_shaft / P_input

    # Speed regulation
    speed_regulation = None
    if loaded_speed != 0:
        speed_regulation = 100 * (no_load_speed - loaded_speed) / loaded_speed

    return OperatingPoint(
        load_percent=load_percent,
        rated_torque=rated_torque,
        target_torque=target_torque,
        no_load_speed=no_load_speed,
        no_load_torque=interpolate_at_speed(curve, no_load_speed, CurveField.TORQUE),
        no_load_current=interpolate_at_speed(curve, no_load_speed, CurveField.CURRENT),
        no_load_input_power=interpolate_at_speed(
            curve, no_load_speed, CurveField.INPUT_POWER),
        loaded_speed=loaded_speed,
        torque=torque,
        line_current=current,
        P_input=P_input,
        power_factor=power_factor,
        P_shaft=P_shaft,
        horsepower=horsepower,
        efficiency=efficiency,
        speed_regulation=speed_regulation,
        rpm_sync=curve.rpm_sync,
        speed_at_breakdown=speed_at_breakdown,
        stalled=stalled
    )

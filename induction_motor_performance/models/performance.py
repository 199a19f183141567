"""
Result models: swept performance curve and resolved operating point.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Curve:
    """
    Steady-state characteristic swept over slip.

    All lists are index-aligned and ordered by increasing slip (decreasing
    speed): index 0 is just below synchronous speed, the last index is
    standstill (slip = 1).

    Attributes:
        slip: Slip samples, strictly increasing in (0, 1]
        speed_rpm: Rotor speed [rpm], strictly decreasing
        torque: Electromagnetic torque [Nm]
        line_current: Line current magnitude [A]
        input_power: Three-phase electrical input power [W]
        power_factor: Input power factor cos(φ)
        rpm_sync: Synchronous speed [rpm]
        omega_sync: Synchronous mechanical angular speed [rad/s]
        T_max: Breakdown (maximum) torque [Nm]
        s_at_T_max: Slip of the first sample reaching T_max
    """
    slip: List[float]
    speed_rpm: List[float]
    torque: List[float]
    line_current: List[float]
    input_power: List[float]
    power_factor: List[float]
    rpm_sync: float
    omega_sync: float
    T_max: float
    s_at_T_max: float

    def __len__(self) -> int:
        return len(self.slip)

    @property
    def starting_current(self) -> float:
        """Locked-rotor line current (slip = 1) [A]."""
        return self.line_current[-1]

    @property
    def no_load_current(self) -> float:
        """Line current at the smallest sampled slip [A]."""
        return self.line_current[0]

    @property
    def starting_torque(self) -> float:
        """Locked-rotor torque [Nm]."""
        return self.torque[-1]

    @property
    def speed_at_T_max(self) -> float:
        """Speed at breakdown torque [rpm]."""
        return self.rpm_sync * (1 - self.s_at_T_max)


@dataclass
class OperatingPoint:
    """
    Motor performance at a requested load level.

    Optional quantities are None when the curve cannot provide them
    (query outside the sampled range, zero input power, zero speed).
    """
    load_percent: float
    rated_torque: float             # 100 % load torque [Nm]
    target_torque: float            # Requested load torque [Nm]

    # No-load point
    no_load_speed: float            # [rpm]
    no_load_torque: Optional[float]
    no_load_current: Optional[float]
    no_load_input_power: Optional[float]

    # Loaded point
    loaded_speed: float             # [rpm]
    torque: Optional[float]         # [Nm]
    line_current: Optional[float]   # [A]
    P_input: Optional[float]        # [W]
    power_factor: Optional[float]
    P_shaft: Optional[float]        # [W]
    horsepower: Optional[float]     # [hp]
    efficiency: Optional[float]     # [%]
    speed_regulation: Optional[float]  # [%]

    # Stability
    rpm_sync: float                 # [rpm]
    speed_at_breakdown: float       # [rpm]
    stalled: bool

    @property
    def slip(self) -> float:
        """Slip at the loaded point."""
        return 1 - self.loaded_speed / self.rpm_sync

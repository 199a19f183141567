"""
Equivalent circuit model for induction motors.

Solves the per-phase T-equivalent circuit at a given slip and sweeps it
over slip to build the torque-speed and current-slip characteristics.
"""

from dataclasses import dataclass
from typing import List, Tuple
import math

from .complex_ops import c_add, c_mul, c_div, c_mag, c_par
from ..models.machine import MachineParameters
from ..models.performance import Curve
from ..utils.constants import SLIP_MIN, SLIP_MAX

PHASES = 3


@dataclass
class CircuitSolution:
    """
    Solution of the equivalent circuit at a given slip.

    Phasors are per-phase values; powers and torque are three-phase totals.
    """
    slip: float
    V_phase: float          # Applied phase voltage [V]
    rpm_sync: float         # Synchronous speed [rpm]
    omega_sync: float       # Synchronous angular speed [rad/s]
    R2: float               # Rotor resistance used for air-gap power [Ω]

    Z_total: complex        # Total impedance seen from supply [Ω]
    Z_parallel: complex     # Rotor || magnetizing branch [Ω]
    I_line: complex         # Line (stator) current [A]
    V_parallel: complex     # Voltage across the parallel section [V]
    I_rotor: complex        # Rotor current (referred) [A]

    @property
    def I_line_mag(self) -> float:
        """Line current magnitude [A]."""
        return c_mag(self.I_line)

    @property
    def I_rotor_mag(self) -> float:
        """Rotor current magnitude [A]."""
        return c_mag(self.I_rotor)

    @property
    def P_airgap(self) -> float:
        """Air gap power [W]."""
        return PHASES * self.I_rotor_mag ** 2 * (self.R2 / self.slip)

    @property
    def torque(self) -> float:
        """Electromagnetic torque [Nm]."""
        return self.P_airgap / self.omega_sync

    @property
    def P_input(self) -> float:
        """Electrical input power [W]."""
        return PHASES * self.V_phase * self.I_line.real

    @property
    def power_factor(self) -> float:
        """Power factor cos(φ)."""
        magnitude = self.I_line_mag
        if magnitude == 0:
            return 0.0
        return self.I_line.real / magnitude

    @property
    def speed_rpm(self) -> float:
        """Rotor speed [rpm]."""
        return self.rpm_sync * (1 - self.slip)


def solve_circuit(params: MachineParameters, slip: float) -> CircuitSolution:
    """
    Solve the equivalent circuit at a given slip.

    Args:
        params: Machine parameters
        slip: Operating slip, must be > 0

    Returns:
        CircuitSolution with all electrical quantities

    Raises:
        DivisionByZeroError: if an impedance in the solution path is zero
    """
    V_phase = params.V_phase

    Zs = params.Zs
    Zr = params.Zr(slip)
    Zm = params.Zm

    # T-equivalent: Zm in parallel with Zr, then series with Zs
    Z_parallel = c_par(Zr, Zm)
    Z_total = c_add(Zs, Z_parallel)

    I_line = c_div(complex(V_phase, 0), Z_total)
    V_parallel = c_mul(I_line, Z_parallel)
    I_rotor = c_div(V_parallel, Zr)

    return CircuitSolution(
        slip=slip,
        V_phase=V_phase,
        rpm_sync=params.rpm_sync,
        omega_sync=params.omega_sync,
        R2=params.R2,
        Z_total=Z_total,
        Z_parallel=Z_parallel,
        I_line=I_line,
        V_parallel=V_parallel,
        I_rotor=I_rotor
    )


def slip_grid(points: int) -> List[float]:
    """
    Uniform slip samples from SLIP_MIN to SLIP_MAX inclusive.

    The grid is uniform in slip, not in speed.
    """
    span = SLIP_MAX - SLIP_MIN
    slips = [SLIP_MIN + span * i / (points - 1) for i in range(points - 1)]
    # Pin the last sample so standstill is exact
    slips.append(SLIP_MAX)
    return slips


def calculate_breakdown_point(torque: List[float]) -> Tuple[float, int]:
    """
    Find breakdown (maximum) torque in a sampled torque list.

    Returns:
        Tuple of (T_max [Nm], index of its first occurrence)
    """
    T_max = -math.inf
    index = 0
    for i, value in enumerate(torque):
        if value > T_max:
            T_max = value
            index = i
    return T_max, index


def generate_curve(params: MachineParameters) -> Curve:
    """
    Calculate the torque-speed and current-slip characteristic.

    Args:
        params: Machine parameters (params.points sets the sample count)

    Returns:
        Curve with index-aligned samples and breakdown summary

    Raises:
        DivisionByZeroError: propagated from the circuit solution
    """
    slips = slip_grid(params.points)

    speeds = []
    torques = []
    currents = []
    powers = []
    power_factors = []
    for s in slips:
        sol = solve_circuit(params, s)
        speeds.append(sol.speed_rpm)
        torques.append(sol.torque)
        currents.append(sol.I_line_mag)
        powers.append(sol.P_input)
        power_factors.append(sol.power_factor)

    T_max, index = calculate_breakdown_point(torques)

    return Curve(
        slip=slips,
        speed_rpm=speeds,
        torque=torques,
        line_current=currents,
        input_power=powers,
        power_factor=power_factors,
        rpm_sync=params.rpm_sync,
        omega_sync=params.omega_sync,
        T_max=T_max,
        s_at_T_max=slips[index]
    )

"""
Machine parameter model for induction motor performance analysis.
Contains the per-phase equivalent circuit and the supply data that fully
determine the steady-state torque-speed characteristic.
"""

from dataclasses import dataclass, fields, replace as _dc_replace
import math

from ..utils.constants import SQRT_3, MAX_POINTS, DEFAULT_POINTS
from ..utils.errors import InvalidParameterError


@dataclass(frozen=True)
class MachineParameters:
    """
    Per-phase equivalent circuit and supply data (all referred to stator).

    Circuit topology (T-model, Y-connected):

        R1      X1           X2      R2/s
    ○──┴┴┴──┬┬┬┬──┬──────┬┬┬┬──┴┴┴──○
                  │
                 ╱│╲
                │ Xm │
                 ╲│╱
                  │
    ○─────────────┴─────────────────○

    Attributes:
        R1: Stator resistance [Ω]
        X1: Stator leakage reactance [Ω]
        R2: Rotor resistance (referred to stator) [Ω]
        X2: Rotor leakage reactance (referred to stator) [Ω]
        Xm: Magnetizing reactance [Ω]
        voltage_line: Line-to-line RMS voltage [V]
        frequency: Supply frequency [Hz]
        poles: Number of poles (2p, positive and even)
        points: Number of slip samples in the curve (>= 2)
    """
    R1: float
    X1: float
    R2: float
    X2: float
    Xm: float
    voltage_line: float
    frequency: float
    poles: int
    points: int

    def __post_init__(self):
        """Validate parameters."""
        self._validate()

    def _validate(self):
        for name in ('R1', 'X1', 'R2', 'X2', 'Xm', 'voltage_line', 'frequency'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidParameterError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidParameterError(f"{name} must be finite, got {value}")

        if any(x < 0 for x in [self.R1, self.X1, self.R2, self.X2]):
            raise InvalidParameterError("Circuit parameters must be non-negative")
        if self.Xm <= 0:
            raise InvalidParameterError(f"Xm must be positive, got {self.Xm}")
        if self.voltage_line <= 0:
            raise InvalidParameterError(
                f"Voltage must be positive, got {self.voltage_line}")
        if self.frequency <= 0:
            raise InvalidParameterError(
                f"Frequency must be positive, got {self.frequency}")

        if isinstance(self.poles, bool) or not isinstance(self.poles, int):
            raise InvalidParameterError(f"Poles must be an integer, got {self.poles!r}")
        if self.poles <= 0 or self.poles % 2:
            raise InvalidParameterError(
                f"Poles must be a positive even number, got {self.poles}")

        if isinstance(self.points, bool) or not isinstance(self.points, int):
            raise InvalidParameterError(f"Points must be an integer, got {self.points!r}")
        if not 2 <= self.points <= MAX_POINTS:
            raise InvalidParameterError(
                f"Points must be in [2, {MAX_POINTS}], got {self.points}")

    @property
    def pole_pairs(self) -> int:
        """Number of pole pairs p."""
        return self.poles // 2

    @property
    def V_phase(self) -> float:
        """Phase voltage [V] (Y connection)."""
        return self.voltage_line / SQRT_3

    @property
    def rpm_sync(self) -> float:
        """Synchronous speed [rpm]."""
        return 120 * self.frequency / self.poles

    @property
    def omega_sync(self) -> float:
        """Mechanical synchronous angular speed [rad/s]."""
        return 4 * math.pi * self.frequency / self.poles

    @property
    def Zs(self) -> complex:
        """Stator impedance."""
        return complex(self.R1, self.X1)

    def Zr(self, slip: float) -> complex:
        """Rotor branch impedance at given slip."""
        return complex(self.R2 / slip, self.X2)

    @property
    def Zm(self) -> complex:
        """Magnetizing branch impedance."""
        return complex(0, self.Xm)

    def replace(self, **overrides) -> 'MachineParameters':
        """Return a validated copy with some fields overridden."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise InvalidParameterError(
                f"Unknown machine parameter(s): {', '.join(sorted(unknown))}")
        return _dc_replace(self, **overrides)

    def __repr__(self) -> str:
        return (
            f"MachineParameters(\n"
            f"  Supply: {self.voltage_line} V, {self.frequency} Hz, "
            f"{self.poles} poles\n"
            f"  Sync speed: {self.rpm_sync:.0f} rpm\n"
            f"  R1={self.R1} Ω, X1={self.X1} Ω, R2={self.R2} Ω, "
            f"X2={self.X2} Ω, Xm={self.Xm} Ω\n"
            f"  Samples: {self.points}\n"
            f")"
        )


def create_machine(
    R1: float,
    X1: float,
    R2: float,
    X2: float,
    Xm: float,
    voltage_line: float,
    frequency: float,
    poles: int,
    points: int = DEFAULT_POINTS
) -> MachineParameters:
    """Create machine parameters from keyword arguments."""
    return MachineParameters(
        R1=R1, X1=X1, R2=R2, X2=X2, Xm=Xm,
        voltage_line=voltage_line,
        frequency=frequency,
        poles=poles,
        points=points
    )

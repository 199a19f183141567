"""
Performance analysis driver for induction motors.

This module orchestrates a complete analysis:
1. Sweep the equivalent circuit over slip
2. Locate breakdown torque
3. Resolve the no-load and loaded operating points
4. Report summary values
"""

from dataclasses import dataclass
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from ..calculations.equivalent_circuit import generate_curve
from ..models.machine import MachineParameters
from ..models.performance import Curve, OperatingPoint
from ..models.presets import apply_nema_design
from ..utils.constants import DEFAULT_MACHINE, ParameterRanges
from ..utils.errors import InvalidParameterError
from ..utils.formatting import format_value
from .operating_point import resolve_operating_point


@dataclass
class AnalysisResult:
    """
    Complete analysis outputs.
    """
    params: MachineParameters
    curve: Curve
    operating_point: OperatingPoint


class MotorAnalyzer:
    """
    Analysis engine for a single parameter set.

    Usage:
        analyzer = MotorAnalyzer(params)
        result = analyzer.run(load_percent=100)
    """

    def __init__(self, params: MachineParameters, verbose: bool = True):
        """
        Initialize the analyzer.

        Args:
            params: Machine parameters
            verbose: Print progress messages
        """
        self.params = params
        self.verbose = verbose

        # Populated by run()
        self.curve: Optional[Curve] = None
        self._curve_params: Optional[MachineParameters] = None
        self.operating_point: Optional[OperatingPoint] = None

    def _log(self, message: str):
        """Print message if verbose."""
        if self.verbose:
            print(message)

    def _curve_is_stale(self) -> bool:
        """True if no curve exists for the current params."""
        return self.curve is None or self._curve_params != self.params

    def run(self, load_percent: float = ParameterRanges.LOAD_PERCENT_RATED) -> AnalysisResult:
        """
        Run the complete analysis.

        The curve is swept again only when params has changed since the
        last sweep; otherwise only the operating point is re-resolved.

        Args:
            load_percent: Load as percent of rated torque

        Returns:
            AnalysisResult with curve and operating point
        """
        self._log("=" * 60)
        self._log("INDUCTION MOTOR PERFORMANCE")
        self._log("=" * 60)

        if self._curve_is_stale():
            self._log("\n--- Step 1: Slip Sweep ---")
            self.curve = generate_curve(self.params)
            self._curve_params = self.params
            self._log(f"  Samples: {len(self.curve)}")
            self._log(f"  Synchronous speed: {self.curve.rpm_sync:.1f} rpm")

            self._log("\n--- Step 2: Breakdown Torque ---")
            self._log(f"  T_max: {format_value(self.curve.T_max, 2)} Nm "
                      f"at s = {format_value(self.curve.s_at_T_max, 4)}")

        self._log(f"\n--- Step 3: Operating Point ({load_percent:g} % load) ---")
        self.operating_point = resolve_operating_point(self.curve, load_percent)
        op = self.operating_point
        self._log(f"  No-load speed: {format_value(op.no_load_speed, 1)} rpm")
        self._log(f"  Loaded speed: {format_value(op.loaded_speed, 1)} rpm")
        if op.stalled:
            self._log("  WARNING: operating point below breakdown speed (stalled)")

        return AnalysisResult(
            params=self.params,
            curve=self.curve,
            operating_point=self.operating_point
        )

    def summary(self) -> str:
        """Format curve and operating-point results as a text table."""
        if self.operating_point is None:
            self.run()
        elif self._curve_is_stale():
            self.run(self.operating_point.load_percent)
        curve = self.curve
        op = self.operating_point

        rows = [
            ("Breakdown torque", curve.T_max, 2, "Nm"),
            ("Slip at breakdown", curve.s_at_T_max, 4, ""),
            ("Starting torque", curve.starting_torque, 2, "Nm"),
            ("Starting current", curve.starting_current, 1, "A"),
            ("No-load current", curve.no_load_current, 1, "A"),
            ("Load", op.load_percent, 0, "%"),
            ("No-load speed", op.no_load_speed, 1, "rpm"),
            ("Loaded speed", op.loaded_speed, 1, "rpm"),
            ("Torque", op.torque, 2, "Nm"),
            ("Line current", op.line_current, 1, "A"),
            ("Power factor", op.power_factor, 3, ""),
            ("Input power", op.P_input, 0, "W"),
            ("Shaft power", op.P_shaft, 0, "W"),
            ("Horsepower", op.horsepower, 2, "hp"),
            ("Efficiency", op.efficiency, 1, "%"),
            ("Speed regulation", op.speed_regulation, 2, "%"),
        ]
        lines = [f"{label:<20} {format_value(value, digits):>12} {unit}".rstrip()
                 for label, value, digits, unit in rows]
        lines.append(f"{'Stalled':<20} {'yes' if op.stalled else 'no':>12}")
        return "\n".join(lines)


def sweep_parameter(
    params: MachineParameters,
    name: str,
    values: Iterable[float],
    max_workers: Optional[int] = None
) -> List[Curve]:
    """
    Generate one curve per value of a single machine parameter.

    Every parameter set is validated before any curve is computed.
    Curves are independent, so with max_workers > 1 they are generated
    concurrently; results keep the order of values.

    Args:
        params: Base machine parameters
        name: Field to vary (e.g. 'R2')
        values: Values to substitute
        max_workers: Thread pool size, None or 1 for sequential

    Returns:
        List of curves, one per value
    """
    variants = [params.replace(**{name: value}) for value in values]
    if max_workers is None or max_workers <= 1:
        return [generate_curve(p) for p in variants]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(generate_curve, variants))


def analyze_motor(
    load_percent: float = ParameterRanges.LOAD_PERCENT_RATED,
    nema_design: Optional[str] = None,
    verbose: bool = True,
    **kwargs
) -> AnalysisResult:
    """
    Convenience function for a quick analysis.

    Unspecified machine parameters default to the 460 V / 60 Hz / 4-pole
    reference machine.

    Args:
        load_percent: Load as percent of rated torque
        nema_design: Optional NEMA design class overriding R2 and X2
        verbose: Print progress messages
        **kwargs: MachineParameters fields (R1, X1, R2, X2, Xm,
            voltage_line, frequency, poles, points)

    Returns:
        AnalysisResult
    """
    unknown = set(kwargs) - set(DEFAULT_MACHINE)
    if unknown:
        raise InvalidParameterError(
            f"Unknown machine parameter(s): {', '.join(sorted(unknown))}")

    params = MachineParameters(**{**DEFAULT_MACHINE, **kwargs})
    if nema_design is not None:
        params = apply_nema_design(params, nema_design)

    analyzer = MotorAnalyzer(params, verbose=verbose)
    return analyzer.run(load_percent)

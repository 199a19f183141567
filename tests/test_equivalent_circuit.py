"""
Tests for the circuit solver and the slip sweep
"""

import unittest

from induction_motor_performance.calculations import (
    solve_circuit, slip_grid, calculate_breakdown_point, generate_curve
)
from induction_motor_performance.models import MachineParameters
from induction_motor_performance.utils import (
    DEFAULT_MACHINE, SLIP_MIN, SLIP_MAX, DivisionByZeroError
)


def reference_machine(**overrides):
    return MachineParameters(**{**DEFAULT_MACHINE, **overrides})


class TestSolveCircuit(unittest.TestCase):
    """Single slip-point solution"""

    def setUp(self):
        self.params = reference_machine()

    def test_kirchhoff_voltage(self):
        sol = solve_circuit(self.params, 0.05)
        # V = I * (Zs + Zpar)
        v = sol.I_line * sol.Z_total
        self.assertAlmostEqual(v.real, self.params.V_phase, places=9)
        self.assertAlmostEqual(v.imag, 0.0, places=9)

    def test_rotor_current_divider(self):
        sol = solve_circuit(self.params, 0.05)
        I_m = sol.V_parallel / self.params.Zm
        self.assertAlmostEqual(abs(sol.I_line - sol.I_rotor - I_m), 0.0, places=9)

    def test_power_balance(self):
        sol = solve_circuit(self.params, 0.05)
        P_cu_s = 3 * self.params.R1 * sol.I_line_mag ** 2
        # No core-loss branch: input = stator copper loss + air gap power
        self.assertAlmostEqual(sol.P_input, P_cu_s + sol.P_airgap, places=6)

    def test_torque_from_air_gap_power(self):
        sol = solve_circuit(self.params, 0.05)
        self.assertAlmostEqual(sol.torque, sol.P_airgap / self.params.omega_sync)
        self.assertAlmostEqual(sol.speed_rpm, 1800 * 0.95)

    def test_power_factor_lagging(self):
        sol = solve_circuit(self.params, 0.05)
        self.assertGreater(sol.power_factor, 0.0)
        self.assertLess(sol.power_factor, 1.0)

    def test_zero_rotor_impedance_raises(self):
        params = reference_machine(R2=0.0, X2=0.0)
        with self.assertRaises(DivisionByZeroError):
            solve_circuit(params, 0.5)


class TestSlipGrid(unittest.TestCase):
    """Uniform slip samples"""

    def test_end_points(self):
        slips = slip_grid(800)
        self.assertEqual(len(slips), 800)
        self.assertEqual(slips[0], SLIP_MIN)
        self.assertEqual(slips[-1], SLIP_MAX)

    def test_two_points(self):
        self.assertEqual(slip_grid(2), [SLIP_MIN, SLIP_MAX])

    def test_uniform_spacing(self):
        slips = slip_grid(11)
        step = (SLIP_MAX - SLIP_MIN) / 10
        for a, b in zip(slips, slips[1:]):
            self.assertAlmostEqual(b - a, step)


class TestBreakdownPoint(unittest.TestCase):

    def test_first_occurrence_on_ties(self):
        self.assertEqual(calculate_breakdown_point([1.0, 3.0, 2.0, 3.0]), (3.0, 1))


class TestGenerateCurve(unittest.TestCase):
    """Full sweep of the reference 460 V, 60 Hz, 4-pole machine"""

    @classmethod
    def setUpClass(cls):
        cls.params = reference_machine()
        cls.curve = generate_curve(cls.params)

    def test_lengths_aligned(self):
        n = self.params.points
        for values in (self.curve.slip, self.curve.speed_rpm, self.curve.torque,
                       self.curve.line_current, self.curve.input_power,
                       self.curve.power_factor):
            self.assertEqual(len(values), n)
        self.assertEqual(len(self.curve), n)

    def test_slip_strictly_increasing(self):
        slips = self.curve.slip
        self.assertEqual(slips[0], 1e-4)
        self.assertEqual(slips[-1], 1.0)
        for a, b in zip(slips, slips[1:]):
            self.assertLess(a, b)

    def test_speed_strictly_decreasing(self):
        speeds = self.curve.speed_rpm
        for a, b in zip(speeds, speeds[1:]):
            self.assertGreater(a, b)
        for s, n in zip(self.curve.slip, speeds):
            self.assertAlmostEqual(n, 1800 * (1 - s))

    def test_synchronous_speed(self):
        self.assertAlmostEqual(self.curve.rpm_sync, 1800.0)
        self.assertAlmostEqual(self.curve.omega_sync, self.params.omega_sync)

    def test_breakdown_is_exact_maximum(self):
        self.assertEqual(self.curve.T_max, max(self.curve.torque))
        index = self.curve.torque.index(self.curve.T_max)
        self.assertEqual(self.curve.s_at_T_max, self.curve.slip[index])

    def test_breakdown_slip_inside_range(self):
        self.assertGreater(self.curve.s_at_T_max, 0.0)
        self.assertLess(self.curve.s_at_T_max, 1.0)
        # Thevenin estimate R2 / |Zth + jX2| is about 0.15
        self.assertGreater(self.curve.s_at_T_max, 0.1)
        self.assertLess(self.curve.s_at_T_max, 0.2)

    def test_starting_current_exceeds_no_load(self):
        self.assertGreater(self.curve.starting_current, self.curve.no_load_current)
        self.assertEqual(self.curve.starting_current, self.curve.line_current[-1])
        self.assertEqual(self.curve.no_load_current, self.curve.line_current[0])

    def test_speed_at_breakdown(self):
        self.assertAlmostEqual(
            self.curve.speed_at_T_max, 1800 * (1 - self.curve.s_at_T_max))

    def test_minimum_size_curve(self):
        curve = generate_curve(reference_machine(points=2))
        self.assertEqual(curve.slip, [1e-4, 1.0])
        self.assertEqual(len(curve.torque), 2)
        self.assertGreater(curve.speed_rpm[0], curve.speed_rpm[1])
        self.assertEqual(curve.T_max, max(curve.torque))

    def test_zero_rotor_impedance_propagates(self):
        with self.assertRaises(DivisionByZeroError):
            generate_curve(reference_machine(R2=0.0, X2=0.0, points=10))

    def test_independent_calls_are_identical(self):
        again = generate_curve(self.params)
        self.assertEqual(again.torque, self.curve.torque)


if __name__ == '__main__':
    unittest.main()

"""
Tests for machine parameter validation, derived quantities and presets
"""

import math
import unittest

from induction_motor_performance.models import (
    MachineParameters, create_machine, apply_nema_design, NEMA_DESIGN_PRESETS
)
from induction_motor_performance.utils import (
    DEFAULT_MACHINE, MAX_POINTS, InvalidParameterError
)


def reference_machine(**overrides):
    return MachineParameters(**{**DEFAULT_MACHINE, **overrides})


class TestMachineParameters(unittest.TestCase):
    """Derived supply quantities"""

    def setUp(self):
        self.params = reference_machine()

    def test_synchronous_speed(self):
        self.assertAlmostEqual(self.params.rpm_sync, 1800.0)
        self.assertAlmostEqual(self.params.omega_sync, 2 * math.pi * 1800 / 60)
        self.assertEqual(self.params.pole_pairs, 2)

    def test_phase_voltage(self):
        self.assertAlmostEqual(self.params.V_phase, 460 / math.sqrt(3))

    def test_impedances(self):
        self.assertEqual(self.params.Zs, complex(0.5, 1.5))
        self.assertEqual(self.params.Zm, complex(0, 30))
        self.assertAlmostEqual(self.params.Zr(0.5), complex(0.6, 0.5))

    def test_frozen(self):
        with self.assertRaises(AttributeError):
            self.params.R2 = 1.0

    def test_create_machine_default_points(self):
        params = create_machine(0.5, 1.5, 0.3, 0.5, 30, 460, 60, 4)
        self.assertEqual(params.points, 800)

    def test_replace_validates(self):
        self.assertEqual(self.params.replace(R2=0.6).R2, 0.6)
        with self.assertRaises(InvalidParameterError):
            self.params.replace(R2=-0.1)
        with self.assertRaises(InvalidParameterError):
            self.params.replace(R3=0.1)


class TestMachineValidation(unittest.TestCase):
    """Invalid inputs are rejected before any computation"""

    def test_negative_resistance(self):
        with self.assertRaises(InvalidParameterError):
            reference_machine(R1=-0.5)

    def test_zero_magnetizing_reactance(self):
        with self.assertRaises(InvalidParameterError):
            reference_machine(Xm=0)

    def test_zero_frequency(self):
        with self.assertRaises(InvalidParameterError):
            reference_machine(frequency=0)

    def test_non_finite_voltage(self):
        with self.assertRaises(InvalidParameterError):
            reference_machine(voltage_line=float('nan'))
        with self.assertRaises(InvalidParameterError):
            reference_machine(voltage_line=float('inf'))

    def test_odd_poles(self):
        with self.assertRaises(InvalidParameterError):
            reference_machine(poles=3)

    def test_non_positive_poles(self):
        with self.assertRaises(InvalidParameterError):
            reference_machine(poles=0)

    def test_points_bounds(self):
        with self.assertRaises(InvalidParameterError):
            reference_machine(points=1)
        with self.assertRaises(InvalidParameterError):
            reference_machine(points=MAX_POINTS + 1)
        self.assertEqual(reference_machine(points=2).points, 2)

    def test_is_value_error(self):
        with self.assertRaises(ValueError):
            reference_machine(points=0)


class TestNemaPresets(unittest.TestCase):
    """Design-class overrides of the rotor branch"""

    def test_apply_preset(self):
        params = apply_nema_design(reference_machine(), 'd')
        self.assertEqual(params.R2, NEMA_DESIGN_PRESETS['D']['R2'])
        self.assertEqual(params.X2, NEMA_DESIGN_PRESETS['D']['X2'])
        self.assertEqual(params.R1, DEFAULT_MACHINE['R1'])

    def test_unknown_preset(self):
        with self.assertRaises(InvalidParameterError):
            apply_nema_design(reference_machine(), 'Z')


if __name__ == '__main__':
    unittest.main()

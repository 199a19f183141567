#!/usr/bin/env python3
"""
Compare NEMA design classes and a rotor-resistance sweep.

Each NEMA preset overrides the rotor branch (R2, X2) of the reference
machine; the sweep reproduces the effect of moving the R2 slider.
"""

from __future__ import annotations

from pathlib import Path
import sys

# Allow running the script from the repo root without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import matplotlib.pyplot as plt

from induction_motor_performance import (
    DEFAULT_MACHINE,
    NEMA_DESIGN_PRESETS,
    MachineParameters,
    analyze_motor,
    apply_nema_design,
    format_value,
    generate_curve,
    sweep_parameter,
)


def compare_nema_designs(base: MachineParameters) -> None:
    """Print breakdown and starting values for each design class."""
    print(f"{'Design':>6} {'R2 [Ω]':>8} {'X2 [Ω]':>8} {'T_max [Nm]':>11} "
          f"{'s_Tmax':>8} {'T_start [Nm]':>13} {'I_start [A]':>12}")
    print("-" * 72)
    for design in sorted(NEMA_DESIGN_PRESETS):
        params = apply_nema_design(base, design)
        curve = generate_curve(params)
        print(
            f"{design:>6} {params.R2:8.2f} {params.X2:8.2f} "
            f"{format_value(curve.T_max, 1):>11} {format_value(curve.s_at_T_max, 4):>8} "
            f"{format_value(curve.starting_torque, 1):>13} "
            f"{format_value(curve.starting_current, 1):>12}"
        )

    result = analyze_motor(load_percent=100, nema_design='B', verbose=False)
    op = result.operating_point
    print(f"\nDesign B at rated load: {format_value(op.loaded_speed, 1)} rpm, "
          f"{format_value(op.horsepower, 1)} hp, "
          f"efficiency {format_value(op.efficiency, 1)} %")


def plot_rotor_resistance_sweep(base: MachineParameters) -> None:
    """Plot torque-speed curves for several rotor resistances."""
    values = [0.1, 0.3, 0.6, 1.0, 1.5]
    curves = sweep_parameter(base, 'R2', values, max_workers=len(values))

    fig, ax = plt.subplots(figsize=(8, 5))
    for value, curve in zip(values, curves):
        ax.plot(curve.speed_rpm, curve.torque, label=f"R2 = {value:.2f} Ω")
    ax.set_xlim(0, base.rpm_sync)
    ax.set_xlabel("Speed [rpm]")
    ax.set_ylabel("Torque [Nm]")
    ax.set_title("Torque vs Speed for varying rotor resistance")
    ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.7)
    ax.legend()
    fig.tight_layout()
    plt.show()


def main() -> None:
    base = MachineParameters(**DEFAULT_MACHINE)
    compare_nema_designs(base)
    plot_rotor_resistance_sweep(base)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Torque-speed and current-slip curves for the reference 460 V machine.

The script runs the analysis at a few load levels, prints the data-sheet
summary and plots the characteristic with the operating points marked.
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
    MachineParameters,
    MotorAnalyzer,
    format_value,
)


def _print_section(title: str) -> None:
    """Utility to format console sections consistently."""
    line = "=" * 70
    print(f"\n{line}\n{title}\n{line}")


def run_load_table(analyzer: MotorAnalyzer) -> list:
    """Resolve and tabulate operating points from no-load to overload."""
    _print_section("LOAD TABLE")
    print(f"{'Load [%]':>9} {'Speed [rpm]':>12} {'Torque [Nm]':>12} "
          f"{'Current [A]':>12} {'Eff [%]':>8} {'Stalled':>8}")
    print("-" * 66)

    points = []
    for load in (0, 25, 50, 75, 100, 125, 150):
        op = analyzer.run(load).operating_point
        points.append(op)
        print(
            f"{load:9.0f} {format_value(op.loaded_speed, 1):>12} "
            f"{format_value(op.torque, 2):>12} {format_value(op.line_current, 1):>12} "
            f"{format_value(op.efficiency, 1):>8} {'yes' if op.stalled else 'no':>8}"
        )
    return points


def plot_characteristics(curve, operating_points) -> None:
    """
    Plot torque vs speed and line current vs slip.

    Args:
        curve: Swept Curve
        operating_points: OperatingPoint results to mark on the torque plot
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(curve.speed_rpm, curve.torque, color="tab:blue", label="Torque")
    axes[0].axhline(curve.T_max, color="tab:gray", linestyle=":",
                    label=f"T_max = {curve.T_max:.1f} Nm")
    axes[0].scatter(
        [op.loaded_speed for op in operating_points if op.torque is not None],
        [op.torque for op in operating_points if op.torque is not None],
        color="tab:red", zorder=3, label="Operating points"
    )
    axes[0].set_xlim(0, curve.rpm_sync)
    axes[0].set_xlabel("Speed [rpm]")
    axes[0].set_ylabel("Torque [Nm]")
    axes[0].set_title("Torque vs Speed")
    axes[0].legend()

    axes[1].plot(curve.slip, curve.line_current, color="tab:green")
    axes[1].set_xlim(0, 1)
    axes[1].set_xlabel("Slip")
    axes[1].set_ylabel("Current [A]")
    axes[1].set_title("Stator Line Current vs Slip")

    for ax in axes.flat:
        ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.7)

    fig.tight_layout()
    plt.show()


def main() -> None:
    params = MachineParameters(**DEFAULT_MACHINE)
    print(params)

    analyzer = MotorAnalyzer(params, verbose=True)
    analyzer.run(100)

    _print_section("RATED LOAD SUMMARY")
    print(analyzer.summary())

    points = run_load_table(analyzer)
    plot_characteristics(analyzer.curve, points)


if __name__ == "__main__":
    main()

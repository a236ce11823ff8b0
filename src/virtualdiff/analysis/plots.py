"""Plot generation for simulation analysis."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from virtualdiff.simulation.runner import SimulationResult
from virtualdiff.utils.constants import KMH_PER_MS

matplotlib.use("Agg")


def _save_dual_format(fig: Figure, out_base: Path) -> None:
    """Write a figure to PNG and PDF with a shared base path.

    Args:
        fig: Figure object to persist.
        out_base: Output path without suffix.
    """
    out_base.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_base.with_suffix(".png"), dpi=180, bbox_inches="tight")
    fig.savefig(out_base.with_suffix(".pdf"), bbox_inches="tight")


def plot_speed_trace(result: SimulationResult, out_base: Path) -> None:
    """Plot speed and cruise target over time.

    Args:
        result: Simulation result containing ``speed`` and ``time``.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(result.time, result.speed * KMH_PER_MS, lw=2.0, label="Speed")
    ax.axhline(result.scenario.target_speed, color="k", ls="--", lw=1.0, label="Target")
    ax.set_xlabel("t [s]")
    ax.set_ylabel("Speed [km/h]")
    ax.set_title("Speed Trace")
    ax.grid(True, alpha=0.3)
    ax.legend()
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_yaw_rate_trace(result: SimulationResult, out_base: Path) -> None:
    """Plot yaw rate over time.

    Args:
        result: Simulation result containing ``yaw_rate``.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(result.time, result.yaw_rate, lw=2.0)
    ax.set_xlabel("t [s]")
    ax.set_ylabel("Yaw rate [rad/s]")
    ax.set_title("Yaw Rate")
    ax.grid(True, alpha=0.3)
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_wheel_slip(result: SimulationResult, out_base: Path) -> None:
    """Plot left and right wheel slip ratio over time.

    Args:
        result: Simulation result containing slip traces.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(result.time, result.slip_left, label="Left")
    ax.plot(result.time, result.slip_right, label="Right")
    ax.set_ylim(0.0, 1.0)
    ax.set_xlabel("t [s]")
    ax.set_ylabel("Slip ratio [-]")
    ax.set_title("Wheel Slip Ratio")
    ax.grid(True, alpha=0.3)
    ax.legend()
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_torque_split(result: SimulationResult, out_base: Path) -> None:
    """Plot per-wheel torque and locking ratio over time.

    Args:
        result: Simulation result containing torque and lock traces.
        out_base: Output path without suffix.
    """
    fig, (ax_torque, ax_lock) = plt.subplots(2, 1, figsize=(9, 6), sharex=True)
    ax_torque.plot(result.time, result.torque_left, label="Left")
    ax_torque.plot(result.time, result.torque_right, label="Right")
    ax_torque.set_ylabel("Torque [Nm]")
    ax_torque.set_title("Torque Split")
    ax_torque.grid(True, alpha=0.3)
    ax_torque.legend()
    ax_lock.plot(result.time, result.locking_ratio, color="tab:purple")
    ax_lock.set_ylim(0.0, 1.05)
    ax_lock.set_xlabel("t [s]")
    ax_lock.set_ylabel("Locking ratio [-]")
    ax_lock.grid(True, alpha=0.3)
    _save_dual_format(fig, out_base)
    plt.close(fig)


def plot_trajectory(result: SimulationResult, out_base: Path) -> None:
    """Plot the driven path in visual units.

    Args:
        result: Simulation result containing position traces.
        out_base: Output path without suffix.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.plot(result.x, result.y, lw=2.0)
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(f"Trajectory ({result.scenario.diff_mode.value})")
    ax.grid(True, alpha=0.3)
    _save_dual_format(fig, out_base)
    plt.close(fig)


def export_standard_plots(result: SimulationResult, output_dir: str | Path) -> None:
    """Export all standard analysis plots in PNG and PDF format.

    Args:
        result: Simulation result used as plotting input.
        output_dir: Destination directory for all generated plots.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    plot_speed_trace(result, out_dir / "speed_trace")
    plot_yaw_rate_trace(result, out_dir / "yaw_rate")
    plot_wheel_slip(result, out_dir / "wheel_slip")
    plot_torque_split(result, out_dir / "torque_split")
    plot_trajectory(result, out_dir / "trajectory")

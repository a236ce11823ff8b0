"""KPI calculation from scenario simulation results."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from virtualdiff.simulation.runner import SimulationResult
from virtualdiff.utils.constants import KMH_PER_MS, SMALL_EPS


@dataclass(frozen=True)
class KpiSummary:
    """Summary metrics for one scenario run.

    Args:
        final_speed_kmh: Speed at the end of the run [km/h].
        max_lateral_g: Peak lateral acceleration [g].
        mean_slip_left: Mean left wheel slip ratio.
        mean_slip_right: Mean right wheel slip ratio.
        peak_slip: Peak slip ratio over both wheels.
        mean_locking_ratio: Mean differential lock fraction.
        mean_abs_yaw_rate: Mean absolute yaw rate [rad/s].
        distance: Distance travelled [m].
        outer_torque_bias: Mean fraction of axle torque sent to the outer wheel
            minus the inner wheel, zero when driving straight.
    """

    final_speed_kmh: float
    max_lateral_g: float
    mean_slip_left: float
    mean_slip_right: float
    peak_slip: float
    mean_locking_ratio: float
    mean_abs_yaw_rate: float
    distance: float
    outer_torque_bias: float


def _outer_torque_bias(result: SimulationResult) -> float:
    """Average outer-minus-inner torque share over powered ticks.

    Args:
        result: Scenario traces.

    Returns:
        Mean torque bias toward the outer wheel in ``[-1, 1]``.
    """
    direction = float(np.sign(result.scenario.steering_angle))
    total = result.torque_left + result.torque_right
    powered = total > SMALL_EPS
    if direction == 0.0 or not np.any(powered):
        return 0.0
    # Positive steering is a right turn, so the left wheel is outer.
    bias = direction * (result.torque_left - result.torque_right)
    return float(np.mean(bias[powered] / total[powered]))


def compute_kpis(result: SimulationResult) -> KpiSummary:
    """Compute summary KPIs from scenario traces.

    Args:
        result: Full per-tick traces of a scenario run.

    Returns:
        Aggregated KPI summary.
    """
    tick_duration = np.diff(result.time, prepend=0.0)
    return KpiSummary(
        final_speed_kmh=float(result.speed[-1] * KMH_PER_MS),
        max_lateral_g=float(np.max(result.lateral_g)),
        mean_slip_left=float(np.mean(result.slip_left)),
        mean_slip_right=float(np.mean(result.slip_right)),
        peak_slip=float(max(np.max(result.slip_left), np.max(result.slip_right))),
        mean_locking_ratio=float(np.mean(result.locking_ratio)),
        mean_abs_yaw_rate=float(np.mean(np.abs(result.yaw_rate))),
        distance=float(np.sum(result.speed * tick_duration)),
        outer_torque_bias=_outer_torque_bias(result),
    )

"""Export helpers for simulation outputs."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

import numpy as np

from virtualdiff.analysis.kpi import KpiSummary
from virtualdiff.simulation.runner import SimulationResult

TRACE_COLUMNS = (
    ("time", "time_s"),
    ("throttle", "throttle"),
    ("x", "x"),
    ("y", "y"),
    ("heading", "heading_rad"),
    ("speed", "speed_mps"),
    ("yaw_rate", "yaw_rate_radps"),
    ("slip_left", "slip_left"),
    ("slip_right", "slip_right"),
    ("torque_left", "torque_left_nm"),
    ("torque_right", "torque_right_nm"),
    ("rpm_left", "rpm_left"),
    ("rpm_right", "rpm_right"),
    ("locking_ratio", "locking_ratio"),
    ("lateral_g", "lateral_g"),
)


def export_kpi_json(kpis: KpiSummary, path: str | Path) -> None:
    """Persist KPI summary as JSON.

    Args:
        kpis: KPI dataclass returned by :func:`virtualdiff.analysis.kpi.compute_kpis`.
        path: Output file path for the JSON document.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(asdict(kpis), indent=2), encoding="utf-8")


def export_trace_csv(result: SimulationResult, path: str | Path) -> None:
    """Export per-tick traces for post-processing outside VirtualDiff.

    Args:
        result: Scenario traces.
        path: Destination CSV path.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    table = np.column_stack([getattr(result, field) for field, _ in TRACE_COLUMNS])
    np.savetxt(
        out,
        table,
        delimiter=",",
        header=",".join(column for _, column in TRACE_COLUMNS),
        comments="",
    )

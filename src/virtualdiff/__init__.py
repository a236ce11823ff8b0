"""Rear-axle differential simulation package."""

from virtualdiff.analysis.kpi import KpiSummary, compute_kpis
from virtualdiff.simulation.runner import SimulationResult, simulate_scenario
from virtualdiff.vehicle.dynamics import step
from virtualdiff.vehicle.state import ControlInput, DiffMode, VehicleState

__all__ = [
    "ControlInput",
    "DiffMode",
    "KpiSummary",
    "SimulationResult",
    "VehicleState",
    "compute_kpis",
    "simulate_scenario",
    "step",
]

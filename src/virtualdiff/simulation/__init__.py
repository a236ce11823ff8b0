"""Simulation driver, telemetry and scenario runners."""

from virtualdiff.simulation.config import (
    DrivingScenario,
    SimulationConfig,
    build_simulation_config,
)
from virtualdiff.simulation.cruise import cruise_control_throttle
from virtualdiff.simulation.runner import SimulationResult, simulate_scenario
from virtualdiff.simulation.session import SimulationSession
from virtualdiff.simulation.telemetry import TelemetryPoint, TelemetryRecorder

__all__ = [
    "DrivingScenario",
    "SimulationConfig",
    "SimulationResult",
    "SimulationSession",
    "TelemetryPoint",
    "TelemetryRecorder",
    "build_simulation_config",
    "cruise_control_throttle",
    "simulate_scenario",
]

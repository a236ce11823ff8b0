"""Side-by-side runs of one driving scenario under every differential mode."""

from __future__ import annotations

from dataclasses import replace

from virtualdiff.simulation.config import DrivingScenario, SimulationConfig
from virtualdiff.simulation.runner import SimulationResult, simulate_scenario
from virtualdiff.vehicle.params import PhysicsConstants
from virtualdiff.vehicle.state import DiffMode


def compare_diff_modes(
    scenario: DrivingScenario,
    constants: PhysicsConstants | None = None,
    config: SimulationConfig | None = None,
) -> dict[DiffMode, SimulationResult]:
    """Simulate a scenario once per differential mode.

    The ``diff_mode`` of ``scenario`` is ignored; all other inputs are shared.

    Args:
        scenario: Shared steering, target speed, surface and duration.
        constants: Vehicle constants. Defaults to the reference car.
        config: Driver loop configuration.

    Returns:
        Results keyed by differential mode, in ``DiffMode`` order.
    """
    return {
        mode: simulate_scenario(replace(scenario, diff_mode=mode), constants, config)
        for mode in DiffMode
    }

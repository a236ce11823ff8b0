"""Batch scenario simulation orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

import numpy as np

from virtualdiff.simulation.config import DrivingScenario, SimulationConfig
from virtualdiff.simulation.session import SimulationSession
from virtualdiff.surface.presets import parse_surface_type
from virtualdiff.vehicle.params import PhysicsConstants
from virtualdiff.vehicle.state import STATE_FIELDS, VehicleState, parse_diff_mode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Per-tick traces of one scenario run.

    Args:
        scenario: Scenario that produced the traces.
        time: Simulated time at the end of each tick [s].
        throttle: Cruise-control throttle applied at each tick.
        x: Position trace [visual units].
        y: Position trace [visual units].
        heading: Heading trace [rad].
        speed: Speed trace [m/s].
        yaw_rate: Yaw-rate trace [rad/s].
        slip_left: Left wheel slip trace.
        slip_right: Right wheel slip trace.
        torque_left: Left wheel torque trace [N*m].
        torque_right: Right wheel torque trace [N*m].
        rpm_left: Left wheel speed trace [rpm].
        rpm_right: Right wheel speed trace [rpm].
        locking_ratio: Differential lock trace.
        lateral_g: Lateral acceleration trace [g].
        final_state: Vehicle state after the last tick.
    """

    scenario: DrivingScenario
    time: np.ndarray
    throttle: np.ndarray
    x: np.ndarray
    y: np.ndarray
    heading: np.ndarray
    speed: np.ndarray
    yaw_rate: np.ndarray
    slip_left: np.ndarray
    slip_right: np.ndarray
    torque_left: np.ndarray
    torque_right: np.ndarray
    rpm_left: np.ndarray
    rpm_right: np.ndarray
    locking_ratio: np.ndarray
    lateral_g: np.ndarray
    final_state: VehicleState


def simulate_scenario(
    scenario: DrivingScenario,
    constants: PhysicsConstants | None = None,
    config: SimulationConfig | None = None,
    initial_state: VehicleState | None = None,
) -> SimulationResult:
    """Run a scenario from a start state and collect full traces.

    Args:
        scenario: Constant driver inputs and simulated duration.
        constants: Vehicle constants. Defaults to the reference car.
        config: Driver loop configuration.
        initial_state: Start state. Defaults to the vehicle at rest.

    Returns:
        Traces for every tick of the scenario.

    Raises:
        virtualdiff.utils.exceptions.ConfigurationError: If scenario,
            constants or configuration are invalid.
    """
    scenario.validate()
    scenario = replace(
        scenario,
        diff_mode=parse_diff_mode(scenario.diff_mode),
        surface=parse_surface_type(scenario.surface),
    )
    session = SimulationSession(constants=constants, config=config)
    session.set_steering_angle(scenario.steering_angle)
    session.set_target_speed(scenario.target_speed)
    session.set_diff_mode(scenario.diff_mode)
    session.set_surface(scenario.surface)
    if initial_state is not None:
        session.reset(initial_state)

    tick_count = scenario.tick_count(session.constants.time_step)
    logger.debug(
        "Simulating %s on %s for %d ticks",
        session.diff_mode.value,
        session.surface.value,
        tick_count,
    )

    states = np.empty((tick_count, len(STATE_FIELDS)), dtype=float)
    throttle = np.empty(tick_count, dtype=float)
    time_trace = np.empty(tick_count, dtype=float)
    for idx in range(tick_count):
        state = session.tick()
        throttle[idx] = session.last_control.throttle
        states[idx] = state.to_array()
        time_trace[idx] = session.elapsed

    columns = {name: states[:, col].copy() for col, name in enumerate(STATE_FIELDS)}
    logger.debug("Final speed %.2f km/h", session.state.speed_kmh)
    return SimulationResult(
        scenario=scenario,
        time=time_trace,
        throttle=throttle,
        final_state=session.state,
        **columns,
    )

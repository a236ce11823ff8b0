"""Interactive driver that owns the live state, controls and telemetry window."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from virtualdiff.simulation.config import (
    DEFAULT_TARGET_SPEED,
    MAX_STEERING_ANGLE,
    MAX_TARGET_SPEED,
    SimulationConfig,
)
from virtualdiff.simulation.cruise import cruise_control_throttle
from virtualdiff.simulation.telemetry import TelemetryRecorder
from virtualdiff.surface.presets import SurfaceType, parse_surface_type, surface_preset
from virtualdiff.vehicle.dynamics import step
from virtualdiff.vehicle.params import PhysicsConstants, default_physics_constants
from virtualdiff.vehicle.state import (
    ControlInput,
    DiffMode,
    VehicleState,
    initial_vehicle_state,
    parse_diff_mode,
)

logger = logging.getLogger(__name__)


class SimulationSession:
    """Fixed-cadence driver feeding each stepper output into the next tick.

    Control setters clamp values into their domains the way the control
    surface does, so every tick receives a well-formed ``ControlInput``.
    """

    def __init__(
        self,
        constants: PhysicsConstants | None = None,
        config: SimulationConfig | None = None,
    ) -> None:
        """Initialize a session at rest with default controls.

        Args:
            constants: Vehicle constants. Defaults to the reference car.
            config: Driver loop configuration. Defaults to
                :class:`virtualdiff.simulation.config.SimulationConfig`.

        Raises:
            virtualdiff.utils.exceptions.ConfigurationError: If constants or
                configuration are invalid.
        """
        self.constants = constants or default_physics_constants()
        self.config = config or SimulationConfig()
        self.constants.validate()
        self.config.validate()

        self.telemetry = TelemetryRecorder(self.config.telemetry_capacity)
        self.steering_angle = 0.0
        self.target_speed = DEFAULT_TARGET_SPEED
        self.diff_mode = DiffMode.OPEN
        self.surface = SurfaceType.DRY
        self._state = initial_vehicle_state()
        self._elapsed = 0.0
        self.last_control: ControlInput | None = None

    @property
    def state(self) -> VehicleState:
        """Vehicle state produced by the latest tick.

        Returns:
            Current vehicle state.
        """
        return self._state

    @property
    def elapsed(self) -> float:
        """Simulated time since start or last reset.

        Returns:
            Elapsed simulated time [s].
        """
        return self._elapsed

    def set_steering_angle(self, steering_angle: float) -> None:
        """Set the steering angle, clamped to the steering range.

        Args:
            steering_angle: Steering angle [deg], positive for a right turn.
        """
        self.steering_angle = min(max(float(steering_angle), -MAX_STEERING_ANGLE), MAX_STEERING_ANGLE)

    def set_target_speed(self, target_speed: float) -> None:
        """Set the cruise target speed, clamped to the slider range.

        Args:
            target_speed: Cruise target speed [km/h].
        """
        self.target_speed = min(max(float(target_speed), 0.0), MAX_TARGET_SPEED)

    def set_diff_mode(self, diff_mode: DiffMode | str) -> None:
        """Select the differential mode.

        Args:
            diff_mode: Differential mode or its name.

        Raises:
            virtualdiff.utils.exceptions.ConfigurationError: If ``diff_mode``
                is not a known mode.
        """
        self.diff_mode = parse_diff_mode(diff_mode)

    def set_surface(self, surface: SurfaceType | str) -> None:
        """Select the road surface.

        Args:
            surface: Surface type or its name.

        Raises:
            virtualdiff.utils.exceptions.ConfigurationError: If ``surface`` is
                not a known surface.
        """
        self.surface = parse_surface_type(surface)

    def control_input(self) -> ControlInput:
        """Build this tick's control input from the live control values.

        Returns:
            Fresh control input with a cruise-control throttle command.
        """
        return ControlInput(
            steering_angle=self.steering_angle,
            throttle=cruise_control_throttle(self._state.speed, self.target_speed),
            surface_friction=surface_preset(self.surface).friction_coefficient,
            diff_mode=self.diff_mode,
            target_speed=self.target_speed,
        )

    def tick(self, timestamp: float | None = None) -> VehicleState:
        """Advance the simulation by one stepper call and record telemetry.

        Args:
            timestamp: Telemetry timestamp [s]. Defaults to simulated time.

        Returns:
            New vehicle state.
        """
        self.last_control = self.control_input()
        self._state = step(self._state, self.last_control, self.constants)
        self._elapsed += self.constants.time_step
        self.telemetry.record(self._elapsed if timestamp is None else timestamp, self._state)
        return self._state

    def reset(self, state: VehicleState | None = None) -> None:
        """Restart from a given state and clear telemetry.

        Args:
            state: Start state. Defaults to the vehicle at rest at the origin.
        """
        self._state = state or initial_vehicle_state()
        self._elapsed = 0.0
        self.last_control = None
        self.telemetry.clear()
        logger.debug("Session reset")

    def run_realtime(
        self,
        ticks: int,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> VehicleState:
        """Run ticks paced at the configured wall-clock interval.

        Ticks that overrun the interval are not made up; the next tick is
        scheduled relative to the overrun one.

        Args:
            ticks: Number of ticks to run.
            clock: Monotonic clock returning seconds.
            sleep: Blocking sleep taking seconds.

        Returns:
            Vehicle state after the last tick.
        """
        interval = self.config.tick_interval
        next_deadline = clock()
        for _ in range(ticks):
            self.tick(timestamp=clock())
            next_deadline += interval
            remaining = next_deadline - clock()
            if remaining > 0.0:
                sleep(remaining)
            else:
                next_deadline = clock()
        return self._state

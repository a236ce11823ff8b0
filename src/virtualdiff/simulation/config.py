"""Simulation driver and scenario configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from virtualdiff.surface.presets import SurfaceType, parse_surface_type
from virtualdiff.utils.exceptions import ConfigurationError
from virtualdiff.vehicle.state import DiffMode, parse_diff_mode

DEFAULT_TICK_INTERVAL = 0.016
DEFAULT_TELEMETRY_CAPACITY = 50
DEFAULT_TARGET_SPEED = 50.0
DEFAULT_SCENARIO_DURATION = 10.0
MAX_STEERING_ANGLE = 45.0
MAX_TARGET_SPEED = 120.0


@dataclass(frozen=True)
class SimulationConfig:
    """Driver loop controls, independent of physical car data.

    Args:
        tick_interval: Wall-clock interval between ticks in real-time mode [s].
        telemetry_capacity: Number of trailing telemetry points retained.
    """

    tick_interval: float = DEFAULT_TICK_INTERVAL
    telemetry_capacity: int = DEFAULT_TELEMETRY_CAPACITY

    def validate(self) -> None:
        """Validate driver loop settings.

        Raises:
            virtualdiff.utils.exceptions.ConfigurationError: If any driver
                setting violates its bound.
        """
        if self.tick_interval <= 0.0:
            msg = "tick_interval must be positive"
            raise ConfigurationError(msg)
        if self.telemetry_capacity < 1:
            msg = "telemetry_capacity must be at least 1"
            raise ConfigurationError(msg)


def build_simulation_config(
    tick_interval: float = DEFAULT_TICK_INTERVAL,
    telemetry_capacity: int = DEFAULT_TELEMETRY_CAPACITY,
) -> SimulationConfig:
    """Build a validated driver configuration.

    Args:
        tick_interval: Wall-clock interval between ticks in real-time mode [s].
        telemetry_capacity: Number of trailing telemetry points retained.

    Returns:
        Fully validated simulation configuration.

    Raises:
        virtualdiff.utils.exceptions.ConfigurationError: If any driver setting
            violates its bound.
    """
    config = SimulationConfig(
        tick_interval=tick_interval,
        telemetry_capacity=telemetry_capacity,
    )
    config.validate()
    return config


@dataclass(frozen=True)
class DrivingScenario:
    """Constant driver inputs held for a fixed simulated duration.

    Args:
        steering_angle: Steering angle [deg], positive for a right turn.
        target_speed: Cruise target speed [km/h].
        diff_mode: Differential operating mode.
        surface: Road surface preset.
        duration: Simulated duration [s].
    """

    steering_angle: float = 0.0
    target_speed: float = DEFAULT_TARGET_SPEED
    diff_mode: DiffMode = DiffMode.OPEN
    surface: SurfaceType = SurfaceType.DRY
    duration: float = DEFAULT_SCENARIO_DURATION

    def tick_count(self, time_step: float) -> int:
        """Number of stepper ticks needed to cover the scenario duration.

        Args:
            time_step: Stepper integration step [s].

        Returns:
            Tick count, at least one.
        """
        return max(int(round(self.duration / time_step)), 1)

    def validate(self) -> None:
        """Validate scenario inputs against the control domains.

        Raises:
            virtualdiff.utils.exceptions.ConfigurationError: If an input lies
                outside its domain or names an unknown mode or surface.
        """
        if not -MAX_STEERING_ANGLE <= self.steering_angle <= MAX_STEERING_ANGLE:
            msg = f"steering_angle must be between {-MAX_STEERING_ANGLE} and {MAX_STEERING_ANGLE}"
            raise ConfigurationError(msg)
        if not 0.0 <= self.target_speed <= MAX_TARGET_SPEED:
            msg = f"target_speed must be between 0 and {MAX_TARGET_SPEED} km/h"
            raise ConfigurationError(msg)
        if self.duration <= 0.0:
            msg = "duration must be positive"
            raise ConfigurationError(msg)
        parse_diff_mode(self.diff_mode)
        parse_surface_type(self.surface)

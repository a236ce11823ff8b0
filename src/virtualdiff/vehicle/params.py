"""Physical parameter definitions for the rear-axle differential model."""

from __future__ import annotations

from dataclasses import dataclass

from virtualdiff.utils.constants import GRAVITY
from virtualdiff.utils.exceptions import ConfigurationError

DEFAULT_MASS = 1500.0
DEFAULT_WHEELBASE = 2.7
DEFAULT_TRACK_WIDTH = 1.6
DEFAULT_MAX_TORQUE = 600.0
DEFAULT_TIME_STEP = 0.016
DEFAULT_AIR_RESISTANCE = 0.3
DEFAULT_TIRE_RADIUS = 0.3
DEFAULT_POSITION_SCALE = 10.0


@dataclass(frozen=True)
class PhysicsConstants:
    """Vehicle and integration constants for the differential stepper.

    Args:
        mass: Vehicle mass [kg].
        wheelbase: Wheelbase [m].
        track_width: Rear track width [m].
        max_torque: Total drive torque available at full throttle [N*m].
        time_step: Integration step per tick [s].
        air_resistance: Quadratic drag coefficient [N*s^2/m^2].
        tire_radius: Rolling radius of the driven wheels [m].
        gravity: Gravitational acceleration [m/s^2].
        position_scale: Visual units per meter used for position output.
    """

    mass: float = DEFAULT_MASS
    wheelbase: float = DEFAULT_WHEELBASE
    track_width: float = DEFAULT_TRACK_WIDTH
    max_torque: float = DEFAULT_MAX_TORQUE
    time_step: float = DEFAULT_TIME_STEP
    air_resistance: float = DEFAULT_AIR_RESISTANCE
    tire_radius: float = DEFAULT_TIRE_RADIUS
    gravity: float = GRAVITY
    position_scale: float = DEFAULT_POSITION_SCALE

    @property
    def static_wheel_load(self) -> float:
        """Static normal load carried by one wheel.

        Returns:
            Quarter of the vehicle weight [N].
        """
        return self.mass * self.gravity / 4.0

    def validate(self) -> None:
        """Validate configuration values before simulation.

        Raises:
            virtualdiff.utils.exceptions.ConfigurationError: If any constant
                violates its defined bound.
        """
        if self.mass <= 0.0:
            msg = "mass must be positive"
            raise ConfigurationError(msg)
        if self.wheelbase <= 0.0:
            msg = "wheelbase must be positive"
            raise ConfigurationError(msg)
        if self.track_width <= 0.0:
            msg = "track_width must be positive"
            raise ConfigurationError(msg)
        if self.max_torque < 0.0:
            msg = "max_torque must be non-negative"
            raise ConfigurationError(msg)
        if self.time_step <= 0.0:
            msg = "time_step must be positive"
            raise ConfigurationError(msg)
        if self.air_resistance < 0.0:
            msg = "air_resistance must be non-negative"
            raise ConfigurationError(msg)
        if self.tire_radius <= 0.0:
            msg = "tire_radius must be positive"
            raise ConfigurationError(msg)
        if self.gravity <= 0.0:
            msg = "gravity must be positive"
            raise ConfigurationError(msg)
        if self.position_scale <= 0.0:
            msg = "position_scale must be positive"
            raise ConfigurationError(msg)


def default_physics_constants() -> PhysicsConstants:
    """Create the reference rear-wheel-drive passenger car parameterization.

    Returns:
        Validated constants for a 1500 kg car with a 600 N*m drive unit.
    """
    constants = PhysicsConstants()
    constants.validate()
    return constants

"""State and control containers exchanged with the differential stepper."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from virtualdiff.utils.constants import KMH_PER_MS
from virtualdiff.utils.exceptions import ConfigurationError


class DiffMode(str, Enum):
    """Rear differential operating mode."""

    OPEN = "OPEN"
    LOCKED = "LOCKED"
    ADAPTIVE = "ADAPTIVE"


def parse_diff_mode(value: DiffMode | str) -> DiffMode:
    """Resolve a differential mode from an enum member or its name.

    Args:
        value: ``DiffMode`` member or case-insensitive mode name.

    Returns:
        Matching differential mode.

    Raises:
        virtualdiff.utils.exceptions.ConfigurationError: If ``value`` does not
            name one of the known modes.
    """
    if isinstance(value, DiffMode):
        return value
    try:
        return DiffMode(str(value).upper())
    except ValueError as exc:
        valid = tuple(mode.value for mode in DiffMode)
        msg = f"diff_mode must be one of {valid}, got: {value!r}"
        raise ConfigurationError(msg) from exc


@dataclass(frozen=True)
class VehicleState:
    """Vehicle state produced by one stepper tick.

    Args:
        x: Longitudinal world position [visual units].
        y: Lateral world position [visual units].
        heading: Accumulated orientation angle [rad].
        speed: Forward speed [m/s].
        yaw_rate: Yaw rate, positive for right turns [rad/s].
        slip_left: Left driven wheel slip ratio in ``[0, 1]``.
        slip_right: Right driven wheel slip ratio in ``[0, 1]``.
        torque_left: Drive torque delivered to the left wheel [N*m].
        torque_right: Drive torque delivered to the right wheel [N*m].
        rpm_left: Displayed left wheel speed [rpm].
        rpm_right: Displayed right wheel speed [rpm].
        locking_ratio: Differential lock fraction in ``[0, 1]``.
        lateral_g: Lateral acceleration magnitude [g].
    """

    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0
    speed: float = 0.0
    yaw_rate: float = 0.0
    slip_left: float = 0.0
    slip_right: float = 0.0
    torque_left: float = 0.0
    torque_right: float = 0.0
    rpm_left: float = 0.0
    rpm_right: float = 0.0
    locking_ratio: float = 0.0
    lateral_g: float = 0.0

    @property
    def speed_kmh(self) -> float:
        """Forward speed in display units.

        Returns:
            Speed [km/h].
        """
        return self.speed * KMH_PER_MS

    @property
    def heading_degrees(self) -> float:
        """Heading wrapped for display.

        Returns:
            Heading angle in ``[0, 360)`` degrees.
        """
        return float(np.rad2deg(self.heading) % 360.0)

    @property
    def wheel_speed_difference(self) -> float:
        """Right minus left displayed wheel speed.

        Returns:
            Wheel speed difference [rpm].
        """
        return self.rpm_right - self.rpm_left

    def to_array(self) -> np.ndarray:
        """Convert the state to a flat vector in field order.

        Returns:
            State vector of length ``len(STATE_FIELDS)``.
        """
        return np.array([getattr(self, name) for name in STATE_FIELDS], dtype=float)


STATE_FIELDS = (
    "x",
    "y",
    "heading",
    "speed",
    "yaw_rate",
    "slip_left",
    "slip_right",
    "torque_left",
    "torque_right",
    "rpm_left",
    "rpm_right",
    "locking_ratio",
    "lateral_g",
)


def initial_vehicle_state() -> VehicleState:
    """Create the all-zero state used at simulation start.

    Returns:
        Vehicle at rest at the origin, heading along ``+x``.
    """
    return VehicleState()


@dataclass(frozen=True)
class ControlInput:
    """Control and environment inputs for one stepper tick.

    Args:
        steering_angle: Steering angle [deg], positive for a right turn.
        throttle: Throttle fraction in ``[0, 1]``.
        surface_friction: Tire-road friction coefficient ``mu`` (-).
        diff_mode: Differential operating mode.
        target_speed: Cruise target speed [km/h].
    """

    steering_angle: float
    throttle: float
    surface_friction: float
    diff_mode: DiffMode
    target_speed: float

    @property
    def target_speed_ms(self) -> float:
        """Cruise target speed in SI units.

        Returns:
            Target speed [m/s].
        """
        return self.target_speed / KMH_PER_MS

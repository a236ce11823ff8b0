"""Quasi-static rear-axle load transfer and traction limits."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from virtualdiff.utils.constants import SMALL_EPS
from virtualdiff.vehicle.params import PhysicsConstants

# Bias added to the steering angle so a centered wheel never yields tan(0).
STEERING_ANGLE_BIAS = 0.001


@dataclass(frozen=True)
class WheelLoads:
    """Left/right driven-wheel normal loads.

    Args:
        left: Left wheel normal load [N]. May be negative under extreme transfer.
        right: Right wheel normal load [N]. May be negative under extreme transfer.
    """

    left: float
    right: float

    @property
    def locked_share_left(self) -> float:
        """Left share of a load-proportional torque split.

        Loads are floored at zero before the share is formed, so the share
        always lies in ``[0, 1]``.

        Returns:
            Fraction of axle torque sent to the left wheel.
        """
        left = max(self.left, 0.0)
        right = max(self.right, 0.0)
        total = left + right
        if total <= 0.0:
            return 0.5
        return left / total


@dataclass(frozen=True)
class TractionLimits:
    """Coulomb traction bound per driven wheel.

    Args:
        left: Maximum transmissible left wheel force [N].
        right: Maximum transmissible right wheel force [N].
    """

    left: float
    right: float


def turn_radius(steering_angle: float, constants: PhysicsConstants) -> float:
    """Compute the kinematic turn radius for a steering angle.

    Args:
        steering_angle: Steering angle [deg].
        constants: Vehicle constants providing the wheelbase.

    Returns:
        Positive, finite turn radius [m].
    """
    tangent = np.tan(np.deg2rad(steering_angle) + STEERING_ANGLE_BIAS)
    return float(constants.wheelbase / max(abs(tangent), SMALL_EPS))


def estimate_wheel_loads(
    steering_angle: float,
    speed: float,
    constants: PhysicsConstants,
) -> WheelLoads:
    """Estimate driven-wheel loads with single-moment-arm lateral transfer.

    A right turn (positive steering) moves load onto the left, outer wheel and
    a left turn onto the right wheel. With the wheel exactly centered no load
    is transferred.

    Args:
        steering_angle: Steering angle [deg].
        speed: Forward speed [m/s].
        constants: Vehicle constants.

    Returns:
        Left and right wheel normal loads [N].
    """
    radius = turn_radius(steering_angle, constants)
    centrifugal_force = constants.mass * speed**2 / radius
    transfer = centrifugal_force * (constants.track_width / 2.0) / constants.wheelbase
    direction = float(np.sign(steering_angle))
    static_load = constants.static_wheel_load
    return WheelLoads(
        left=static_load + direction * transfer,
        right=static_load - direction * transfer,
    )


def traction_limits(loads: WheelLoads, surface_friction: float) -> TractionLimits:
    """Convert wheel loads to linear Coulomb traction bounds.

    Args:
        loads: Driven-wheel normal loads [N].
        surface_friction: Tire-road friction coefficient ``mu`` (-).

    Returns:
        Non-negative traction limit per wheel [N].
    """
    return TractionLimits(
        left=max(0.0, loads.left * surface_friction),
        right=max(0.0, loads.right * surface_friction),
    )

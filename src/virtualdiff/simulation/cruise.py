"""Bang-bang cruise control that turns a target speed into a throttle command."""

from __future__ import annotations

from virtualdiff.utils.constants import KMH_PER_MS

FULL_THROTTLE = 1.0
PARTIAL_THROTTLE = 0.3
FULL_THROTTLE_SPEED_ERROR = 2.0


def cruise_control_throttle(speed: float, target_speed: float) -> float:
    """Select a throttle level from the current speed error.

    Args:
        speed: Current forward speed [m/s].
        target_speed: Cruise target speed [km/h].

    Returns:
        Full throttle when more than 2 km/h below target, partial throttle when
        just below it, and zero (coasting) at or above it.
    """
    speed_error = target_speed - speed * KMH_PER_MS
    if speed_error > FULL_THROTTLE_SPEED_ERROR:
        return FULL_THROTTLE
    if speed_error > 0.0:
        return PARTIAL_THROTTLE
    return 0.0

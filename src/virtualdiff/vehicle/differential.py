"""Rear differential torque distribution for open, locked and adaptive modes."""

from __future__ import annotations

from dataclasses import dataclass

from virtualdiff.utils.exceptions import ConfigurationError
from virtualdiff.vehicle.load_transfer import TractionLimits, WheelLoads
from virtualdiff.vehicle.state import DiffMode

OPEN_SPLIT = 0.5
OPEN_OVERSPEED_ALLOWANCE = 1.5

ADAPTIVE_PRELOAD = 0.1
ADAPTIVE_CORNER_BASE_LOCK = 0.3
ADAPTIVE_CORNER_LOCK_GAIN = 0.4
ADAPTIVE_STEERING_THRESHOLD = 5.0
ADAPTIVE_THROTTLE_THRESHOLD = 0.1
ADAPTIVE_FULL_SCALE_STEERING = 45.0
ADAPTIVE_FULL_SCALE_SPEED = 10.0
ADAPTIVE_LOW_GRIP_FRICTION = 0.5
ADAPTIVE_LOW_GRIP_MAX_LOCK = 0.5


@dataclass(frozen=True)
class TorqueSplit:
    """Drive torque delivered to each rear wheel.

    Args:
        left: Left wheel drive torque [N*m].
        right: Right wheel drive torque [N*m].
        locking_ratio: Differential lock fraction in ``[0, 1]``.
    """

    left: float
    right: float
    locking_ratio: float

    @property
    def total(self) -> float:
        """Total delivered axle torque.

        Returns:
            Sum of left and right torque [N*m].
        """
        return self.left + self.right


def adaptive_locking_ratio(
    steering_angle: float,
    throttle: float,
    speed: float,
    surface_friction: float,
) -> float:
    """Select the electronic differential lock for the current driving situation.

    The lock stays at a light preload unless the car is both cornering and on
    power, where it rises with steering angle and speed. Low-grip surfaces cap
    the lock to keep the rear from stepping out.

    Args:
        steering_angle: Steering angle [deg].
        throttle: Throttle fraction in ``[0, 1]``.
        speed: Forward speed [m/s].
        surface_friction: Tire-road friction coefficient ``mu`` (-).

    Returns:
        Target locking ratio in ``[0, 1]``.
    """
    steering = abs(steering_angle)
    if steering <= ADAPTIVE_STEERING_THRESHOLD or throttle <= ADAPTIVE_THROTTLE_THRESHOLD:
        return ADAPTIVE_PRELOAD

    steer_factor = steering / ADAPTIVE_FULL_SCALE_STEERING
    speed_factor = min(speed / ADAPTIVE_FULL_SCALE_SPEED, 1.0)
    target_lock = ADAPTIVE_CORNER_BASE_LOCK + steer_factor * ADAPTIVE_CORNER_LOCK_GAIN * speed_factor
    if surface_friction < ADAPTIVE_LOW_GRIP_FRICTION:
        target_lock = min(target_lock, ADAPTIVE_LOW_GRIP_MAX_LOCK)
    return min(max(target_lock, 0.0), 1.0)


def _open_split(total_torque: float, traction: TractionLimits) -> TorqueSplit:
    """Equalize torque, capped by the weaker wheel with an overspeed allowance.

    Args:
        total_torque: Requested axle torque [N*m].
        traction: Traction limit per wheel [N].

    Returns:
        Equal left/right torque with zero lock.
    """
    limit = OPEN_OVERSPEED_ALLOWANCE * min(traction.left, traction.right)
    per_wheel = min(total_torque * OPEN_SPLIT, limit)
    return TorqueSplit(left=per_wheel, right=per_wheel, locking_ratio=0.0)


def _locked_split(total_torque: float, loads: WheelLoads) -> TorqueSplit:
    """Split torque in proportion to wheel load.

    Args:
        total_torque: Requested axle torque [N*m].
        loads: Driven-wheel normal loads [N].

    Returns:
        Load-proportional torque with full lock.
    """
    share_left = loads.locked_share_left
    return TorqueSplit(
        left=total_torque * share_left,
        right=total_torque * (1.0 - share_left),
        locking_ratio=1.0,
    )


def _adaptive_split(total_torque: float, loads: WheelLoads, locking_ratio: float) -> TorqueSplit:
    """Blend the even split and the load-proportional split by the lock.

    Args:
        total_torque: Requested axle torque [N*m].
        loads: Driven-wheel normal loads [N].
        locking_ratio: Lock fraction used as blend weight.

    Returns:
        Blended torque split carrying ``locking_ratio``.
    """
    split_left = (1.0 - locking_ratio) * OPEN_SPLIT + locking_ratio * loads.locked_share_left
    return TorqueSplit(
        left=total_torque * split_left,
        right=total_torque * (1.0 - split_left),
        locking_ratio=locking_ratio,
    )


def distribute_torque(
    diff_mode: DiffMode,
    total_torque: float,
    loads: WheelLoads,
    traction: TractionLimits,
    *,
    steering_angle: float,
    throttle: float,
    speed: float,
    surface_friction: float,
) -> TorqueSplit:
    """Distribute requested axle torque according to the differential mode.

    Args:
        diff_mode: Differential operating mode.
        total_torque: Requested axle torque [N*m].
        loads: Driven-wheel normal loads [N].
        traction: Traction limit per wheel [N].
        steering_angle: Steering angle [deg], used by the adaptive controller.
        throttle: Throttle fraction, used by the adaptive controller.
        speed: Forward speed [m/s], used by the adaptive controller.
        surface_friction: Friction coefficient, used by the adaptive controller.

    Returns:
        Per-wheel torque and resulting locking ratio.

    Raises:
        virtualdiff.utils.exceptions.ConfigurationError: If ``diff_mode`` is
            not a known differential mode.
    """
    if diff_mode == DiffMode.OPEN:
        return _open_split(total_torque, traction)
    if diff_mode == DiffMode.LOCKED:
        return _locked_split(total_torque, loads)
    if diff_mode == DiffMode.ADAPTIVE:
        locking_ratio = adaptive_locking_ratio(
            steering_angle=steering_angle,
            throttle=throttle,
            speed=speed,
            surface_friction=surface_friction,
        )
        return _adaptive_split(total_torque, loads, locking_ratio)

    valid = tuple(mode.value for mode in DiffMode)
    msg = f"diff_mode must be one of {valid}, got: {diff_mode!r}"
    raise ConfigurationError(msg)

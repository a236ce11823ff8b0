"""Per-tick vehicle-state update for the rear-axle differential model."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from virtualdiff.vehicle.differential import TorqueSplit, distribute_torque
from virtualdiff.vehicle.load_transfer import (
    TractionLimits,
    estimate_wheel_loads,
    traction_limits,
    turn_radius,
)
from virtualdiff.vehicle.params import PhysicsConstants, default_physics_constants
from virtualdiff.vehicle.state import ControlInput, DiffMode, VehicleState

SLIP_DENOMINATOR_OFFSET = 1.0
COAST_DECAY = 0.98
MIN_LATERAL_RADIUS = 1.0
RAD_PER_S_TO_RPM = 60.0 / (2.0 * np.pi)

LOCKED_UNDERSTEER_THRESHOLD = 10.0
LOCKED_STEERING_SCALE = 0.7
OPEN_SPIN_SLIP_THRESHOLD = 0.5
OPEN_STEERING_SCALE = 0.8
ADAPTIVE_VECTORING_SCALE = 1.1


@dataclass(frozen=True)
class WheelSlip:
    """Slip ratio and propulsive force per driven wheel.

    Args:
        slip_left: Left wheel slip ratio in ``[0, 1]``.
        slip_right: Right wheel slip ratio in ``[0, 1]``.
        force_left: Traction-capped left propulsive force [N].
        force_right: Traction-capped right propulsive force [N].
    """

    slip_left: float
    slip_right: float
    force_left: float
    force_right: float


def resolve_wheel_slip(torque: TorqueSplit, traction: TractionLimits) -> WheelSlip:
    """Resolve slip and propulsive force from torque demand and traction.

    Args:
        torque: Per-wheel drive torque [N*m].
        traction: Traction limit per wheel [N].

    Returns:
        Slip ratios and propulsive forces per wheel.
    """
    excess_left = max(0.0, torque.left - traction.left)
    excess_right = max(0.0, torque.right - traction.right)
    return WheelSlip(
        slip_left=min(1.0, excess_left / (traction.left + SLIP_DENOMINATOR_OFFSET)),
        slip_right=min(1.0, excess_right / (traction.right + SLIP_DENOMINATOR_OFFSET)),
        force_left=min(torque.left, traction.left),
        force_right=min(torque.right, traction.right),
    )


def integrate_speed(
    speed: float,
    propulsive_force: float,
    control: ControlInput,
    constants: PhysicsConstants,
) -> float:
    """Advance forward speed by one time step.

    Throttle never pushes speed past the cruise target, but coasting and drag
    may still slow the car below it.

    Args:
        speed: Current forward speed [m/s].
        propulsive_force: Sum of traction-capped wheel forces [N].
        control: Current control input.
        constants: Vehicle constants.

    Returns:
        Non-negative forward speed after the step [m/s].
    """
    drag = constants.air_resistance * speed**2
    acceleration = (propulsive_force - drag) / constants.mass
    new_speed = speed + acceleration * constants.time_step
    if control.throttle == 0.0:
        new_speed *= COAST_DECAY
    target_speed = control.target_speed_ms
    if control.throttle > 0.0 and new_speed > target_speed:
        new_speed = target_speed
    return max(0.0, new_speed)


def effective_steering(
    steering_angle: float,
    diff_mode: DiffMode,
    torque: TorqueSplit,
    slip: WheelSlip,
) -> float:
    """Apply differential-dependent understeer or turn-in to the steering angle.

    Args:
        steering_angle: Driver steering angle [deg].
        diff_mode: Differential operating mode.
        torque: Per-wheel drive torque [N*m].
        slip: Per-wheel slip state.

    Returns:
        Effective steering angle [rad].
    """
    steering = float(np.deg2rad(steering_angle))
    if diff_mode == DiffMode.LOCKED:
        if abs(steering_angle) > LOCKED_UNDERSTEER_THRESHOLD:
            steering *= LOCKED_STEERING_SCALE
    elif diff_mode == DiffMode.OPEN:
        if max(slip.slip_left, slip.slip_right) > OPEN_SPIN_SLIP_THRESHOLD:
            steering *= OPEN_STEERING_SCALE
    elif diff_mode == DiffMode.ADAPTIVE:
        # The left wheel is outer in a right turn.
        if steering_angle > 0.0:
            outer_bias = torque.left - torque.right
        else:
            outer_bias = torque.right - torque.left
        if outer_bias > 0.0:
            steering *= ADAPTIVE_VECTORING_SCALE
    return steering


def step(
    state: VehicleState,
    control: ControlInput,
    constants: PhysicsConstants | None = None,
) -> VehicleState:
    """Advance the vehicle by one fixed time step.

    The update is a pure function of its arguments: ``state`` is never mutated
    and the returned state is a new value.

    Args:
        state: Vehicle state of the previous tick.
        control: Control and surface inputs for this tick.
        constants: Vehicle constants. Defaults to
            :func:`virtualdiff.vehicle.params.default_physics_constants`.

    Returns:
        Vehicle state after one time step.

    Raises:
        virtualdiff.utils.exceptions.ConfigurationError: If
            ``control.diff_mode`` is not a known differential mode.
    """
    constants = constants or default_physics_constants()
    dt = constants.time_step

    radius = turn_radius(control.steering_angle, constants)
    loads = estimate_wheel_loads(control.steering_angle, state.speed, constants)
    traction = traction_limits(loads, control.surface_friction)

    torque = distribute_torque(
        control.diff_mode,
        control.throttle * constants.max_torque,
        loads,
        traction,
        steering_angle=control.steering_angle,
        throttle=control.throttle,
        speed=state.speed,
        surface_friction=control.surface_friction,
    )
    slip = resolve_wheel_slip(torque, traction)

    new_speed = integrate_speed(
        state.speed,
        slip.force_left + slip.force_right,
        control,
        constants,
    )
    steering = effective_steering(control.steering_angle, control.diff_mode, torque, slip)
    new_yaw_rate = float(new_speed * np.tan(steering) / constants.wheelbase)

    new_heading = state.heading + new_yaw_rate * dt
    travel = new_speed * dt * constants.position_scale
    wheel_rpm = new_speed / constants.tire_radius * RAD_PER_S_TO_RPM

    return VehicleState(
        x=float(state.x + np.cos(new_heading) * travel),
        y=float(state.y + np.sin(new_heading) * travel),
        heading=new_heading,
        speed=new_speed,
        yaw_rate=new_yaw_rate,
        slip_left=slip.slip_left,
        slip_right=slip.slip_right,
        torque_left=torque.left,
        torque_right=torque.right,
        rpm_left=float(wheel_rpm * (1.0 + slip.slip_left)),
        rpm_right=float(wheel_rpm * (1.0 + slip.slip_right)),
        locking_ratio=torque.locking_ratio,
        lateral_g=float(new_speed**2 / max(radius, MIN_LATERAL_RADIUS) / constants.gravity),
    )

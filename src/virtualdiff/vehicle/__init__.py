"""Rear-axle vehicle model: parameters, state, load transfer and differential."""

from virtualdiff.vehicle.differential import (
    TorqueSplit,
    adaptive_locking_ratio,
    distribute_torque,
)
from virtualdiff.vehicle.dynamics import (
    WheelSlip,
    effective_steering,
    integrate_speed,
    resolve_wheel_slip,
    step,
)
from virtualdiff.vehicle.load_transfer import (
    TractionLimits,
    WheelLoads,
    estimate_wheel_loads,
    traction_limits,
    turn_radius,
)
from virtualdiff.vehicle.params import PhysicsConstants, default_physics_constants
from virtualdiff.vehicle.state import (
    ControlInput,
    DiffMode,
    VehicleState,
    initial_vehicle_state,
    parse_diff_mode,
)

__all__ = [
    "ControlInput",
    "DiffMode",
    "PhysicsConstants",
    "TorqueSplit",
    "TractionLimits",
    "VehicleState",
    "WheelLoads",
    "WheelSlip",
    "adaptive_locking_ratio",
    "default_physics_constants",
    "distribute_torque",
    "effective_steering",
    "estimate_wheel_loads",
    "initial_vehicle_state",
    "integrate_speed",
    "parse_diff_mode",
    "resolve_wheel_slip",
    "step",
    "traction_limits",
    "turn_radius",
]

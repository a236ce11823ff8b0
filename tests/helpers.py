"""Shared test helpers."""

from __future__ import annotations

from virtualdiff.vehicle import (
    ControlInput,
    DiffMode,
    PhysicsConstants,
    VehicleState,
    step,
)


def sample_physics_constants() -> PhysicsConstants:
    """Create the reference rear-wheel-drive car used across tests.

    Returns:
        Physics constants for a 1500 kg, 600 N*m car on a 16 ms step.
    """
    return PhysicsConstants(
        mass=1500.0,
        wheelbase=2.7,
        track_width=1.6,
        max_torque=600.0,
        time_step=0.016,
        air_resistance=0.3,
        tire_radius=0.3,
        gravity=9.81,
        position_scale=10.0,
    )


def sample_control(**overrides: object) -> ControlInput:
    """Create a straight-line, full-throttle control input on dry tarmac.

    Args:
        **overrides: Field values replacing the defaults.

    Returns:
        Control input with overrides applied.
    """
    values: dict[str, object] = {
        "steering_angle": 0.0,
        "throttle": 1.0,
        "surface_friction": 1.0,
        "diff_mode": DiffMode.OPEN,
        "target_speed": 50.0,
    }
    values.update(overrides)
    return ControlInput(**values)  # type: ignore[arg-type]


def run_ticks(
    state: VehicleState,
    control: ControlInput,
    ticks: int,
    constants: PhysicsConstants | None = None,
) -> list[VehicleState]:
    """Apply the stepper repeatedly with constant control.

    Args:
        state: Start state.
        control: Control input held for every tick.
        ticks: Number of ticks.
        constants: Vehicle constants. Defaults to the sample car.

    Returns:
        States produced by each tick, in order.
    """
    constants = constants or sample_physics_constants()
    states = []
    for _ in range(ticks):
        state = step(state, control, constants)
        states.append(state)
    return states

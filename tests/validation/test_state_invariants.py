"""Validation of stepper output bounds over randomized inputs."""

from __future__ import annotations

import unittest

import numpy as np

from tests.helpers import run_ticks, sample_control, sample_physics_constants
from virtualdiff.vehicle import DiffMode, VehicleState, initial_vehicle_state, step
from virtualdiff.vehicle.load_transfer import STEERING_ANGLE_BIAS

SAMPLE_COUNT = 600


class StateInvariantTests(unittest.TestCase):
    """Bounds that must hold for every reachable state."""

    def assert_state_within_bounds(self, state: VehicleState) -> None:
        """Check finiteness and domain bounds of every state field.

        Args:
            state: Vehicle state to check.
        """
        self.assertTrue(np.all(np.isfinite(state.to_array())), msg=str(state))
        self.assertGreaterEqual(state.speed, 0.0)
        self.assertGreaterEqual(state.slip_left, 0.0)
        self.assertLessEqual(state.slip_left, 1.0)
        self.assertGreaterEqual(state.slip_right, 0.0)
        self.assertLessEqual(state.slip_right, 1.0)
        self.assertGreaterEqual(state.locking_ratio, 0.0)
        self.assertLessEqual(state.locking_ratio, 1.0)
        self.assertGreaterEqual(state.torque_left, 0.0)
        self.assertGreaterEqual(state.torque_right, 0.0)
        self.assertGreaterEqual(state.rpm_left, 0.0)
        self.assertGreaterEqual(state.rpm_right, 0.0)
        self.assertGreaterEqual(state.lateral_g, 0.0)

    def test_random_single_steps_stay_within_bounds(self) -> None:
        """Keep all fields finite and bounded for random states and controls."""
        rng = np.random.default_rng(20240611)
        constants = sample_physics_constants()
        modes = tuple(DiffMode)
        for _ in range(SAMPLE_COUNT):
            start = VehicleState(
                x=float(rng.uniform(-1e4, 1e4)),
                y=float(rng.uniform(-1e4, 1e4)),
                heading=float(rng.uniform(-50.0, 50.0)),
                speed=float(rng.uniform(0.0, 60.0)),
                yaw_rate=float(rng.uniform(-3.0, 3.0)),
            )
            control = sample_control(
                steering_angle=float(rng.uniform(-45.0, 45.0)),
                throttle=float(rng.uniform(0.0, 1.0)),
                surface_friction=float(rng.uniform(0.01, 1.5)),
                diff_mode=modes[int(rng.integers(len(modes)))],
                target_speed=float(rng.uniform(0.0, 200.0)),
            )
            self.assert_state_within_bounds(step(start, control, constants))

    def test_bias_cancelling_steering_angle_stays_finite(self) -> None:
        """Produce finite output when the steering bias cancels the angle exactly."""
        steering = -float(np.rad2deg(STEERING_ANGLE_BIAS))
        for mode in DiffMode:
            state = step(
                VehicleState(speed=30.0),
                sample_control(steering_angle=steering, diff_mode=mode),
                sample_physics_constants(),
            )
            self.assert_state_within_bounds(state)

    def test_long_runs_stay_within_bounds_on_every_surface(self) -> None:
        """Keep bounds over a long tight-corner run on dry, wet and snow."""
        for friction in (1.0, 0.6, 0.3):
            for mode in DiffMode:
                control = sample_control(
                    steering_angle=40.0,
                    surface_friction=friction,
                    diff_mode=mode,
                    target_speed=120.0,
                )
                for state in run_ticks(initial_vehicle_state(), control, 1500):
                    self.assert_state_within_bounds(state)


if __name__ == "__main__":
    unittest.main()

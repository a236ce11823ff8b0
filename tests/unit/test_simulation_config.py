"""Unit tests for driver loop and scenario configuration."""

from __future__ import annotations

import unittest

from virtualdiff.simulation import DrivingScenario, SimulationConfig, build_simulation_config
from virtualdiff.surface import SurfaceType
from virtualdiff.utils.exceptions import ConfigurationError
from virtualdiff.vehicle import DiffMode


class SimulationConfigTests(unittest.TestCase):
    """Driver loop configuration validation."""

    def test_defaults(self) -> None:
        """Tick every 16 ms and keep the last 50 telemetry points."""
        config = build_simulation_config()
        self.assertEqual(config, SimulationConfig(tick_interval=0.016, telemetry_capacity=50))

    def test_invalid_values_raise(self) -> None:
        """Reject non-positive tick intervals and empty telemetry windows."""
        with self.assertRaises(ConfigurationError):
            build_simulation_config(tick_interval=0.0)
        with self.assertRaises(ConfigurationError):
            build_simulation_config(telemetry_capacity=0)


class DrivingScenarioTests(unittest.TestCase):
    """Scenario validation and derived values."""

    def test_tick_count_covers_duration(self) -> None:
        """Round the duration to whole ticks with at least one tick."""
        self.assertEqual(DrivingScenario(duration=10.0).tick_count(0.016), 625)
        self.assertEqual(DrivingScenario(duration=0.001).tick_count(0.016), 1)

    def test_valid_scenario_passes(self) -> None:
        """Accept inputs at the edges of their domains and mode names."""
        DrivingScenario(steering_angle=-45.0, target_speed=0.0).validate()
        DrivingScenario(steering_angle=45.0, target_speed=120.0).validate()
        DrivingScenario(diff_mode="adaptive", surface="snow").validate()  # type: ignore[arg-type]

    def test_invalid_scenarios_raise(self) -> None:
        """Reject inputs outside the control domains."""
        invalid = (
            DrivingScenario(steering_angle=46.0),
            DrivingScenario(target_speed=-1.0),
            DrivingScenario(target_speed=121.0),
            DrivingScenario(duration=0.0),
            DrivingScenario(diff_mode="viscous"),  # type: ignore[arg-type]
            DrivingScenario(surface="sand"),  # type: ignore[arg-type]
        )
        for scenario in invalid:
            with self.subTest(scenario=scenario), self.assertRaises(ConfigurationError):
                scenario.validate()

    def test_defaults(self) -> None:
        """Drive straight at 50 km/h with an open differential on dry tarmac."""
        scenario = DrivingScenario()
        self.assertEqual(scenario.steering_angle, 0.0)
        self.assertEqual(scenario.target_speed, 50.0)
        self.assertIs(scenario.diff_mode, DiffMode.OPEN)
        self.assertIs(scenario.surface, SurfaceType.DRY)


if __name__ == "__main__":
    unittest.main()

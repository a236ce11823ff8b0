"""Unit tests for the trailing telemetry window."""

from __future__ import annotations

import unittest

import numpy as np

from virtualdiff.simulation import TelemetryPoint, TelemetryRecorder
from virtualdiff.simulation.telemetry import TELEMETRY_CHANNELS
from virtualdiff.utils.exceptions import ConfigurationError
from virtualdiff.vehicle import VehicleState


class TelemetryRecorderTests(unittest.TestCase):
    """FIFO behavior of the telemetry recorder."""

    def test_record_samples_state_channels(self) -> None:
        """Copy yaw rate, wheel slip and lock from the sampled state."""
        recorder = TelemetryRecorder()
        state = VehicleState(yaw_rate=0.4, slip_left=0.1, slip_right=0.2, locking_ratio=0.5)
        point = recorder.record(1.5, state)
        self.assertEqual(point, TelemetryPoint(1.5, 0.4, 0.1, 0.2, 0.5))
        self.assertIs(recorder.latest, point)

    def test_oldest_points_are_evicted_at_capacity(self) -> None:
        """Keep only the newest ``capacity`` points, oldest first."""
        recorder = TelemetryRecorder(capacity=50)
        for idx in range(75):
            recorder.record(float(idx), VehicleState(yaw_rate=float(idx)))
        self.assertEqual(len(recorder), 50)
        self.assertEqual(recorder.capacity, 50)
        self.assertEqual(recorder.points[0].time, 25.0)
        self.assertEqual(recorder.points[-1].time, 74.0)

    def test_clear_empties_window(self) -> None:
        """Drop every point and report no latest sample."""
        recorder = TelemetryRecorder(capacity=3)
        recorder.record(0.0, VehicleState())
        recorder.clear()
        self.assertEqual(len(recorder), 0)
        self.assertIsNone(recorder.latest)

    def test_as_arrays_returns_one_array_per_channel(self) -> None:
        """Expose the window as numeric arrays for plotting."""
        recorder = TelemetryRecorder(capacity=4)
        for idx in range(6):
            recorder.record(0.1 * idx, VehicleState(locking_ratio=0.1 * idx))
        arrays = recorder.as_arrays()
        self.assertEqual(tuple(arrays), TELEMETRY_CHANNELS)
        np.testing.assert_allclose(arrays["time"], [0.2, 0.3, 0.4, 0.5])
        np.testing.assert_allclose(arrays["locking_ratio"], [0.2, 0.3, 0.4, 0.5])
        self.assertEqual(TelemetryRecorder().as_arrays()["yaw_rate"].shape, (0,))

    def test_capacity_must_be_positive(self) -> None:
        """Reject an empty window."""
        with self.assertRaises(ConfigurationError):
            TelemetryRecorder(capacity=0)


if __name__ == "__main__":
    unittest.main()

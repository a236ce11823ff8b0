"""Bounded trailing window of telemetry samples."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

import numpy as np

from virtualdiff.simulation.config import DEFAULT_TELEMETRY_CAPACITY
from virtualdiff.utils.exceptions import ConfigurationError
from virtualdiff.vehicle.state import VehicleState

TELEMETRY_CHANNELS = ("time", "yaw_rate", "slip_left", "slip_right", "locking_ratio")


@dataclass(frozen=True)
class TelemetryPoint:
    """One timestamped telemetry sample.

    Args:
        time: Sample timestamp [s].
        yaw_rate: Yaw rate [rad/s].
        slip_left: Left wheel slip ratio.
        slip_right: Right wheel slip ratio.
        locking_ratio: Differential lock fraction.
    """

    time: float
    yaw_rate: float
    slip_left: float
    slip_right: float
    locking_ratio: float


class TelemetryRecorder:
    """Fixed-capacity FIFO of telemetry points; the oldest point is evicted first."""

    def __init__(self, capacity: int = DEFAULT_TELEMETRY_CAPACITY) -> None:
        """Initialize an empty recorder.

        Args:
            capacity: Maximum number of retained points.

        Raises:
            virtualdiff.utils.exceptions.ConfigurationError: If ``capacity`` is
                smaller than one.
        """
        if capacity < 1:
            msg = "telemetry capacity must be at least 1"
            raise ConfigurationError(msg)
        self._points: deque[TelemetryPoint] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of retained points.

        Returns:
            Window capacity.
        """
        return int(self._points.maxlen or 0)

    @property
    def points(self) -> tuple[TelemetryPoint, ...]:
        """Retained points, oldest first.

        Returns:
            Snapshot of the telemetry window.
        """
        return tuple(self._points)

    @property
    def latest(self) -> TelemetryPoint | None:
        """Most recent point.

        Returns:
            Newest point, or ``None`` when the window is empty.
        """
        return self._points[-1] if self._points else None

    def __len__(self) -> int:
        """Number of retained points.

        Returns:
            Current window length.
        """
        return len(self._points)

    def record(self, time: float, state: VehicleState) -> TelemetryPoint:
        """Append a sample taken from a vehicle state.

        Args:
            time: Sample timestamp [s].
            state: Vehicle state to sample.

        Returns:
            The appended telemetry point.
        """
        point = TelemetryPoint(
            time=time,
            yaw_rate=state.yaw_rate,
            slip_left=state.slip_left,
            slip_right=state.slip_right,
            locking_ratio=state.locking_ratio,
        )
        self._points.append(point)
        return point

    def clear(self) -> None:
        """Drop all retained points."""
        self._points.clear()

    def as_arrays(self) -> dict[str, np.ndarray]:
        """Return the window as one array per channel.

        Returns:
            Mapping from channel name to values, oldest first.
        """
        return {
            channel: np.array([getattr(point, channel) for point in self._points], dtype=float)
            for channel in TELEMETRY_CHANNELS
        }

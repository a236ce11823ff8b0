"""Drive an interactive session at the fixed 16 ms cadence and log telemetry."""

from __future__ import annotations

import argparse
import logging

from virtualdiff.simulation import SimulationSession, build_simulation_config
from virtualdiff.surface import SurfaceType
from virtualdiff.utils import configure_logging
from virtualdiff.vehicle import DiffMode

LOG_EVERY_TICKS = 60


def _parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the real-time session.

    Returns:
        Parsed CLI namespace.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--steering", type=float, default=0.0, help="Steering angle [deg].")
    parser.add_argument("--target-speed", type=float, default=50.0, help="Target speed [km/h].")
    parser.add_argument(
        "--mode",
        choices=tuple(mode.value for mode in DiffMode),
        default=DiffMode.OPEN.value,
        help="Differential mode.",
    )
    parser.add_argument(
        "--surface",
        choices=tuple(surface.value for surface in SurfaceType),
        default=SurfaceType.DRY.value,
        help="Road surface preset.",
    )
    parser.add_argument("--seconds", type=float, default=5.0, help="Wall-clock run time [s].")
    return parser.parse_args()


def main() -> None:
    """Run a paced session and log the trailing telemetry window."""
    args = _parse_args()
    configure_logging(logging.INFO)
    logger = logging.getLogger("realtime_session")

    config = build_simulation_config()
    session = SimulationSession(config=config)
    session.set_steering_angle(args.steering)
    session.set_target_speed(args.target_speed)
    session.set_diff_mode(args.mode)
    session.set_surface(args.surface)

    total_ticks = max(int(args.seconds / config.tick_interval), 1)
    for start in range(0, total_ticks, LOG_EVERY_TICKS):
        state = session.run_realtime(min(LOG_EVERY_TICKS, total_ticks - start))
        logger.info(
            "t=%.2fs speed=%.1f km/h yaw=%.3f rad/s slip=%.2f/%.2f lock=%.2f",
            session.elapsed,
            state.speed_kmh,
            state.yaw_rate,
            state.slip_left,
            state.slip_right,
            state.locking_ratio,
        )
    logger.info("Telemetry window holds %d points", len(session.telemetry))


if __name__ == "__main__":
    main()

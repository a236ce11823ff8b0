"""Compare open, locked and adaptive differentials on one cornering scenario."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from common import example_output_root

from virtualdiff.analysis import (
    compare_diff_modes,
    compute_kpis,
    export_kpi_json,
    export_standard_plots,
    export_trace_csv,
)
from virtualdiff.simulation import DrivingScenario
from virtualdiff.surface import SurfaceType
from virtualdiff.utils import configure_logging
from virtualdiff.utils.exceptions import ConfigurationError


def _parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the differential comparison.

    Returns:
        Parsed CLI namespace.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--steering",
        type=float,
        default=30.0,
        help="Steering angle in degrees, positive for a right turn.",
    )
    parser.add_argument(
        "--target-speed",
        type=float,
        default=80.0,
        help="Cruise target speed in km/h.",
    )
    parser.add_argument(
        "--surface",
        choices=tuple(surface.value for surface in SurfaceType),
        default=SurfaceType.DRY.value,
        help="Road surface preset.",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=20.0,
        help="Simulated duration in seconds.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=example_output_root() / "diff_mode_comparison",
        help="Directory for plots, KPI JSON and trace CSV files.",
    )
    return parser.parse_args()


def main() -> None:
    """Run the scenario under each differential mode and export artifacts."""
    args = _parse_args()
    configure_logging(logging.INFO)
    logger = logging.getLogger("diff_mode_comparison")

    scenario = DrivingScenario(
        steering_angle=args.steering,
        target_speed=args.target_speed,
        surface=SurfaceType(args.surface),
        duration=args.duration,
    )
    try:
        results = compare_diff_modes(scenario)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return

    for mode, result in results.items():
        kpis = compute_kpis(result)
        output_dir = args.output_dir / mode.value.lower()
        export_standard_plots(result, output_dir)
        export_kpi_json(kpis, output_dir / "kpis.json")
        export_trace_csv(result, output_dir / "trace.csv")

        logger.info("Mode: %s", mode.value)
        logger.info("  Final speed: %.1f km/h", kpis.final_speed_kmh)
        logger.info("  Peak lateral accel: %.2f g", kpis.max_lateral_g)
        logger.info(
            "  Mean slip left/right: %.3f / %.3f",
            kpis.mean_slip_left,
            kpis.mean_slip_right,
        )
        logger.info("  Mean locking ratio: %.2f", kpis.mean_locking_ratio)
        logger.info("  Mean |yaw rate|: %.3f rad/s", kpis.mean_abs_yaw_rate)
        logger.info("  Outer torque bias: %.3f", kpis.outer_torque_bias)


if __name__ == "__main__":
    main()

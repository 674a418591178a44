"""
Orthodromic distance calculator - command line entry point.

Usage:
    geodesy 40.641766 -73.780968 51.470020 -0.454295
    python -m geodesy.main 40.641766 -73.780968 51.470020 -0.454295 --unit us
    python -m geodesy.main --help
"""

import argparse
import logging
import sys

from geodesy.distance import METHODS, distance
from geodesy.result import DistanceResult
from geodesy.units import Unit

logger = logging.getLogger(__name__)

# Display names, in output order
METHOD_LABELS = {
    "haversine": "Haversine",
    "slc": "Spherical Law of Cosines",
    "vincenty": "Vincenty (inverse)",
}

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def non_negative_int(text: str) -> int:
    """argparse type for counts that must be >= 0."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def format_result(result: DistanceResult, precision: int = 10) -> str:
    """
    Format one result as a table row.

    Examples:
        "Haversine                       5540.1754190795 km"
        "Vincenty (inverse)              FAILED (non-convergence)"
    """
    label = METHOD_LABELS.get(result.method, result.method)
    if not result.ok:
        return f"{label:<32}FAILED ({result.failure.value})"
    return f"{label:<32}{result.distance:.{precision}f} {result.unit.symbol}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Great-circle distance between two geographic points"
    )
    parser.add_argument("lat1", type=float, help="Latitude of first point (degrees)")
    parser.add_argument("lon1", type=float, help="Longitude of first point (degrees)")
    parser.add_argument("lat2", type=float, help="Latitude of second point (degrees)")
    parser.add_argument("lon2", type=float, help="Longitude of second point (degrees)")
    parser.add_argument(
        "--unit",
        choices=["si", "us", "km", "mi"],
        default="si",
        help="Output unit: si/km for kilometers, us/mi for miles (default: si)",
    )
    parser.add_argument(
        "--method",
        choices=[*METHODS, "all"],
        default="all",
        help="Algorithm to use (default: all)",
    )
    parser.add_argument(
        "--precision",
        type=non_negative_int,
        default=10,
        help="Decimal places in output (default: 10)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also log per-calculation failure details (DEBUG) to stderr",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    unit = Unit.parse(args.unit)
    methods = list(METHOD_LABELS) if args.method == "all" else [args.method]

    failed = 0
    for method in methods:
        result = distance(method, args.lat1, args.lon1, args.lat2, args.lon2, unit)
        if not result.ok:
            failed += 1
        print(format_result(result, args.precision))

    if failed:
        logger.info("%d of %d method(s) failed", failed, len(methods))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

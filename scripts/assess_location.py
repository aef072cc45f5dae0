#!/usr/bin/env python3
"""Assess flood risk around a location from the command line.

Fetches live ThaiWater station data, runs one assessment pass and prints
the JSON payload the HTTP function would return.

Usage:
    # Default reference point and radius from config
    python scripts/assess_location.py

    # A specific point within 20 km
    python scripts/assess_location.py --lat 9.138 --lon 99.3208 --radius 20

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import json
import logging
import math
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from floodwatch.core.config import validate_coordinates
from floodwatch.core.formatter import format_assessment
from floodwatch.core.station import GeoPoint
from floodwatch.orchestrator import Orchestrator
from floodwatch.shell.config_loader import load_config

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Assess flood risk around a location",
    )
    parser.add_argument("--lat", type=float, help="Reference latitude")
    parser.add_argument("--lon", type=float, help="Reference longitude")
    parser.add_argument("--radius", type=float, help="Search radius in km")
    parser.add_argument(
        "--config",
        default=os.environ.get("CONFIG_PATH", "config/config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    if args.radius is not None and not math.isfinite(args.radius):
        parser.error("--radius must be a finite number")

    config = load_config(args.config)

    reference = None
    if args.lat is not None:
        reference = GeoPoint(latitude=args.lat, longitude=args.lon)
        errors = validate_coordinates(reference, "reference")
        if errors:
            parser.error(errors[0].message)

    result = Orchestrator(config).assess(reference=reference, radius_km=args.radius)

    for error in result.errors:
        logger.error("%s", error)

    payload = format_assessment(result.assessment, result.counts)
    print(json.dumps(payload, indent=2, ensure_ascii=False))

    logger.info("Completed: %s", result.summary)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())

"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions.
It's a thin wrapper that loads configuration and invokes the orchestrator.
"""

import json
import logging
import math
import os
from typing import Any

import functions_framework
from flask import Request

from floodwatch.core.config import Config, validate_coordinates
from floodwatch.core.formatter import format_assessment
from floodwatch.core.station import GeoPoint
from floodwatch.orchestrator import Orchestrator
from floodwatch.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif os.environ.get("FLOOD_WATCH_LAT") or os.environ.get("FLOOD_WATCH_RADIUS_KM"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def _parse_query(
    args: Any,
    config: Config,
) -> tuple[GeoPoint, float]:
    """Read reference point and radius from query arguments.

    Missing arguments fall back to the config defaults. `lat` and `lng`
    must be given together.

    Raises:
        ValueError: If an argument is not a finite number, the coordinates
            are out of range, or only one of `lat`/`lng` is given
    """
    lat = args.get("lat")
    lng = args.get("lng") or args.get("lon")
    radius = args.get("radius_km")

    if (lat is None) != (lng is None):
        raise ValueError("lat and lng must be given together")

    reference = config.reference
    if lat is not None:
        reference = GeoPoint(latitude=float(lat), longitude=float(lng))
        errors = validate_coordinates(reference, "reference")
        if errors:
            raise ValueError(errors[0].message)

    radius_km = float(radius) if radius is not None else config.radius_km
    if not math.isfinite(radius_km):
        raise ValueError(f"radius_km {radius_km} is not a finite number")

    return reference, radius_km


@functions_framework.http
def flood_risk(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point.

    Assesses flood risk around the point given by the `lat`/`lng` query
    arguments within `radius_km`.

    Args:
        request: Flask request object

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    logger.info("Starting flood risk assessment")

    try:
        config = _get_config()

        try:
            reference, radius_km = _parse_query(request.args, config)
        except ValueError as e:
            logger.warning("Invalid query arguments: %s", e)
            return {
                "status": "error",
                "message": f"Invalid query arguments: {e}",
            }, 400

        orchestrator = Orchestrator(config)
        result = orchestrator.assess(reference=reference, radius_km=radius_km)

        response = {
            "status": "success" if result.success else "partial_failure",
            "summary": result.summary,
            "assessment": format_assessment(result.assessment, result.counts),
        }

        if result.errors:
            response["errors"] = result.errors

        logger.info("Completed: %s", result.summary)

        status_code = 200 if result.success else 207  # 207 = Multi-Status
        return response, status_code

    except Exception as e:
        logger.exception("Unexpected error in flood risk assessment")
        return {
            "status": "error",
            "message": str(e),
        }, 500


# For local testing
if __name__ == "__main__":
    print("Running flood risk assessment locally...")

    # Mock request for local testing
    class MockRequest:
        args: dict[str, str] = {}

    response, status = flood_risk(MockRequest())
    print(f"\nResponse ({status}):")
    print(json.dumps(response, indent=2, ensure_ascii=False))

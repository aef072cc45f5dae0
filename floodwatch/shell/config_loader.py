"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in floodwatch/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from floodwatch.core.config import (
    DEFAULT_RADIUS_KM,
    DEFAULT_REFERENCE,
    Config,
    validate_config,
)
from floodwatch.core.geo import DEFAULT_CLOSEST_LIMIT
from floodwatch.core.station import GeoPoint


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a value that may be a ${VAR} environment placeholder.

    Args:
        value: Value to resolve

    Returns:
        Resolved value, or the value unchanged if the variable is not set
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_reference(data: dict[str, Any]) -> GeoPoint:
    """Parse a reference point from config data."""
    return GeoPoint(
        latitude=float(_resolve_value(data["latitude"])),
        longitude=float(_resolve_value(data["longitude"])),
    )


def _parse_provinces(value: Any) -> tuple[str, ...]:
    """Parse a province list from a YAML list or a comma-separated string."""
    if isinstance(value, str):
        return tuple(p.strip() for p in value.split(",") if p.strip())
    return tuple(str(p) for p in value)


def _log_validation(config: Config) -> None:
    """Log validation errors and warnings for a loaded config."""
    result = validate_config(config)
    for error in result.critical_errors:
        logger.error("Config error in %s: %s", error.field, error.message)
    for warning in result.warnings:
        logger.warning("Config warning in %s: %s", warning.field, warning.message)


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()

    reference = DEFAULT_REFERENCE
    if "reference" in data:
        reference = _parse_reference(data["reference"])

    provinces = defaults.provinces
    if "provinces" in data:
        provinces = _parse_provinces(_resolve_value(data["provinces"]) or [])

    api = data.get("api") or {}

    return Config(
        reference=reference,
        radius_km=float(_resolve_value(data.get("radius_km", DEFAULT_RADIUS_KM))),
        provinces=provinces,
        water_api_url=_resolve_value(api.get("water_url", defaults.water_api_url)),
        rain_api_url=_resolve_value(api.get("rain_url", defaults.rain_api_url)),
        request_timeout_seconds=int(
            _resolve_value(api.get("timeout_seconds", defaults.request_timeout_seconds))
        ),
        nearby_rain_limit=int(data.get("nearby_rain_limit", DEFAULT_CLOSEST_LIMIT)),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)
    _log_validation(config)

    logger.info(
        "Loaded config: reference (%.4f, %.4f), radius %.1f km, %d provinces",
        config.reference.latitude,
        config.reference.longitude,
        config.radius_km,
        len(config.provinces),
    )

    return config


def load_config_from_env() -> Config:
    """Load minimal configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        FLOOD_WATCH_LAT: Default reference latitude
        FLOOD_WATCH_LON: Default reference longitude
        FLOOD_WATCH_RADIUS_KM: Default search radius
        FLOOD_WATCH_PROVINCES: Comma-separated province names ("" keeps all)
        REQUEST_TIMEOUT: HTTP timeout in seconds

    Returns:
        Config object from environment
    """
    defaults = Config()

    reference = defaults.reference
    lat = os.environ.get("FLOOD_WATCH_LAT")
    lon = os.environ.get("FLOOD_WATCH_LON")
    if lat and lon:
        reference = GeoPoint(latitude=float(lat), longitude=float(lon))
    elif lat or lon:
        logger.warning("FLOOD_WATCH_LAT and FLOOD_WATCH_LON must both be set, using default reference")

    provinces = defaults.provinces
    provinces_str = os.environ.get("FLOOD_WATCH_PROVINCES")
    if provinces_str is not None:
        provinces = _parse_provinces(provinces_str)

    config = Config(
        reference=reference,
        radius_km=float(os.environ.get("FLOOD_WATCH_RADIUS_KM", str(defaults.radius_km))),
        provinces=provinces,
        request_timeout_seconds=int(
            os.environ.get("REQUEST_TIMEOUT", str(defaults.request_timeout_seconds))
        ),
    )
    _log_validation(config)

    return config

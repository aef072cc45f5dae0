"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from floodwatch.core.geo import DEFAULT_CLOSEST_LIMIT
from floodwatch.core.station import GeoPoint


# ThaiWater public API endpoints
WATER_API_URL = "https://api-v3.thaiwater.net/api/v1/thaiwater30/public/waterlevel_load"
RAIN_API_URL = "https://api-v3.thaiwater.net/api/v1/thaiwater30/public/rain_24h"

# Surat Thani city centre
DEFAULT_REFERENCE = GeoPoint(latitude=9.1380, longitude=99.3208)

DEFAULT_RADIUS_KM = 50.0

# The 14 southern provinces, as named in the feed
SOUTHERN_PROVINCES = (
    "กระบี่",
    "ชุมพร",
    "ตรัง",
    "นครศรีธรรมราช",
    "นราธิวาส",
    "ปัตตานี",
    "พังงา",
    "พัทลุง",
    "ภูเก็ต",
    "ยะลา",
    "ระนอง",
    "สงขลา",
    "สตูล",
    "สุราษฎร์ธานี",
)


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        reference: Default reference point when the caller gives none
        radius_km: Default search radius
        provinces: Province names kept from the feeds (empty keeps all)
        water_api_url: Water-level feed URL
        rain_api_url: 24h rainfall feed URL
        request_timeout_seconds: HTTP timeout for feed requests
        nearby_rain_limit: Length of the nearby rain station list
    """
    reference: GeoPoint = DEFAULT_REFERENCE
    radius_km: float = DEFAULT_RADIUS_KM
    provinces: tuple[str, ...] = field(default_factory=lambda: SOUTHERN_PROVINCES)
    water_api_url: str = WATER_API_URL
    rain_api_url: str = RAIN_API_URL
    request_timeout_seconds: int = 30
    nearby_rain_limit: int = DEFAULT_CLOSEST_LIMIT


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(point: GeoPoint, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        point: Point to validate
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= point.latitude <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {point.latitude} out of range [-90, 90]",
        ))

    if not -180 <= point.longitude <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {point.longitude} out of range [-180, 180]",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    errors.extend(validate_coordinates(config.reference, "reference"))

    if config.radius_km <= 0:
        errors.append(ValidationError(
            field="radius_km",
            message=f"Radius must be positive, got {config.radius_km}",
        ))

    if config.request_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="request_timeout_seconds",
            message=f"Timeout must be positive, got {config.request_timeout_seconds}",
        ))

    if config.nearby_rain_limit <= 0:
        errors.append(ValidationError(
            field="nearby_rain_limit",
            message=f"Nearby rain limit must be positive, got {config.nearby_rain_limit}",
        ))

    if not config.provinces:
        errors.append(ValidationError(
            field="provinces",
            message="No provinces configured, stations from the whole country are used",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )

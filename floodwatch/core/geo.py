"""Geographic calculations - Pure functions.

This module provides distance and radius filtering for station locations.
All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from floodwatch.core.station import GeoPoint, RainStation, WaterStation


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0

# Default number of stations in a "closest stations" list
DEFAULT_CLOSEST_LIMIT = 5

S = TypeVar("S", WaterStation, RainStation)


@dataclass(frozen=True)
class RankedStation(Generic[S]):
    """A station paired with its distance from the reference point.

    Attributes:
        station: The station
        distance_km: Great-circle distance to the reference point
    """
    station: S
    distance_km: float


def calculate_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function. Coordinates are not validated.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in kilometers
    """
    # Convert to radians
    lat1_rad = math.radians(a.latitude)
    lat2_rad = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    # Haversine formula
    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push h just past 1 for antipodal points
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def is_within_radius(
    station: WaterStation | RainStation,
    reference: GeoPoint,
    radius_km: float,
) -> bool:
    """Check if a station is within a radius of a point (inclusive).

    Pure function. A non-positive radius contains nothing.
    """
    if radius_km <= 0:
        return False
    return calculate_distance(reference, station.location) <= radius_km


def filter_within_radius(
    reference: GeoPoint,
    stations: Sequence[S],
    radius_km: float,
) -> list[RankedStation[S]]:
    """Filter stations to those within a radius, attaching their distance.

    Pure function. The boundary is inclusive and input order is preserved,
    so later selectors can fall back on it for ties. A non-positive radius
    always yields an empty result.

    Args:
        reference: Reference point
        stations: Stations to filter
        radius_km: Search radius in kilometers

    Returns:
        Ranked stations within the radius, in input order
    """
    if radius_km <= 0:
        return []

    ranked = []

    for station in stations:
        distance = calculate_distance(reference, station.location)
        if distance <= radius_km:
            ranked.append(RankedStation(station=station, distance_km=distance))

    return ranked


def closest_stations(
    ranked: Sequence[RankedStation[S]],
    limit: int = DEFAULT_CLOSEST_LIMIT,
) -> list[RankedStation[S]]:
    """Get up to `limit` ranked stations, closest first.

    Pure function. Equal distances keep their input order.
    """
    if limit <= 0:
        return []
    return sorted(ranked, key=lambda r: r.distance_km)[:limit]

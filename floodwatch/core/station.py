"""Station data models and parsing - Pure functions.

This module handles parsing ThaiWater JSON records into typed station objects.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Iterable


@dataclass(frozen=True)
class GeoPoint:
    """A WGS-84 coordinate in decimal degrees."""
    latitude: float
    longitude: float


class WaterSituation(IntEnum):
    """Official five-level water situation scale.

    1 and 2 are dry conditions, 3 is normal, 4 and 5 are flood conditions.
    """
    CRITICALLY_LOW = 1
    LOW = 2
    NORMAL = 3
    HIGH = 4
    OVERFLOW = 5


class RainBand(Enum):
    """24-hour rainfall intensity bands."""
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    VERY_HEAVY = "very_heavy"


# Rainfall band lower bounds in millimetres over 24 hours
MODERATE_RAIN_MM = 10.0
HEAVY_RAIN_MM = 35.0
VERY_HEAVY_RAIN_MM = 90.0


def rain_band(rain_24h_mm: float) -> RainBand:
    """Get the intensity band for a 24-hour rainfall amount.

    Pure function.
    """
    if rain_24h_mm >= VERY_HEAVY_RAIN_MM:
        return RainBand.VERY_HEAVY
    elif rain_24h_mm >= HEAVY_RAIN_MM:
        return RainBand.HEAVY
    elif rain_24h_mm >= MODERATE_RAIN_MM:
        return RainBand.MODERATE
    else:
        return RainBand.LIGHT


@dataclass(frozen=True)
class WaterStation:
    """Immutable river water-level gauge reading.

    Attributes:
        id: Station record ID (unique within one fetch, not across fetches)
        name: Station name
        location: Gauge coordinates
        severity: Situation level 1-5, 5 is overflow/critical
        level_msl: Water level in metres above mean sea level
        storage_percent: Percentage of bank capacity (optional)
        province: Province name as reported by the feed
        observed_at: Observation timestamp as reported by the feed
    """
    id: int
    name: str
    location: GeoPoint
    severity: int
    level_msl: float
    storage_percent: float | None = None
    province: str = ""
    observed_at: str | None = None

    @property
    def situation(self) -> WaterSituation | None:
        """Return the situation level, or None if severity is off the scale."""
        try:
            return WaterSituation(self.severity)
        except ValueError:
            return None


@dataclass(frozen=True)
class RainStation:
    """Immutable rain gauge reading.

    Attributes:
        id: Station record ID (unique within one fetch, not across fetches)
        name: Station name
        location: Gauge coordinates
        rain_24h_mm: Accumulated rainfall over the last 24 hours
        province: Province name as reported by the feed
        observed_at: Observation timestamp as reported by the feed
    """
    id: int
    name: str
    location: GeoPoint
    rain_24h_mm: float
    province: str = ""
    observed_at: str | None = None

    @property
    def band(self) -> RainBand:
        """Return the rainfall intensity band."""
        return rain_band(self.rain_24h_mm)


def is_in_provinces(province: str, provinces: Iterable[str]) -> bool:
    """Check if a feed province name matches any configured province.

    Pure function. Matching is by substring since the feed sometimes
    prefixes names. An empty province list matches everything.
    """
    provinces = tuple(provinces)
    if not provinces:
        return True
    return any(p in province for p in provinces)


def _localized(names: Any) -> str:
    """Pick the Thai name, falling back to English."""
    if not isinstance(names, dict):
        return ""
    return names.get("th") or names.get("en") or ""


def _parse_location(station: dict[str, Any]) -> GeoPoint | None:
    """Parse station coordinates, None if either is missing or zero."""
    lat = station.get("tele_station_lat")
    lon = station.get("tele_station_long")
    if lat is None or lon is None or lat == "" or lon == "":
        return None
    latitude, longitude = float(lat), float(lon)
    if latitude == 0 or longitude == 0:
        return None
    return GeoPoint(latitude=latitude, longitude=longitude)


def _parse_province(record: dict[str, Any]) -> str:
    geocode = record.get("geocode") or {}
    return _localized(geocode.get("province_name"))


def parse_water_station(record: dict[str, Any]) -> WaterStation | None:
    """Parse a single water-level record into a WaterStation.

    Pure function: takes raw dict, returns typed WaterStation or None if invalid.

    Args:
        record: Record from the ThaiWater waterlevel_load feed

    Returns:
        WaterStation or None if parsing fails
    """
    try:
        station = record.get("station") or {}
        location = _parse_location(station)
        if location is None:
            return None

        severity = record.get("situation_level")
        if severity is None:
            return None

        level = record.get("waterlevel_msl")
        if level is None:
            return None

        storage = record.get("storage_percent")

        return WaterStation(
            id=int(record["id"]),
            name=_localized(station.get("tele_station_name")),
            location=location,
            severity=int(severity),
            level_msl=float(level),
            storage_percent=float(storage) if storage not in (None, "") else None,
            province=_parse_province(record),
            observed_at=record.get("waterlevel_datetime"),
        )
    except (KeyError, TypeError, ValueError):
        return None


def parse_rain_station(record: dict[str, Any]) -> RainStation | None:
    """Parse a single rainfall record into a RainStation.

    Pure function: takes raw dict, returns typed RainStation or None if invalid.

    Args:
        record: Record from the ThaiWater rain_24h feed

    Returns:
        RainStation or None if parsing fails
    """
    try:
        station = record.get("station") or {}
        location = _parse_location(station)
        if location is None:
            return None

        rain = record.get("rain_24h")
        if rain is None:
            return None

        rain_mm = float(rain)
        if rain_mm < 0:
            return None

        return RainStation(
            id=int(record["id"]),
            name=_localized(station.get("tele_station_name")),
            location=location,
            rain_24h_mm=rain_mm,
            province=_parse_province(record),
            observed_at=record.get("rainfall_datetime"),
        )
    except (KeyError, TypeError, ValueError):
        return None


def parse_water_stations(
    payload: dict[str, Any],
    provinces: Iterable[str] = (),
) -> list[WaterStation]:
    """Parse a waterlevel_load response into WaterStations.

    Pure function: skips invalid records and records outside the given
    provinces. Feed order is preserved.

    Args:
        payload: Full JSON response from the waterlevel_load endpoint
        provinces: Province names to keep (empty keeps all)

    Returns:
        List of valid WaterStation objects
    """
    provinces = tuple(provinces)
    records = (payload.get("waterlevel_data") or {}).get("data") or []
    stations = []

    for record in records:
        station = parse_water_station(record)
        if station is not None and is_in_provinces(station.province, provinces):
            stations.append(station)

    return stations


def parse_rain_stations(
    payload: dict[str, Any],
    provinces: Iterable[str] = (),
) -> list[RainStation]:
    """Parse a rain_24h response into RainStations.

    Pure function: skips invalid records and records outside the given
    provinces. Feed order is preserved.

    Args:
        payload: Full JSON response from the rain_24h endpoint
        provinces: Province names to keep (empty keeps all)

    Returns:
        List of valid RainStation objects
    """
    provinces = tuple(provinces)
    records = payload.get("data") or []
    stations = []

    for record in records:
        station = parse_rain_station(record)
        if station is not None and is_in_provinces(station.province, provinces):
            stations.append(station)

    return stations

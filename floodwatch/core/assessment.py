"""Area assessment pipeline - Pure functions.

Runs the full ranking pass for one reference point and radius:
radius filter -> nearest/worst selectors -> risk classifier and
divergence detector. The host re-runs it whenever the reference point,
the radius or the station lists change. Nothing is cached between calls.

Station lists are read, never mutated. Callers that refresh stations
concurrently must pass a consistent snapshot.
"""

from dataclasses import dataclass, field
from typing import Sequence

from floodwatch.core.geo import (
    DEFAULT_CLOSEST_LIMIT,
    RankedStation,
    closest_stations,
    filter_within_radius,
)
from floodwatch.core.ranking import nearest, worst_rain, worst_water
from floodwatch.core.risk import (
    HIGH_SEVERITY,
    OVERFLOW_SEVERITY,
    RiskAssessment,
    classify,
    rain_diverges,
    water_diverges,
)
from floodwatch.core.station import GeoPoint, RainStation, WaterStation


@dataclass(frozen=True)
class RainSummary:
    """Rainfall statistics over the rain stations in radius.

    Attributes:
        station_count: Number of rain stations in radius
        max_mm: Highest 24h rainfall, None with no stations
        mean_mm: Mean 24h rainfall, None with no stations
    """
    station_count: int = 0
    max_mm: float | None = None
    mean_mm: float | None = None


@dataclass(frozen=True)
class SituationCounts:
    """Counts of water stations in flood conditions across a snapshot."""
    critical: int = 0
    watch: int = 0


@dataclass(frozen=True)
class AreaAssessment:
    """Everything the presentation layer needs for one reference point.

    Attributes:
        reference: Reference point the assessment was computed for
        radius_km: Search radius
        nearest_water: Closest water station in radius
        worst_water: Highest-severity water station in radius
        nearest_rain: Closest rain station in radius
        worst_rain: Rain station with the most rainfall in radius
        risk: Overall risk classification
        water_divergence: Worst water station is more dangerous than the nearest
        rain_divergence: Worst rain station is more dangerous than the nearest
        nearby_rain: Closest rain stations in radius, closest first
        rain_summary: Rainfall statistics in radius
    """
    reference: GeoPoint
    radius_km: float
    nearest_water: RankedStation[WaterStation] | None
    worst_water: RankedStation[WaterStation] | None
    nearest_rain: RankedStation[RainStation] | None
    worst_rain: RankedStation[RainStation] | None
    risk: RiskAssessment
    water_divergence: bool = False
    rain_divergence: bool = False
    nearby_rain: tuple[RankedStation[RainStation], ...] = field(default_factory=tuple)
    rain_summary: RainSummary = field(default_factory=RainSummary)


def summarize_rain(ranked: Sequence[RankedStation[RainStation]]) -> RainSummary:
    """Compute rainfall statistics over ranked rain stations.

    Pure function.
    """
    if not ranked:
        return RainSummary()

    amounts = [r.station.rain_24h_mm for r in ranked]
    return RainSummary(
        station_count=len(amounts),
        max_mm=max(amounts),
        mean_mm=sum(amounts) / len(amounts),
    )


def count_situations(stations: Sequence[WaterStation]) -> SituationCounts:
    """Count water stations at overflow and at high level.

    Pure function. Counts the whole snapshot, not just a radius.
    """
    return SituationCounts(
        critical=sum(1 for s in stations if s.severity >= OVERFLOW_SEVERITY),
        watch=sum(1 for s in stations if s.severity == HIGH_SEVERITY),
    )


def assess_area(
    reference: GeoPoint,
    radius_km: float,
    water_stations: Sequence[WaterStation],
    rain_stations: Sequence[RainStation],
    nearby_limit: int = DEFAULT_CLOSEST_LIMIT,
) -> AreaAssessment:
    """Assess flood risk around a reference point.

    Pure function: identical inputs always give an identical result.

    Args:
        reference: Reference point (device location or a dropped pin)
        radius_km: Search radius in kilometers
        water_stations: Current water-level stations
        rain_stations: Current rain stations
        nearby_limit: Maximum number of rain stations in `nearby_rain`

    Returns:
        AreaAssessment with the four selections, risk and divergence flags
    """
    water_in_radius = filter_within_radius(reference, water_stations, radius_km)
    rain_in_radius = filter_within_radius(reference, rain_stations, radius_km)

    nearest_w = nearest(water_in_radius)
    worst_w = worst_water(water_in_radius)
    nearest_r = nearest(rain_in_radius)
    worst_r = worst_rain(rain_in_radius)

    risk = classify(
        worst_water=worst_w,
        nearest_water=nearest_w,
        worst_rain=worst_r,
        radius_km=radius_km,
        nearest_rain=nearest_r,
    )

    return AreaAssessment(
        reference=reference,
        radius_km=radius_km,
        nearest_water=nearest_w,
        worst_water=worst_w,
        nearest_rain=nearest_r,
        worst_rain=worst_r,
        risk=risk,
        water_divergence=water_diverges(nearest_w, worst_w),
        rain_divergence=rain_diverges(nearest_r, worst_r),
        nearby_rain=tuple(closest_stations(rain_in_radius, nearby_limit)),
        rain_summary=summarize_rain(rain_in_radius),
    )

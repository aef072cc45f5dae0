"""Risk classification - Pure functions.

This module turns the selected stations into one overall risk category
and detects when the nearest station understates the danger in range.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from enum import Enum

from floodwatch.core.geo import RankedStation
from floodwatch.core.station import (
    HEAVY_RAIN_MM,
    VERY_HEAVY_RAIN_MM,
    RainStation,
    WaterStation,
)


# Water situation levels that count as dangerous
OVERFLOW_SEVERITY = 5
HIGH_SEVERITY = 4

# Very heavy 24-hour rainfall (mm) raises a flash flood risk
FLASH_FLOOD_RAIN_MM = VERY_HEAVY_RAIN_MM

# Warning floors used by the divergence detector
WATER_WARNING_SEVERITY = HIGH_SEVERITY
RAIN_WARNING_MM = HEAVY_RAIN_MM


class RiskCategory(str, Enum):
    """Overall risk category for a reference point."""
    LOW = "LOW"
    WATCH = "WATCH"
    HIGH_WATER = "HIGH_WATER"
    HIGH_RAIN_FLASH_FLOOD = "HIGH_RAIN_FLASH_FLOOD"
    HEAVY_RAIN = "HEAVY_RAIN"
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"


@dataclass(frozen=True)
class RiskAssessment:
    """Result of classifying the stations around a reference point.

    Attributes:
        category: Overall risk category
        driving_water: Water station that triggered the category (optional)
        driving_rain: Rain station that triggered the category (optional)
        threshold: Threshold crossed by the triggering station, None for
            LOW and INSUFFICIENT_DATA
        radius_km: Search radius the assessment covers
    """
    category: RiskCategory
    driving_water: RankedStation[WaterStation] | None = None
    driving_rain: RankedStation[RainStation] | None = None
    threshold: float | None = None
    radius_km: float | None = None


def classify(
    worst_water: RankedStation[WaterStation] | None,
    nearest_water: RankedStation[WaterStation] | None,
    worst_rain: RankedStation[RainStation] | None,
    radius_km: float,
    nearest_rain: RankedStation[RainStation] | None = None,
) -> RiskAssessment:
    """Classify overall risk from the selected stations.

    Pure function. Rules are checked in priority order, first match wins:

    1. No water station in radius -> INSUFFICIENT_DATA
    2. Worst water severity 5 -> HIGH_WATER
    3. Worst water severity 4 -> WATCH
    4. Worst rainfall >= 90 mm -> HIGH_RAIN_FLASH_FLOOD
    5. Worst rainfall >= 35 mm -> HEAVY_RAIN
    6. Otherwise -> LOW

    Rain is only considered once a water station is in range.

    Args:
        worst_water: Highest-severity water station in radius
        nearest_water: Closest water station in radius
        worst_rain: Rain station with the most rainfall in radius
        radius_km: Search radius, echoed on the result
        nearest_rain: Closest rain station in radius. Only affects what is
            reported as driving_rain in the LOW case, never the category

    Returns:
        RiskAssessment with the category and the stations behind it
    """
    if nearest_water is None:
        return RiskAssessment(
            category=RiskCategory.INSUFFICIENT_DATA,
            radius_km=radius_km,
        )

    if worst_water is not None:
        severity = worst_water.station.severity
        if severity == OVERFLOW_SEVERITY:
            return RiskAssessment(
                category=RiskCategory.HIGH_WATER,
                driving_water=worst_water,
                threshold=OVERFLOW_SEVERITY,
                radius_km=radius_km,
            )
        if severity == HIGH_SEVERITY:
            return RiskAssessment(
                category=RiskCategory.WATCH,
                driving_water=worst_water,
                threshold=HIGH_SEVERITY,
                radius_km=radius_km,
            )

    if worst_rain is not None:
        rain_mm = worst_rain.station.rain_24h_mm
        if rain_mm >= FLASH_FLOOD_RAIN_MM:
            return RiskAssessment(
                category=RiskCategory.HIGH_RAIN_FLASH_FLOOD,
                driving_rain=worst_rain,
                threshold=FLASH_FLOOD_RAIN_MM,
                radius_km=radius_km,
            )
        if rain_mm >= HEAVY_RAIN_MM:
            return RiskAssessment(
                category=RiskCategory.HEAVY_RAIN,
                driving_rain=worst_rain,
                threshold=HEAVY_RAIN_MM,
                radius_km=radius_km,
            )

    return RiskAssessment(
        category=RiskCategory.LOW,
        driving_water=nearest_water,
        driving_rain=nearest_rain,
        radius_km=radius_km,
    )


def water_diverges(
    nearest: RankedStation[WaterStation] | None,
    worst: RankedStation[WaterStation] | None,
) -> bool:
    """Check if a more dangerous water station hides behind the nearest one.

    Pure function.

    Returns True when the worst station is a different station, is at
    severity 4 or above, and is strictly more severe than the nearest.
    """
    if nearest is None or worst is None:
        return False
    if worst.station.id == nearest.station.id:
        return False
    return (
        worst.station.severity >= WATER_WARNING_SEVERITY
        and worst.station.severity > nearest.station.severity
    )


def rain_diverges(
    nearest: RankedStation[RainStation] | None,
    worst: RankedStation[RainStation] | None,
) -> bool:
    """Check if heavier rain falls somewhere other than the nearest gauge.

    Pure function.

    Returns True when the worst station is a different station, reports
    more than 35 mm, and strictly more than the nearest.
    """
    if nearest is None or worst is None:
        return False
    if worst.station.id == nearest.station.id:
        return False
    return (
        worst.station.rain_24h_mm > RAIN_WARNING_MM
        and worst.station.rain_24h_mm > nearest.station.rain_24h_mm
    )


def diverges(
    nearest: RankedStation | None,
    worst: RankedStation | None,
) -> bool:
    """Check divergence for either station kind.

    Pure function. Dispatches on the station type of the arguments.
    """
    if nearest is None or worst is None:
        return False
    if isinstance(worst.station, WaterStation):
        return water_diverges(nearest, worst)
    return rain_diverges(nearest, worst)

"""Assessment formatting - Pure functions.

This module converts assessment results into JSON-serialisable payloads
for the presentation layer. Values only; no prose or locale formatting.
All functions are pure with no side effects.
"""

from typing import Any

from floodwatch.core.assessment import AreaAssessment, RainSummary, SituationCounts
from floodwatch.core.geo import RankedStation
from floodwatch.core.risk import RiskAssessment
from floodwatch.core.station import RainStation, WaterStation


# Decimal places kept for distances in payloads
DISTANCE_DECIMALS = 2


def format_ranked_station(ranked: RankedStation | None) -> dict[str, Any] | None:
    """Format a ranked station of either kind.

    Pure function.

    Args:
        ranked: Ranked station, or None

    Returns:
        Station payload dict, or None if no station
    """
    if ranked is None:
        return None

    station = ranked.station
    payload: dict[str, Any] = {
        "id": station.id,
        "name": station.name,
        "latitude": station.location.latitude,
        "longitude": station.location.longitude,
        "distance_km": round(ranked.distance_km, DISTANCE_DECIMALS),
        "province": station.province,
        "observed_at": station.observed_at,
    }

    if isinstance(station, WaterStation):
        situation = station.situation
        payload["severity"] = station.severity
        payload["situation"] = situation.name if situation is not None else None
        payload["level_msl"] = station.level_msl
        payload["storage_percent"] = station.storage_percent
    elif isinstance(station, RainStation):
        payload["rain_24h_mm"] = station.rain_24h_mm
        payload["rain_band"] = station.band.name

    return payload


def format_risk(risk: RiskAssessment) -> dict[str, Any]:
    """Format a risk classification.

    Pure function. Driving stations are referenced by id only.
    """
    return {
        "category": risk.category.value,
        "threshold": risk.threshold,
        "driving_water_id": risk.driving_water.station.id if risk.driving_water else None,
        "driving_rain_id": risk.driving_rain.station.id if risk.driving_rain else None,
    }


def format_rain_summary(summary: RainSummary) -> dict[str, Any]:
    """Format rainfall statistics.

    Pure function.
    """
    return {
        "station_count": summary.station_count,
        "max_mm": summary.max_mm,
        "mean_mm": round(summary.mean_mm, 1) if summary.mean_mm is not None else None,
    }


def format_assessment(
    assessment: AreaAssessment,
    counts: SituationCounts | None = None,
) -> dict[str, Any]:
    """Format a full area assessment as a payload dict.

    Pure function.

    Args:
        assessment: Area assessment to format
        counts: Optional snapshot-wide situation counts

    Returns:
        JSON-serialisable payload dict
    """
    payload: dict[str, Any] = {
        "reference": {
            "latitude": assessment.reference.latitude,
            "longitude": assessment.reference.longitude,
        },
        "radius_km": assessment.radius_km,
        "risk": format_risk(assessment.risk),
        "water": {
            "nearest": format_ranked_station(assessment.nearest_water),
            "worst": format_ranked_station(assessment.worst_water),
            "diverges": assessment.water_divergence,
        },
        "rain": {
            "nearest": format_ranked_station(assessment.nearest_rain),
            "worst": format_ranked_station(assessment.worst_rain),
            "diverges": assessment.rain_divergence,
            "nearby": [format_ranked_station(r) for r in assessment.nearby_rain],
            "summary": format_rain_summary(assessment.rain_summary),
        },
    }

    if counts is not None:
        payload["counts"] = {
            "critical": counts.critical,
            "watch": counts.watch,
        }

    return payload

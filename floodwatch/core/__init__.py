"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Station data parsing
- Geo/distance calculations and radius filtering
- Nearest and worst-case station selection
- Risk classification and divergence detection
- Payload formatting

All functions here are deterministic and have no I/O.
"""

from floodwatch.core.station import (
    GeoPoint,
    RainStation,
    WaterStation,
    parse_rain_stations,
    parse_water_stations,
)
from floodwatch.core.geo import RankedStation, calculate_distance, filter_within_radius
from floodwatch.core.ranking import nearest, worst_rain, worst_water
from floodwatch.core.risk import RiskAssessment, RiskCategory, classify, diverges
from floodwatch.core.assessment import AreaAssessment, assess_area, count_situations
from floodwatch.core.formatter import format_assessment

__all__ = [
    # Stations
    "GeoPoint",
    "WaterStation",
    "RainStation",
    "parse_water_stations",
    "parse_rain_stations",
    # Geo
    "RankedStation",
    "calculate_distance",
    "filter_within_radius",
    # Ranking
    "nearest",
    "worst_water",
    "worst_rain",
    # Risk
    "RiskCategory",
    "RiskAssessment",
    "classify",
    "diverges",
    # Assessment
    "AreaAssessment",
    "assess_area",
    "count_situations",
    # Formatter
    "format_assessment",
]

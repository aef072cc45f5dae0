"""Station selection - Pure functions.

Picks the nearest and the worst station out of a radius-filtered set.

Every selector orders its candidates with an explicit sort key whose last
component is the candidate's position in the input. The order is therefore
total, and among otherwise equal candidates the earlier one wins. Radius
filtering preserves feed order, so "earlier" means earlier in the feed.
"""

from typing import Callable, Sequence, TypeVar

from floodwatch.core.geo import RankedStation
from floodwatch.core.station import RainStation, WaterStation


T = TypeVar("T")


def nearest_key(ranked: RankedStation) -> tuple[float]:
    """Sort key: closest first."""
    return (ranked.distance_km,)


def water_severity_key(ranked: RankedStation[WaterStation]) -> tuple[int, float]:
    """Sort key: highest severity first, then closest first."""
    return (-ranked.station.severity, ranked.distance_km)


def rain_amount_key(ranked: RankedStation[RainStation]) -> tuple[float]:
    """Sort key: most rainfall first. No distance tie-break."""
    return (-ranked.station.rain_24h_mm,)


def _select_first(
    ranked: Sequence[T],
    key: Callable[[T], tuple],
) -> T | None:
    """Return the minimum element under `key`, earliest index breaking ties."""
    if not ranked:
        return None
    _, best = min(enumerate(ranked), key=lambda pair: (key(pair[1]), pair[0]))
    return best


def nearest(ranked: Sequence[RankedStation]) -> RankedStation | None:
    """Pick the station with the smallest distance.

    Pure function.

    Args:
        ranked: Radius-filtered stations of one kind

    Returns:
        The nearest station, or None if the input is empty
    """
    return _select_first(ranked, nearest_key)


def worst_water(
    ranked: Sequence[RankedStation[WaterStation]],
) -> RankedStation[WaterStation] | None:
    """Pick the water station with the highest severity.

    Pure function. Among equal severities the closer gauge wins.

    Args:
        ranked: Radius-filtered water stations

    Returns:
        The worst water station, or None if the input is empty
    """
    return _select_first(ranked, water_severity_key)


def worst_rain(
    ranked: Sequence[RankedStation[RainStation]],
) -> RankedStation[RainStation] | None:
    """Pick the rain station with the most rainfall over 24 hours.

    Pure function. Equal amounts are decided by input order only.

    Args:
        ranked: Radius-filtered rain stations

    Returns:
        The worst rain station, or None if the input is empty
    """
    return _select_first(ranked, rain_amount_key)

"""Unit tests for nearest and worst-case station selection.

Pure function tests - fast, no mocks needed.
"""

from floodwatch.core.geo import RankedStation
from floodwatch.core.ranking import (
    nearest,
    nearest_key,
    rain_amount_key,
    water_severity_key,
    worst_rain,
    worst_water,
)
from floodwatch.core.station import GeoPoint, RainStation, WaterStation


def water(id, severity, distance):
    return RankedStation(
        station=WaterStation(
            id=id,
            name=f"W{id}",
            location=GeoPoint(latitude=9.0, longitude=99.0),
            severity=severity,
            level_msl=3.0,
        ),
        distance_km=distance,
    )


def rain(id, mm, distance):
    return RankedStation(
        station=RainStation(
            id=id,
            name=f"R{id}",
            location=GeoPoint(latitude=9.0, longitude=99.0),
            rain_24h_mm=mm,
        ),
        distance_km=distance,
    )


class TestNearest:
    """Tests for nearest() selector."""

    def test_picks_minimum_distance(self):
        ranked = [water(1, 3, 12.0), water(2, 3, 4.5), water(3, 3, 8.0)]
        assert nearest(ranked).station.id == 2

    def test_tie_goes_to_earlier_station(self):
        """Equal distances are decided by input order."""
        ranked = [water(1, 3, 9.0), water(5, 3, 2.0), water(4, 3, 2.0)]
        assert nearest(ranked).station.id == 5

    def test_empty_input_returns_none(self):
        assert nearest([]) is None

    def test_works_for_rain(self):
        ranked = [rain(1, 0.0, 3.0), rain(2, 50.0, 1.0)]
        assert nearest(ranked).station.id == 2

    def test_returns_member_of_input(self):
        ranked = [water(1, 3, 9.0), water(2, 4, 3.0)]
        assert nearest(ranked) in ranked


class TestWorstWater:
    """Tests for worst_water() selector."""

    def test_picks_highest_severity(self):
        ranked = [water(1, 3, 1.0), water(2, 5, 20.0), water(3, 4, 5.0)]
        assert worst_water(ranked).station.id == 2

    def test_closer_station_wins_equal_severity(self):
        """Among equal severities the closer gauge wins, whatever the order."""
        ranked = [water(1, 4, 15.0), water(2, 4, 3.0), water(3, 2, 1.0)]
        assert worst_water(ranked).station.id == 2

    def test_full_tie_goes_to_earlier_station(self):
        ranked = [water(8, 5, 6.0), water(2, 5, 6.0)]
        assert worst_water(ranked).station.id == 8

    def test_low_severity_ranked_lowest(self):
        """Severity 1 (critically low) is not treated as dangerous."""
        ranked = [water(1, 1, 1.0), water(2, 3, 10.0)]
        assert worst_water(ranked).station.id == 2

    def test_empty_input_returns_none(self):
        assert worst_water([]) is None


class TestWorstRain:
    """Tests for worst_rain() selector."""

    def test_picks_most_rainfall(self):
        ranked = [rain(1, 12.0, 1.0), rain(2, 95.5, 30.0), rain(3, 40.0, 2.0)]
        assert worst_rain(ranked).station.id == 2

    def test_tie_ignores_distance(self):
        """Equal rainfall is decided by input order, not by distance."""
        ranked = [rain(1, 60.0, 40.0), rain(2, 60.0, 1.0)]
        assert worst_rain(ranked).station.id == 1

    def test_empty_input_returns_none(self):
        assert worst_rain([]) is None


class TestSortKeys:
    """Tests for the explicit sort keys."""

    def test_nearest_key(self):
        assert nearest_key(water(1, 3, 2.5)) == (2.5,)

    def test_water_severity_key_orders_severity_then_distance(self):
        keys = sorted([
            water_severity_key(water(1, 4, 1.0)),
            water_severity_key(water(2, 5, 9.0)),
            water_severity_key(water(3, 5, 2.0)),
        ])
        assert keys == [(-5, 2.0), (-5, 9.0), (-4, 1.0)]

    def test_rain_amount_key(self):
        assert rain_amount_key(rain(1, 35.0, 7.0)) == (-35.0,)

"""Unit tests for risk classification and divergence detection.

Pure function tests - fast, no mocks needed.
"""

import pytest

from floodwatch.core.geo import RankedStation
from floodwatch.core.risk import (
    RiskAssessment,
    RiskCategory,
    classify,
    diverges,
    rain_diverges,
    water_diverges,
)
from floodwatch.core.station import GeoPoint, RainStation, WaterStation


def water(id, severity, distance=1.0):
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


def rain(id, mm, distance=1.0):
    return RankedStation(
        station=RainStation(
            id=id,
            name=f"R{id}",
            location=GeoPoint(latitude=9.0, longitude=99.0),
            rain_24h_mm=mm,
        ),
        distance_km=distance,
    )


class TestClassify:
    """Tests for classify() priority cascade."""

    def test_no_water_station_is_insufficient_data(self):
        result = classify(None, None, None, radius_km=20)

        assert result.category == RiskCategory.INSUFFICIENT_DATA
        assert result.driving_water is None
        assert result.driving_rain is None
        assert result.threshold is None
        assert result.radius_km == 20

    def test_heavy_rain_without_water_is_still_insufficient_data(self):
        """Water presence is checked before any rainfall rule."""
        result = classify(None, None, rain(1, 95.0), radius_km=20)

        assert result.category == RiskCategory.INSUFFICIENT_DATA

    def test_overflow_is_high_water(self):
        worst = water(2, 5, 8.0)
        result = classify(worst, water(1, 3, 2.0), None, radius_km=20)

        assert result.category == RiskCategory.HIGH_WATER
        assert result.driving_water == worst
        assert result.threshold == 5

    def test_high_water_beats_very_heavy_rain(self):
        worst = water(1, 5)
        result = classify(worst, worst, rain(9, 150.0), radius_km=20)

        assert result.category == RiskCategory.HIGH_WATER
        assert result.driving_rain is None

    def test_severity_four_is_watch(self):
        worst = water(1, 4)
        result = classify(worst, worst, None, radius_km=20)

        assert result.category == RiskCategory.WATCH
        assert result.driving_water == worst
        assert result.threshold == 4

    def test_watch_beats_very_heavy_rain(self):
        worst = water(1, 4)
        result = classify(worst, worst, rain(9, 120.0), radius_km=20)

        assert result.category == RiskCategory.WATCH

    @pytest.mark.parametrize("mm", [90.0, 90.1, 300.0])
    def test_very_heavy_rain_is_flash_flood(self, mm):
        worst = rain(9, mm)
        result = classify(water(1, 3), water(1, 3), worst, radius_km=20)

        assert result.category == RiskCategory.HIGH_RAIN_FLASH_FLOOD
        assert result.driving_rain == worst
        assert result.driving_water is None
        assert result.threshold == 90.0

    @pytest.mark.parametrize("mm", [35.0, 60.0, 89.99])
    def test_heavy_rain(self, mm):
        worst = rain(9, mm)
        result = classify(water(1, 2), water(1, 2), worst, radius_km=20)

        assert result.category == RiskCategory.HEAVY_RAIN
        assert result.driving_rain == worst
        assert result.threshold == 35.0

    def test_light_rain_is_low(self):
        nearest_water = water(1, 3, 0.5)
        result = classify(water(2, 3, 4.0), nearest_water, rain(9, 34.9), radius_km=20)

        assert result.category == RiskCategory.LOW
        assert result.driving_water == nearest_water
        assert result.threshold is None

    def test_low_reports_nearest_rain(self):
        nearest_rain = rain(8, 2.0, 0.3)
        result = classify(
            water(1, 3), water(1, 3), rain(9, 20.0, 5.0),
            radius_km=20,
            nearest_rain=nearest_rain,
        )

        assert result.category == RiskCategory.LOW
        assert result.driving_rain == nearest_rain

    @pytest.mark.parametrize("worst_water_severity, worst_mm", [
        (5, 0.0),
        (4, 0.0),
        (3, 120.0),
        (3, 40.0),
    ])
    def test_nearest_rain_never_changes_category(self, worst_water_severity, worst_mm):
        """nearest_rain only fills driving_rain for LOW results."""
        args = (water(2, worst_water_severity), water(1, 3), rain(9, worst_mm))
        nearest_rain = rain(8, 95.0, 0.1)

        without = classify(*args, radius_km=20)
        with_nearest = classify(*args, radius_km=20, nearest_rain=nearest_rain)

        assert with_nearest == without

    @pytest.mark.parametrize("severity", [1, 2, 3])
    def test_dry_and_normal_levels_are_low(self, severity):
        """Low water levels are not a flood risk."""
        result = classify(water(1, severity), water(1, severity), None, radius_km=20)

        assert result.category == RiskCategory.LOW

    def test_idempotent(self):
        """Identical inputs give identical assessments."""
        args = (water(2, 4, 8.0), water(1, 3, 2.0), rain(9, 50.0), 20)

        first = classify(*args)
        second = classify(*args)

        assert first == second
        assert isinstance(first, RiskAssessment)


class TestWaterDiverges:
    """Tests for water_diverges()."""

    def test_more_severe_station_further_away(self):
        assert water_diverges(water(1, 3, 1.0), water(2, 5, 9.0)) is True

    def test_same_station_never_diverges(self):
        station = water(1, 5)
        assert water_diverges(station, station) is False

    def test_below_warning_floor(self):
        """Severity 3 vs 2 is a difference but not a warning."""
        assert water_diverges(water(1, 2), water(2, 3)) is False

    def test_equal_severity_does_not_diverge(self):
        assert water_diverges(water(1, 4, 1.0), water(2, 4, 5.0)) is False

    def test_severity_four_is_enough(self):
        assert water_diverges(water(1, 3), water(2, 4)) is True

    def test_absent_station(self):
        assert water_diverges(None, water(2, 5)) is False
        assert water_diverges(water(1, 3), None) is False


class TestRainDiverges:
    """Tests for rain_diverges()."""

    def test_heavier_rain_elsewhere(self):
        assert rain_diverges(rain(1, 5.0), rain(2, 60.0)) is True

    def test_floor_is_strict(self):
        """Exactly 35 mm is not above the warning floor."""
        assert rain_diverges(rain(1, 5.0), rain(2, 35.0)) is False

    def test_same_station_never_diverges(self):
        station = rain(1, 120.0)
        assert rain_diverges(station, station) is False

    def test_equal_rainfall_does_not_diverge(self):
        assert rain_diverges(rain(1, 50.0), rain(2, 50.0)) is False

    def test_absent_station(self):
        assert rain_diverges(None, None) is False


class TestDiverges:
    """Tests for the kind-dispatching diverges()."""

    def test_dispatches_water(self):
        assert diverges(water(1, 3), water(2, 5)) is True

    def test_dispatches_rain(self):
        assert diverges(rain(1, 0.0), rain(2, 40.0)) is True

    def test_absent(self):
        assert diverges(None, water(2, 5)) is False

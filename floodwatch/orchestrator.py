"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the I/O-performing shell components. It's the "glue" that
makes the application work.
"""

import logging
from dataclasses import dataclass, field

import requests

from floodwatch.core.assessment import (
    AreaAssessment,
    SituationCounts,
    assess_area,
    count_situations,
)
from floodwatch.core.config import Config
from floodwatch.core.station import (
    GeoPoint,
    RainStation,
    WaterStation,
    parse_rain_stations,
    parse_water_stations,
)
from floodwatch.shell.thaiwater_client import ThaiWaterClient


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StationSnapshot:
    """Parsed station lists from one fetch cycle.

    Attributes:
        water: Water-level stations
        rain: Rain stations
        errors: Feeds that failed to load
    """
    water: tuple[WaterStation, ...] = ()
    rain: tuple[RainStation, ...] = ()
    errors: tuple[str, ...] = ()


@dataclass
class AssessmentResult:
    """Result of one assessment pass.

    Attributes:
        assessment: Area assessment from the pure pipeline
        counts: Snapshot-wide water situation counts
        water_station_count: Water stations in the snapshot
        rain_station_count: Rain stations in the snapshot
        errors: Any errors that occurred
    """
    assessment: AreaAssessment
    counts: SituationCounts
    water_station_count: int
    rain_station_count: int
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if no feed failed."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the assessment result."""
        return (
            f"{self.water_station_count} water stations, "
            f"{self.rain_station_count} rain stations, "
            f"risk {self.assessment.risk.category.value} "
            f"within {self.assessment.radius_km:g} km"
        )


class Orchestrator:
    """Coordinates station retrieval and risk assessment.

    This class wires together:
    - ThaiWater client (fetches station data)
    - Core functions (parsing, ranking, classification)
    """

    def __init__(
        self,
        config: Config,
        client: ThaiWaterClient | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            client: ThaiWater client (created if not provided)
        """
        self.config = config
        self.client = client or ThaiWaterClient(
            water_url=config.water_api_url,
            rain_url=config.rain_api_url,
            timeout=config.request_timeout_seconds,
        )

    def _fetch_water(self) -> list[WaterStation]:
        payload = self.client.fetch_water_levels()
        # Pure core function
        return parse_water_stations(payload, self.config.provinces)

    def _fetch_rain(self) -> list[RainStation]:
        payload = self.client.fetch_rainfall()
        # Pure core function
        return parse_rain_stations(payload, self.config.provinces)

    def fetch_snapshot(self) -> StationSnapshot:
        """Fetch and parse both station feeds.

        A failing feed is logged and contributes an empty list, so the
        other feed can still be used.

        Returns:
            StationSnapshot with the parsed stations and any feed errors
        """
        errors: list[str] = []

        try:
            water = self._fetch_water()
            logger.info("Parsed %d water stations", len(water))
        except (requests.RequestException, ValueError) as e:
            error_msg = f"Failed to fetch water levels: {e}"
            logger.error(error_msg)
            errors.append(error_msg)
            water = []

        try:
            rain = self._fetch_rain()
            logger.info("Parsed %d rain stations", len(rain))
        except (requests.RequestException, ValueError) as e:
            error_msg = f"Failed to fetch rainfall: {e}"
            logger.error(error_msg)
            errors.append(error_msg)
            rain = []

        return StationSnapshot(
            water=tuple(water),
            rain=tuple(rain),
            errors=tuple(errors),
        )

    def assess(
        self,
        reference: GeoPoint | None = None,
        radius_km: float | None = None,
        snapshot: StationSnapshot | None = None,
    ) -> AssessmentResult:
        """Run one assessment pass.

        This is the main entry point that:
        1. Fetches a station snapshot (unless one is given)
        2. Runs the pure assessment pipeline
        3. Counts flood situations across the snapshot

        Args:
            reference: Reference point (config default if None)
            radius_km: Search radius (config default if None)
            snapshot: Pre-fetched stations, fetched if None

        Returns:
            AssessmentResult with details of what happened
        """
        if reference is None:
            reference = self.config.reference
        if radius_km is None:
            radius_km = self.config.radius_km
        if snapshot is None:
            snapshot = self.fetch_snapshot()

        # Pure core functions
        assessment = assess_area(
            reference,
            radius_km,
            snapshot.water,
            snapshot.rain,
            nearby_limit=self.config.nearby_rain_limit,
        )
        counts = count_situations(snapshot.water)

        logger.info(
            "Assessed (%.4f, %.4f) within %.1f km: %s",
            reference.latitude,
            reference.longitude,
            radius_km,
            assessment.risk.category.value,
        )

        if assessment.water_divergence:
            logger.info(
                "Water station %s is more severe than the nearest station %s",
                assessment.worst_water.station.id,
                assessment.nearest_water.station.id,
            )

        return AssessmentResult(
            assessment=assessment,
            counts=counts,
            water_station_count=len(snapshot.water),
            rain_station_count=len(snapshot.rain),
            errors=list(snapshot.errors),
        )

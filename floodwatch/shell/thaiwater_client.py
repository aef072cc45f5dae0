"""ThaiWater API Client - Imperative Shell.

This module handles HTTP communication with the ThaiWater public API.
All I/O is contained here; parsing and business logic are in the core module.
"""

import logging
from typing import Any

import requests

from floodwatch.core.config import RAIN_API_URL, WATER_API_URL


logger = logging.getLogger(__name__)


# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30


class ThaiWaterClient:
    """Client for fetching station data from the ThaiWater API.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        water_url: str = WATER_API_URL,
        rain_url: str = RAIN_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize ThaiWater client.

        Args:
            water_url: Water-level endpoint URL
            rain_url: 24h rainfall endpoint URL
            timeout: Request timeout in seconds
        """
        self.water_url = water_url
        self.rain_url = rain_url
        self.timeout = timeout

    def _get_json(self, url: str) -> dict[str, Any]:
        """GET a URL and decode the JSON body.

        Raises:
            requests.RequestException: If the request fails
        """
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def fetch_water_levels(self) -> dict[str, Any]:
        """Fetch the latest water-level readings.

        This method performs HTTP I/O.

        Returns:
            Raw JSON response (records under waterlevel_data.data)

        Raises:
            requests.RequestException: If the request fails
        """
        logger.info("Fetching water levels from %s", self.water_url)

        data = self._get_json(self.water_url)
        count = len((data.get("waterlevel_data") or {}).get("data") or [])

        logger.info("Fetched %d water-level records", count)

        return data

    def fetch_rainfall(self) -> dict[str, Any]:
        """Fetch the latest 24-hour rainfall readings.

        This method performs HTTP I/O.

        Returns:
            Raw JSON response (records under data)

        Raises:
            requests.RequestException: If the request fails
        """
        logger.info("Fetching rainfall from %s", self.rain_url)

        data = self._get_json(self.rain_url)
        count = len(data.get("data") or [])

        logger.info("Fetched %d rainfall records", count)

        return data

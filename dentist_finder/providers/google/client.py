"""
Google Geocoding API client.

Resolves free-text addresses to coordinates using the first result returned
by the Geocoding API.
https://developers.google.com/maps/documentation/geocoding/requests-geocoding
"""

import logging
from typing import Optional

import httpx

from ...exceptions import GeocodeEmptyError
from ..base import Geocoder
from ..models import Coordinate

logger = logging.getLogger(__name__)


class GoogleGeocodingClient(Geocoder):
    """
    Client for the Google Geocoding API.

    No caching, retries or rate limiting: every call is one request and any
    failure propagates to the caller.
    """

    GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

    def __init__(
        self,
        api_key: str,
        geocode_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the Google Geocoding client.

        Args:
            api_key: Google Cloud API key with the Geocoding API enabled
            geocode_url: Endpoint override (defaults to GEOCODE_URL)
            timeout: Request timeout in seconds, None waits forever
            client: Optional pre-built HTTP client; it is not closed by close()
        """
        self.api_key = api_key
        self.geocode_url = geocode_url or self.GEOCODE_URL
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def geocode(self, address: str) -> Coordinate:
        """
        Geocode an address.

        Args:
            address: Free-text address

        Returns:
            Coordinate of the first result

        Raises:
            GeocodeEmptyError: If the response has no results
            httpx.HTTPError: On transport failure or non-2xx status
        """
        client = await self._get_client()

        params = {"address": address, "key": self.api_key}

        logger.debug(f"Geocoding '{address}'")
        response = await client.get(self.geocode_url, params=params)
        response.raise_for_status()

        data = response.json()
        results = data.get("results") or []
        if not results:
            status = data.get("status")
            logger.error(f"Google Geocoding returned no results for '{address}' (status: {status})")
            raise GeocodeEmptyError(address, status=status, detail=data.get("error_message"))

        location = results[0]["geometry"]["location"]
        return Coordinate(latitude=location["lat"], longitude=location["lng"])

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

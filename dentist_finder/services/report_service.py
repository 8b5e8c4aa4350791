"""
Dentist Report Service - builds the nearest-first dentist report.

This service handles:
- Fetching and parsing the provider listing
- Geocoding every provider and the home address concurrently
- Calculating the distance from home to each provider
- Sorting and formatting the report
"""

import asyncio
import logging
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from dentist_finder.providers.base import Geocoder
from dentist_finder.providers.hospital_aleman import (
    HospitalAlemanListingClient,
    parse_providers,
)
from dentist_finder.providers.models import Coordinate, DentistProvider
from dentist_finder.utils.geo_utils import distance_in_km

logger = logging.getLogger(__name__)

SEPARATOR = "==================================="


def calculate_distances(
    providers: Sequence[DentistProvider], home: Coordinate
) -> List[DentistProvider]:
    """Return copies of the geocoded providers carrying their distance from home."""
    return [
        provider.with_distance(distance_in_km(provider.location, home))
        for provider in providers
    ]


def sort_by_proximity(providers: Sequence[DentistProvider]) -> List[DentistProvider]:
    """
    Sort providers nearest-first.

    The sort is stable: providers at the same distance keep their input order.

    Raises:
        ValueError: If a provider has no location or no distance
    """
    for provider in providers:
        if provider.location is None or provider.distance_km is None:
            raise ValueError(f"Provider '{provider.name}' has no location or distance")
    return sorted(providers, key=lambda provider: provider.distance_km)


def format_provider(provider: DentistProvider) -> str:
    return (
        f"name: {provider.name}\n"
        f"phone number: {provider.phone}\n"
        f"address: {provider.address}\n"
        f"distance: {provider.distance_km}\n"
        f"{SEPARATOR}\n"
    )


def format_report(providers: Sequence[DentistProvider]) -> str:
    """One block per provider, each followed by a blank line."""
    return "".join(f"{format_provider(provider)}\n" for provider in providers)


def print_report(providers: Sequence[DentistProvider], stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write(format_report(providers))
    stream.flush()


class DentistReportService:
    """
    Runs the fetch, parse, geocode, distance and sort pipeline.

    Nothing is recovered locally: any failure propagates and no partial
    report is produced.
    """

    def __init__(
        self,
        listing_client: HospitalAlemanListingClient,
        geocoder: Geocoder,
        home_address: str,
    ):
        """
        Initialize the Dentist Report Service.

        Args:
            listing_client: Client for the provider directory page
            geocoder: Geocoder used for providers and the home address
            home_address: Reference address distances are measured from
        """
        self.listing_client = listing_client
        self.geocoder = geocoder
        self.home_address = home_address

    async def fetch_providers(self) -> List[DentistProvider]:
        """Download the listing page and parse the provider records."""
        html = await asyncio.to_thread(self.listing_client.fetch)
        return parse_providers(html)

    async def _geocode_provider(self, provider: DentistProvider) -> DentistProvider:
        return provider.with_location(await self.geocoder.geocode(provider.address))

    async def geocode_providers(
        self, providers: Sequence[DentistProvider]
    ) -> Tuple[List[DentistProvider], Coordinate]:
        """
        Geocode every provider and the home address in one concurrent batch.

        The batch is all-or-nothing: the first failure is raised and no
        result is returned.

        Returns:
            Tuple of (geocoded providers in input order, home coordinate)
        """
        logger.info(f"Geocoding {len(providers)} providers and the home address")
        home, *geocoded = await asyncio.gather(
            self.geocoder.geocode(self.home_address),
            *(self._geocode_provider(provider) for provider in providers),
        )
        return geocoded, home

    async def build_report(self) -> List[DentistProvider]:
        """
        Run the whole pipeline.

        Returns:
            Providers with location and distance, nearest first
        """
        providers = await self.fetch_providers()
        geocoded, home = await self.geocode_providers(providers)
        with_distance = calculate_distances(geocoded, home)
        return sort_by_proximity(with_distance)

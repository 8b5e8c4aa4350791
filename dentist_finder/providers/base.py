"""
Base interfaces for the external data sources used by the report.
"""

from abc import ABC, abstractmethod

from .models import Coordinate


class Geocoder(ABC):
    """
    Abstract geocoder.

    Implementations must raise rather than return an empty value: an address
    that cannot be resolved fails the whole report.
    """

    @abstractmethod
    async def geocode(self, address: str) -> Coordinate:
        """
        Convert a free-text address to coordinates.

        Args:
            address: Address string to geocode (e.g., "Av. Pueyrredón 1640, CABA")

        Returns:
            Coordinate of the first result returned by the service

        Raises:
            GeocodeEmptyError: If the service returns no result
        """
        pass

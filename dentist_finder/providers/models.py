"""
Data models shared by the listing provider, the geocoder and the report.

Providers are created by the listing parser without a location and are
enriched by copy as the pipeline progresses.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """A latitude/longitude pair in degrees. Range is not enforced."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")


class DentistProvider(BaseModel):
    """
    A dentist record scraped from the insurer's directory page.

    ``location`` is filled in by the geocoder and ``distance_km`` by the
    distance step; both are absent right after parsing.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Provider name as listed")
    address: str = Field(..., description="Free-text street address")
    phone: str = Field(..., description="Phone number as listed")
    location: Optional[Coordinate] = Field(None, description="Geocoded address")
    distance_km: Optional[float] = Field(
        None, description="Great-circle distance from home in kilometers"
    )

    def with_location(self, location: Coordinate) -> "DentistProvider":
        return self.model_copy(update={"location": location})

    def with_distance(self, distance_km: float) -> "DentistProvider":
        return self.model_copy(update={"distance_km": distance_km})

"""
Google Maps integration.

Provides address geocoding through the Google Geocoding API.
"""

from .client import GoogleGeocodingClient

__all__ = ["GoogleGeocodingClient"]

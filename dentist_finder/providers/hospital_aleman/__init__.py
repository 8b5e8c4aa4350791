"""
Hospital Alemán provider directory.

Fetches the dentist listing page and extracts the provider records from it.
"""

from .client import HospitalAlemanListingClient
from .parser import parse_providers

__all__ = ["HospitalAlemanListingClient", "parse_providers"]

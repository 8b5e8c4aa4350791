"""
External data sources for the dentist report.

- ``hospital_aleman``: the insurer's provider directory (fetch + parse)
- ``google``: Google Geocoding API client
"""

from .base import Geocoder
from .models import Coordinate, DentistProvider

__all__ = [
    'Geocoder',
    'Coordinate',
    'DentistProvider',
]

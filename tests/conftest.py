"""
Pytest configuration and shared fixtures.

This module provides common fixtures for all tests in the dentist_finder
project: a listing page fixture, sample providers and a mock geocoder.
"""

import pytest

# Add the project root to Python path
import sys
from pathlib import Path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dentist_finder.providers.base import Geocoder
from dentist_finder.providers.models import Coordinate, DentistProvider


LISTING_HTML = """
<html>
<head><meta charset="utf-8"></head>
<body>
<ul class="results">
  <li class="result">
    <div class="resultheader">
      GARCÍA,
      María   Laura
    </div>
    <div class="pseudodl">
      <div class="pseudodt">Especialidad:</div>
      <div class="pseudodd">Odontología</div>
      <div class="pseudodt">Dirección:</div>
      <div class="pseudodd">Av. Santa Fe 1234, CABA</div>
      <div class="pseudodt">Tel.:</div>
      <div class="pseudodd">4811-2233</div>
    </div>
  </li>
  <li class="result">
    <div class="resultheader">PÉREZ, Juan</div>
    <div class="pseudodl">
      <div class="pseudodt">Dirección:</div>
      <div class="pseudodd">Av. Pueyrredón 1640, CABA</div>
      <div class="pseudodt">Tel.:</div>
      <div class="pseudodd">4821-1234</div>
    </div>
  </li>
</ul>
</body>
</html>
"""

EMPTY_LISTING_HTML = """
<html>
<body>
<p>Access denied</p>
</body>
</html>
"""

HOME_ADDRESS = "Av. Cabildo 2000, CABA"


@pytest.fixture
def listing_html():
    """Listing page with two well-formed provider records."""
    return LISTING_HTML


@pytest.fixture
def empty_listing_html():
    """Page without any provider record (blocked request)."""
    return EMPTY_LISTING_HTML


@pytest.fixture
def sample_coordinates():
    """Coordinates used by the mock geocoder, keyed by address."""
    return {
        HOME_ADDRESS: Coordinate(latitude=0.0, longitude=0.0),
        "Av. Santa Fe 1234, CABA": Coordinate(latitude=0.0, longitude=2.0),
        "Av. Pueyrredón 1640, CABA": Coordinate(latitude=0.0, longitude=1.0),
    }


@pytest.fixture
def sample_providers():
    """Providers as produced by the listing parser."""
    return [
        DentistProvider(
            name="GARCÍA, María Laura",
            address="Av. Santa Fe 1234, CABA",
            phone="4811-2233",
        ),
        DentistProvider(
            name="PÉREZ, Juan",
            address="Av. Pueyrredón 1640, CABA",
            phone="4821-1234",
        ),
    ]


@pytest.fixture
def mock_geocoder(sample_coordinates):
    """Create a mock geocoder for testing."""

    class MockGeocoder(Geocoder):
        """Mock geocoder answering from a fixed table."""

        def __init__(self, results):
            self.results = dict(results)
            self.failures = {}
            self.calls = []

        async def geocode(self, address: str) -> Coordinate:
            self.calls.append(address)
            if address in self.failures:
                raise self.failures[address]
            return self.results[address]

    return MockGeocoder(sample_coordinates)


@pytest.fixture
def mock_env_vars(monkeypatch, tmp_path):
    """Set the required environment variables and run from an empty directory."""
    test_values = {
        'GOOGLE_API_KEY': 'test_api_key_12345',
        'COOKIE': 'PHPSESSID=abc123',
        'MY_ADDRESS': HOME_ADDRESS,
    }
    for key, value in test_values.items():
        monkeypatch.setenv(key, value)

    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    return test_values


@pytest.fixture
def home_address():
    """Home address known to the mock geocoder."""
    return HOME_ADDRESS

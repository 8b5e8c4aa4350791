"""
Error types raised by the dentist report pipeline.

Transport failures are not wrapped: they surface as the HTTP libraries' own
exceptions (``requests.RequestException`` and ``httpx.HTTPError``).
"""

from typing import Dict, Iterable, Optional


class DentistFinderError(Exception):
    """Base class for all errors raised by dentist_finder."""


class ConfigurationError(DentistFinderError):
    """Raised when settings are missing from the environment or malformed."""

    def __init__(self, missing: Iterable[str], invalid: Optional[Dict[str, str]] = None):
        self.missing = list(missing)
        self.invalid = dict(invalid or {})
        problems = []
        if self.missing:
            problems.append(f"Missing env var {', '.join(self.missing)}")
        for name, reason in self.invalid.items():
            problems.append(f"Invalid env var {name}: {reason}")
        super().__init__("; ".join(problems))


class ListingParseError(DentistFinderError):
    """Raised when the listing page yields no provider records."""

    def __init__(self, html: str, message: str = "No doctors could be parsed"):
        self.html = html
        super().__init__(message)


class GeocodeEmptyError(DentistFinderError, LookupError):
    """Raised when the geocoding service returns no result for an address."""

    def __init__(self, address: str, status: Optional[str] = None, detail: Optional[str] = None):
        self.address = address
        self.status = status
        self.detail = detail
        message = f"No geocoding results for address '{address}'"
        if status:
            message += f" (status: {status})"
        if detail:
            message += f": {detail}"
        super().__init__(message)

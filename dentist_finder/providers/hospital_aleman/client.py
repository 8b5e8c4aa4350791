"""
HTTP client for the Hospital Alemán provider directory.

The directory page is protected against robots; a session cookie copied from
a browser gets past it. The server also sends malformed response headers, so
the request goes through ``requests``, whose ``http.client`` based parser
only logs header defects instead of rejecting the response.
"""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class HospitalAlemanListingClient:
    """Fetches the raw HTML of the dentist listing page."""

    def __init__(
        self,
        listing_url: str,
        cookie: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            listing_url: Directory page URL
            cookie: Value of the Cookie header
            timeout: Request timeout in seconds, None waits forever
            session: Optional requests session (a new one is used otherwise)
        """
        self.listing_url = listing_url
        self.cookie = cookie
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self) -> str:
        """
        Download the listing page.

        Returns:
            Response body as text

        Raises:
            requests.RequestException: On transport failure or non-2xx status
        """
        headers = {
            "Cache-Control": "no-cache",
            "Cookie": self.cookie,
        }

        logger.info(f"Fetching provider listing from {self.listing_url}")
        response = self.session.get(self.listing_url, headers=headers, timeout=self.timeout)
        response.raise_for_status()

        # Without a charset requests assumes ISO-8859-1 for text/html
        content_type = response.headers.get("Content-Type", "")
        if "charset" not in content_type.lower():
            response.encoding = response.apparent_encoding

        logger.debug(f"Listing page: {len(response.content)} bytes, encoding {response.encoding}")
        return response.text

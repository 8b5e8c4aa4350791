"""
Parser for the Hospital Alemán provider directory page.

The selectors below are a data-format contract with the upstream page:

- every provider is an ``li.result`` element
- the provider name is the text of its ``.resultheader``
- fields are ``.pseudodt`` label / ``.pseudodd`` value pairs, and the value
  is the element right after the label
"""

import logging
import re
from typing import List

from bs4 import BeautifulSoup

from ...exceptions import ListingParseError
from ..models import DentistProvider

logger = logging.getLogger(__name__)

ADDRESS_LABEL = "Dirección:"
PHONE_LABEL = "Tel.:"

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_name(text: str) -> str:
    """Collapse every whitespace run (newlines included) to a single space."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _labelled_value(item, label: str) -> str:
    """Text of the value following every label containing ``label``."""
    values = item.select(f'.pseudodt:-soup-contains("{label}") + .pseudodd')
    return "".join(value.get_text() for value in values).strip()


def parse_providers(html: str) -> List[DentistProvider]:
    """
    Extract provider records from the listing page.

    Args:
        html: Raw HTML of the listing page

    Returns:
        Providers in page order, without location or distance

    Raises:
        ListingParseError: If the page contains no provider record (the page
                           layout changed or the request was blocked)
    """
    soup = BeautifulSoup(html, "html.parser")

    providers = []
    for item in soup.select("li.result"):
        header = item.select_one(".resultheader")
        providers.append(
            DentistProvider(
                name=normalize_name(header.get_text()) if header else "",
                address=_labelled_value(item, ADDRESS_LABEL),
                phone=_labelled_value(item, PHONE_LABEL),
            )
        )

    if not providers:
        logger.error(f"No providers found in listing page ({len(html)} characters)")
        raise ListingParseError(html)

    logger.info(f"Parsed {len(providers)} providers from listing page")
    return providers

"""
Configuration settings for the dentist report using Pydantic Settings.

Settings are read once at startup, from environment variables and an optional
``.env`` file, and the resulting object is passed explicitly to every
collaborator.
"""

from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from ..exceptions import ConfigurationError

DEFAULT_LISTING_URL = (
    "https://www.hospitalaleman.org.ar/plan-medico/quiero-asociarme/cartillas-online/"
    "?ioutput=ajax&tab=4&esp=408&loc=403&q=&plan=111"
)
DEFAULT_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class DentistFinderSettings(BaseSettings):
    """
    Settings for the dentist report.

    ``GOOGLE_API_KEY``, ``COOKIE`` and ``MY_ADDRESS`` have no default: a
    missing value is a startup error.
    """

    google_api_key: str = Field(
        ...,
        alias="GOOGLE_API_KEY",
        description="Google Cloud API key with the Geocoding API enabled"
    )
    cookie: str = Field(
        ...,
        alias="COOKIE",
        description="Session cookie that gets past the listing page's bot protection"
    )
    my_address: str = Field(
        ...,
        alias="MY_ADDRESS",
        description="Home address distances are measured from"
    )

    listing_url: str = Field(
        default=DEFAULT_LISTING_URL,
        alias="LISTING_URL",
        description="Provider directory page to scrape"
    )
    geocode_url: str = Field(
        default=DEFAULT_GEOCODE_URL,
        alias="GOOGLE_GEOCODE_URL",
        description="Google Geocoding API endpoint"
    )
    http_timeout: Optional[float] = Field(
        default=None,
        alias="HTTP_TIMEOUT",
        description="Timeout in seconds for HTTP requests (none by default)"
    )
    log_level: Optional[str] = Field(
        default=None,
        alias="LOG_LEVEL",
        description="Overrides the root log level from logging_config.yaml"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "env_prefix": "",
        "extra": "ignore",
        "populate_by_name": True,
    }


def load_settings(env_file: Optional[str] = ".env") -> DentistFinderSettings:
    """
    Load and validate settings.

    Args:
        env_file: Optional dotenv file to read in addition to the environment.
                  Pass None to read the environment only.

    Returns:
        Validated DentistFinderSettings instance

    Raises:
        ConfigurationError: If any required value is missing or any value is
                            malformed
    """
    try:
        return DentistFinderSettings(_env_file=env_file)
    except ValidationError as e:
        missing = []
        invalid = {}
        for error in e.errors():
            name = str(error["loc"][0]) if error["loc"] else "settings"
            if error["type"] == "missing":
                missing.append(name)
            else:
                invalid[name] = error["msg"]
        raise ConfigurationError(missing, invalid) from e

"""Configuration for the SportsData.io NBA API."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from modules.errors import ConfigurationError

API_KEY_ENV = "SPORTSDATA_API_KEY"
DEFAULT_BASE_URL = "https://api.sportsdata.io/v3/nba/scores/json"


class SportsDataConfig(BaseModel):
    """Connection settings injected into the SportsData.io client."""

    api_key: str | None = Field(default=None, description="Ocp-Apim-Subscription-Key value")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="NBA scores feed root URL")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")

    @classmethod
    def from_env(cls) -> "SportsDataConfig":
        """
        Build configuration from environment variables (and .env, if present).

        Reads SPORTSDATA_API_KEY, SPORTSDATA_BASE_URL and SPORTSDATA_TIMEOUT.
        A missing key is not an error here; requests fail later without
        touching the network.
        """
        load_dotenv()

        timeout = os.getenv("SPORTSDATA_TIMEOUT")
        return cls(
            api_key=os.getenv(API_KEY_ENV) or None,
            base_url=os.getenv("SPORTSDATA_BASE_URL") or DEFAULT_BASE_URL,
            timeout=float(timeout) if timeout else 10.0,
        )

    def require_api_key(self) -> str:
        """Return the API key or raise ConfigurationError if it is not set."""
        if not self.api_key:
            raise ConfigurationError(f"{API_KEY_ENV} environment variable is not set")
        return self.api_key

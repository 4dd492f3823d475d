"""HTTP client for the SportsData.io NBA scores feed."""

import asyncio
import logging
from typing import Any, Protocol

import requests

from modules.config import SportsDataConfig
from modules.errors import DecodeError, UpstreamStatusError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "Ocp-Apim-Subscription-Key"


class JsonClient(Protocol):
    """Anything that can GET a path and return decoded JSON."""

    async def get_json(self, path: str) -> Any: ...


class SportsDataClient:
    """
    Issues authenticated GET requests against the NBA scores feed.

    Responsibilities:
    - Attach the subscription key header (fail before any request if missing)
    - Turn non-2xx responses into UpstreamStatusError
    - Decode JSON bodies

    The blocking request runs in a worker thread so concurrent callers only
    wait on their own response. There is no retry: one call, one request.
    """

    def __init__(self, config: SportsDataConfig, session: requests.Session | None = None):
        """
        Initialize client.

        Args:
            config: API key, base URL and timeout
            session: Optional requests session (a new one is used per call if omitted)
        """
        self.config = config
        self.session = session

    def url_for(self, path: str) -> str:
        """Join an endpoint path onto the configured base URL."""
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    async def get_json(self, path: str) -> Any:
        """
        GET an endpoint and decode the JSON body.

        Args:
            path: Endpoint path relative to the base URL, e.g. 'GamesByDate/2024-12-25'

        Returns:
            Decoded JSON payload

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamStatusError: If the response status is not 2xx
            DecodeError: If the body is not valid JSON
            requests.RequestException: On network failure
        """
        api_key = self.config.require_api_key()
        return await asyncio.to_thread(self._get, self.url_for(path), api_key)

    def _get(self, url: str, api_key: str) -> Any:
        getter = self.session.get if self.session is not None else requests.get

        logger.info(f"GET {url}")
        response = getter(url, headers={API_KEY_HEADER: api_key}, timeout=self.config.timeout)

        if not response.ok:
            raise UpstreamStatusError(response.status_code, response.reason or "")

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

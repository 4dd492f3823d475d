"""Exceptions raised while fetching NBA data."""


class NbaDataError(Exception):
    """Base class for NBA data tool failures."""


class ConfigurationError(NbaDataError):
    """Required configuration (e.g. the API key) is missing."""


class UpstreamStatusError(NbaDataError):
    """The upstream API answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API request failed with status {status_code}: {reason}")


class DecodeError(NbaDataError):
    """The response body does not have the expected shape."""


class InvalidDataTypeError(NbaDataError):
    """The requested data category is not supported."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Invalid data type: {category}")


class FetchError(NbaDataError):
    """Fetching one category failed; the message names the category and the cause."""

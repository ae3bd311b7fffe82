"""
Exception hierarchy for SwissKnife.

All custom exceptions inherit from SwissKnifeError base class.
"""

from typing import Any, Optional


class SwissKnifeError(Exception):
    """Base exception for all SwissKnife errors."""
    pass


# Argument Errors
class ArgumentError(SwissKnifeError, ValueError):
    """Raised when a caller passes an invalid argument."""
    pass


class ArgumentOutOfRangeError(ArgumentError):
    """Raised when a numeric argument falls outside its allowed range."""

    def __init__(self, param_name: str, value: Any, message: Optional[str] = None):
        self.param_name = param_name
        self.value = value
        if message is None:
            message = f"{param_name} is out of range, got {value!r}"
        super().__init__(message)


# HTTP Errors
class HttpError(SwissKnifeError):
    """Base exception for JSON-over-HTTP helper errors."""
    pass


class AddressFormatError(HttpError, ValueError):
    """Raised when a request address has no usable scheme."""
    pass


class HttpRequestFailedError(HttpError):
    """Raised when the server answers with a non-success status code.

    ``body`` holds the response text already truncated for diagnostics.
    """

    def __init__(self, message: str, status_code: int, url: str, body: str):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.body = body


class ResponseParseError(HttpError, ValueError):
    """Raised when a successful response body cannot be decoded.

    ``body`` holds the complete response text.
    """

    def __init__(self, message: str, url: str, body: str):
        super().__init__(message)
        self.url = url
        self.body = body


# Configuration Errors
class ConfigurationError(SwissKnifeError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass

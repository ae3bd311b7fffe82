"""
Unit tests for exception hierarchy.
"""

import pytest

from swissknife.exceptions import (
    AddressFormatError,
    ArgumentError,
    ArgumentOutOfRangeError,
    ConfigurationError,
    HttpError,
    HttpRequestFailedError,
    InvalidConfigurationError,
    ResponseParseError,
    SwissKnifeError,
)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correctly defined."""

    def test_base_exception(self):
        """Test that SwissKnifeError is the base exception."""
        error = SwissKnifeError("test error")
        assert isinstance(error, Exception)
        assert str(error) == "test error"

    def test_argument_errors_are_value_errors(self):
        """Test argument errors can be caught as ValueError."""
        assert issubclass(ArgumentError, SwissKnifeError)
        assert issubclass(ArgumentError, ValueError)
        assert issubclass(ArgumentOutOfRangeError, ArgumentError)

    def test_http_errors_inherit_from_base(self):
        """Test that HTTP helper errors inherit from HttpError."""
        assert issubclass(HttpError, SwissKnifeError)
        assert issubclass(AddressFormatError, HttpError)
        assert issubclass(HttpRequestFailedError, HttpError)
        assert issubclass(ResponseParseError, HttpError)

    def test_configuration_errors_inherit_from_base(self):
        """Test that configuration errors inherit from SwissKnifeError."""
        assert issubclass(ConfigurationError, SwissKnifeError)
        assert issubclass(InvalidConfigurationError, ConfigurationError)


class TestExceptionAttributes:
    """Test data carried by exceptions."""

    def test_out_of_range_default_message(self):
        error = ArgumentOutOfRangeError("max_length", -1)
        assert error.param_name == "max_length"
        assert error.value == -1
        assert "max_length" in str(error)

    def test_http_request_failed_error(self):
        error = HttpRequestFailedError("boom", status_code=502, url="https://host/", body="bad...")
        assert str(error) == "boom"
        assert error.status_code == 502
        assert error.url == "https://host/"
        assert error.body == "bad..."

    def test_response_parse_error_can_be_raised_and_caught(self):
        """Test that parse errors can be caught as ValueError."""
        with pytest.raises(ValueError) as exc_info:
            raise ResponseParseError("cannot parse '{x'", url="https://host/", body="{x")

        assert exc_info.value.body == "{x"
        assert isinstance(exc_info.value, SwissKnifeError)

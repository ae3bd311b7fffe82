"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SwissKnife, a product of Garudex Labs

JSON-over-HTTP POST helpers for ``httpx`` clients.

``post_json`` and ``apost_json`` resolve the target address, POST an optional
JSON body and either return the decoded response or raise one of:

- ``AddressFormatError`` when the resolved address has no http(s) scheme
  (raised before any network activity),
- ``HttpRequestFailedError`` for non-2xx responses (message carries the
  response body truncated to ``truncation_limit`` characters),
- ``ResponseParseError`` when a 2xx body cannot be decoded (message carries
  the complete body).

Transport failures (``httpx.TransportError``) propagate unchanged.
"""

import functools
import time
from typing import Any, Dict, Optional, Tuple, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from swissknife.config.settings import HttpConfig
from swissknife.exceptions import (
    AddressFormatError,
    ArgumentOutOfRangeError,
    HttpRequestFailedError,
    ResponseParseError,
)
from swissknife.extensions.strings import truncate
from swissknife.logging_config import get_logger, log_http_exchange

logger = get_logger(__name__)

DEFAULT_TRUNCATION_LIMIT = 1000
SUPPORTED_SCHEMES = ("http", "https")

RequestTarget = Union[str, httpx.URL]


class _NoBody:
    """Marker for "send an empty body", distinct from an explicit ``None``."""

    def __repr__(self) -> str:
        return "NO_BODY"


NO_BODY: Any = _NoBody()

_BODY_ADAPTER: TypeAdapter = TypeAdapter(Any)


@functools.lru_cache(maxsize=128)
def _response_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", None) or repr(response_type)


def resolve_url(client: Union[httpx.Client, httpx.AsyncClient], target: RequestTarget) -> httpx.URL:
    """
    Resolve the address a request will be sent to.

    An ``httpx.URL`` is used exactly as given and never combined with the
    client's ``base_url``. A string is resolved against ``base_url`` using
    standard relative-reference rules; a string that carries its own scheme
    replaces the base entirely. httpx stores ``base_url`` with a trailing
    slash, so its last path segment is kept: base ``https://host/api`` and
    target ``"post"`` give ``https://host/api/post``.

    Args:
        client: Client whose ``base_url`` applies to string targets
        target: Textual address or absolute ``httpx.URL``

    Returns:
        The absolute URL to request

    Raises:
        AddressFormatError: If the resolved address has no http or https scheme
        TypeError: If target is neither a string nor an ``httpx.URL``
    """
    if isinstance(target, httpx.URL):
        url = target
    elif isinstance(target, str):
        try:
            if client.base_url.is_absolute_url:
                url = client.base_url.join(target)
            else:
                url = httpx.URL(target)
        except httpx.InvalidURL as e:
            raise AddressFormatError(f"Invalid request address '{target}': {e}") from e
    else:
        raise TypeError(
            f"target must be a str or httpx.URL, got {type(target).__name__}"
        )

    if url.scheme not in SUPPORTED_SCHEMES:
        raise AddressFormatError(
            f"Request address '{url}' must be absolute with an http or https scheme"
        )
    return url


def _prepare_request(
    client: Union[httpx.Client, httpx.AsyncClient],
    target: RequestTarget,
    body: Any,
    truncation_limit: int,
) -> Tuple[httpx.URL, bytes, Dict[str, str]]:
    if truncation_limit <= 0:
        raise ArgumentOutOfRangeError(
            "truncation_limit",
            truncation_limit,
            f"truncation_limit must be greater than zero, got {truncation_limit}",
        )

    url = resolve_url(client, target)

    if body is NO_BODY:
        return url, b"", {}
    return url, _BODY_ADAPTER.dump_json(body), {"Content-Type": "application/json"}


def _read_response(
    response: httpx.Response,
    url: httpx.URL,
    truncation_limit: int,
    response_type: Any,
    started: float,
) -> Any:
    duration_ms = round((time.monotonic() - started) * 1000, 2)
    log_http_exchange(logger, "POST", str(url), response.status_code, duration_ms)

    text = response.text

    if not response.is_success:
        truncated = truncate(text, truncation_limit)
        logger.warning(
            "http_request_failed",
            url=str(url),
            status_code=response.status_code,
            body=truncated,
        )
        raise HttpRequestFailedError(
            f"POST {url} failed with status {response.status_code}: '{truncated}'",
            status_code=response.status_code,
            url=str(url),
            body=truncated,
        )

    try:
        return _response_adapter(response_type).validate_json(text)
    except ValidationError as e:
        logger.warning(
            "response_parse_failed",
            url=str(url),
            response_type=_type_name(response_type),
            error_count=e.error_count(),
        )
        raise ResponseParseError(
            f"Could not parse response from POST {url} as "
            f"{_type_name(response_type)}. Response body: '{text}'",
            url=str(url),
            body=text,
        ) from e


def post_json(
    client: httpx.Client,
    target: RequestTarget,
    body: Any = NO_BODY,
    truncation_limit: int = DEFAULT_TRUNCATION_LIMIT,
    response_type: Any = Any,
) -> Any:
    """
    POST ``body`` as JSON and decode the JSON response into ``response_type``.

    Args:
        client: Client to send the request with
        target: Textual address (resolved against ``client.base_url``) or an
            absolute ``httpx.URL`` (used verbatim)
        body: Payload to serialize. Omit it to send an empty body; pass
            ``None`` to send the JSON literal ``null``.
        truncation_limit: Maximum number of response body characters quoted
            in an ``HttpRequestFailedError``
        response_type: Any type ``pydantic.TypeAdapter`` accepts, e.g.
            ``Dict[str, str]`` or a model class. Defaults to plain JSON.

    Returns:
        The decoded response

    Raises:
        AddressFormatError: If the address has no http or https scheme
        ArgumentOutOfRangeError: If truncation_limit is not positive
        HttpRequestFailedError: If the response status is not 2xx
        ResponseParseError: If a 2xx body cannot be decoded
        httpx.TransportError: If the exchange could not be completed
    """
    url, content, headers = _prepare_request(client, target, body, truncation_limit)

    logger.debug("http_request", method="POST", url=str(url), content_length=len(content))
    started = time.monotonic()
    try:
        response = client.post(url, content=content, headers=headers)
    except httpx.TransportError as e:
        logger.warning("http_transport_error", url=str(url), error=str(e))
        raise

    return _read_response(response, url, truncation_limit, response_type, started)


async def apost_json(
    client: httpx.AsyncClient,
    target: RequestTarget,
    body: Any = NO_BODY,
    truncation_limit: int = DEFAULT_TRUNCATION_LIMIT,
    response_type: Any = Any,
) -> Any:
    """
    Async counterpart of :func:`post_json` for ``httpx.AsyncClient``.

    Cancelling the awaiting task aborts the request and propagates
    ``asyncio.CancelledError``.
    """
    url, content, headers = _prepare_request(client, target, body, truncation_limit)

    logger.debug("http_request", method="POST", url=str(url), content_length=len(content))
    started = time.monotonic()
    try:
        response = await client.post(url, content=content, headers=headers)
    except httpx.TransportError as e:
        logger.warning("http_transport_error", url=str(url), error=str(e))
        raise

    return _read_response(response, url, truncation_limit, response_type, started)


def _client_kwargs(config: Optional[HttpConfig], overrides: Dict[str, Any]) -> Dict[str, Any]:
    config = config or HttpConfig()

    headers = {"User-Agent": config.user_agent}
    headers.update(config.headers)

    kwargs: Dict[str, Any] = {
        "base_url": config.base_url,
        "headers": headers,
        "timeout": httpx.Timeout(config.timeout_seconds),
        "follow_redirects": config.follow_redirects,
    }
    kwargs.update(overrides)
    return kwargs


def build_client(config: Optional[HttpConfig] = None, **overrides: Any) -> httpx.Client:
    """
    Create an ``httpx.Client`` from an HttpConfig section.

    Keyword overrides (``transport=``, ``auth=`` ...) go straight to the
    ``httpx.Client`` constructor. The caller owns and closes the client.
    """
    kwargs = _client_kwargs(config, overrides)
    logger.debug("Building HTTP client", base_url=str(kwargs["base_url"]))
    return httpx.Client(**kwargs)


def build_async_client(config: Optional[HttpConfig] = None, **overrides: Any) -> httpx.AsyncClient:
    """Async counterpart of :func:`build_client`."""
    kwargs = _client_kwargs(config, overrides)
    logger.debug("Building async HTTP client", base_url=str(kwargs["base_url"]))
    return httpx.AsyncClient(**kwargs)

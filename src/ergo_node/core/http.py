"""
Request/response protocol shared by every endpoint call.

send() issues exactly one HTTP request and turns transport failures into
TransportError. process_response() maps the response into a typed value:

    2xx + body matching the expected shape  -> value
    2xx + anything else                     -> DecodeError
    non-2xx                                 -> RequestError(status, node message)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from ergo_node.core.errors import ConfigError, DecodeError, RequestError, TransportError

logger = logging.getLogger("ergo_node.http")

T = TypeVar("T")


def join_url(base: str, *segments: str | int) -> str:
    """Append path segments to a base URL, percent-encoding each segment."""
    if "://" not in base:
        raise ConfigError(f"Cannot extend a URL without a scheme: {base!r}")
    path = "/".join(quote(str(segment), safe="") for segment in segments)
    return f"{base.rstrip('/')}/{path}" if path else base


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    json: Any = None,
) -> httpx.Response:
    """Issue a single request. Never retries."""
    logger.debug(f"{method} {url} params={params}")
    kwargs: dict[str, Any] = {"params": params}
    if json is not None:
        kwargs["json"] = json
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.TransportError as e:
        raise TransportError(f"{method} {url} failed: {e!r}") from e
    logger.debug(f"{method} {url} -> {response.status_code}")
    return response


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def process_response(response: httpx.Response, shape: type[T] | Any) -> T:
    """
    Decode a node response into `shape`.

    Args:
        response: the response returned by send()
        shape: a pydantic model, builtin type or typing generic (e.g. list[ErgoBox])

    Raises:
        RequestError: the node answered with a non-2xx status
        DecodeError: the body is not valid JSON for `shape`
    """
    if not response.is_success:
        raise RequestError(response.status_code, _error_message(response))
    try:
        return _adapter(shape).validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"Unexpected response body: {e}"
        ) from e


def _error_message(response: httpx.Response) -> str | None:
    """Extract the node's error text; the node reports {"error", "reason", "detail"}."""
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        for key in ("detail", "reason", "error"):
            if body.get(key):
                return str(body[key])
    return response.text or None

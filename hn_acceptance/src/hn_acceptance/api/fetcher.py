"""
Single-shot JSON fetching.

``fetch_json`` performs exactly one GET, checks the status, drains the body
and decodes it into the requested shape. Retries are not handled here; wrap
calls in ``RetryExecutor`` for that.
"""

import json
from typing import Any, Optional, Type, TypeVar, get_origin

import requests
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..config import get_settings
from .errors import BodyReadError, DecodeError, TransportError, UnexpectedStatusError

T = TypeVar("T")

_EMPTY_CONTAINERS = (list, tuple, set, frozenset, dict)


def _read_body(url: str, timeout: Optional[float] = None) -> bytes:
    """
    GET *url* and return the full response body.

    The response is always closed before returning, including on the error
    paths.

    Raises:
        TransportError: If the request could not be sent or answered
        UnexpectedStatusError: If the status code is not 200
        BodyReadError: If the body stream fails while being read
    """
    timeout = timeout if timeout is not None else get_settings().request_timeout

    logger.debug(f"Making GET request to {url}")
    try:
        response = requests.get(url, timeout=timeout, stream=True)
    except requests.exceptions.RequestException as e:
        raise TransportError(f"GET failed for {url}: {e}", url=url) from e

    with response:
        if response.status_code != requests.codes.ok:
            raise UnexpectedStatusError(
                f"Unexpected HTTP status: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )
        try:
            return response.content
        except requests.exceptions.RequestException as e:
            raise BodyReadError(f"Error reading body from {url}: {e}", url=url) from e


def empty_value(target: Any) -> Any:
    """Return the zero value of *target*: a default model, an empty container or None."""
    if isinstance(target, type) and issubclass(target, BaseModel):
        try:
            return target()
        except ValidationError:
            # Required fields are left unset.
            return target.model_construct()
    origin = get_origin(target) or target
    if origin in _EMPTY_CONTAINERS:
        return origin()
    return None


def decode_json(body: bytes, target: Type[T], url: Optional[str] = None) -> T:
    """
    Decode *body* into *target*.

    *target* may be a pydantic model or any type ``TypeAdapter`` accepts, such
    as ``List[int]``. Validation is strict, so ``"42"`` is not accepted for an
    int. A literal ``null`` body yields ``empty_value(target)``.

    Raises:
        DecodeError: If the body is not JSON or does not match *target*
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Unmarshal failed: {e}", url=url) from e

    if payload is None:
        return empty_value(target)

    try:
        return TypeAdapter(target).validate_python(payload, strict=True)
    except ValidationError as e:
        raise DecodeError(f"Unmarshal failed: {e}", url=url) from e


def fetch_json(url: str, target: Type[T], timeout: Optional[float] = None) -> T:
    """
    Fetch *url* once and decode the JSON body into *target*.

    Args:
        url: Fully qualified URL
        target: Destination shape
        timeout: Request timeout in seconds, defaults to settings

    Returns:
        The decoded value
    """
    return decode_json(_read_body(url, timeout), target, url=url)


def fetch_text(url: str, timeout: Optional[float] = None) -> str:
    """Fetch *url* once and return the body as text, without decoding JSON."""
    body = _read_body(url, timeout)
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Body from {url} is not valid UTF-8: {e}", url=url) from e

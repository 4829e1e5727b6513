"""JSON body decoding with structured API-error fallback."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from ...core.exceptions import ApiError, DecodeError, FetchError
from ...models.api_error import ApiErrorBody
from .response import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MAX_LOGGED_BODY = 512


@lru_cache(maxsize=128)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _api_error(response: RawResponse) -> ApiError | None:
    try:
        body = _adapter(ApiErrorBody).validate_json(response.body)
    except ValidationError:
        return None
    return ApiError(
        body.error,
        body.error_description,
        status_code=response.status,
        url=response.url,
    )


def _snippet(response: RawResponse) -> str:
    return response.text()[:_MAX_LOGGED_BODY]


def decode_json(data: str | bytes, shape: type[T] | Any) -> T:
    """Validate a JSON document against ``shape``.

    Raises:
        DecodeError: If the JSON is malformed or does not match ``shape``.
    """
    try:
        return _adapter(shape).validate_json(data)
    except ValidationError as exc:
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        raise DecodeError(f"Payload does not match {shape!r}: {exc}", body=text[:_MAX_LOGGED_BODY]) from exc


def raise_for_status(response: RawResponse) -> None:
    """Raise ApiError or FetchError for an error status, else do nothing."""
    if response.ok:
        return
    api_error = _api_error(response)
    logger.error(f"HTTP {response.status} from {response.url}: {_snippet(response)}")
    if api_error is not None:
        raise api_error
    raise FetchError(
        f"HTTP {response.status} for {response.url}",
        status_code=response.status,
        url=response.url,
    )


def deserialize(response: RawResponse, shape: type[T] | Any) -> T:
    """Decode a response body into ``shape``.

    Error statuses are reported as the structured API error when the body
    carries one, otherwise as a plain FetchError. A success body that does
    not match ``shape`` is tried as an API error before surfacing the decode
    failure itself.

    Raises:
        ApiError: The body is a structured API error
        FetchError: Error status without a structured body
        DecodeError: Success status, body does not match ``shape``
    """
    raise_for_status(response)

    try:
        return _adapter(shape).validate_json(response.body)
    except ValidationError as exc:
        logger.error(f"Failed to decode body from {response.url}: {_snippet(response)}")
        api_error = _api_error(response)
        if api_error is not None:
            raise api_error from exc
        raise DecodeError(
            f"Response from {response.url} does not match {shape!r}: {exc}",
            body=_snippet(response),
        ) from exc

"""Response interpretation for the link service.

Functions:
    classify_status(status: int, message: str | None) -> AppError
        Map a non-2xx status to the matching error class
    error_message(response: httpx.Response) -> str | None
        Extract the `{error}` field from an error response, if any
    parse_response(response: httpx.Response) -> JSONPayload
        Return the decoded body of a 2xx response or raise a classified error
    decode(factory, payload) -> T
        Build a model from a payload, turning bad shapes into MalformedResponseError

Classification:
    400        -> ValidationError
    401, 403   -> AuthError
    404        -> NotFoundError
    429        -> RateLimited
    >= 500     -> NetworkError (transient, retried by the client)
    other      -> AppError
"""

import logging
from typing import Any, TypeVar
from collections.abc import Callable

import httpx

from shortlinks.constants import HTTPStatus, Messages
from shortlinks.exceptions import (
    AppError,
    AuthError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimited,
    ValidationError,
)
from shortlinks.types import JSONPayload

T = TypeVar('T')


logger = logging.getLogger(__name__)


def classify_status(status: int, message: str | None = None) -> AppError:
    """Map an HTTP error status to a typed client error

    Args:
        status (int):
            Response status code (non-2xx).
        message (str | None):
            Server-provided error message, if any.

    Returns:
        AppError: an instance of the matching subclass, carrying `status`.

    Example:
        >>> classify_status(404, 'Link not found')
        NotFoundError('Link not found', status=404)
        >>> classify_status(503)
        NetworkError('Server error occurred. Please try again later.', status=503)
    """
    if status == HTTPStatus.BAD_REQUEST:
        return ValidationError(message or Messages.BAD_REQUEST, status)
    if status in {HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN}:
        return AuthError(message or Messages.UNAUTHORIZED, status)
    if status == HTTPStatus.NOT_FOUND:
        return NotFoundError(message or Messages.NOT_FOUND, status)
    if status == HTTPStatus.TOO_MANY_REQUESTS:
        return RateLimited(message or Messages.RATE_LIMITED, status)
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return NetworkError(message or Messages.SERVER_ERROR, status)
    return AppError(message or Messages.UNEXPECTED, status)


def is_json(response: httpx.Response) -> bool:
    content_type = response.headers.get('content-type', '')
    media_type = content_type.split(';', 1)[0].strip().lower()
    return media_type == 'application/json' or media_type.endswith('+json')


def error_message(response: httpx.Response) -> str | None:
    if not is_json(response):
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get('error'), str):
        return body['error']
    return None


def parse_response(response: httpx.Response) -> JSONPayload:
    """Return the decoded body of a successful response

    Non-2xx responses are never treated as success, whatever their body.
    2xx responses without a JSON content type yield an empty dict.

    Raises:
        AppError (subclass):
            Classified error for non-2xx statuses.
        MalformedResponseError:
            If a 2xx response declares JSON but the body can't be decoded.
    """
    if not response.is_success:
        raise classify_status(response.status_code, error_message(response))

    if not is_json(response):
        return {}

    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(Messages.MALFORMED, response.status_code) from e


def decode(factory: Callable[[Any], T], payload: Any) -> T:
    """Build a model from a response payload

    Args:
        factory (Callable[[Any], T]):
            Usually a model's `from_dict` classmethod.
        payload (Any):
            Decoded JSON body.

    Raises:
        MalformedResponseError:
            If the payload is missing fields or has the wrong shape.
    """
    try:
        return factory(payload)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning('Malformed response payload.', extra={'model': getattr(factory, '__qualname__', str(factory))})
        raise MalformedResponseError(f'{Messages.MALFORMED} ({type(e).__name__}: {e})') from e

"""Error taxonomy for the link service client.

Every error raised by the client is an `AppError`. Subclasses tell the caller
what went wrong; `NetworkError` is the only one the client retries on its own.

Classes:
    AppError:               base class, also used for unclassified failures
    ValidationError:        malformed input (HTTP 400 or local validation)
    AuthError:              credential missing, invalid or forbidden (401/403)
    NotFoundError:          resource does not exist (404)
    RateLimited:            too many requests (429)
    NetworkError:           connectivity failure, timeout or 5xx (transient)
    MalformedResponseError: the server answered with an unusable payload
    ConfigurationError:     invalid client configuration
    StoreError:             credential/preference backing store failure

Example:
    >>> from shortlinks.exceptions import NotFoundError
    >>> err = NotFoundError('Link not found', status=404)
    >>> err.status, err.error_code
    (404, 'app:not_found')
"""


class AppError(Exception):
    """Base exception for all client errors."""

    error_code = 'app:error'
    transient = False

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.message!r}, status={self.status!r})'


class ValidationError(AppError):
    """Raised when input is malformed, locally or as reported by the server."""

    error_code = 'app:validation_error'


class AuthError(AppError):
    """Raised when the credential is missing, invalid or lacks permission."""

    error_code = 'app:auth_error'


class NotFoundError(AppError):
    """Raised when the requested resource does not exist."""

    error_code = 'app:not_found'


class RateLimited(AppError):
    """Raised when the server throttles the client."""

    error_code = 'app:rate_limited'


class NetworkError(AppError):
    """Raised on connectivity failures, timeouts and 5xx responses."""

    error_code = 'app:network_error'
    transient = True


class MalformedResponseError(AppError):
    """Raised when a response body can't be interpreted."""

    error_code = 'app:malformed_response_error'


class ConfigurationError(AppError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the client is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class StoreError(AppError):
    """Raised when a credential or preference store can't be reached.

    e.g. Redis connection issues, unwritable files, etc.
    """

    error_code = 'store:store_error'

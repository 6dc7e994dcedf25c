from enum import StrEnum


class Defaults:
    """Default client settings."""

    API_URL = 'http://localhost:8080/api'
    TIMEOUT = 10.0  # seconds
    RETRY_ATTEMPTS = 3  # total attempts, including the first one
    RETRY_DELAY = 1.0  # seconds, multiplied by the failed attempt number
    TOKEN_KEY = 'auth_token'  # cookie name read by the routing guard
    COOKIE_MAX_AGE = 86_400  # 60 * 60 * 24
    SESSION_TTL = 86_400  # 60 * 60 * 24


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOG_LEVEL = 'SHORTLINKS_LOG_LEVEL'
        CONFIG_FILE = 'SHORTLINKS_CONFIG'

    class Client(StrEnum):
        API_URL = 'SHORTLINKS_API_URL'
        TIMEOUT = 'SHORTLINKS_TIMEOUT'
        RETRY_ATTEMPTS = 'SHORTLINKS_RETRY_ATTEMPTS'
        RETRY_DELAY = 'SHORTLINKS_RETRY_DELAY'
        TOKEN_KEY = 'SHORTLINKS_TOKEN_KEY'  # noqa: S105


class HTTPStatus:
    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500


class Validation:
    """Client-side input limits."""

    URL_MIN_LENGTH = 10
    URL_MAX_LENGTH = 2048
    URL_PATTERN = r'^https?://.+\..+'
    NAME_MAX_LENGTH = 100
    PASSWORD_MIN_LENGTH = 4
    PASSWORD_MAX_LENGTH = 50
    EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'


class Messages:
    """Human-readable defaults used when the server sends no `error` field."""

    OFFLINE = 'You appear to be offline. Please check your connection.'
    TIMEOUT = 'Request timed out. Please try again.'
    SERVER_ERROR = 'Server error occurred. Please try again later.'
    UNAUTHORIZED = 'You are not authorized to perform this action'
    NOT_FOUND = 'Link not found'
    RATE_LIMITED = 'Too many requests. Please try again later.'
    BAD_REQUEST = 'Invalid request'
    UNEXPECTED = 'An unexpected error occurred'
    MALFORMED = 'Server sent a malformed response'

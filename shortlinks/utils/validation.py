"""Client-side input validation.

These checks mirror the limits the web UI enforced before talking to the
link service. They raise `ValidationError` without a status code, since no
request has been made yet.

Functions:
    validate_url(url: str) -> str
    validate_name(name: str | None) -> str | None
    validate_password(password: str | None) -> str | None
    validate_email(email: str) -> str
    validate_schedule(active_from, expires_at) -> None
"""

import re
from datetime import datetime

from shortlinks.constants import Validation
from shortlinks.exceptions import ValidationError
from shortlinks.utils.helpers import as_utc


URL_RE = re.compile(Validation.URL_PATTERN)
EMAIL_RE = re.compile(Validation.EMAIL_PATTERN)


def validate_url(url: str) -> str:
    url = (url or '').strip()
    if not url:
        raise ValidationError('This field is required')
    if len(url) < Validation.URL_MIN_LENGTH or not URL_RE.match(url):
        raise ValidationError('Please enter a valid URL')
    if len(url) > Validation.URL_MAX_LENGTH:
        raise ValidationError(f'URL must be less than {Validation.URL_MAX_LENGTH} characters')
    return url


def validate_name(name: str | None) -> str | None:
    if name is None:
        return None
    if len(name) > Validation.NAME_MAX_LENGTH:
        raise ValidationError(f'Name must be less than {Validation.NAME_MAX_LENGTH} characters')
    return name


def validate_password(password: str | None) -> str | None:
    if password is None:
        return None
    if len(password) < Validation.PASSWORD_MIN_LENGTH:
        raise ValidationError(f'Password must be at least {Validation.PASSWORD_MIN_LENGTH} characters')
    if len(password) > Validation.PASSWORD_MAX_LENGTH:
        raise ValidationError(f'Password must be at most {Validation.PASSWORD_MAX_LENGTH} characters')
    return password


def validate_email(email: str) -> str:
    email = (email or '').strip()
    if not EMAIL_RE.match(email):
        raise ValidationError('Please enter a valid email address')
    return email


def validate_schedule(active_from: datetime | None, expires_at: datetime | None) -> None:
    """Reject windows that end before they start (both bounds optional)."""
    if active_from is not None and expires_at is not None and as_utc(expires_at) < as_utc(active_from):
        raise ValidationError('Expiry must not be earlier than activation')

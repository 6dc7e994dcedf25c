from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from shortlinks.utils.helpers import parse_timestamp, format_timestamp


class LinkStatus(StrEnum):
    """Lifecycle status of a link, derived at evaluation time and never stored."""

    ACTIVE = 'active'
    SCHEDULED = 'scheduled'
    EXPIRED = 'expired'
    DISABLED = 'disabled'


@dataclass(frozen=True)
class LinkModel:
    """Represent one shortened URL as returned by the link service.

    Attributes:
        id (str):
            Opaque link identifier used by the CRUD endpoints.
        slug (str):
            Unique short path segment used in the short URL.
        original (str):
            Target URL the slug redirects to.
        created_at (datetime):
            Creation instant (immutable).
        last_updated (datetime):
            Instant of the last mutation.
        name (Optional[str]):
            Human-readable label.
        active_from (Optional[datetime]):
            Instant from which the link starts redirecting.
        expires_at (Optional[datetime]):
            Instant from which the link stops redirecting.
        disabled (bool):
            Manual kill switch, independent of time.
        clicks (int):
            Total clicks (server-maintained).
        unique_clicks (int):
            Unique clicks (server-maintained, <= clicks).
        short_url (Optional[str]):
            Fully qualified short URL, when the server provides it.

    Example:
        >>> link = LinkModel.from_dict({
        ...     'id': '4f1c', 'slug': 'abc123', 'original': 'https://example.com',
        ...     'createdAt': '2024-05-01T00:00:00Z', 'lastUpdated': '2024-05-01T00:00:00Z',
        ... })
        >>> link.slug, link.clicks, link.disabled
        ('abc123', 0, False)
    """

    id: str
    slug: str
    original: str
    created_at: datetime
    last_updated: datetime
    name: str | None = None
    active_from: datetime | None = None
    expires_at: datetime | None = None
    disabled: bool = False
    clicks: int = 0
    unique_clicks: int = 0
    short_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'LinkModel':
        created_at = parse_timestamp(data['createdAt'])
        return cls(
            id=str(data['id']),
            slug=data['slug'],
            original=data['original'],
            created_at=created_at,
            last_updated=parse_timestamp(data.get('lastUpdated')) or created_at,
            name=data.get('name') or None,
            active_from=parse_timestamp(data.get('activeFrom')),
            expires_at=parse_timestamp(data.get('expiresAt')),
            disabled=bool(data.get('disabled', False)),
            clicks=int(data.get('clicks') or 0),
            unique_clicks=int(data.get('uniqueClicks') or 0),
            short_url=data.get('shortUrl'),
        )


# fmt: off
@dataclass(frozen=True)
class CreateLinkRequest:
    url: str                            # Target URL to shorten
    name: str | None = None             # Optional label
    expires_at: datetime | None = None  # Optional end of the redirect window
    active_from: datetime | None = None # Optional start of the redirect window
    password: str | None = None         # Optional access password (sent once, never kept)
# fmt: on

    def to_payload(self) -> dict[str, Any]:
        payload = {
            'url': self.url,
            'name': self.name,
            'expiresAt': format_timestamp(self.expires_at),
            'activeFrom': format_timestamp(self.active_from),
            'password': self.password,
        }
        return {k: v for k, v in payload.items() if v is not None}


@dataclass(frozen=True)
class LinkUpdate:
    """Partial update of a link; fields left as None are not sent."""

    name: str | None = None
    expires_at: datetime | None = None
    active_from: datetime | None = None
    password: str | None = None
    disabled: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = {
            'name': self.name,
            'expiresAt': format_timestamp(self.expires_at),
            'activeFrom': format_timestamp(self.active_from),
            'password': self.password,
            'disabled': self.disabled,
        }
        return {k: v for k, v in payload.items() if v is not None}


@dataclass(frozen=True)
class CreatedLink:
    short_url: str
    slug: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'CreatedLink':
        return cls(short_url=data['shortUrl'], slug=data['slug'])

"""Link lifecycle resolution.

A link's status is never stored; it is recomputed from its temporal fields
every time it is needed. Precedence, first match wins:

    1. disabled                       -> DISABLED
    2. expires_at set, now >= expiry  -> EXPIRED
    3. active_from set, now < start   -> SCHEDULED
    4. otherwise                      -> ACTIVE

Expiry is checked before scheduling, so a malformed link whose window ends
before it starts reports EXPIRED once the end has passed.

Example:
    >>> from datetime import datetime, UTC
    >>> resolve_status(datetime(2024, 6, 1, tzinfo=UTC), False, None, datetime(2024, 5, 15, tzinfo=UTC))
    <LinkStatus.EXPIRED: 'expired'>
"""

from collections import Counter
from collections.abc import Iterable
from datetime import datetime, UTC

from beartype import beartype

from shortlinks.models import LinkModel, LinkStatus
from shortlinks.utils.helpers import as_utc


@beartype
def resolve_status(
    now: datetime,
    disabled: bool,
    active_from: datetime | None = None,
    expires_at: datetime | None = None,
) -> LinkStatus:
    """Map a link's temporal fields to its status at `now`

    Naive datetimes are treated as UTC, so mixing naive and aware values is safe.

    Args:
        now (datetime):
            Evaluation instant. Injected so callers and tests control the clock.
        disabled (bool):
            Manual kill switch; always wins.
        active_from (datetime | None):
            Start of the redirect window, if any.
        expires_at (datetime | None):
            End of the redirect window, if any.

    Returns:
        LinkStatus: exactly one status.
    """
    if disabled:
        return LinkStatus.DISABLED

    now = as_utc(now)
    if expires_at is not None and now >= as_utc(expires_at):
        return LinkStatus.EXPIRED
    if active_from is not None and now < as_utc(active_from):
        return LinkStatus.SCHEDULED
    return LinkStatus.ACTIVE


def link_status(link: LinkModel, now: datetime | None = None) -> LinkStatus:
    """Resolve the status of a link, using the current UTC time if `now` is omitted."""
    return resolve_status(now or datetime.now(UTC), link.disabled, link.active_from, link.expires_at)


def count_by_status(links: Iterable[LinkModel], now: datetime | None = None) -> dict[LinkStatus, int]:
    """Count links per status. Every status is present in the result, zeros included."""
    now = now or datetime.now(UTC)
    counts = Counter(link_status(link, now) for link in links)
    return {status: counts.get(status, 0) for status in LinkStatus}

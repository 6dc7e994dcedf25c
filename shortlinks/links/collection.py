"""Client-side search and sort over the in-memory link list.

Functions:
    filter_links(links, query) -> list[LinkModel]
        Case-insensitive substring match on name, original URL and slug.
    sort_links(links, sort_key, sort_order) -> list[LinkModel]
        Stable sort by creation time, clicks or name.
    filter_and_sort(links, query, sort_key, sort_order) -> list[LinkModel]
        Both of the above; what the dashboard displays.
    total_clicks(links) -> int

Nothing here reads the clock or any external state; the same inputs always
produce the same output.

Example:
    >>> visible = filter_and_sort(links, 'exam', SortKey.CLICKS, SortOrder.DESC)
"""

from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import Any

from shortlinks.models import LinkModel


class SortKey(StrEnum):
    CREATED_AT = 'createdAt'
    CLICKS = 'clicks'
    NAME = 'name'


class SortOrder(StrEnum):
    ASC = 'asc'
    DESC = 'desc'


_SORT_KEYS: dict[SortKey, Callable[[LinkModel], Any]] = {
    SortKey.CREATED_AT: lambda link: link.created_at,
    SortKey.CLICKS: lambda link: link.clicks,
    SortKey.NAME: lambda link: (link.name or '').casefold(),
}


def _matches(link: LinkModel, needle: str) -> bool:
    return any(needle in (field or '').lower() for field in (link.name, link.original, link.slug))


def filter_links(links: Iterable[LinkModel], query: str | None) -> list[LinkModel]:
    needle = (query or '').strip().lower()
    if not needle:
        return list(links)
    return [link for link in links if _matches(link, needle)]


def sort_links(links: Iterable[LinkModel], sort_key: SortKey | str, sort_order: SortOrder | str) -> list[LinkModel]:
    """Sort links without disturbing the relative order of equal elements

    `sorted(..., reverse=True)` keeps equal elements in input order, which is
    exactly "negate the comparator" for a stable sort.

    Raises:
        ValueError:
            If sort_key or sort_order is not a known value.
    """
    key = _SORT_KEYS[SortKey(sort_key)]
    return sorted(links, key=key, reverse=SortOrder(sort_order) is SortOrder.DESC)


def filter_and_sort(
    links: Iterable[LinkModel],
    query: str | None = '',
    sort_key: SortKey | str = SortKey.CREATED_AT,
    sort_order: SortOrder | str = SortOrder.DESC,
) -> list[LinkModel]:
    return sort_links(filter_links(links, query), sort_key, sort_order)


def total_clicks(links: Iterable[LinkModel]) -> int:
    return sum(link.clicks for link in links)

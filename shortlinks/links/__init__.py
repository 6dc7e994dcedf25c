from shortlinks.links.lifecycle import resolve_status, link_status, count_by_status
from shortlinks.links.collection import SortKey, SortOrder, filter_links, sort_links, filter_and_sort, total_clicks
from shortlinks.links.access import AccessState, AccessOutcome, AccessResolver


__all__ = [
    'resolve_status',
    'link_status',
    'count_by_status',
    'SortKey',
    'SortOrder',
    'filter_links',
    'sort_links',
    'filter_and_sort',
    'total_clicks',
    'AccessState',
    'AccessOutcome',
    'AccessResolver',
]

"""Client core for the short link service.

Subpackages:
    api:    resilient HTTP client (request executor, retry policy, typed operations)
    links:  lifecycle resolution, password-gated access, search and sort
    models: typed payloads exchanged with the service
    store:  credential Token Store (with cookie/Redis mirrors) and view preferences
    utils:  configuration, logging, timestamps and input validation
"""

from shortlinks.api import ShortLinksClient, RequestExecutor, RetryPolicy
from shortlinks.links import AccessResolver, filter_and_sort, resolve_status
from shortlinks.store import TokenStore
from shortlinks.utils import load_config, initialize_logging


__version__ = '0.1.0'

__all__ = [
    'ShortLinksClient',
    'RequestExecutor',
    'RetryPolicy',
    'AccessResolver',
    'filter_and_sort',
    'resolve_status',
    'TokenStore',
    'load_config',
    'initialize_logging',
]

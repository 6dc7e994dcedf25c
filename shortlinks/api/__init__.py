from shortlinks.api.executor import RequestExecutor
from shortlinks.api.retry import RetryPolicy
from shortlinks.api.client import ShortLinksClient


__all__ = [
    'RequestExecutor',
    'RetryPolicy',
    'ShortLinksClient',
]

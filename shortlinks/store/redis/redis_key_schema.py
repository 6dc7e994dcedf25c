import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for mirrored client sessions.

    An optional prefix can be provided to namespace all generated keys,
    e.g. "shortlinks:prod" or "shortlinks:dev".

    Example:
        >>> RedisKeySchema('shortlinks:prod').session_key('9f86d081...')
        'shortlinks:prod:sessions:9f86d081...'
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def session_key(self, session_id: str) -> str:
        return f'sessions:{session_id}'

import functools
from typing import Any, TypeVar
from collections.abc import Callable

import redis

from shortlinks.exceptions import StoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_redis_connection_error(method: F) -> F:
    """Turn Redis connectivity failures inside a store method into StoreError

    The decorated method must belong to a RedisClientMixin subclass, whose
    `endpoint` names the unreachable server in the error message.

    Example:
        >>> @handle_redis_connection_error
        ... def current(self):
        ...     return self.redis.get(self.keys.session_key(self._session))
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise StoreError(f"Can't connect to Redis at {self.endpoint} ({method.__name__} failed).") from e

    return wrapper

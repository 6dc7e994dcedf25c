"""Redis mixin shared by Redis-backed stores.

Responsibilities:
    - Hold the injected Redis client and the key schema
    - Healthcheck the client on construction
    - Describe the Redis endpoint for error messages

Classes:
    - RedisClientMixin: Base mixin to inject Redis key management, client & healthcheck.

Example:
    >>> class RedisCredentialPublisher(RedisClientMixin, CredentialPublisher):
    ...     pass
    ...
    >>> publisher = RedisCredentialPublisher(redis.Redis(decode_responses=True), prefix='shortlinks:prod')
    >>> publisher.endpoint
    'localhost:6379/0'
"""

import redis

from shortlinks.store.redis.redis_key_schema import RedisKeySchema
from shortlinks.exceptions import StoreError


class RedisClientMixin:
    """Redis client holder with a fail-fast healthcheck.

    Attributes:
        redis (redis.Redis):
            Client supplied by the caller. The mixin never opens connections of its own.

        keys (RedisKeySchema):
            Helper class for generating namespaced Redis key names.
    """

    def __init__(self, redis_client: redis.Redis, prefix: str | None = None):
        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    @property
    def endpoint(self) -> str:
        """'host:port/db' of the client's connection pool."""
        info = self.redis.connection_pool.connection_kwargs
        return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis to healthcheck connectivity

        Raises:
            StoreError:
                If Redis is unreachable and raise_error=True.
        """
        try:
            self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            if raise_error:
                raise StoreError(f"Can't connect to Redis at {self.endpoint}. Check the provided client configuration.") from e
            return False
        return True

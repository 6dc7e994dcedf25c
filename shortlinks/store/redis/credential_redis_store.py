"""Redis session registry mirroring the bearer token.

Routing guards that run in a different process (an edge proxy, a server-side
renderer) can't read an in-memory cookie jar. This publisher registers each
published credential under `<prefix>:sessions:<sha256 of token>`, holding
the issue time and expiring with the session lifetime. A guard holding the
cookie value hashes it and checks that the key exists; the token itself is never written to Redis.

Every client owns only its own session key, so clients sharing one Redis
never overwrite or retract each other's sessions.

Example:
    >>> publisher = RedisCredentialPublisher(redis.Redis(decode_responses=True), prefix='shortlinks:dev')
    >>> publisher.publish('eyJhbGciOi...')
    >>> publisher.current()
    'eyJhbGciOi...'
"""

import hashlib
from datetime import datetime, UTC

from beartype import beartype

from shortlinks.constants import Defaults
from shortlinks.store.base import CredentialPublisher
from shortlinks.store.redis.mixins import RedisClientMixin
from shortlinks.store.redis.helpers import handle_redis_connection_error
from shortlinks.utils.helpers import format_timestamp


def session_id(token: str) -> str:
    """Stable, non-reversible identifier of a credential."""
    return hashlib.sha256(token.encode('utf-8')).hexdigest()


class RedisCredentialPublisher(RedisClientMixin, CredentialPublisher):
    """Redis-backed credential mirror.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.
        ttl (int):
            Lifetime of the mirrored session in seconds.
        token (str | None):
            Credential already held by the primary sink, so a restarted
            process can still retract the session it registered earlier.
    """

    def __init__(
        self,
        *args,
        ttl: int = Defaults.SESSION_TTL,
        token: str | None = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.ttl = ttl
        self._token = token or None

    @handle_redis_connection_error
    @beartype
    def publish(self, token: str) -> None:
        previous = self._token
        if previous is not None and previous != token:
            self.redis.delete(self.keys.session_key(session_id(previous)))
        self.redis.set(self.keys.session_key(session_id(token)), format_timestamp(datetime.now(UTC)), ex=self.ttl)
        self._token = token

    @handle_redis_connection_error
    def retract(self) -> None:
        if self._token is None:
            return
        self.redis.delete(self.keys.session_key(session_id(self._token)))
        self._token = None

    @handle_redis_connection_error
    def current(self) -> str | None:
        """The token this publisher registered, while its session is still live."""
        if self._token is None:
            return None
        return self._token if self.redis.exists(self.keys.session_key(session_id(self._token))) else None

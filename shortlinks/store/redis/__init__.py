from shortlinks.store.redis.redis_key_schema import RedisKeySchema
from shortlinks.store.redis.mixins import RedisClientMixin
from shortlinks.store.redis.credential_redis_store import RedisCredentialPublisher, session_id


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'RedisCredentialPublisher',
    'session_id',
]

from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def app_prefix():
    """Provide a consistent Redis key prefix for testing."""
    return 'shortlinks:test'


@pytest.fixture
def redis_client():
    """Mock a Redis client that answers PING and remembers its connection settings."""
    _redis_client = MagicMock(
        spec=redis.Redis, connection_pool=MagicMock(spec=redis.ConnectionPool, connection_kwargs={'host': 'redis', 'port': 6379, 'db': 0})
    )
    _redis_client.ping.return_value = True
    return _redis_client


@pytest.fixture
def redis_data(redis_client):
    """Back the mocked SET/DELETE/EXISTS commands with a shared dict."""
    data = {}
    redis_client.set.side_effect = lambda key, value, ex=None: data.__setitem__(key, value)
    redis_client.delete.side_effect = lambda *keys: sum(data.pop(key, None) is not None for key in keys)
    redis_client.exists.side_effect = lambda *keys: sum(key in data for key in keys)
    return data

import json
from collections.abc import Callable
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from shortlinks.api import RequestExecutor, ShortLinksClient
from shortlinks.store import MemoryCredentialPublisher, TokenStore
from shortlinks.utils.config import ClientConfig


BASE_URL = 'https://sho.rt/api'


class Recorder:
    """Mock transport handler that records requests and replays scripted responses.

    Each scripted item is either an httpx.Response or an exception instance to raise.
    The last item is repeated once the script runs out.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.script: list[httpx.Response | Exception] = [httpx.Response(200, json={})]

    def respond(self, *items: httpx.Response | Exception) -> 'Recorder':
        self.script = list(items)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.script[min(len(self.requests), len(self.script)) - 1]
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1):
        content = self.requests[index].content
        return json.loads(content) if content else None


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, timeout=1.0, retry_attempts=3, retry_delay=0.5)


@pytest.fixture
def tokens() -> TokenStore:
    return TokenStore(MemoryCredentialPublisher())


@pytest.fixture
def sleep() -> AsyncMock:
    return AsyncMock(return_value=None)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest_asyncio.fixture
async def http(recorder) -> httpx.AsyncClient:
    async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
        yield client


@pytest.fixture
def executor(http, config) -> RequestExecutor:
    return RequestExecutor(http, timeout=config.timeout)


@pytest.fixture
def client(config, tokens, executor, sleep) -> ShortLinksClient:
    return ShortLinksClient(config, tokens, executor=executor, sleep=sleep)


@pytest.fixture
def link_payload() -> Callable[..., dict]:
    def _make(**overrides) -> dict:
        payload = {
            'id': '0b8f2c1e-6c1a-4f43-9a57-1f2e9f0d7a10',
            'slug': 'abc123',
            'original': 'https://example.com/article/123',
            'name': 'Article',
            'clicks': 12,
            'uniqueClicks': 7,
            'createdAt': '2024-05-01T10:00:00Z',
            'lastUpdated': '2024-05-02T10:00:00Z',
            'shortUrl': 'https://sho.rt/abc123',
        }
        payload.update(overrides)
        return payload

    return _make

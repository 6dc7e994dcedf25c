"""Build stores from a `ClientConfig`.

Functions:
    token_store_from_config(config, cookies=None, redis_client=None) -> TokenStore
        Primary sink is the credential file if configured, memory otherwise.
        The cookie mirror is always attached; the Redis mirror only when a
        Redis client is supplied.

    preferences_store_from_config(config) -> PreferencesBaseStore
        YAML file if configured, memory otherwise.

Example:
    >>> config = load_config()
    >>> tokens = token_store_from_config(config)
    >>> prefs = preferences_store_from_config(config)
"""

import urllib.parse

import httpx
import redis

from shortlinks.store.base import CredentialPublisher, PreferencesBaseStore
from shortlinks.store.local import (
    CookieJarCredentialPublisher,
    FileCredentialPublisher,
    MemoryCredentialPublisher,
    MemoryPreferencesStore,
    YamlPreferencesStore,
)
from shortlinks.store.redis import RedisCredentialPublisher
from shortlinks.store.token_store import CompositeCredentialPublisher, TokenStore
from shortlinks.utils.config import ClientConfig, app_prefix


def token_store_from_config(
    config: ClientConfig,
    cookies: httpx.Cookies | None = None,
    redis_client: redis.Redis | None = None,
) -> TokenStore:
    if config.credential_file is not None:
        primary = FileCredentialPublisher(config.credential_file)
    else:
        primary = MemoryCredentialPublisher()

    mirrors: list[CredentialPublisher] = [
        CookieJarCredentialPublisher(
            cookies,
            name=config.token_key,
            domain=urllib.parse.urlparse(config.base_url).hostname or 'localhost',
            max_age=config.cookie_max_age,
        )
    ]
    if redis_client is not None:
        mirrors.append(
            RedisCredentialPublisher(
                redis_client,
                prefix=app_prefix(),
                ttl=config.session_ttl,
                token=primary.current(),
            )
        )

    return TokenStore(CompositeCredentialPublisher(primary, *mirrors))


def preferences_store_from_config(config: ClientConfig) -> PreferencesBaseStore:
    if config.preferences_file is not None:
        return YamlPreferencesStore(config.preferences_file)
    return MemoryPreferencesStore()

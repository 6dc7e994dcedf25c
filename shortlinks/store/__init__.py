from shortlinks.store.base import CredentialPublisher, PreferencesBaseStore, ViewPreferences
from shortlinks.store.token_store import CompositeCredentialPublisher, TokenStore
from shortlinks.store.factory import token_store_from_config, preferences_store_from_config
from shortlinks.store.local import (
    MemoryCredentialPublisher,
    MemoryPreferencesStore,
    FileCredentialPublisher,
    YamlPreferencesStore,
    CookieJarCredentialPublisher,
)


__all__ = [
    'CredentialPublisher',
    'PreferencesBaseStore',
    'ViewPreferences',
    'CompositeCredentialPublisher',
    'TokenStore',
    'MemoryCredentialPublisher',
    'MemoryPreferencesStore',
    'FileCredentialPublisher',
    'YamlPreferencesStore',
    'CookieJarCredentialPublisher',
    'token_store_from_config',
    'preferences_store_from_config',
]

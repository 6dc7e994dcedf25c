from shortlinks.store.local.memory import MemoryCredentialPublisher, MemoryPreferencesStore
from shortlinks.store.local.file import FileCredentialPublisher, YamlPreferencesStore
from shortlinks.store.local.cookies import CookieJarCredentialPublisher


__all__ = [
    'MemoryCredentialPublisher',
    'MemoryPreferencesStore',
    'FileCredentialPublisher',
    'YamlPreferencesStore',
    'CookieJarCredentialPublisher',
]

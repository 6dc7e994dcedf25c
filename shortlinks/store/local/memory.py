"""In-process credential and preference stores.

Used as the primary credential sink for short-lived processes and in tests.
"""

from shortlinks.store.base import CredentialPublisher, PreferencesBaseStore, ViewPreferences


class MemoryCredentialPublisher(CredentialPublisher):
    def __init__(self, token: str | None = None):
        self._token = token

    def publish(self, token: str) -> None:
        self._token = token

    def retract(self) -> None:
        self._token = None

    def current(self) -> str | None:
        return self._token


class MemoryPreferencesStore(PreferencesBaseStore):
    def __init__(self, preferences: ViewPreferences | None = None):
        self._preferences = preferences

    def load(self) -> ViewPreferences:
        return self._preferences or ViewPreferences()

    def save(self, preferences: ViewPreferences) -> None:
        self._preferences = preferences

    def reset(self) -> None:
        self._preferences = None

from shortlinks.store.base.credential_base_store import CredentialPublisher
from shortlinks.store.base.preferences_base_store import PreferencesBaseStore, ViewPreferences


__all__ = [
    'CredentialPublisher',
    'PreferencesBaseStore',
    'ViewPreferences',
]

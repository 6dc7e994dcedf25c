"""File-backed credential and preference stores.

Classes:
    FileCredentialPublisher:
        Keep the bearer token in a single owner-only (0600) file.

    YamlPreferencesStore:
        Keep view preferences in a YAML document.

Example:
    >>> from pathlib import Path
    >>> publisher = FileCredentialPublisher(Path('~/.shortlinks/token'))
    >>> publisher.publish('eyJhbGciOi...')
    >>> publisher.current()
    'eyJhbGciOi...'
    >>> publisher.retract()
    >>> publisher.current() is None
    True
"""

import os
import logging
from pathlib import Path

import yaml
from beartype import beartype

from shortlinks.exceptions import StoreError
from shortlinks.store.base import CredentialPublisher, PreferencesBaseStore, ViewPreferences


logger = logging.getLogger(__name__)

TOKEN_FILE_MODE = 0o600


class FileCredentialPublisher(CredentialPublisher):
    """Credential sink persisting the token to disk.

    Attributes:
        path (Path):
            Token file location. Parent directories are created on publish.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    @beartype
    def publish(self, token: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Create with restricted permissions before any secret is written
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, TOKEN_FILE_MODE)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(token)
            os.chmod(self.path, TOKEN_FILE_MODE)
        except OSError as e:
            raise StoreError(f"Can't write credential file {self.path}.") from e

    def retract(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StoreError(f"Can't remove credential file {self.path}.") from e

    def current(self) -> str | None:
        try:
            token = self.path.read_text(encoding='utf-8').strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreError(f"Can't read credential file {self.path}.") from e
        return token or None


class YamlPreferencesStore(PreferencesBaseStore):
    """Preference store persisting `ViewPreferences` as a YAML mapping.

    Corrupt or unreadable documents are logged and treated as empty.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> ViewPreferences:
        try:
            with self.path.open(encoding='utf-8') as f:
                document = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return ViewPreferences()
        except (OSError, yaml.YAMLError):
            logger.warning('Ignoring unreadable preferences file.', extra={'preferencesFile': str(self.path)})
            return ViewPreferences()

        if not isinstance(document, dict):
            logger.warning('Ignoring malformed preferences file.', extra={'preferencesFile': str(self.path)})
            return ViewPreferences()
        return ViewPreferences.from_dict(document)

    @beartype
    def save(self, preferences: ViewPreferences) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('w', encoding='utf-8') as f:
                yaml.safe_dump(preferences.to_dict(), f, default_flow_style=False)
        except OSError as e:
            raise StoreError(f"Can't write preferences file {self.path}.") from e

    def reset(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StoreError(f"Can't remove preferences file {self.path}.") from e

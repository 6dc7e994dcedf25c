"""Client configuration management.

Configuration is resolved in three layers, later layers winning:

    1. Built-in defaults (`shortlinks.constants.Defaults`)
    2. An optional YAML document (path given explicitly or via `SHORTLINKS_CONFIG`)
    3. Environment variable overrides (`SHORTLINKS_API_URL`, `SHORTLINKS_TIMEOUT`, ...)

The YAML document follows this structure (every key is optional):

    client:
      base_url: https://sho.rt/api
      timeout: 10
      retry_attempts: 3
      retry_delay: 1
      token_key: auth_token
    storage:
      credential_file: ~/.shortlinks/token
      preferences_file: ~/.shortlinks/preferences.yml

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the namespace prefix for shared stores, or None if `APP_NAME` is not set.

    load_config(path: str | Path | None = None) -> ClientConfig
        Resolve the client configuration.

Example:
    >>> from shortlinks.utils.config import load_config
    >>> config = load_config()
    >>> config.base_url
    'http://localhost:8080/api'
    >>> config.retry_attempts
    3
"""

import os
import logging
import urllib.parse
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from shortlinks.constants import ENV, Defaults
from shortlinks.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


# fmt: off
@dataclass(frozen=True)
class ClientConfig:
    base_url: str = Defaults.API_URL                # Link service root, e.g. https://sho.rt/api
    timeout: float = Defaults.TIMEOUT               # Per-request deadline in seconds
    retry_attempts: int = Defaults.RETRY_ATTEMPTS   # Total attempts for transient failures
    retry_delay: float = Defaults.RETRY_DELAY       # Backoff unit in seconds
    token_key: str = Defaults.TOKEN_KEY             # Cookie / storage key of the credential
    cookie_max_age: int = Defaults.COOKIE_MAX_AGE   # Lifetime of the mirrored cookie in seconds
    session_ttl: int = Defaults.SESSION_TTL         # Lifetime of the mirrored Redis session in seconds
    credential_file: Path | None = None             # Token file for FileCredentialPublisher
    preferences_file: Path | None = None            # YAML file for YamlPreferencesStore
# fmt: on

    def __post_init__(self):
        components = urllib.parse.urlparse(self.base_url)
        if components.scheme not in {'http', 'https'} or not components.netloc:
            raise BadConfigurationError(f'Base URL must be an absolute http(s) URL (given value: {self.base_url!r}).')
        if self.timeout <= 0:
            raise BadConfigurationError(f'Timeout must be positive (given value: {self.timeout}).')
        if self.retry_attempts < 1:
            raise BadConfigurationError(f'Retry attempts must be at least 1 (given value: {self.retry_attempts}).')
        if self.retry_delay < 0:
            raise BadConfigurationError(f'Retry delay must be non-negative (given value: {self.retry_delay}).')
        if not self.token_key:
            raise BadConfigurationError('Token key must be a non-empty string.')


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return namespace prefix for shared stores

    Returns:
        str: prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'shortlinks'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'shortlinks:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


_ENV_OVERRIDES = {
    ENV.Client.API_URL: ('base_url', str),
    ENV.Client.TIMEOUT: ('timeout', float),
    ENV.Client.RETRY_ATTEMPTS: ('retry_attempts', int),
    ENV.Client.RETRY_DELAY: ('retry_delay', float),
    ENV.Client.TOKEN_KEY: ('token_key', str),
}


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.expanduser().open(encoding='utf-8') as f:
            document = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise BadConfigurationError(f'Configuration file {path} does not exist.') from e
    except yaml.YAMLError as e:
        raise BadConfigurationError(f'Configuration file {path} is not valid YAML.') from e

    if not isinstance(document, dict):
        raise BadConfigurationError(f'Configuration file {path} must contain a mapping.')

    values = dict(document.get('client') or {})
    values.update(document.get('storage') or {})
    return values


def _coerce(values: dict[str, Any]) -> dict[str, Any]:
    known = {f.name: f for f in fields(ClientConfig)}
    unknown = set(values) - set(known)
    if unknown:
        raise BadConfigurationError(f'Unknown configuration keys: {", ".join(sorted(unknown))}')

    coerced = {}
    for key, value in values.items():
        if value is None:
            continue
        try:
            if key in {'credential_file', 'preferences_file'}:
                coerced[key] = Path(value).expanduser()
            elif key in {'timeout', 'retry_delay'}:
                coerced[key] = float(value)
            elif key in {'retry_attempts', 'cookie_max_age', 'session_ttl'}:
                coerced[key] = int(value)
            else:
                coerced[key] = str(value)
        except (TypeError, ValueError) as e:
            raise BadConfigurationError(f'Invalid value for {key!r}: {value!r}') from e
    return coerced


def load_config(path: str | Path | None = None) -> ClientConfig:
    """Resolve the client configuration from defaults, YAML and environment

    Args:
        path (str | Path | None):
            Optional YAML configuration file. Falls back to `SHORTLINKS_CONFIG`.

    Returns:
        ClientConfig: validated, immutable configuration.

    Raises:
        BadConfigurationError:
            If the file is missing/invalid or any value fails validation.
    """
    path = path or os.environ.get(ENV.App.CONFIG_FILE)
    values = _coerce(_read_yaml(Path(path))) if path else {}
    if path:
        logger.debug('Loaded client configuration file.', extra={'configFile': str(path)})

    config = ClientConfig(**values)

    overrides = {}
    for env_name, (key, cast) in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or raw == '':
            continue
        try:
            overrides[key] = cast(raw)
        except ValueError as e:
            raise BadConfigurationError(f'Invalid value for {env_name}: {raw!r}') from e

    if overrides:
        logger.debug('Applied environment overrides.', extra={'overrides': sorted(overrides)})
        config = replace(config, **overrides)
    return config

"""Cookie-jar mirror for the bearer token.

A routing guard that gates protected views only looks at the `auth_token`
cookie; it can't call into client code. This publisher keeps that cookie in
step with the Token Store. The jar is an `httpx.Cookies` instance, so it can
be handed to an `httpx.AsyncClient` as-is, and it can optionally be saved as a
Mozilla-format cookie file for guards running in another process.

Example:
    >>> import httpx
    >>> cookies = httpx.Cookies()
    >>> mirror = CookieJarCredentialPublisher(cookies, domain='sho.rt')
    >>> mirror.publish('eyJhbGciOi...')
    >>> cookies.get('auth_token', domain='sho.rt')
    'eyJhbGciOi...'
"""

import os
import time
import http.cookiejar
from pathlib import Path

import httpx
from beartype import beartype

from shortlinks.constants import Defaults
from shortlinks.exceptions import StoreError
from shortlinks.store.base import CredentialPublisher


class CookieJarCredentialPublisher(CredentialPublisher):
    """Mirror the credential into a cookie jar.

    Attributes:
        cookies (httpx.Cookies):
            Jar holding the mirrored cookie.
        name (str):
            Cookie name the routing guard reads (default 'auth_token').
        domain (str):
            Cookie domain.
        max_age (int):
            Cookie lifetime in seconds.
        cookie_file (Path | None):
            If set, the jar is saved to this Mozilla cookie file after every change.
    """

    def __init__(
        self,
        cookies: httpx.Cookies | None = None,
        name: str = Defaults.TOKEN_KEY,
        domain: str = 'localhost',
        max_age: int = Defaults.COOKIE_MAX_AGE,
        cookie_file: Path | str | None = None,
    ):
        self.cookies = cookies if cookies is not None else httpx.Cookies()
        self.name = name
        self.domain = domain
        self.max_age = max_age
        self.cookie_file = Path(cookie_file).expanduser() if cookie_file is not None else None

    def _make_cookie(self, token: str) -> http.cookiejar.Cookie:
        return http.cookiejar.Cookie(
            version=0,
            name=self.name,
            value=token,
            port=None,
            port_specified=False,
            domain=self.domain,
            domain_specified=True,
            domain_initial_dot=self.domain.startswith('.'),
            path='/',
            path_specified=True,
            secure=True,
            expires=int(time.time()) + self.max_age,
            discard=False,
            comment=None,
            comment_url=None,
            rest={'SameSite': 'Strict'},
        )

    def _save(self) -> None:
        if self.cookie_file is None:
            return
        jar = http.cookiejar.MozillaCookieJar(str(self.cookie_file))
        for cookie in self.cookies.jar:
            jar.set_cookie(cookie)
        try:
            self.cookie_file.parent.mkdir(parents=True, exist_ok=True)
            jar.save(ignore_discard=True)
            os.chmod(self.cookie_file, 0o600)
        except OSError as e:
            raise StoreError(f"Can't write cookie file {self.cookie_file}.") from e

    @beartype
    def publish(self, token: str) -> None:
        self.cookies.delete(self.name, domain=self.domain)
        self.cookies.jar.set_cookie(self._make_cookie(token))
        self._save()

    def retract(self) -> None:
        self.cookies.delete(self.name, domain=self.domain)
        self._save()

    def current(self) -> str | None:
        for cookie in self.cookies.jar:
            if cookie.name == self.name and cookie.domain == self.domain and not cookie.is_expired():
                return cookie.value
        return None

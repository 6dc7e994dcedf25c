"""Unit tests for CookieJarCredentialPublisher.

Test coverage includes:

1. Mirroring
   - Ensures the cookie is set on the configured domain and replaced on every publish.
   - Ensures retract() removes it, even when it was never set.
   - Ensures expired cookies are not reported as current.

2. Cookie attributes
   - Ensures the cookie is Secure, SameSite=Strict and lives for max_age seconds.

3. Cookie file
   - Ensures the jar is saved in Mozilla format with 0600 permissions.
"""

import http.cookiejar
import stat
import time

import httpx
from freezegun import freeze_time

from shortlinks.store import CookieJarCredentialPublisher


# -------------------------------
# 1. Mirroring
# -------------------------------


def test_publish_and_retract():
    cookies = httpx.Cookies()
    mirror = CookieJarCredentialPublisher(cookies, name='auth_token', domain='sho.rt')

    mirror.publish('first')
    mirror.publish('second')

    assert cookies.get('auth_token', domain='sho.rt') == 'second'
    assert len(list(cookies.jar)) == 1
    assert mirror.current() == 'second'

    mirror.retract()
    assert mirror.current() is None
    assert len(list(cookies.jar)) == 0


def test_retract_without_cookie():
    mirror = CookieJarCredentialPublisher(domain='sho.rt')
    mirror.retract()
    assert mirror.current() is None


def test_other_domains_are_untouched():
    cookies = httpx.Cookies()
    cookies.set('auth_token', 'foreign', domain='other.test')
    mirror = CookieJarCredentialPublisher(cookies, domain='sho.rt')

    assert mirror.current() is None
    mirror.publish('mine')
    mirror.retract()

    assert cookies.get('auth_token', domain='other.test') == 'foreign'


def test_expired_cookie_is_not_current():
    mirror = CookieJarCredentialPublisher(domain='sho.rt', max_age=-60)
    mirror.publish('stale')
    assert mirror.current() is None


# -------------------------------
# 2. Cookie attributes
# -------------------------------


@freeze_time('2024-06-01T12:00:00Z')
def test_cookie_attributes():
    mirror = CookieJarCredentialPublisher(domain='sho.rt', max_age=3600)
    mirror.publish('t0k3n')

    (cookie,) = list(mirror.cookies.jar)
    assert cookie.secure is True
    assert cookie.path == '/'
    assert cookie.get_nonstandard_attr('SameSite') == 'Strict'
    assert cookie.expires == int(time.time()) + 3600


# -------------------------------
# 3. Cookie file
# -------------------------------


def test_cookie_file_is_saved(tmp_path):
    path = tmp_path / 'cookies.txt'
    mirror = CookieJarCredentialPublisher(domain='sho.rt', cookie_file=path)

    mirror.publish('t0k3n')

    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    jar = http.cookiejar.MozillaCookieJar(str(path))
    jar.load(ignore_discard=True)
    assert [(c.name, c.value, c.domain) for c in jar] == [('auth_token', 't0k3n', 'sho.rt')]

    mirror.retract()
    jar = http.cookiejar.MozillaCookieJar(str(path))
    jar.load(ignore_discard=True)
    assert list(jar) == []

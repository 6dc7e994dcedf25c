"""Token Store: sole owner of the bearer credential.

The store is read before every outgoing request and written only by
login/register/logout (and cleared when the server rejects the credential).
Writes fan out through a `CompositeCredentialPublisher`, so the primary sink
and its mirrors (cookie jar, Redis) never drift apart.

Classes:
    CompositeCredentialPublisher:
        Publish to a primary sink plus any number of mirrors.

    TokenStore:
        get()/set()/clear() facade used by the client.

Example:
    >>> from shortlinks.store.local import MemoryCredentialPublisher, CookieJarCredentialPublisher
    >>> cookies = CookieJarCredentialPublisher()
    >>> store = TokenStore(CompositeCredentialPublisher(MemoryCredentialPublisher(), cookies))
    >>> store.set('eyJhbGciOi...')
    >>> cookies.current()
    'eyJhbGciOi...'
    >>> store.clear()
    >>> store.get() is None
    True
"""

import logging

from shortlinks.exceptions import StoreError
from shortlinks.store.base import CredentialPublisher


logger = logging.getLogger(__name__)


class CompositeCredentialPublisher(CredentialPublisher):
    """Fan credential writes out to a primary sink and its mirrors.

    `current()` only consults the primary sink; mirrors are write-only from
    the client's point of view.
    """

    def __init__(self, primary: CredentialPublisher, *mirrors: CredentialPublisher):
        self.primary = primary
        self.mirrors = tuple(mirrors)

    @property
    def sinks(self) -> tuple[CredentialPublisher, ...]:
        return (self.primary, *self.mirrors)

    def publish(self, token: str) -> None:
        for sink in self.sinks:
            sink.publish(token)

    def retract(self) -> None:
        """Retract from every sink, even if some of them fail.

        Raises:
            StoreError:
                The first failure, after all sinks have been attempted.
        """
        failure = None
        for sink in self.sinks:
            try:
                sink.retract()
            except StoreError as e:
                logger.warning('Failed to retract credential from sink.', extra={'sink': type(sink).__name__})
                failure = failure or e
        if failure is not None:
            raise failure

    def current(self) -> str | None:
        return self.primary.current()


class TokenStore:
    """Persist and retrieve the opaque bearer token.

    Attributes:
        publisher (CredentialPublisher):
            Sink(s) the token is written to. Usually a CompositeCredentialPublisher.
    """

    def __init__(self, publisher: CredentialPublisher):
        self.publisher = publisher

    def get(self) -> str | None:
        return self.publisher.current()

    def set(self, token: str) -> None:
        if not isinstance(token, str) or not token:
            raise ValueError('Token must be a non-empty string.')
        self.publisher.publish(token)
        logger.info('Stored credential.')

    def clear(self) -> None:
        self.publisher.retract()
        logger.info('Cleared credential.')

    @property
    def is_authenticated(self) -> bool:
        return self.get() is not None

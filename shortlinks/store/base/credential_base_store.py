"""Abstract base class for credential publishers.

A credential publisher is one sink the bearer token is written to. The Token
Store composes several of them: a primary sink the client reads back from,
and mirrors that exist only so other parties (e.g. a routing guard reading a
cookie) can see the same credential without importing client code.

Example:
    Typical usage with concrete publishers:

        >>> from shortlinks.store.local import MemoryCredentialPublisher, CookieJarCredentialPublisher
        >>> from shortlinks.store import CompositeCredentialPublisher, TokenStore

        >>> publisher = CompositeCredentialPublisher(
        ...     MemoryCredentialPublisher(),
        ...     CookieJarCredentialPublisher(),
        ... )
        >>> store = TokenStore(publisher)
        >>> store.set('eyJhbGciOi...')
        >>> store.get()
        'eyJhbGciOi...'
"""

from abc import ABC, abstractmethod


class CredentialPublisher(ABC):
    """Interface for credential sinks.

    Methods:
        publish(token: str) -> None:
            Write the token to the sink, replacing any previous one.
            Raises StoreError if the sink can't be written.

        retract() -> None:
            Remove the token from the sink. Retracting an empty sink is a no-op.
            Raises StoreError if the sink can't be written.

        current() -> str | None:
            Return the token held by the sink, or None.
            Raises StoreError if the sink can't be read.
    """

    @abstractmethod
    def publish(self, token: str) -> None:
        pass

    @abstractmethod
    def retract(self) -> None:
        pass

    @abstractmethod
    def current(self) -> str | None:
        pass

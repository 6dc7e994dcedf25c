"""Resilient client for the link/authentication service.

`ShortLinksClient` is the only component that talks to the network. Every
operation attaches `Content-Type: application/json` and, when the Token
Store holds a credential, `Authorization: Bearer <token>`; runs through the
retry policy (transient failures only); and returns typed models.

Credential side effects:
    - `register()` / `login()` store the returned token before returning. They never
      send the stored token, so a rejected password leaves it untouched.
    - `logout()` clears the Token Store whether or not the remote call succeeds.
    - A 401 on a request that carried a credential clears the Token Store,
      since the server has declared that credential invalid.

The client is constructed explicitly and takes its collaborators as
arguments, so tests can pass fakes without touching global state.

Example:
    >>> config = load_config()
    >>> store = TokenStore(MemoryCredentialPublisher())
    >>> async with ShortLinksClient(config, store) as client:
    ...     await client.login('ada@example.com', 'correct horse')
    ...     links = await client.list_links()
"""

import asyncio
import logging
import urllib.parse
from typing import Any

import httpx

from shortlinks.api.executor import RequestExecutor
from shortlinks.api.helpers import decode
from shortlinks.api.retry import RetryPolicy
from shortlinks.constants import HTTPStatus
from shortlinks.exceptions import AuthError, MalformedResponseError, StoreError
from shortlinks.models import (
    AccessCheck,
    AuthResult,
    CreatedLink,
    CreateLinkRequest,
    DashboardStats,
    LinkModel,
    LinkUpdate,
    UserModel,
)
from shortlinks.store import TokenStore
from shortlinks.types import JSONPayload, Sleep
from shortlinks.utils.config import ClientConfig
from shortlinks.utils.validation import (
    validate_email,
    validate_password,
    validate_name,
    validate_schedule,
    validate_url,
)


logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Quote a value for use as a single path segment."""
    return urllib.parse.quote(value, safe='')


class ShortLinksClient:
    """Typed, retrying client for the link service.

    Attributes:
        config (ClientConfig):
            Base URL, timeout and retry settings.
        tokens (TokenStore):
            Credential owner; read before every request.
        executor (RequestExecutor):
            Single-request transport with deadline.
        retry (RetryPolicy):
            Backoff policy for transient failures.

    Methods:
        register(email, password) -> AuthResult
        login(email, password) -> AuthResult
        logout() -> None
        get_profile() -> UserModel
        create_link(request) -> CreatedLink
        list_links() -> list[LinkModel]
        get_link(link_id) -> LinkModel
        update_link(link_id, update) -> str
        delete_link(link_id) -> None
        check_access(slug, password=None) -> AccessCheck
        get_dashboard_stats() -> DashboardStats
    """

    def __init__(
        self,
        config: ClientConfig,
        tokens: TokenStore,
        *,
        executor: RequestExecutor | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.config = config
        self.tokens = tokens
        self._owns_http = executor is None
        if executor is None:
            http = httpx.AsyncClient(base_url=config.base_url, timeout=config.timeout)
            executor = RequestExecutor(http, timeout=config.timeout)
        self.executor = executor
        self.retry = RetryPolicy(attempts=config.retry_attempts, delay=config.retry_delay, sleep=sleep)

    async def __aenter__(self) -> 'ShortLinksClient':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP transport if this client created it."""
        if self._owns_http:
            await self.executor.http.aclose()

    # -------------------------------
    # Request plumbing
    # -------------------------------

    def _headers(self, token: str | None) -> dict[str, str]:
        headers = {'Content-Type': 'application/json'}
        if token:
            headers['Authorization'] = f'Bearer {token}'
        return headers

    def _discard_credential(self, description: str) -> None:
        """Clear the Token Store while another error is being raised.

        The composite publisher retracts the primary sink before re-raising a
        mirror's StoreError, so the failure is logged and the original error wins.
        """
        try:
            self.tokens.clear()
        except StoreError as e:
            logger.error(
                'Failed to clear credential from a mirror.',
                extra={'request': description, 'errorCode': e.error_code, 'reason': e.message},
            )

    async def _request(self, method: str, path: str, payload: Any = None, *, authenticated: bool = True) -> JSONPayload:
        description = f'{method} {path}'

        async def attempt() -> JSONPayload:
            # Re-read on every attempt so a concurrent logout is honoured
            token = self.tokens.get() if authenticated else None
            try:
                return await self.executor.execute(method, path, headers=self._headers(token), payload=payload)
            except AuthError as e:
                if token and e.status == HTTPStatus.UNAUTHORIZED and self.tokens.get() == token:
                    logger.info('Credential rejected by server, clearing it.', extra={'request': description})
                    self._discard_credential(description)
                raise

        return await self.retry.run(attempt, description=description)

    async def _authenticate(self, path: str, email: str, password: str) -> AuthResult:
        # No bearer token on credential exchange
        payload = await self._request('POST', path, {'email': email, 'password': password}, authenticated=False)
        result = decode(AuthResult.from_dict, payload)
        self.tokens.set(result.token)
        logger.info('Authenticated.', extra={'request': f'POST {path}', 'userId': result.user.id})
        return result

    # -------------------------------
    # Authentication
    # -------------------------------

    async def register(self, email: str, password: str) -> AuthResult:
        """Create an account and store its credential

        Raises:
            ValidationError:
                Locally, for a malformed e-mail or a password outside 4-50 characters;
                remotely, for a 400 response.
        """
        email = validate_email(email)
        validate_password(password)
        return await self._authenticate('/auth/register', email, password)

    async def login(self, email: str, password: str) -> AuthResult:
        return await self._authenticate('/auth/login', email, password)

    async def logout(self) -> None:
        """End the session remotely and, unconditionally, locally

        The Token Store is cleared even if the remote call fails; the remote
        error is still raised afterwards and is never replaced by a StoreError.
        """
        try:
            await self._request('POST', '/auth/logout')
        except BaseException:
            self._discard_credential('POST /auth/logout')
            raise
        self.tokens.clear()

    async def get_profile(self) -> UserModel:
        return decode(UserModel.from_dict, await self._request('GET', '/auth/profile'))

    # -------------------------------
    # Links
    # -------------------------------

    async def create_link(self, request: CreateLinkRequest) -> CreatedLink:
        """Shorten a URL

        Args:
            request (CreateLinkRequest):
                Target URL plus optional name, activation window and password.

        Returns:
            CreatedLink: the new slug and its short URL.

        Raises:
            ValidationError:
                If the URL, name, password or activation window is invalid.
        """
        validate_url(request.url)
        validate_name(request.name)
        validate_password(request.password)
        validate_schedule(request.active_from, request.expires_at)
        return decode(CreatedLink.from_dict, await self._request('POST', '/links', request.to_payload()))

    async def list_links(self) -> list[LinkModel]:
        payload = await self._request('GET', '/links')
        if not isinstance(payload, list):
            raise MalformedResponseError('Expected a list of links.')
        return [decode(LinkModel.from_dict, item) for item in payload]

    async def get_link(self, link_id: str) -> LinkModel:
        return decode(LinkModel.from_dict, await self._request('GET', f'/links/{_segment(link_id)}'))

    async def update_link(self, link_id: str, update: LinkUpdate) -> str:
        """Apply a partial update; returns the server's confirmation message."""
        validate_name(update.name)
        validate_password(update.password)
        validate_schedule(update.active_from, update.expires_at)
        payload = await self._request('PATCH', f'/links/{_segment(link_id)}', update.to_payload())
        return payload.get('message', '') if isinstance(payload, dict) else ''

    async def delete_link(self, link_id: str) -> None:
        await self._request('DELETE', f'/links/{_segment(link_id)}')

    async def check_access(self, slug: str, password: str | None = None) -> AccessCheck:
        payload = {} if password is None else {'password': password}
        return decode(AccessCheck.from_dict, await self._request('POST', f'/links/{_segment(slug)}/access', payload))

    # -------------------------------
    # Analytics
    # -------------------------------

    async def get_dashboard_stats(self) -> DashboardStats:
        return decode(DashboardStats.from_dict, await self._request('GET', '/dashboard/stats'))

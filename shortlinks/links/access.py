"""Password-gated access resolution for short links.

Visiting a slug runs a small state machine:

    resolve(slug)
        passwordRequired = false, originalUrl given  -> REDIRECT
        passwordRequired = true                      -> AWAITING_PASSWORD
    submit_password(outcome, password)
        passwordValid = true, originalUrl given      -> REDIRECT
        passwordValid = false                        -> AWAITING_PASSWORD (attempts + 1)
    any classified client error                      -> FAILED (error attached)

Outcomes are immutable snapshots; each visit starts from `resolve()` with a
zero attempt counter. The resolver never retries a whole flow on its own and
never limits attempts (lockout is the server's call). A password only ever
travels inside the body of the `submit_password` request: it is not logged,
not stored on the outcome and not kept by the resolver.

Example:
    >>> resolver = AccessResolver(client)
    >>> outcome = await resolver.resolve('abc123')
    >>> outcome.state
    <AccessState.AWAITING_PASSWORD: 'awaiting_password'>
    >>> outcome = await resolver.submit_password(outcome, 'hunter22')
    >>> outcome.state, outcome.original_url
    (<AccessState.REDIRECT: 'redirect'>, 'https://example.com/private')
"""

import logging
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Protocol

from shortlinks.constants import Messages
from shortlinks.exceptions import AppError, MalformedResponseError
from shortlinks.models import AccessCheck


logger = logging.getLogger(__name__)


class AccessState(StrEnum):
    REDIRECT = 'redirect'
    AWAITING_PASSWORD = 'awaiting_password'
    FAILED = 'failed'


class AccessChecker(Protocol):
    async def check_access(self, slug: str, password: str | None = None) -> AccessCheck: ...


# fmt: off
@dataclass(frozen=True)
class AccessOutcome:
    slug: str                           # Slug being visited
    state: AccessState                  # Terminal state of the last step
    original_url: str | None = None     # Navigation target (REDIRECT only)
    attempts: int = 0                   # Rejected password attempts so far
    error: AppError | None = None       # Failure to display (FAILED only)
# fmt: on

    @property
    def is_terminal(self) -> bool:
        return self.state is not AccessState.AWAITING_PASSWORD


class AccessResolver:
    """Drive the two-step password challenge for a slug.

    Attributes:
        client (AccessChecker):
            Anything exposing `check_access(slug, password=None)`, usually ShortLinksClient.
    """

    def __init__(self, client: AccessChecker):
        self.client = client

    async def resolve(self, slug: str) -> AccessOutcome:
        """First step: ask the service whether `slug` needs a password."""
        try:
            check = await self.client.check_access(slug)
        except AppError as e:
            return self._failed(AccessOutcome(slug=slug, state=AccessState.FAILED), e)

        if check.password_required:
            logger.debug('Link requires a password.', extra={'slug': slug})
            return AccessOutcome(slug=slug, state=AccessState.AWAITING_PASSWORD)

        if check.original_url:
            return self._redirect(AccessOutcome(slug=slug, state=AccessState.REDIRECT), check.original_url)

        return self._failed(
            AccessOutcome(slug=slug, state=AccessState.FAILED),
            MalformedResponseError(f'{Messages.MALFORMED} (no target URL for unprotected link)'),
        )

    async def submit_password(self, outcome: AccessOutcome, password: str) -> AccessOutcome:
        """Second step: re-check `outcome.slug` with a password attempt

        Args:
            outcome (AccessOutcome):
                The AWAITING_PASSWORD outcome returned by the previous step.
            password (str):
                The attempt. Sent once, in the request body only.

        Returns:
            AccessOutcome: REDIRECT, AWAITING_PASSWORD (attempts + 1) or FAILED.

        Raises:
            ValueError:
                If `outcome` is not awaiting a password.
        """
        if outcome.state is not AccessState.AWAITING_PASSWORD:
            raise ValueError(f'Cannot submit a password in state {outcome.state!r}.')

        try:
            check = await self.client.check_access(outcome.slug, password)
        except AppError as e:
            return self._failed(outcome, e)

        if check.password_valid:
            if check.original_url:
                return self._redirect(outcome, check.original_url)
            return self._failed(outcome, MalformedResponseError(f'{Messages.MALFORMED} (no target URL for valid password)'))

        if not check.password_required and check.original_url:
            # Protection was lifted between the two calls; the service granted access anyway
            return self._redirect(outcome, check.original_url)

        attempts = outcome.attempts + 1
        logger.info('Password rejected.', extra={'slug': outcome.slug, 'attempts': attempts})
        return replace(outcome, state=AccessState.AWAITING_PASSWORD, attempts=attempts, error=None)

    @staticmethod
    def _redirect(outcome: AccessOutcome, original_url: str) -> AccessOutcome:
        logger.info('Access granted, redirecting.', extra={'slug': outcome.slug})
        return replace(outcome, state=AccessState.REDIRECT, original_url=original_url, error=None)

    @staticmethod
    def _failed(outcome: AccessOutcome, error: AppError) -> AccessOutcome:
        logger.warning(
            'Access resolution failed.',
            extra={'slug': outcome.slug, 'errorCode': error.error_code, 'status': error.status},
        )
        return replace(outcome, state=AccessState.FAILED, error=error, original_url=None)

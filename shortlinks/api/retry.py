"""Retry policy for transient failures.

Only errors flagged as transient (`NetworkError`: connectivity failures,
timeouts and 5xx responses) are retried. Every other `AppError` is raised on
its first occurrence. Attempts are strictly sequential: after failed attempt
*k* the policy waits `delay * k` seconds before attempt *k + 1*.

Example:
    >>> policy = RetryPolicy(attempts=3, delay=1.0)
    >>> [policy.backoff(k) for k in (1, 2)]
    [1.0, 2.0]
    >>> result = await policy.run(lambda: executor.execute('GET', '/links', headers={}))
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TypeVar
from collections.abc import Awaitable, Callable

from shortlinks.constants import Defaults
from shortlinks.exceptions import AppError
from shortlinks.types import Sleep

T = TypeVar('T')


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded linear backoff.

    Attributes:
        attempts (int):
            Total attempts, including the first one. Must be >= 1.
        delay (float):
            Backoff unit in seconds.
        sleep (Sleep):
            Coroutine used to wait between attempts (injectable for tests).
    """

    attempts: int = Defaults.RETRY_ATTEMPTS
    delay: float = Defaults.RETRY_DELAY
    sleep: Sleep = field(default=asyncio.sleep, repr=False, compare=False)

    def __post_init__(self):
        if self.attempts < 1:
            raise ValueError(f'Retry attempts must be at least 1 (given value: {self.attempts}).')
        if self.delay < 0:
            raise ValueError(f'Retry delay must be non-negative (given value: {self.delay}).')

    def backoff(self, attempt: int) -> float:
        """Delay to wait after failed attempt number `attempt` (1-based)."""
        return self.delay * attempt

    async def run(self, operation: Callable[[], Awaitable[T]], *, description: str = '') -> T:
        """Run `operation`, retrying transient failures

        Args:
            operation (Callable[[], Awaitable[T]]):
                Zero-argument coroutine factory; called once per attempt.
            description (str):
                Short label for log records, e.g. 'GET /links'.

        Returns:
            T: the first successful result.

        Raises:
            AppError:
                The first non-transient error, or the last transient one once
                all attempts are used up.
        """
        for attempt in range(1, self.attempts + 1):
            try:
                return await operation()
            except AppError as e:
                if not e.transient:
                    raise
                if attempt >= self.attempts:
                    logger.error(
                        'Transient failure, retries exhausted.',
                        extra={'request': description, 'attempt': attempt, 'status': e.status},
                    )
                    raise

                wait = self.backoff(attempt)
                logger.warning(
                    'Transient failure, retrying request.',
                    extra={'request': description, 'attempt': attempt, 'status': e.status, 'delay': wait},
                )
                await self.sleep(wait)

        raise AssertionError('unreachable')  # pragma: no cover

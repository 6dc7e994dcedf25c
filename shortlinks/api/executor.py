"""Single-request execution with a hard deadline.

The executor issues exactly one HTTP request and either returns the decoded
payload or raises a classified `AppError`. It knows nothing about retries,
credentials or endpoints; those belong to the client.

Timeouts are cooperative: the request runs inside `asyncio.timeout()`, and
when the deadline passes the in-flight request is cancelled and its result
discarded. Nothing from a cancelled request is ever returned.

Example:
    >>> async with httpx.AsyncClient(base_url='https://sho.rt/api') as http:
    ...     executor = RequestExecutor(http, timeout=10)
    ...     links = await executor.execute('GET', '/links', headers={'Authorization': 'Bearer ...'})
"""

import asyncio
import logging
from typing import Any

import httpx

from shortlinks.constants import Defaults, Messages
from shortlinks.exceptions import AppError, MalformedResponseError, NetworkError
from shortlinks.api.helpers import parse_response
from shortlinks.types import JSONPayload


logger = logging.getLogger(__name__)


class RequestExecutor:
    """Issue one request against the link service.

    Attributes:
        http (httpx.AsyncClient):
            Transport. Its base URL is prepended to request paths.
        timeout (float):
            Deadline in seconds for the whole request, body included.
    """

    def __init__(self, http: httpx.AsyncClient, timeout: float = Defaults.TIMEOUT):
        self.http = http
        self.timeout = timeout

    async def execute(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str],
        payload: Any = None,
    ) -> JSONPayload:
        """Perform one request

        Args:
            method (str):
                HTTP method, e.g. 'GET'.
            path (str):
                Path relative to the service base URL, e.g. '/links'.
            headers (dict[str, str]):
                Request headers.
            payload (Any):
                JSON-serializable body; omitted when None.

        Returns:
            JSONPayload: decoded JSON body, or {} for non-JSON successes.

        Raises:
            NetworkError:
                On timeout, connectivity failure or a 5xx status.
            MalformedResponseError:
                On a body that can't be decoded (bad JSON or content encoding).
            AppError (subclass):
                On any other non-2xx status or httpx failure.
        """
        request = self.http.build_request(method, path, headers=headers, json=payload)
        try:
            async with asyncio.timeout(self.timeout):
                response = await self.http.send(request)
        except TimeoutError as e:
            logger.info('Request timed out.', extra={'method': method, 'path': path, 'timeout': self.timeout})
            raise NetworkError(Messages.TIMEOUT) from e
        except httpx.TimeoutException as e:
            logger.info('Request timed out.', extra={'method': method, 'path': path, 'timeout': self.timeout})
            raise NetworkError(Messages.TIMEOUT) from e
        except httpx.TransportError as e:
            logger.info('Request failed at transport level.', extra={'method': method, 'path': path, 'reason': type(e).__name__})
            raise NetworkError(Messages.OFFLINE) from e
        except httpx.DecodingError as e:
            logger.warning('Response body could not be decoded.', extra={'method': method, 'path': path})
            raise MalformedResponseError(Messages.MALFORMED) from e
        except httpx.HTTPError as e:
            logger.warning('Request failed.', extra={'method': method, 'path': path, 'reason': type(e).__name__})
            raise AppError(Messages.UNEXPECTED) from e

        logger.debug('Received response.', extra={'method': method, 'path': path, 'status': response.status_code})
        return parse_response(response)

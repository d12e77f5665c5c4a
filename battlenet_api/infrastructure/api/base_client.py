"""
Transport

Sends one built request and classifies its one response.
"""

import logging
from typing import Optional

import httpx

from ...core.exceptions import ErrorType, HTTPError
from ...core.protocols import TransportProtocol
from ...core.result import Result
from .request_builder import APIRequest

logger = logging.getLogger(__name__)


def classify_response(status_code: int, body: bytes) -> Result[bytes]:
    """
    Map a status code to a result.

    2xx is success with the body, 401 and 403 are their own kinds and
    anything else is a server error carrying the code.
    """
    if 200 <= status_code < 300:
        return Result.success(body)
    return Result.failure(HTTPError.from_status(status_code))


class Transport(TransportProtocol):
    """Single-shot HTTP transport on an ``httpx.AsyncClient``."""

    def __init__(
        self,
        session: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize transport.

        Args:
            session: Client to send with; the transport creates and owns one when omitted
            timeout: Request timeout in seconds, httpx default when omitted
        """
        self.timeout = timeout
        self._client = session
        self._owns_client = session is None

    async def __aenter__(self):
        """Enter async context."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.close()

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        if not self._client:
            kwargs = {}
            if self.timeout is not None:
                kwargs["timeout"] = httpx.Timeout(self.timeout)
            self._client = httpx.AsyncClient(**kwargs)
            self._owns_client = True
            logger.info("HTTP client initialized")

    async def close(self) -> None:
        """Close HTTP client if this transport created it."""
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.info("HTTP client closed")

    async def send(self, request: APIRequest) -> Result[bytes]:
        """
        Send exactly one request.

        Args:
            request: Request built by the request builder

        Returns:
            Success with the response body, or a typed failure
        """
        if not self._client:
            await self.initialize()

        logger.debug(f"{request.method} {request.path}")

        try:
            response = await self._client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                content=request.content
            )
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            logger.warning(f"No network for {request.method} {request.path}: {type(e).__name__}")
            return Result.failure(HTTPError.of(ErrorType.NO_NETWORK, original_exception=e))
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            return Result.failure(HTTPError.of(ErrorType.MALFORMED_REQUEST, original_exception=e))
        except httpx.HTTPError as e:
            logger.warning(f"Transport error for {request.method} {request.path}: {e}")
            return Result.failure(HTTPError.of(
                ErrorType.SERVER_ERROR,
                str(e) or None,
                original_exception=e
            ))

        result = classify_response(response.status_code, response.content)
        if result.is_failure:
            logger.warning(
                f"{request.method} {request.path} returned {response.status_code}"
            )
        return result

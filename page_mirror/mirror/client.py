"""
HTTP client used to retrieve the page and its assets.

Wraps a single aiohttp session with the mirror's timeout and user agent.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

import aiohttp
from aiohttp import ClientTimeout, ClientError

from ..errors import NetworkError
from ..utils.log import get_logger
from ..utils.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


@dataclass
class FetchedResponse:
    """Body of a successful response, as bytes and as decoded text."""

    url: str
    status: int
    content: bytes
    text: str


class HttpClient:
    """
    Fetches URLs over HTTP using aiohttp.

    Use as an async context manager so the underlying session is closed:

        async with HttpClient() as client:
            response = await client.get(url)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize the HTTP client.

        Args:
            timeout: Total request timeout in seconds
            user_agent: User agent string for requests
        """
        self.timeout = ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self.logger = get_logger("client")

        self._session: Optional[aiohttp.ClientSession] = None

    async def start(self) -> None:
        """Open the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent}
            )

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "HttpClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def get(self, url: str) -> FetchedResponse:
        """
        Download a URL.

        Args:
            url: Absolute URL to fetch

        Returns:
            FetchedResponse with the raw and decoded body

        Raises:
            NetworkError: On connection errors, timeouts and non-2xx statuses
        """
        await self.start()

        try:
            async with self._session.get(url, allow_redirects=True) as response:
                if not 200 <= response.status < 300:
                    raise NetworkError(url, f"HTTP {response.status}", response.status)

                content = await response.read()
                try:
                    text = content.decode(response.get_encoding(), errors='replace')
                except LookupError:
                    # Unknown charset in Content-Type
                    text = content.decode('utf-8', errors='replace')

                self.logger.debug(f"GET {url} -> {response.status} ({len(content)} bytes)")
                return FetchedResponse(
                    url=str(response.url),
                    status=response.status,
                    content=content,
                    text=text
                )

        except ClientError as e:
            raise NetworkError(url, str(e) or e.__class__.__name__) from e
        except asyncio.TimeoutError as e:
            raise NetworkError(url, "request timed out") from e

"""Async HTTP client used by the LeetCode client."""

from typing import Any

import httpx
from loguru import logger

from .errors import RequestError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36"
)


class AsyncHTTPClient:
    """Thin wrapper around ``httpx.AsyncClient``."""

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
            client: Preconfigured httpx client, mainly for tests
        """
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"user-agent": DEFAULT_USER_AGENT},
            follow_redirects=True,
        )

    async def get(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        logger.debug(f"GET {url}")
        try:
            return await self._client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"GET {url} failed: {e}")
            raise RequestError(f"Request to {url} failed: {e}") from e

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        logger.debug(f"POST {url}")
        try:
            return await self._client.post(url, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"POST {url} failed: {e}")
            raise RequestError(f"Request to {url} failed: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()


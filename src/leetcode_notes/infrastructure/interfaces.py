"""Protocol interfaces for infrastructure adapters."""

from pathlib import Path
from typing import Any, Protocol

import httpx

from leetcode_notes.domain.models import ProblemMetadata, Solution


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response: ...

    async def post(
        self, url: str, json: Any = None, headers: dict[str, str] | None = None
    ) -> httpx.Response: ...

    async def close(self) -> None: ...


class ProblemClientProtocol(Protocol):
    """Protocol for the LeetCode data source."""

    async def fetch_problem(self, slug_or_id: str) -> ProblemMetadata:
        """Fetch problem metadata by slug or frontend number."""
        ...

    async def fetch_slug_by_number(self, number: str) -> str | None: ...

    async def fetch_solutions(self, slug: str, limit: int) -> list[Solution]:
        """Fetch accepted solutions, newest first."""
        ...

    async def close(self) -> None: ...


class NoteStoreProtocol(Protocol):
    """Protocol for note persistence."""

    def create(self, metadata: ProblemMetadata, content: str) -> Path: ...

    def read(self, path: str | Path) -> str: ...

    def write(self, path: str | Path, content: str) -> Path: ...

"""Downstream mock service client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class MockServiceClient(Protocol):
    """Interface for notifying the mock service about submissions."""

    async def call_mock_service(
        self,
        domain: str | None,
        correlation: dict[str, str],
        submission_id: str,
    ) -> None:
        """Notify the mock service that a form was submitted."""


@dataclass
class HttpxMockServiceClient:
    """Mock service client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(cls, base_url: str, timeout: float = 10) -> "HttpxMockServiceClient":
        """Create a mock service client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout)

    async def call_mock_service(
        self,
        domain: str | None,
        correlation: dict[str, str],
        submission_id: str,
    ) -> None:
        """POST the correlation triple and submission id to the mock service."""
        prefix = f"{self.base_url}/{domain}" if domain else self.base_url
        payload: dict[str, object] = {**correlation, "submission_id": submission_id}
        response = await self.http_client.post(
            f"{prefix}/form/submit", json=payload, timeout=self.timeout
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

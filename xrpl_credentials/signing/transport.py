"""
Transport protocol for signing-service HTTP calls.

The gateway posts through a SigningTransport rather than calling httpx
itself; tests hand it a fake that returns canned payload responses.
Credentials travel as headers supplied per call, so a transport holds
no secrets.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SigningTransport(Protocol):
    """Async transport for JSON POST requests."""

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> dict[str, Any]:
        """Send a JSON request and return the parsed response.

        Args:
            url: Absolute endpoint URL.
            payload: JSON request body.
            headers: Extra headers (credentials live here).

        Returns:
            Parsed JSON response as a dict.

        Raises:
            Exception: On transport-level failures (connection refused,
                timeout, TLS error, HTTP error status, non-JSON body).
                The gateway maps these to SERVICE_UNAVAILABLE.
        """
        ...


class HttpxTransport:
    """Default transport using httpx.AsyncClient.

    Opens one client per call. No retries.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> dict[str, Any]:
        """Send JSON request via httpx."""
        import httpx

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.post(
                url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                    **headers,
                },
            )
            response.raise_for_status()
            result: dict[str, Any] = response.json()
            return result

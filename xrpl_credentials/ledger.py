"""
XRPL ledger connection — owned once per process, read by the health probe.

The application factory constructs a single LedgerConnection, opens it
during startup and closes it at shutdown. It is passed explicitly to
whatever needs it (today only the health router). Transaction
preparation never consults it: signing and submission happen at the
signing service.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from xrpl.asyncio.clients import AsyncWebsocketClient

logger = logging.getLogger(__name__)

DEFAULT_XRPL_ENDPOINT = "wss://s.altnet.rippletest.net:51233"


@runtime_checkable
class WebsocketClient(Protocol):
    """The subset of xrpl-py's AsyncWebsocketClient used here."""

    async def open(self) -> None: ...

    async def close(self) -> None: ...

    def is_open(self) -> bool: ...


class LedgerConnection:
    """Process-wide websocket connection to an XRPL node.

    Args:
        endpoint: Websocket URL of the node.
        client: Injectable client. Defaults to AsyncWebsocketClient
            for ``endpoint``.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_XRPL_ENDPOINT,
        client: WebsocketClient | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._client = client or AsyncWebsocketClient(endpoint)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def connect(self) -> bool:
        """Open the connection. Failures are logged, not raised.

        Returns:
            True if the connection is open afterwards.
        """
        try:
            await self._client.open()
        except Exception:
            logger.exception("XRPL connect error", extra={"endpoint": self._endpoint})
            return False
        logger.info("Connected to XRPL", extra={"endpoint": self._endpoint})
        return True

    async def close(self) -> None:
        if not self._client.is_open():
            return
        await self._client.close()
        logger.info("Disconnected from XRPL", extra={"endpoint": self._endpoint})

    def is_connected(self) -> bool:
        """Current connection state. Read-only, no I/O."""
        return self._client.is_open()

"""Shared fakes for handler and API tests."""

from __future__ import annotations

from typing import Any

import pytest

from xrpl_credentials.signing.gateway import (
    GatewayError,
    GatewayErrorCode,
    SigningPayload,
    parse_payload_response,
)
from xrpl_credentials.tx import PreparedTransaction

ISSUER = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"
SUBJECT = "rPT1Sjq2YGrBMTttX4GZHjKu9dyfzbpAYe"
OTHER = "rf1BiGeXwwQoi8Z2ueFYTEXSwuJYfV2Jpn"

COMPLETE_RESPONSE = {"next": {"always": "https://signing/abc"}, "uuid": "u1"}


class FakeGateway:
    """Gateway double: parses a canned response, records calls."""

    def __init__(
        self,
        response: Any = None,
        exc: Exception | None = None,
    ) -> None:
        self._response = COMPLETE_RESPONSE if response is None else response
        self._exc = exc
        self.calls: list[PreparedTransaction] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def submit(self, tx: PreparedTransaction) -> SigningPayload:
        self.calls.append(tx)
        if self._exc is not None:
            raise self._exc
        parsed = parse_payload_response(self._response)
        if not parsed.complete or parsed.payload is None:
            raise GatewayError(GatewayErrorCode.INCOMPLETE_RESPONSE, parsed.detail)
        return parsed.payload


class FakeTransport:
    """Returns a canned payload response for testing."""

    def __init__(self, response: Any) -> None:
        self._response = response
        self.calls: list[tuple[str, dict[str, Any], dict[str, str]]] = []

    async def post_json(
        self, url: str, payload: dict[str, Any], headers: dict[str, str]
    ) -> Any:
        self.calls.append((url, payload, headers))
        return self._response


class FakeWebsocketClient:
    """Stands in for xrpl-py's AsyncWebsocketClient."""

    def __init__(self, fail_open: bool = False) -> None:
        self._open = False
        self._fail_open = fail_open
        self.open_calls = 0
        self.close_calls = 0

    async def open(self) -> None:
        self.open_calls += 1
        if self._fail_open:
            raise ConnectionError("node unreachable")
        self._open = True

    async def close(self) -> None:
        self.close_calls += 1
        self._open = False

    def is_open(self) -> bool:
        return self._open


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()

"""
Signing-request gateway — hands prepared transactions to Xumm/Xaman.

Creates a platform payload for a transaction and returns the signing
URL and payload uuid. A human opens the URL in their wallet, signs,
and the service submits the signed transaction to the ledger itself
(``submit`` option). Unsigned payloads lapse after ``expire``.

One POST per call, no retries. Parsing is a pure function over the
decoded body, so tests drive it with canned dicts.

Response parsing targets the platform payload API:
    - Success: {"uuid": "...", "next": {"always": "https://..."}, "refs": {...}}
    - Anything lacking a non-empty uuid or next.always is incomplete,
      even when the HTTP call itself succeeded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from xrpl_credentials.signing.transport import HttpxTransport, SigningTransport
from xrpl_credentials.tx import PreparedTransaction

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://xumm.app/api/v1"

# Path of the payload-creation endpoint, relative to the API URL.
PAYLOAD_PATH = "/platform/payload"


# =========================================================================
# Result types
# =========================================================================


@dataclass(frozen=True)
class SigningOptions:
    """Options handed verbatim to the signing service.

    Attributes:
        submit: Submit the transaction to the ledger once signed.
        expire: Lifetime of an unsigned payload, in the service's
            ``expire`` unit. Enforced by the service, not here.
    """

    submit: bool = True
    expire: int = 300

    def to_dict(self) -> dict[str, object]:
        return {"submit": self.submit, "expire": self.expire}


@dataclass(frozen=True)
class SigningPayload:
    """A queued signing request.

    Attributes:
        sign_url: URL the wallet holder opens to review and sign.
        uuid: Correlation id of the payload at the signing service.
    """

    sign_url: str
    uuid: str


@dataclass(frozen=True)
class PayloadResponse:
    """Parsed payload-creation response.

    Attributes:
        complete: Whether both sign_url and uuid were present.
        payload: The signing payload when complete, else None.
        detail: What was missing when incomplete.
    """

    complete: bool
    payload: SigningPayload | None = None
    detail: str | None = None


class GatewayErrorCode(StrEnum):
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    INCOMPLETE_RESPONSE = "INCOMPLETE_RESPONSE"


class GatewayError(Exception):
    """Signing request could not be queued."""

    def __init__(self, code: GatewayErrorCode, detail: str | None = None) -> None:
        super().__init__(f"{code}: {detail}" if detail else str(code))
        self.code = code
        self.detail = detail


# =========================================================================
# Gateway
# =========================================================================


class SigningGateway:
    """Client for the signing service's payload API.

    Args:
        api_key: Platform API key. Required.
        api_secret: Platform API secret. Required.
        options: Submit/expire options sent with every payload.
        api_url: Base URL of the platform API.
        transport: Injectable transport. Defaults to HttpxTransport.
            Pass a FakeTransport for testing.

    Raises:
        ValueError: If api_key or api_secret is empty.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        options: SigningOptions | None = None,
        api_url: str = DEFAULT_API_URL,
        transport: SigningTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must be non-empty")
        if not api_secret:
            raise ValueError("api_secret must be non-empty")
        self._api_key = api_key
        self._api_secret = api_secret
        self._options = options or SigningOptions()
        self._url = api_url.rstrip("/") + PAYLOAD_PATH
        self._transport = transport or HttpxTransport()

    @property
    def url(self) -> str:
        """The payload-creation endpoint URL."""
        return self._url

    @property
    def options(self) -> SigningOptions:
        return self._options

    async def submit(self, tx: PreparedTransaction) -> SigningPayload:
        """Queue a transaction for signing.

        Args:
            tx: Prepared CredentialCreate or CredentialAccept.

        Returns:
            SigningPayload with sign URL and uuid.

        Raises:
            GatewayError: SERVICE_UNAVAILABLE on any transport failure,
                INCOMPLETE_RESPONSE when the response lacks the sign
                URL or uuid.
        """
        body = {
            "txjson": tx.to_txjson(),
            "options": self._options.to_dict(),
        }
        headers = {
            "X-API-Key": self._api_key,
            "X-API-Secret": self._api_secret,
        }

        try:
            response = await self._transport.post_json(self._url, body, headers)
        except Exception as exc:
            raise GatewayError(GatewayErrorCode.SERVICE_UNAVAILABLE, str(exc)) from exc

        parsed = parse_payload_response(response)
        if not parsed.complete or parsed.payload is None:
            raise GatewayError(GatewayErrorCode.INCOMPLETE_RESPONSE, parsed.detail)

        logger.info(
            "Signing payload created",
            extra={
                "transaction_type": str(tx.transaction_type),
                "uuid": parsed.payload.uuid,
            },
        )
        return parsed.payload


# =====================================================================
# Response parsing (pure functions, no I/O)
# =====================================================================


def parse_payload_response(response: Any) -> PayloadResponse:
    """Parse a payload-creation response into a PayloadResponse.

    Handles:
        - Complete response (uuid and next.always present)
        - Missing or empty uuid / next.always
        - Non-dict bodies and non-dict ``next``
    """
    if not isinstance(response, dict):
        return PayloadResponse(complete=False, detail="response is not an object")

    missing: list[str] = []

    next_ = response.get("next")
    sign_url = next_.get("always") if isinstance(next_, dict) else None
    if not isinstance(sign_url, str) or not sign_url:
        missing.append("next.always")

    uuid = response.get("uuid")
    if not isinstance(uuid, str) or not uuid:
        missing.append("uuid")

    if missing:
        return PayloadResponse(
            complete=False,
            detail=f"missing {', '.join(missing)} in payload response",
        )

    return PayloadResponse(
        complete=True,
        payload=SigningPayload(sign_url=sign_url, uuid=uuid),
    )

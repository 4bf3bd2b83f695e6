"""
Request handlers for credential signing requests.

Composes the pure layer (address.py, credential_type.py, tx.py) with
the signing gateway:

    validate fields → validate addresses → encode type → build → submit

Each step short-circuits on failure with a CredentialRequestError.
Nothing external is touched until the gateway call, so a rejected
request never reaches the signing service.

Handlers are stateless. The gateway is passed in by the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from xrpl_credentials.address import is_valid_address
from xrpl_credentials.credential_type import to_wire_form
from xrpl_credentials.errors import (
    INCOMPLETE_PAYLOAD_MESSAGE,
    CredentialRequestError,
    InternalError,
    InvalidAddress,
    MissingFields,
    UpstreamError,
)
from xrpl_credentials.signing.gateway import (
    GatewayError,
    GatewayErrorCode,
    SigningPayload,
)
from xrpl_credentials.tx import PreparedTransaction, build_accept, build_create

logger = logging.getLogger(__name__)

CREATE_REQUIRED = ["subject", "credentialType", "requester"]
ACCEPT_REQUIRED = ["issuer", "subject", "credentialType"]

# Accept lists its fields with commas only; create ends with "or".
ACCEPT_SEPARATOR = ", "


class Gateway(Protocol):
    async def submit(self, tx: PreparedTransaction) -> SigningPayload: ...


@dataclass(frozen=True)
class CreateRequest:
    subject: str | None = None
    credential_type: str | None = None
    requester: str | None = None
    uri: str | None = None
    already_encoded: bool | None = None


@dataclass(frozen=True)
class AcceptRequest:
    issuer: str | None = None
    subject: str | None = None
    credential_type: str | None = None
    already_encoded: bool | None = None


@dataclass(frozen=True)
class PreparedRequest:
    """Outcome of a successful request: the transaction and its payload."""

    transaction: PreparedTransaction
    payload: SigningPayload


# =========================================================================
# Validation steps
# =========================================================================


def _require(
    required: list[str],
    values: dict[str, str | None],
    last_separator: str = " or ",
) -> None:
    missing = [name for name in required if not values.get(name)]
    if missing:
        raise MissingFields(required, missing, last_separator=last_separator)


def _require_addresses(values: list[tuple[str, str]]) -> None:
    for field, value in values:
        if not is_valid_address(value):
            raise InvalidAddress(field)


# =========================================================================
# Submission
# =========================================================================


async def _submit(gateway: Gateway, tx: PreparedTransaction) -> PreparedRequest:
    try:
        payload = await gateway.submit(tx)
    except GatewayError as exc:
        if exc.code == GatewayErrorCode.INCOMPLETE_RESPONSE:
            logger.error(
                "Signing service returned an incomplete payload",
                extra={"transaction_type": str(tx.transaction_type), "detail": exc.detail},
            )
            raise UpstreamError(INCOMPLETE_PAYLOAD_MESSAGE, str(exc.code)) from exc
        logger.error(
            "Signing service unavailable",
            extra={"transaction_type": str(tx.transaction_type), "detail": exc.detail},
        )
        raise UpstreamError("Signing service unavailable", str(exc.code), exc.detail) from exc

    return PreparedRequest(transaction=tx, payload=payload)


async def _encode_build_submit(
    build: Callable[[Any, str], PreparedTransaction],
    request: CreateRequest | AcceptRequest,
    gateway: Gateway,
) -> PreparedRequest:
    """Steps 3-5. Converts unexpected exceptions to InternalError."""
    try:
        wire = to_wire_form(request.credential_type, request.already_encoded)
        tx = build(request, wire)
        return await _submit(gateway, tx)
    except CredentialRequestError:
        raise
    except Exception as exc:
        logger.exception("Unexpected failure preparing credential transaction")
        raise InternalError(str(exc)) from exc


# =========================================================================
# Handlers
# =========================================================================


async def prepare_create(request: CreateRequest, gateway: Gateway) -> PreparedRequest:
    """Prepare a CredentialCreate and queue it for the issuer to sign.

    Raises:
        MissingFields: subject, credentialType or requester absent.
        InvalidAddress: subject or requester is not a valid address.
        EncodingError: credentialType flagged as hex but is not.
        UpstreamError: signing service unavailable or incomplete.
        InternalError: anything else.
    """
    _require(
        CREATE_REQUIRED,
        {
            "subject": request.subject,
            "credentialType": request.credential_type,
            "requester": request.requester,
        },
    )
    _require_addresses([("subject", request.subject), ("requester", request.requester)])

    def build(req: CreateRequest, wire: str) -> PreparedTransaction:
        return build_create(req.requester, req.subject, wire, req.uri)

    return await _encode_build_submit(build, request, gateway)


async def prepare_accept(request: AcceptRequest, gateway: Gateway) -> PreparedRequest:
    """Prepare a CredentialAccept and queue it for the subject to sign.

    Raises:
        MissingFields: issuer, subject, credentialType absent.
        InvalidAddress: issuer or subject is not a valid address.
        EncodingError: credentialType flagged as hex but is not.
        UpstreamError: signing service unavailable or incomplete.
        InternalError: anything else.
    """
    _require(
        ACCEPT_REQUIRED,
        {
            "issuer": request.issuer,
            "subject": request.subject,
            "credentialType": request.credential_type,
        },
        ACCEPT_SEPARATOR,
    )
    _require_addresses([("issuer", request.issuer), ("subject", request.subject)])

    def build(req: AcceptRequest, wire: str) -> PreparedTransaction:
        return build_accept(req.subject, req.issuer, wire)

    return await _encode_build_submit(build, request, gateway)

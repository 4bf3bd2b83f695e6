"""
XRPL credential signing-request service.

Public API:

    Pure layer (no I/O):
        - ``is_valid_address()`` — XRPL address check.
        - ``to_wire_form()`` — credential type label → hex wire form.
        - ``build_create()`` / ``build_accept()`` — unsigned transactions.

    Impure layer (network I/O):
        - ``SigningGateway`` — queues a transaction at the signing service.
        - ``LedgerConnection`` — process-wide XRPL connection (health only).
        - ``prepare_create()`` / ``prepare_accept()`` — request handlers.

    HTTP:
        - ``create_app()`` — FastAPI application factory.
"""

from xrpl_credentials.address import is_valid_address
from xrpl_credentials.credential_type import is_hex, to_wire_form
from xrpl_credentials.errors import (
    CredentialRequestError,
    EncodingError,
    ErrorCode,
    InternalError,
    InvalidAddress,
    MissingFields,
    UpstreamError,
)
from xrpl_credentials.handlers import (
    AcceptRequest,
    CreateRequest,
    PreparedRequest,
    prepare_accept,
    prepare_create,
)
from xrpl_credentials.ledger import LedgerConnection
from xrpl_credentials.signing import (
    GatewayError,
    GatewayErrorCode,
    SigningGateway,
    SigningOptions,
    SigningPayload,
)
from xrpl_credentials.tx import (
    CredentialAccept,
    CredentialCreate,
    PreparedTransaction,
    TransactionType,
    build_accept,
    build_create,
)

__all__ = [
    "AcceptRequest",
    "CreateRequest",
    "CredentialAccept",
    "CredentialCreate",
    "CredentialRequestError",
    "EncodingError",
    "ErrorCode",
    "GatewayError",
    "GatewayErrorCode",
    "InternalError",
    "InvalidAddress",
    "LedgerConnection",
    "MissingFields",
    "PreparedRequest",
    "PreparedTransaction",
    "SigningGateway",
    "SigningOptions",
    "SigningPayload",
    "TransactionType",
    "UpstreamError",
    "build_accept",
    "build_create",
    "is_hex",
    "is_valid_address",
    "prepare_accept",
    "prepare_create",
    "to_wire_form",
]

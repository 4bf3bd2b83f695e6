"""
Signing-service boundary.

    - ``SigningGateway`` — queues a prepared transaction, returns SigningPayload.
    - ``parse_payload_response()`` — pure response parser, tagged outcome.
    - ``SigningTransport`` / ``HttpxTransport`` — injectable HTTP seam.
"""

from xrpl_credentials.signing.gateway import (
    DEFAULT_API_URL,
    GatewayError,
    GatewayErrorCode,
    PayloadResponse,
    SigningGateway,
    SigningOptions,
    SigningPayload,
    parse_payload_response,
)
from xrpl_credentials.signing.transport import HttpxTransport, SigningTransport

__all__ = [
    "DEFAULT_API_URL",
    "GatewayError",
    "GatewayErrorCode",
    "HttpxTransport",
    "PayloadResponse",
    "SigningGateway",
    "SigningOptions",
    "SigningPayload",
    "SigningTransport",
    "parse_payload_response",
]

"""
Error taxonomy for credential signing requests.

Every failure a request can hit maps to exactly one class here, and
each class knows its HTTP status and response body. The API layer
renders them without inspecting messages.

    MissingFields    400  required field absent or empty
    InvalidAddress   400  address-bearing field fails validation
    EncodingError    400  credentialType flagged as hex but is not
    UpstreamError    500  signing service unreachable or incomplete
    InternalError    500  anything unexpected

Gateway-level failures (``GatewayError``) live next to the gateway and
are converted to UpstreamError by the request handler.
"""

from __future__ import annotations

from enum import StrEnum

# Error body for a signing-service response without sign URL or uuid.
INCOMPLETE_PAYLOAD_MESSAGE = "XUMM payload incomplete or invalid"


class ErrorCode(StrEnum):
    """Machine-readable category, carried on every request error."""

    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    ENCODING_ERROR = "ENCODING_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CredentialRequestError(Exception):
    """Base for all request-level failures."""

    status_code = 500
    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict[str, str]:
        body = {"error": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class MissingFields(CredentialRequestError):
    status_code = 400
    code = ErrorCode.MISSING_FIELDS

    def __init__(
        self,
        required: list[str],
        missing: list[str],
        *,
        last_separator: str = " or ",
    ) -> None:
        self.required = required
        self.missing = missing
        if len(required) > 1:
            names = ", ".join(required[:-1]) + last_separator + required[-1]
        else:
            names = required[0]
        super().__init__(f"Missing fields: {names}")


class InvalidAddress(CredentialRequestError):
    status_code = 400
    code = ErrorCode.INVALID_ADDRESS

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid XRPL address: {field}")


class EncodingError(CredentialRequestError):
    status_code = 400
    code = ErrorCode.ENCODING_ERROR


class UpstreamError(CredentialRequestError):
    """Signing service failed. ``reason`` is the GatewayErrorCode value."""

    status_code = 500
    code = ErrorCode.UPSTREAM_ERROR

    def __init__(self, message: str, reason: str, detail: str | None = None) -> None:
        super().__init__(message, detail)
        self.reason = reason


class InternalError(CredentialRequestError):
    status_code = 500
    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("Internal error", detail)

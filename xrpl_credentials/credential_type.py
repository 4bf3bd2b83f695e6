"""
CredentialType wire encoding.

XRPL carries CredentialType as a hex blob. Callers usually supply a
human label ("KYC", "driver-license"), so the label is UTF-8 encoded
and hex'd before it goes into a transaction.

Rules:
    - Default mode: a label that already matches ``^[0-9a-fA-F]+$`` is
      taken as pre-encoded and returned unchanged. Anything else is
      encoded as lowercase hex of its UTF-8 bytes.
    - ``already_encoded=True``: label must be non-empty, even-length hex.
      Returned unchanged.
    - ``already_encoded=False``: always encode, even for labels made of
      hex digits only ("face", "cafe", "123").

The default mode is ambiguous for all-hex-digit labels: "face" is
passed through as the two bytes 0xFA 0xCE, not as the text "face".
Callers that care pass the explicit flag.
"""

from __future__ import annotations

import re

from xrpl_credentials.errors import EncodingError

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


def is_hex(value: str) -> bool:
    """Check whether value is one or more hex digits (any case, any length)."""
    return bool(_HEX_RE.match(value))


def encode_label_hex(label: str) -> str:
    """Lowercase hex of the label's UTF-8 bytes, byte order preserved."""
    return label.encode("utf-8").hex()


def to_wire_form(label: str, already_encoded: bool | None = None) -> str:
    """Normalize a credential type label to its hex wire form.

    Args:
        label: Credential type as supplied by the caller.
        already_encoded: None keeps the pattern-based pass-through.
            True asserts the label is hex already. False forces
            encoding.

    Returns:
        Hex string suitable for the CredentialType field.

    Raises:
        EncodingError: Only when already_encoded is True and label is
            not non-empty, even-length hex.
    """
    if already_encoded is None:
        return label if is_hex(label) else encode_label_hex(label)

    if already_encoded:
        if not is_hex(label) or len(label) % 2:
            raise EncodingError(
                "credentialType marked as already encoded must be even-length hex"
            )
        return label

    return encode_label_hex(label)

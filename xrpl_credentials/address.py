"""
XRPL account address validation.

Single source of truth for address validity. Every address-bearing
request field passes through ``is_valid_address`` before anything is
encoded or built; nothing downstream re-checks.

Accepted forms (same set as the reference client's ``isValidAddress``):
    - Classic r-address: base58 (XRPL alphabet), 25-35 chars, checksum.
    - X-address: classic address + optional destination tag, checksum.
"""

from __future__ import annotations

from xrpl.core.addresscodec import is_valid_classic_address, is_valid_xaddress


def is_valid_address(value: object) -> bool:
    """Return True if value is a syntactically valid XRPL address.

    Pure, no I/O. Non-strings and empty strings are rejected rather
    than raising.
    """
    if not isinstance(value, str) or not value:
        return False
    return is_valid_classic_address(value) or is_valid_xaddress(value)

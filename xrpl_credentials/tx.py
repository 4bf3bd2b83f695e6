"""
XRPL credential transaction builders.

Builds unsigned CredentialCreate / CredentialAccept transactions from
already-validated inputs. Pure and deterministic. Sequence, Fee and
SigningPubKey are filled in by the wallet at signing time and are NOT
included here.

Inputs are assumed validated (addresses) and encoded (credential type).
The builders do not re-check them.

The builders enforce:
    - CredentialCreate: Account is the issuer (requester), URI present
      only when a non-empty uri was supplied.
    - CredentialAccept: Account is the subject. The subject signs the
      acceptance, never the issuer.
    - No fields that require network state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TransactionType(StrEnum):
    CREDENTIAL_CREATE = "CredentialCreate"
    CREDENTIAL_ACCEPT = "CredentialAccept"


@dataclass(frozen=True)
class CredentialCreate:
    """Unsigned CredentialCreate.

    Attributes:
        account: Issuer r-address, the signer.
        subject: Recipient r-address.
        credential_type: Hex wire form of the credential type.
        uri: Optional URI. None means the field is omitted entirely.
    """

    account: str
    subject: str
    credential_type: str
    uri: str | None = None

    @property
    def transaction_type(self) -> TransactionType:
        return TransactionType.CREDENTIAL_CREATE

    def to_txjson(self) -> dict[str, str]:
        """XRPL JSON form, as handed to the signing service."""
        tx = {
            "TransactionType": str(self.transaction_type),
            "Account": self.account,
            "Subject": self.subject,
            "CredentialType": self.credential_type,
        }
        if self.uri is not None:
            tx["URI"] = self.uri
        return tx


@dataclass(frozen=True)
class CredentialAccept:
    """Unsigned CredentialAccept.

    Attributes:
        account: Subject r-address, the signer accepting the credential.
        issuer: Issuer r-address of the credential being accepted.
        credential_type: Hex wire form of the credential type.
    """

    account: str
    issuer: str
    credential_type: str

    @property
    def transaction_type(self) -> TransactionType:
        return TransactionType.CREDENTIAL_ACCEPT

    def to_txjson(self) -> dict[str, str]:
        """XRPL JSON form, as handed to the signing service."""
        return {
            "TransactionType": str(self.transaction_type),
            "Account": self.account,
            "Issuer": self.issuer,
            "CredentialType": self.credential_type,
        }


PreparedTransaction = CredentialCreate | CredentialAccept


def build_create(
    requester: str,
    subject: str,
    credential_type_wire: str,
    uri: str | None = None,
) -> CredentialCreate:
    """Build an unsigned CredentialCreate.

    Args:
        requester: Issuer r-address (signs the transaction).
        subject: Recipient r-address.
        credential_type_wire: Hex credential type (from to_wire_form).
        uri: Optional URI. None and "" both omit the URI field.

    Returns:
        CredentialCreate ready for the signing gateway.
    """
    return CredentialCreate(
        account=requester,
        subject=subject,
        credential_type=credential_type_wire,
        uri=uri or None,
    )


def build_accept(
    subject: str,
    issuer: str,
    credential_type_wire: str,
) -> CredentialAccept:
    """Build an unsigned CredentialAccept signed by the subject.

    Args:
        subject: r-address accepting the credential (becomes Account).
        issuer: r-address that issued the credential.
        credential_type_wire: Hex credential type (from to_wire_form).
    """
    return CredentialAccept(
        account=subject,
        issuer=issuer,
        credential_type=credential_type_wire,
    )

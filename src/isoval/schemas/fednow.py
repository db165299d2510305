"""FedNow message signature key exchange.

Participants register (``KeyAddition``) or revoke (``KeyRevocation``) the
public keys used to sign FedNow messages, and query the active keys.
These messages travel as bare root elements, without an ISO 20022
``Document`` envelope.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from isoval.domain.constraints import TextConstraint
from isoval.domain.records import Choice, Occurs, Record
from isoval.domain.values import ConstrainedText
from isoval.schemas.common import ISODateTime

KEY_EXCHANGE_ROOT_TAG = "FedNowMessageSignatureKeyExchange"
PUBLIC_KEYS_ROOT_TAG = "FedNowPublicKeyResponses"


class RoutingNumberFRS1(ConstrainedText):
    """Routing number of the participant (master account or subaccount)."""

    constraint = TextConstraint(pattern=r"[0-9]{9,9}")


class Max300AlphaNumericString(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=300, pattern=r"[A-Za-z0-9\-_]{1,300}")


class Max50AlphaNumericString(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=50, pattern=r"[A-Za-z0-9\-_]{1,50}")


class Max300Text(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=300)


class FedNowMessageSignatureKeyStatus(Record):
    key_status: str = Field(alias="KeyStatus")
    status_date_time: ISODateTime = Field(alias="StatusDateTime")


class FedNowMessageSignatureKey(Record):
    fed_now_key_id: Max300AlphaNumericString = Field(alias="FedNowKeyID")
    name: Max300AlphaNumericString = Field(alias="Name")
    encoded_public_key: str = Field(alias="EncodedPublicKey")
    encoding: Max50AlphaNumericString = Field(alias="Encoding")
    algorithm: Max50AlphaNumericString | None = Field(None, alias="Algorithm")
    key_creation_date_time: ISODateTime | None = Field(None, alias="KeyCreationDateTime")


class KeyAddition(Record):
    key: FedNowMessageSignatureKey | None = Field(None, alias="Key")


class KeyRevocation(Record):
    key_revocation: str | None = Field(None, alias="KeyRevocation")
    fed_now_status_description: Max300Text | None = Field(None, alias="FedNowStatusDescription")
    fed_now_key_id: Max300AlphaNumericString | None = Field(None, alias="FedNowKeyID")


class FedNowMessageSignatureKeyExchange(Choice):
    """Either a key addition or a key revocation, never both."""

    key_addition: KeyAddition | None = Field(None, alias="KeyAddition")
    key_revocation: KeyRevocation | None = Field(None, alias="KeyRevocation")


class FedNowCustomerMessageSignatureKeyOperationResponse(Record):
    fed_now_key_id: Max300AlphaNumericString = Field(alias="FedNowKeyID")
    status: str = Field(alias="Status")
    error_code: str | None = Field(None, alias="ErrorCode")


class GetAllFedNowActivePublicKeys(Record):
    pass


class GetAllCustomerPublicKeys(Record):
    pass


class FedNowPublicKeyResponse(Record):
    fed_now_message_signature_key_status: FedNowMessageSignatureKeyStatus = Field(
        alias="FedNowMessageSignatureKeyStatus"
    )
    fed_now_message_signature_key: FedNowMessageSignatureKey = Field(
        alias="FedNowMessageSignatureKey"
    )


class FedNowPublicKeyResponses(Record):
    public_keys: Annotated[list[FedNowPublicKeyResponse], Occurs(min_items=1)] = Field(
        default_factory=list, alias="PublicKeys"
    )

"""Tests for the FedNow key-exchange record types."""

import pytest
from pydantic import ValidationError

from isoval.domain.errors import ErrorCategory
from isoval.domain.policy import LEGACY_POLICY
from isoval.schemas.fednow import (
    FedNowCustomerMessageSignatureKeyOperationResponse,
    FedNowMessageSignatureKey,
    FedNowMessageSignatureKeyExchange,
    FedNowPublicKeyResponses,
    GetAllCustomerPublicKeys,
    GetAllFedNowActivePublicKeys,
    KeyRevocation,
    Max300AlphaNumericString,
    RoutingNumberFRS1,
)


def _key(**overrides: object) -> FedNowMessageSignatureKey:
    data: dict[str, object] = {
        "FedNowKeyID": "key-0001",
        "Name": "signing_key",
        "EncodedPublicKey": "MFkw",
        "Encoding": "PEM",
    }
    data.update(overrides)
    return FedNowMessageSignatureKey.model_validate(data)


class TestRoutingNumber:
    def test_nine_digits(self) -> None:
        assert RoutingNumberFRS1("123456789").validate().ok

    @pytest.mark.parametrize("value", ["12345", "1234567890", "12345678A"])
    def test_pattern_mismatch(self, value: str) -> None:
        result = RoutingNumberFRS1(value).validate()
        assert result.error is not None
        assert result.error.code == ErrorCategory.PATTERN_MISMATCH


class TestKeyIdentifier:
    def test_exactly_300(self) -> None:
        assert Max300AlphaNumericString("k" * 300).validate().ok

    def test_301_is_too_long(self) -> None:
        result = Max300AlphaNumericString("k" * 301).validate()
        assert result.error is not None
        assert result.error.code == ErrorCategory.TOO_LONG

    def test_empty_is_too_short(self) -> None:
        result = Max300AlphaNumericString("").validate()
        assert result.error is not None
        assert result.error.code == ErrorCategory.TOO_SHORT

    def test_illegal_character(self) -> None:
        result = Max300AlphaNumericString("key 1").validate()
        assert result.error is not None
        assert result.error.code == ErrorCategory.PATTERN_MISMATCH


class TestSignatureKey:
    def test_valid(self) -> None:
        assert _key(Algorithm="ECDSA-P256").validate().ok

    def test_algorithm_absent(self) -> None:
        assert _key().validate().ok

    def test_algorithm_too_long_surfaces_field_failure(self) -> None:
        result = _key(Algorithm="A" * 51).validate()
        assert result.error is not None
        assert result.error.code == ErrorCategory.TOO_LONG
        assert result.error.path == "Algorithm"
        assert result.error.message == "Algorithm exceeds the maximum length of 50"

    def test_unconstrained_public_key(self) -> None:
        assert _key(EncodedPublicKey="").validate().ok


class TestKeyExchange:
    def test_addition(self) -> None:
        exchange = FedNowMessageSignatureKeyExchange.of(
            "KeyAddition", {"Key": _key().model_dump(by_alias=True)}
        )
        assert exchange.validate().ok
        assert exchange.selected is not None
        assert exchange.selected[0] == "KeyAddition"

    def test_nested_failure_path(self) -> None:
        exchange = FedNowMessageSignatureKeyExchange.of(
            "KeyAddition", {"Key": _key(Name="bad name").model_dump(by_alias=True)}
        )
        result = exchange.validate()
        assert result.error is not None
        assert result.error.path == "KeyAddition/Key/Name"
        assert result.error.code == ErrorCategory.PATTERN_MISMATCH

    def test_revocation(self) -> None:
        revocation = KeyRevocation.model_validate(
            {"FedNowKeyID": "key-0001", "FedNowStatusDescription": "compromised"}
        )
        exchange = FedNowMessageSignatureKeyExchange(key_revocation=revocation)
        assert exchange.validate().ok

    def test_both_arms_rejected(self) -> None:
        exchange = FedNowMessageSignatureKeyExchange.model_validate(
            {"KeyAddition": {}, "KeyRevocation": {}}
        )
        result = exchange.validate()
        assert result.error is not None
        assert result.error.code == ErrorCategory.CHOICE_VIOLATION


class TestPublicKeyResponses:
    def test_empty_list_rejected(self) -> None:
        result = FedNowPublicKeyResponses().validate()
        assert result.error is not None
        assert result.error.code == ErrorCategory.TOO_FEW_ELEMENTS
        assert result.error.path == "PublicKeys"

    def test_empty_list_accepted_by_legacy_policy(self) -> None:
        assert FedNowPublicKeyResponses().validate(policy=LEGACY_POLICY).ok

    def test_element_failure_indexed(self) -> None:
        entry = {
            "FedNowMessageSignatureKeyStatus": {
                "KeyStatus": "ACTIVE",
                "StatusDateTime": "2024-05-01T10:00:00",
            },
            "FedNowMessageSignatureKey": _key().model_dump(by_alias=True),
        }
        broken = dict(entry, FedNowMessageSignatureKey=_key(Encoding="").model_dump(by_alias=True))
        responses = FedNowPublicKeyResponses.model_validate({"PublicKeys": [entry, broken]})
        result = responses.validate()
        assert result.error is not None
        assert result.error.path == "PublicKeys[1]/FedNowMessageSignatureKey/Encoding"
        assert result.error.code == ErrorCategory.TOO_SHORT


class TestKeyOperationResponse:
    def test_valid(self) -> None:
        response = FedNowCustomerMessageSignatureKeyOperationResponse.model_validate(
            {"FedNowKeyID": "key-0001", "Status": "ACCEPTED"}
        )
        assert response.validate().ok

    def test_key_id_checked(self) -> None:
        response = FedNowCustomerMessageSignatureKeyOperationResponse.model_validate(
            {"FedNowKeyID": "key 0001", "Status": "REJECTED", "ErrorCode": "E100"}
        )
        result = response.validate()
        assert result.error is not None
        assert result.error.path == "FedNowKeyID"
        assert result.error.code == ErrorCategory.PATTERN_MISMATCH


class TestKeyQueries:
    def test_empty_requests_validate(self) -> None:
        assert GetAllFedNowActivePublicKeys().validate().ok
        assert GetAllCustomerPublicKeys().validate().ok

    def test_requests_take_no_fields(self) -> None:
        with pytest.raises(ValidationError):
            GetAllCustomerPublicKeys.model_validate({"Extra": "x"})

import pytest
from unittest.mock import AsyncMock

from hiero_sdk_python import PrivateKey

from hedera_agent_core.shared.errors import KeyDetectionError
from hedera_agent_core.shared.utils.key_type_detector import (
    KeyType,
    detect_key_type_from_mirrornode,
)
from hedera_agent_core.shared.utils.key_utils import parse_key

ACCOUNT_ID = "0.0.1001"

# A 32-byte hex string is a valid private key for both curves
AMBIGUOUS_KEY = "11" * 32


def mirror_with_key_type(key_type):
    service = AsyncMock()
    service.get_account.return_value = {
        "account_id": ACCOUNT_ID,
        "key": {"_type": key_type, "key": "00"},
    }
    return service


@pytest.mark.asyncio
async def test_detects_ed25519_from_mirror_record():
    service = mirror_with_key_type("ED25519")

    result = await detect_key_type_from_mirrornode(service, ACCOUNT_ID, AMBIGUOUS_KEY)

    assert result.detected_type is KeyType.ED25519
    assert result.private_key.is_ed25519()
    assert result.key_material.algorithm is KeyType.ED25519
    assert result.key_material.public_key == result.private_key.public_key()
    service.get_account.assert_called_once_with(ACCOUNT_ID)


@pytest.mark.asyncio
async def test_detects_ecdsa_from_mirror_record():
    service = mirror_with_key_type("ECDSA_SECP256K1")

    result = await detect_key_type_from_mirrornode(service, ACCOUNT_ID, AMBIGUOUS_KEY)

    assert result.detected_type is KeyType.ECDSA
    assert result.private_key.is_ecdsa()


@pytest.mark.asyncio
async def test_same_string_yields_different_keys_per_algorithm():
    ed = await detect_key_type_from_mirrornode(
        mirror_with_key_type("ED25519"), ACCOUNT_ID, AMBIGUOUS_KEY
    )
    ec = await detect_key_type_from_mirrornode(
        mirror_with_key_type("ECDSA_SECP256K1"), ACCOUNT_ID, AMBIGUOUS_KEY
    )

    assert ed.private_key.public_key() != ec.private_key.public_key()


@pytest.mark.asyncio
async def test_unsupported_key_type_raises():
    service = mirror_with_key_type("ProtobufEncoded")

    with pytest.raises(KeyDetectionError, match="Unsupported key type") as exc_info:
        await detect_key_type_from_mirrornode(service, ACCOUNT_ID, AMBIGUOUS_KEY)

    assert exc_info.value.account_id == ACCOUNT_ID


@pytest.mark.asyncio
async def test_mirror_failure_is_wrapped_with_cause():
    service = AsyncMock()
    cause = RuntimeError("Account not found")
    service.get_account.side_effect = cause

    with pytest.raises(
        KeyDetectionError,
        match=f"Failed to detect or parse key for account {ACCOUNT_ID}: Account not found",
    ) as exc_info:
        await detect_key_type_from_mirrornode(service, ACCOUNT_ID, AMBIGUOUS_KEY)

    assert exc_info.value.__cause__ is cause


@pytest.mark.asyncio
async def test_key_of_wrong_algorithm_fails_to_parse():
    ed25519_der = PrivateKey.generate_ed25519().to_string_der()
    service = mirror_with_key_type("ECDSA_SECP256K1")

    with pytest.raises(KeyDetectionError, match="Key mismatch"):
        await detect_key_type_from_mirrornode(service, ACCOUNT_ID, ed25519_der)


@pytest.mark.asyncio
async def test_ecdsa_key_for_ed25519_account_is_rejected():
    ecdsa_der = PrivateKey.generate_ecdsa().to_string_der()
    service = mirror_with_key_type("ED25519")

    with pytest.raises(
        KeyDetectionError, match="private key is ecdsa but the account uses ed25519"
    ) as exc_info:
        await detect_key_type_from_mirrornode(service, ACCOUNT_ID, ecdsa_der)

    assert exc_info.value.account_id == ACCOUNT_ID


@pytest.mark.asyncio
async def test_der_key_of_the_recorded_algorithm_is_accepted():
    private_key = PrivateKey.generate_ecdsa()
    service = mirror_with_key_type("ECDSA_SECP256K1")

    result = await detect_key_type_from_mirrornode(
        service, ACCOUNT_ID, "0x" + private_key.to_string_der()
    )

    assert result.private_key == private_key


@pytest.mark.asyncio
async def test_missing_key_record_raises():
    service = AsyncMock()
    service.get_account.return_value = {"account_id": ACCOUNT_ID}

    with pytest.raises(KeyDetectionError):
        await detect_key_type_from_mirrornode(service, ACCOUNT_ID, AMBIGUOUS_KEY)


@pytest.mark.asyncio
async def test_parse_key_returns_public_half_of_private_key():
    private_key = PrivateKey.generate_ecdsa()
    service = mirror_with_key_type("ECDSA_SECP256K1")

    result = await parse_key(service, ACCOUNT_ID, private_key.to_string_raw())

    assert result == private_key.public_key()


@pytest.mark.asyncio
async def test_parse_key_falls_back_to_public_key_string():
    public_key = PrivateKey.generate_ed25519().public_key()
    service = AsyncMock()
    service.get_account.side_effect = RuntimeError("offline")

    result = await parse_key(service, ACCOUNT_ID, public_key.to_string_der())

    assert result == public_key


@pytest.mark.asyncio
async def test_parse_key_returns_none_for_garbage():
    service = AsyncMock()
    service.get_account.side_effect = RuntimeError("offline")

    assert await parse_key(service, ACCOUNT_ID, "not a key") is None

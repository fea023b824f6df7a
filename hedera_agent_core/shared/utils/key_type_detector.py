import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from hiero_sdk_python import PrivateKey, PublicKey

from hedera_agent_core.shared.errors import KeyDetectionError
from hedera_agent_core.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)

logger = logging.getLogger(__name__)

# hex length of a raw 32-byte Ed25519 seed or secp256k1 scalar
RAW_PRIVATE_KEY_HEX_LENGTH = 64


class KeyType(str, Enum):
    ED25519 = "ed25519"
    ECDSA = "ecdsa"

    @classmethod
    def of(cls, key: Union[PrivateKey, PublicKey]) -> "KeyType":
        return cls.ECDSA if key.is_ecdsa() else cls.ED25519


MIRROR_KEY_TYPES = {
    "ED25519": KeyType.ED25519,
    "ECDSA_SECP256K1": KeyType.ECDSA,
}


@dataclass(frozen=True)
class KeyMaterial:
    """A private key together with the algorithm the ledger records for it."""

    algorithm: KeyType
    private_key: PrivateKey

    @property
    def public_key(self) -> PublicKey:
        return self.private_key.public_key()


@dataclass(frozen=True)
class KeyDetectionResult:
    detected_type: KeyType
    private_key: PrivateKey

    @property
    def key_material(self) -> KeyMaterial:
        return KeyMaterial(algorithm=self.detected_type, private_key=self.private_key)


def parse_private_key(key_string: str, key_type: KeyType) -> PrivateKey:
    """Parse ``key_string`` as a private key of ``key_type``.

    Raw 32-byte hex is loaded with the loader for that curve. DER strings carry
    their own algorithm, which must match ``key_type``.

    Raises:
        ValueError: If the string is not a key of ``key_type``.
    """
    key_hex = key_string.strip().removeprefix("0x")
    if len(key_hex) == RAW_PRIVATE_KEY_HEX_LENGTH:
        if key_type is KeyType.ECDSA:
            return PrivateKey.from_string_ecdsa(key_hex)
        return PrivateKey.from_string_ed25519(key_hex)

    private_key = PrivateKey.from_string_der(key_hex)
    parsed_type = KeyType.of(private_key)
    if parsed_type is not key_type:
        raise ValueError(
            f"Key mismatch: private key is {parsed_type.value} "
            f"but the account uses {key_type.value}"
        )
    return private_key


async def detect_key_type_from_mirrornode(
    mirrornode_service: IHederaMirrornodeService,
    account_id: str,
    private_key_string: str,
) -> KeyDetectionResult:
    """Parse a private key using the algorithm recorded on-chain for ``account_id``.

    The string's shape is never used to guess the algorithm: a 32-byte hex
    string is a valid key for both curves.

    Args:
        mirrornode_service: Mirror node used to read the account's key.
        account_id: Account whose key the private key belongs to.
        private_key_string: Raw or DER hex private key.

    Returns:
        KeyDetectionResult: The recorded algorithm and the parsed private key.

    Raises:
        KeyDetectionError: If the lookup fails, the algorithm is unsupported,
            or the string does not parse as a key of that algorithm.
    """
    try:
        account = await mirrornode_service.get_account(account_id)
        key_info = account.get("key") or {}
        mirror_type = key_info.get("_type")

        key_type = MIRROR_KEY_TYPES.get(mirror_type)
        if key_type is None:
            raise ValueError(f"Unsupported key type: {mirror_type}")

        private_key = parse_private_key(private_key_string, key_type)
    except Exception as e:
        raise KeyDetectionError(account_id, str(e)) from e

    logger.debug("Detected %s key for account %s", key_type.value, account_id)
    return KeyDetectionResult(detected_type=key_type, private_key=private_key)

import logging
from dataclasses import dataclass
from typing import Optional, Union

from hiero_sdk_python import PublicKey

from hedera_agent_core.shared.errors import KeyDetectionError, ValidationError
from hedera_agent_core.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_agent_core.shared.utils.key_type_detector import (
    detect_key_type_from_mirrornode,
)

logger = logging.getLogger(__name__)


class KeyCapability:
    """Whether a management key (admin, supply, submit...) should be set.

    One of :class:`Unset`, :class:`UseCallerDefaultKey` or :class:`ExplicitKey`.
    """

    @staticmethod
    def from_raw(
        raw: Union["KeyCapability", str, bool, None],
    ) -> "KeyCapability":
        """Build a capability from the loosely typed ``bool | str | None`` input.

        ``True`` means "use the caller's default key", a non-empty string is an
        explicit public key, and ``None``, ``False`` or an empty string leave
        the capability absent.
        """
        if isinstance(raw, KeyCapability):
            return raw
        if raw is None or raw is False:
            return Unset()
        if raw is True:
            return UseCallerDefaultKey()
        if isinstance(raw, str):
            value = raw.strip()
            return ExplicitKey(value) if value else Unset()
        raise ValidationError(f"Invalid key value: {raw!r}")


@dataclass(frozen=True)
class Unset(KeyCapability):
    pass


@dataclass(frozen=True)
class UseCallerDefaultKey(KeyCapability):
    pass


@dataclass(frozen=True)
class ExplicitKey(KeyCapability):
    public_key: str


def parse_public_key(value: str) -> PublicKey:
    """Parse a public key string of either algorithm.

    Raises:
        ValidationError: If the string is not a valid public key.
    """
    try:
        return PublicKey.from_string(value)
    except ValueError as e:
        raise ValidationError(f"Invalid public key: {value}") from e


async def parse_key(
    mirrornode_service: IHederaMirrornodeService,
    account_id: str,
    key_string: str,
) -> Optional[PublicKey]:
    """Turn a key string into a public key.

    A private key is parsed with the algorithm recorded for ``account_id`` and
    its public half returned. Otherwise the string is tried as a public key.
    Returns ``None`` when neither works.
    """
    try:
        result = await detect_key_type_from_mirrornode(
            mirrornode_service, account_id, key_string
        )
        return result.private_key.public_key()
    except KeyDetectionError as e:
        logger.debug("Key is not a private key of account %s: %s", account_id, e)

    try:
        return PublicKey.from_string(key_string)
    except ValueError:
        return None

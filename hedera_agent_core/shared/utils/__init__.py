from enum import Enum

from hedera_agent_core.shared.errors import ValidationError


class LedgerId(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"
    PREVIEWNET = "previewnet"
    LOCAL_NODE = "local-node"


SUPPORTED_SIGNER_NETWORKS = (LedgerId.MAINNET, LedgerId.TESTNET)


def ledger_id_from_network(network: str) -> LedgerId:
    """Map a network name to a ``LedgerId``.

    Raises:
        ValidationError: If the name is not a known network.
    """
    try:
        return LedgerId(str(network).strip().lower())
    except ValueError as e:
        raise ValidationError(f"Unknown Hedera network: {network}") from e

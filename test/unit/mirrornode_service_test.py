import pytest
from unittest.mock import AsyncMock

from hedera_agent_core.shared.errors import ResolutionError
from hedera_agent_core.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_core.shared.utils import LedgerId, ledger_id_from_network


def test_injected_service_is_returned():
    service = AsyncMock()

    assert get_mirrornode_service(service, LedgerId.TESTNET) is service


def test_missing_service_raises():
    with pytest.raises(ResolutionError, match="mainnet"):
        get_mirrornode_service(None, LedgerId.MAINNET)


@pytest.mark.parametrize(
    "network, expected",
    [
        ("testnet", LedgerId.TESTNET),
        ("MAINNET", LedgerId.MAINNET),
        ("previewnet", LedgerId.PREVIEWNET),
    ],
)
def test_ledger_id_from_network(network, expected):
    assert ledger_id_from_network(network) is expected

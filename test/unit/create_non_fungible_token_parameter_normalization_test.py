import pytest
from unittest.mock import AsyncMock, MagicMock

from hiero_sdk_python import AccountId, PrivateKey

from hedera_agent_core.shared.configuration import Context
from hedera_agent_core.shared.errors import ResolutionError
from hedera_agent_core.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_core.shared.parameter_schemas import (
    CreateNonFungibleTokenParameters,
    SupplyType,
    TokenType,
)

TEST_OPERATOR_ID = "0.0.1001"
TEST_PRIVATE_KEY = PrivateKey.generate_ecdsa()
TEST_MIRROR_KEY = PrivateKey.generate_ed25519().public_key()


@pytest.fixture
def mock_context():
    return Context(account_id=TEST_OPERATOR_ID)


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.operator_account_id = AccountId.from_string(TEST_OPERATOR_ID)
    client.operator_private_key = TEST_PRIVATE_KEY
    return client


@pytest.fixture
def mock_mirrornode():
    service = AsyncMock()
    service.get_account.return_value = {
        "account_public_key": TEST_MIRROR_KEY.to_string_der()
    }
    return service


@pytest.mark.asyncio
async def test_nft_defaults(mock_context, mock_client, mock_mirrornode):
    params = CreateNonFungibleTokenParameters(token_name="Art", token_symbol="ART")

    result = await HederaParameterNormaliser.normalise_create_non_fungible_token_params(
        params, mock_context, mock_client, mock_mirrornode
    )

    assert result.max_supply == 100
    assert result.supply_type == SupplyType.FINITE
    assert result.token_type == TokenType.NON_FUNGIBLE_UNIQUE
    assert result.treasury_account_id == AccountId.from_string(TEST_OPERATOR_ID)
    assert str(result.auto_renew_account_id) == TEST_OPERATOR_ID
    # supply key is always present for NFTs
    assert result.keys.supply_key == TEST_MIRROR_KEY
    assert result.keys.admin_key is None


@pytest.mark.asyncio
async def test_nft_explicit_supply_key_skips_lookup(
    mock_context, mock_client, mock_mirrornode
):
    explicit = PrivateKey.generate_ed25519().public_key()

    result = await HederaParameterNormaliser.normalise_create_non_fungible_token_params(
        {
            "token_name": "Art",
            "token_symbol": "ART",
            "max_supply": 5,
            "treasury_account_id": "0.0.7007",
            "supply_key": explicit.to_string_der(),
        },
        mock_context,
        mock_client,
        mock_mirrornode,
    )

    assert result.max_supply == 5
    assert str(result.treasury_account_id) == "0.0.7007"
    assert result.keys.supply_key == explicit
    mock_mirrornode.get_account.assert_not_called()


@pytest.mark.asyncio
async def test_nft_without_any_key_source_raises(mock_context):
    client = MagicMock()
    client.operator_account_id = AccountId.from_string(TEST_OPERATOR_ID)
    client.operator_private_key = None
    service = AsyncMock()
    service.get_account.return_value = {}

    with pytest.raises(
        ResolutionError, match="Could not determine public key for supply key"
    ):
        await HederaParameterNormaliser.normalise_create_non_fungible_token_params(
            {"token_name": "Art", "token_symbol": "ART"},
            mock_context,
            client,
            service,
        )

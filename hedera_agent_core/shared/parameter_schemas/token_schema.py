from enum import Enum
from typing import Optional, List, Annotated

from pydantic import Field

from hiero_sdk_python import AccountId, PublicKey, TokenId
from hedera_agent_core.shared.parameter_schemas.common_schema import (
    AmountInput,
    BaseModelWithArbitraryTypes,
    KeyInput,
)


class SupplyType(str, Enum):
    INFINITE = "infinite"
    FINITE = "finite"


class TokenType(str, Enum):
    FUNGIBLE_COMMON = "fungibleCommon"
    NON_FUNGIBLE_UNIQUE = "nonFungibleUnique"


class TokenKeysParameters(BaseModelWithArbitraryTypes):
    admin_key: Annotated[
        KeyInput,
        Field(description="Admin key: true for your key, a public key string, or omit."),
    ] = None
    freeze_key: Annotated[KeyInput, Field(description="Freeze key.")] = None
    wipe_key: Annotated[KeyInput, Field(description="Wipe key.")] = None
    kyc_key: Annotated[KeyInput, Field(description="KYC key.")] = None
    pause_key: Annotated[KeyInput, Field(description="Pause key.")] = None
    metadata_key: Annotated[KeyInput, Field(description="Metadata key.")] = None
    fee_schedule_key: Annotated[KeyInput, Field(description="Fee schedule key.")] = None


class TokenKeys(BaseModelWithArbitraryTypes):
    admin_key: Optional[PublicKey] = None
    supply_key: Optional[PublicKey] = None
    freeze_key: Optional[PublicKey] = None
    wipe_key: Optional[PublicKey] = None
    kyc_key: Optional[PublicKey] = None
    pause_key: Optional[PublicKey] = None
    metadata_key: Optional[PublicKey] = None
    fee_schedule_key: Optional[PublicKey] = None


class AirdropRecipient(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        str, Field(description='Recipient account ID (e.g., "0.0.xxxx").')
    ]
    amount: Annotated[AmountInput, Field(description="Amount in display units.")]


class CreateFungibleTokenParameters(TokenKeysParameters):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    initial_supply: Annotated[
        AmountInput, Field(description="The initial supply of the token.")
    ] = 0
    supply_type: Annotated[
        SupplyType,
        Field(description="Supply type of the token: finite or infinite."),
    ] = SupplyType.FINITE
    max_supply: Annotated[
        Optional[AmountInput], Field(description="The maximum supply of the token.")
    ] = None
    decimals: Annotated[int, Field(ge=0, description="The number of decimals.")] = 0
    treasury_account_id: Annotated[
        Optional[str], Field(description="The treasury account of the token.")
    ] = None
    is_supply_key: Annotated[
        KeyInput,
        Field(description="Determines if the token supply key should be set."),
    ] = None
    token_memo: Annotated[Optional[str], Field(description="Token memo.")] = None


class CreateFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_name: str
    token_symbol: str
    decimals: int
    initial_supply: int
    supply_type: SupplyType
    max_supply: Optional[int] = None
    token_type: TokenType = TokenType.FUNGIBLE_COMMON
    treasury_account_id: AccountId
    auto_renew_account_id: AccountId
    token_memo: Optional[str] = None
    keys: TokenKeys


class CreateNonFungibleTokenParameters(TokenKeysParameters):
    token_name: Annotated[str, Field(description="The name of the token")]
    token_symbol: Annotated[str, Field(description="The symbol of the token")]
    max_supply: Annotated[int, Field(gt=0, description="Maximum supply of NFTs")] = 100
    treasury_account_id: Annotated[
        Optional[str], Field(description="Treasury account ID")
    ] = None
    supply_key: Annotated[
        Optional[str],
        Field(description="Supply key. Defaults to the caller's key."),
    ] = None
    token_memo: Annotated[Optional[str], Field(description="Token memo.")] = None


class CreateNonFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_name: str
    token_symbol: str
    max_supply: int
    supply_type: SupplyType = SupplyType.FINITE
    token_type: TokenType = TokenType.NON_FUNGIBLE_UNIQUE
    treasury_account_id: AccountId
    auto_renew_account_id: AccountId
    token_memo: Optional[str] = None
    keys: TokenKeys


class AirdropFungibleTokenParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[str, Field(description="The id of the token.")]
    source_account_id: Annotated[
        Optional[str], Field(description="The account to airdrop the token from.")
    ] = None
    recipients: Annotated[
        List[AirdropRecipient], Field(min_length=1, description="Array of recipients.")
    ]
    transaction_memo: Annotated[
        Optional[str], Field(description="Optional transaction memo.")
    ] = None


class TokenTransfer(BaseModelWithArbitraryTypes):
    token_id: TokenId
    account_id: AccountId
    amount: int


class AirdropFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_transfers: List[TokenTransfer]
    transaction_memo: Optional[str] = None


class MintFungibleTokenParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[str, Field(description="The id of the token.")]
    amount: Annotated[AmountInput, Field(description="Amount of tokens to mint.")]


class MintFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_id: TokenId
    amount: int


class MintNonFungibleTokenParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[str, Field(description="The id of the NFT class.")]
    uris: Annotated[
        List[Annotated[str, Field(max_length=100)]],
        Field(min_length=1, max_length=10, description="An array of URIs hosting NFT metadata."),
    ]


class MintNonFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_id: TokenId
    metadata: List[bytes]


class AssociateTokenParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str], Field(description="Account to associate tokens with")
    ] = None
    token_ids: Annotated[
        List[str], Field(min_length=1, description="Token IDs to associate")
    ]


class AssociateTokenParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: AccountId
    token_ids: List[TokenId]


class DissociateTokenParameters(BaseModelWithArbitraryTypes):
    token_ids: Annotated[
        List[str], Field(min_length=1, description="List of Hedera token IDs to dissociate")
    ]
    account_id: Annotated[
        Optional[str],
        Field(description="Account to dissociate from, defaults to operator"),
    ] = None
    transaction_memo: Annotated[
        Optional[str], Field(description="Optional transaction memo")
    ] = None


class DissociateTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_ids: List[TokenId]
    account_id: AccountId
    transaction_memo: Optional[str] = None


class GetTokenInfoParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[
        Optional[str], Field(description="The token ID to query (e.g., 0.0.12345).")
    ] = None

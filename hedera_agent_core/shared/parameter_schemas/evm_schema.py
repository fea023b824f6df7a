from typing import Annotated, Optional

from hiero_sdk_python import ContractId
from pydantic import Field

from hedera_agent_core.shared.parameter_schemas.common_schema import (
    BaseModelWithArbitraryTypes,
)


class CreateERC20Parameters(BaseModelWithArbitraryTypes):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    decimals: Annotated[
        int, Field(ge=0, le=255, description="The number of decimals.")
    ] = 18
    initial_supply: Annotated[
        int, Field(ge=0, description="Initial supply in base units.")
    ] = 0


class CreateERC721Parameters(BaseModelWithArbitraryTypes):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    base_uri: Annotated[str, Field(description="Base URI for token metadata.")] = ""


class TransferERC20Parameters(BaseModelWithArbitraryTypes):
    contract_id: Annotated[
        str, Field(description="ERC20 contract, as a Hedera ID or EVM address.")
    ]
    recipient_address: Annotated[
        str, Field(description="Recipient, as a Hedera ID or EVM address.")
    ]
    amount: Annotated[int, Field(description="Amount in base units.")]


class TransferERC721Parameters(BaseModelWithArbitraryTypes):
    contract_id: Annotated[
        str, Field(description="ERC721 contract, as a Hedera ID or EVM address.")
    ]
    from_address: Annotated[
        Optional[str], Field(description="Current owner. Defaults to the operator.")
    ] = None
    to_address: Annotated[str, Field(description="Recipient address.")]
    token_id: Annotated[int, Field(ge=0, description="The NFT token ID.")]


class MintERC721Parameters(BaseModelWithArbitraryTypes):
    contract_id: Annotated[
        str, Field(description="ERC721 contract, as a Hedera ID or EVM address.")
    ]
    to_address: Annotated[
        Optional[str], Field(description="Recipient. Defaults to the operator.")
    ] = None


class ContractExecuteTransactionParametersNormalised(BaseModelWithArbitraryTypes):
    contract_id: ContractId
    function_parameters: bytes
    gas: int

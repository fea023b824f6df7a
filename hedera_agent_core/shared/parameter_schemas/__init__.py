from hedera_agent_core.shared.parameter_schemas.common_schema import (
    AmountInput,
    BaseModelWithArbitraryTypes,
    KeyInput,
)
from hedera_agent_core.shared.parameter_schemas.account_schema import (
    AccountBalanceQueryParameters,
    AccountBalanceQueryParametersNormalised,
    AccountTokenBalancesQueryParameters,
    AccountTokenBalancesQueryParametersNormalised,
    CreateAccountParameters,
    CreateAccountParametersNormalised,
    DeleteAccountParameters,
    DeleteAccountParametersNormalised,
    HbarTransfer,
    TransferHbarEntry,
    TransferHbarParameters,
    TransferHbarParametersNormalised,
    UpdateAccountParameters,
    UpdateAccountParametersNormalised,
)
from hedera_agent_core.shared.parameter_schemas.consensus_schema import (
    CreateTopicParameters,
    CreateTopicParametersNormalised,
    DeleteTopicParameters,
    DeleteTopicParametersNormalised,
    SubmitTopicMessageParameters,
    SubmitTopicMessageParametersNormalised,
    UpdateTopicParameters,
    UpdateTopicParametersNormalised,
)
from hedera_agent_core.shared.parameter_schemas.evm_schema import (
    ContractExecuteTransactionParametersNormalised,
    CreateERC20Parameters,
    CreateERC721Parameters,
    MintERC721Parameters,
    TransferERC20Parameters,
    TransferERC721Parameters,
)
from hedera_agent_core.shared.parameter_schemas.token_schema import (
    AirdropFungibleTokenParameters,
    AirdropFungibleTokenParametersNormalised,
    AirdropRecipient,
    AssociateTokenParameters,
    AssociateTokenParametersNormalised,
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
    DissociateTokenParameters,
    DissociateTokenParametersNormalised,
    GetTokenInfoParameters,
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParameters,
    MintNonFungibleTokenParametersNormalised,
    SupplyType,
    TokenKeys,
    TokenTransfer,
    TokenType,
)
from hedera_agent_core.shared.parameter_schemas.transaction_schema import (
    TransactionRecordQueryParameters,
    TransactionRecordQueryParametersNormalised,
)

from typing import Annotated, List, Optional

from pydantic import Field

from hiero_sdk_python import AccountId, PublicKey
from hedera_agent_core.shared.parameter_schemas.common_schema import (
    AmountInput,
    BaseModelWithArbitraryTypes,
)


class TransferHbarEntry(BaseModelWithArbitraryTypes):
    account_id: Annotated[str, Field(description="Recipient account ID.")]
    amount: Annotated[AmountInput, Field(description="Amount of HBAR to transfer.")]


class TransferHbarParameters(BaseModelWithArbitraryTypes):
    transfers: Annotated[
        List[TransferHbarEntry],
        Field(description="List of HBAR transfers. Each must have an account_id and amount."),
    ]
    source_account_id: Annotated[
        Optional[str],
        Field(description="Account ID of the HBAR owner. Defaults to the operator account."),
    ] = None
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo to include with the transaction.")
    ] = None


class HbarTransfer(BaseModelWithArbitraryTypes):
    account_id: AccountId
    amount: int


class TransferHbarParametersNormalised(BaseModelWithArbitraryTypes):
    hbar_transfers: List[HbarTransfer]
    transaction_memo: Optional[str] = None


class CreateAccountParameters(BaseModelWithArbitraryTypes):
    public_key: Annotated[
        Optional[str],
        Field(description="Public key for the new account. Defaults to the operator key."),
    ] = None
    account_memo: Annotated[
        Optional[str], Field(description="Optional memo for the account.")
    ] = None
    initial_balance: Annotated[
        AmountInput, Field(description="Initial HBAR balance to fund the account.")
    ] = 0
    max_automatic_token_associations: Annotated[
        int,
        Field(ge=-1, description="Max automatic token associations (-1 for unlimited)."),
    ] = -1


class CreateAccountParametersNormalised(BaseModelWithArbitraryTypes):
    key: PublicKey
    memo: Optional[str] = None
    initial_balance: int = 0
    max_automatic_token_associations: int = -1


class UpdateAccountParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str],
        Field(description="Account ID to update. Defaults to the operator account."),
    ] = None
    max_automatic_token_associations: Annotated[
        Optional[int], Field(ge=-1, description="Max automatic token associations.")
    ] = None
    staked_account_id: Annotated[
        Optional[str], Field(description="Account to stake to.")
    ] = None
    account_memo: Annotated[Optional[str], Field(description="Account memo.")] = None
    decline_staking_reward: Annotated[
        Optional[bool], Field(description="Whether to decline staking rewards.")
    ] = None


class UpdateAccountParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: AccountId
    max_automatic_token_associations: Optional[int] = None
    staked_account_id: Optional[AccountId] = None
    account_memo: Optional[str] = None
    decline_staking_reward: Optional[bool] = None


class DeleteAccountParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[str, Field(description="The account ID to delete.")]
    transfer_account_id: Annotated[
        Optional[str],
        Field(description="Account to receive the remaining balance. Defaults to the operator."),
    ] = None


class DeleteAccountParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: AccountId
    transfer_account_id: AccountId


class AccountBalanceQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str], Field(description="The account ID to query.")
    ] = None


class AccountBalanceQueryParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: str


class AccountTokenBalancesQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str], Field(description="The account ID to query.")
    ] = None
    token_id: Annotated[
        Optional[str], Field(description="Restrict the result to one token.")
    ] = None


class AccountTokenBalancesQueryParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: str
    token_id: Optional[str] = None

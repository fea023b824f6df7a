from typing import List, Literal, Optional, TypedDict


class AccountAPIKey(TypedDict):
    _type: Literal["ED25519", "ECDSA_SECP256K1", "ProtobufEncoded"]
    key: str


class AccountResponse(TypedDict, total=False):
    account_id: str
    account_public_key: Optional[str]
    evm_address: Optional[str]
    key: Optional[AccountAPIKey]
    balance: int


class TokenInfo(TypedDict, total=False):
    token_id: str
    name: str
    symbol: str
    decimals: str
    total_supply: str
    max_supply: str
    supply_type: str
    treasury_account_id: str


class TokenBalance(TypedDict):
    token_id: str
    balance: int
    decimals: int


class TokenBalancesResponse(TypedDict, total=False):
    tokens: List[TokenBalance]


class TransactionRecord(TypedDict, total=False):
    transaction_id: str
    result: str
    consensus_timestamp: str
    memo_base64: str
    charged_tx_fee: int

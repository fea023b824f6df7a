from abc import ABC, abstractmethod
from typing import List

from hedera_agent_core.shared.hedera_utils.mirrornode.types import (
    AccountResponse,
    TokenBalancesResponse,
    TokenInfo,
    TransactionRecord,
)


class IHederaMirrornodeService(ABC):
    """Read-only view of ledger state used to resolve defaults.

    Implementations raise on lookup failure rather than returning empty data.
    """

    @abstractmethod
    async def get_account(self, account_id: str) -> AccountResponse:
        """Fetch an account by ``shard.realm.num`` id or EVM address."""

    @abstractmethod
    async def get_token_info(self, token_id: str) -> TokenInfo:
        pass

    @abstractmethod
    async def get_account_token_balances(
        self, account_id: str, token_id: str | None = None
    ) -> TokenBalancesResponse:
        pass

    @abstractmethod
    async def get_transaction_record(
        self, transaction_id: str, nonce: int | None = None
    ) -> List[TransactionRecord]:
        pass

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from hiero_sdk_python import (
    Client,
    PrecheckError,
    ReceiptStatusError,
    TransactionReceipt,
)
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_agent_core.shared.configuration import AgentMode, Context
from hedera_agent_core.shared.errors import ProtocolError, ResolutionError
from hedera_agent_core.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ReturnBytesToolResponse,
    ToolResponse,
)

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "SUCCESS"

PostProcess = Callable[[RawTransactionResponse], str]


def _status_text(status: Any) -> str:
    # SDK status enums print as "ResponseCode.SUCCESS"; keep just the name
    return getattr(status, "name", None) or str(status)


def _optional_str(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def raw_response_from_receipt(
    receipt: TransactionReceipt, transaction_id: Any = None
) -> RawTransactionResponse:
    return RawTransactionResponse(
        status=_status_text(receipt.status),
        account_id=_optional_str(getattr(receipt, "account_id", None)),
        token_id=_optional_str(getattr(receipt, "token_id", None)),
        topic_id=_optional_str(getattr(receipt, "topic_id", None)),
        schedule_id=_optional_str(getattr(receipt, "schedule_id", None)),
        contract_id=_optional_str(getattr(receipt, "contract_id", None)),
        transaction_id=_optional_str(
            transaction_id or getattr(receipt, "transaction_id", None)
        ),
        serial_numbers=list(getattr(receipt, "serial_numbers", None) or []),
    )


def default_post_process(response: RawTransactionResponse) -> str:
    return f"Transaction executed with status {response.status}"


class TxModeStrategy(ABC):
    @abstractmethod
    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ToolResponse:
        pass


class ExecuteStrategy(TxModeStrategy):
    """Freeze, sign with the operator key, submit and wait for the receipt.

    Freezing and signing are no-ops on a transaction that is already frozen
    or already carries the operator signature.
    """

    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ExecutedTransactionToolResponse:
        operator_key = getattr(client, "operator_private_key", None)
        if operator_key is None:
            raise ResolutionError("No operator key available to sign the transaction")

        tx.freeze_with(client)
        tx.sign(operator_key)

        try:
            receipt: TransactionReceipt = tx.execute(client)
        except (PrecheckError, ReceiptStatusError) as e:
            raise ProtocolError(_status_text(e.status), str(e)) from e

        raw = raw_response_from_receipt(receipt, tx.transaction_id)
        if raw.status != SUCCESS_STATUS:
            raise ProtocolError(raw.status)

        logger.debug("Transaction %s executed with status %s", raw.transaction_id, raw.status)
        return ExecutedTransactionToolResponse(
            human_message=(post_process or default_post_process)(raw),
            raw=raw,
        )


class ReturnBytesStrategy(TxModeStrategy):
    """Freeze the transaction and hand back its bytes unsigned."""

    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ReturnBytesToolResponse:
        tx.freeze_with(client)
        tx_bytes = tx.to_bytes()
        return ReturnBytesToolResponse(
            human_message="Transaction bytes",
            raw={"bytes": tx_bytes},
            extra={"bytes": tx_bytes},
        )


def get_strategy_from_context(context: Context) -> TxModeStrategy:
    if context.mode == AgentMode.RETURN_BYTES:
        return ReturnBytesStrategy()
    return ExecuteStrategy()


async def handle_transaction(
    tx: Transaction,
    client: Client,
    context: Context,
    post_process: Optional[PostProcess] = None,
) -> ToolResponse:
    """Finalise ``tx`` according to ``context.mode``.

    Failures during execution are converted here, once, into a response whose
    ``error`` and ``raw.error`` carry the message and whose ``raw.status``
    carries the ledger status verbatim when there is one.
    """
    strategy = get_strategy_from_context(context)
    try:
        return await strategy.handle(tx, client, context, post_process)
    except ProtocolError as e:
        logger.error("Transaction rejected: %s", e)
        message = str(e)
        status = e.status
    except Exception as e:
        logger.error("Transaction execution failed: %s", e)
        message = f"Failed to execute transaction: {e}"
        status = "ERROR"

    return ToolResponse(
        human_message=message,
        error=message,
        raw=RawTransactionResponse(status=status, error=message),
    )

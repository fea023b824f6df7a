from types import SimpleNamespace

import pytest
from unittest.mock import MagicMock

from hiero_sdk_python import (
    AccountId,
    PrecheckError,
    PrivateKey,
    ReceiptStatusError,
    ResponseCode,
)

from hedera_agent_core.shared.configuration import AgentMode, Context
from hedera_agent_core.shared.errors import ProtocolError
from hedera_agent_core.shared.models import (
    ExecutedTransactionToolResponse,
    ReturnBytesToolResponse,
)
from hedera_agent_core.shared.strategies.tx_mode_strategy import (
    ExecuteStrategy,
    ReturnBytesStrategy,
    get_strategy_from_context,
    handle_transaction,
)

OPERATOR_KEY = PrivateKey.generate_ed25519()
TRANSACTION_ID = "0.0.1001@1700000000.000000001"


def make_receipt(status="SUCCESS", **fields):
    values = dict(
        status=status,
        account_id=None,
        token_id=None,
        topic_id=None,
        schedule_id=None,
        contract_id=None,
        transaction_id=None,
        serial_numbers=[],
    )
    values.update(fields)
    return SimpleNamespace(**values)


def make_transaction(receipt=None):
    tx = MagicMock()
    tx.transaction_id = TRANSACTION_ID
    tx.execute.return_value = receipt or make_receipt()
    tx.to_bytes.return_value = b"\x0a\x0b"
    return tx


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.operator_account_id = AccountId.from_string("0.0.1001")
    client.operator_private_key = OPERATOR_KEY
    return client


def test_strategy_follows_context_mode():
    assert isinstance(
        get_strategy_from_context(Context(mode=AgentMode.AUTONOMOUS)), ExecuteStrategy
    )
    assert isinstance(
        get_strategy_from_context(Context(mode=AgentMode.RETURN_BYTES)),
        ReturnBytesStrategy,
    )


@pytest.mark.asyncio
async def test_autonomous_freezes_signs_submits_once(mock_client):
    tx = make_transaction(make_receipt(token_id="0.0.5005"))

    result = await handle_transaction(tx, mock_client, Context(mode=AgentMode.AUTONOMOUS))

    tx.freeze_with.assert_called_once_with(mock_client)
    tx.sign.assert_called_once_with(OPERATOR_KEY)
    tx.execute.assert_called_once_with(mock_client)

    assert isinstance(result, ExecutedTransactionToolResponse)
    assert result.error is None
    assert result.raw.status == "SUCCESS"
    assert result.raw.token_id == "0.0.5005"
    assert result.raw.transaction_id == TRANSACTION_ID
    assert result.human_message == "Transaction executed with status SUCCESS"


@pytest.mark.asyncio
async def test_autonomous_without_operator_key_never_submits(mock_client):
    mock_client.operator_private_key = None
    tx = make_transaction()

    result = await handle_transaction(tx, mock_client, Context())

    tx.execute.assert_not_called()
    assert result.raw.status == "ERROR"
    assert "No operator key available" in result.error


@pytest.mark.asyncio
async def test_post_process_builds_human_message(mock_client):
    tx = make_transaction(make_receipt(topic_id="0.0.6006"))

    result = await handle_transaction(
        tx,
        mock_client,
        Context(),
        lambda raw: f"Topic created with ID {raw.topic_id}",
    )

    assert result.human_message == "Topic created with ID 0.0.6006"


@pytest.mark.asyncio
async def test_return_bytes_freezes_once_and_never_submits(mock_client):
    tx = make_transaction()

    result = await handle_transaction(
        tx, mock_client, Context(mode=AgentMode.RETURN_BYTES)
    )

    tx.freeze_with.assert_called_once_with(mock_client)
    tx.sign.assert_not_called()
    tx.execute.assert_not_called()

    assert isinstance(result, ReturnBytesToolResponse)
    assert result.raw == {"bytes": b"\x0a\x0b"}
    assert result.extra == {"bytes": b"\x0a\x0b"}


@pytest.mark.asyncio
async def test_failed_status_is_reported_verbatim(mock_client):
    tx = make_transaction(make_receipt(status="INSUFFICIENT_PAYER_BALANCE"))

    result = await handle_transaction(tx, mock_client, Context())

    assert result.raw.status == "INSUFFICIENT_PAYER_BALANCE"
    assert "INSUFFICIENT_PAYER_BALANCE" in result.error
    assert result.raw.error == result.error
    assert result.human_message == result.error


@pytest.mark.asyncio
async def test_execute_strategy_raises_protocol_error(mock_client):
    tx = make_transaction(make_receipt(status="INVALID_SIGNATURE"))

    with pytest.raises(ProtocolError) as exc_info:
        await ExecuteStrategy().handle(tx, mock_client, Context())

    assert exc_info.value.status == "INVALID_SIGNATURE"


@pytest.mark.asyncio
async def test_receipt_status_error_keeps_ledger_status(mock_client):
    tx = make_transaction()
    tx.execute.side_effect = ReceiptStatusError(
        ResponseCode.INVALID_SIGNATURE, None, MagicMock()
    )

    with pytest.raises(ProtocolError) as exc_info:
        await ExecuteStrategy().handle(tx, mock_client, Context())

    assert exc_info.value.status == "INVALID_SIGNATURE"
    assert isinstance(exc_info.value.__cause__, ReceiptStatusError)


@pytest.mark.asyncio
async def test_precheck_error_is_reported_verbatim(mock_client):
    tx = make_transaction()
    tx.execute.side_effect = PrecheckError(ResponseCode.INSUFFICIENT_PAYER_BALANCE)

    result = await handle_transaction(tx, mock_client, Context())

    assert result.raw.status == "INSUFFICIENT_PAYER_BALANCE"
    assert "INSUFFICIENT_PAYER_BALANCE" in result.error
    assert result.raw.error == result.error


@pytest.mark.asyncio
async def test_status_enum_name_is_used(mock_client):
    tx = make_transaction(make_receipt(status=ResponseCode.SUCCESS))

    result = await handle_transaction(tx, mock_client, Context())

    assert result.raw.status == "SUCCESS"


@pytest.mark.asyncio
async def test_transport_failure_is_converted(mock_client):
    tx = make_transaction()
    tx.execute.side_effect = ConnectionError("node unreachable")

    result = await handle_transaction(tx, mock_client, Context())

    assert result.error == "Failed to execute transaction: node unreachable"
    assert result.raw.status == "ERROR"
    assert result.to_dict()["raw"]["error"] == result.error

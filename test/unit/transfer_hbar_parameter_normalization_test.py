import pytest
from unittest.mock import MagicMock

from hiero_sdk_python import AccountId

from hedera_agent_core.shared.configuration import Context
from hedera_agent_core.shared.errors import ValidationError
from hedera_agent_core.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_core.shared.parameter_schemas import (
    TransferHbarParameters,
    TransferHbarParametersNormalised,
)


@pytest.fixture
def mock_context():
    return Context(account_id="0.0.1001")


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.operator_account_id = AccountId.from_string("0.0.9999")
    return client


def as_pairs(result: TransferHbarParametersNormalised):
    return [(str(t.account_id), t.amount) for t in result.hbar_transfers]


def test_transfers_are_balanced_by_source(mock_context, mock_client):
    params = TransferHbarParameters(
        transfers=[
            {"account_id": "0.0.2002", "amount": 1.5},
            {"account_id": "0.0.3003", "amount": "0.25"},
        ],
        transaction_memo="rent",
    )

    result = HederaParameterNormaliser.normalise_transfer_hbar(
        params, mock_context, mock_client
    )

    assert as_pairs(result) == [
        ("0.0.2002", 150_000_000),
        ("0.0.3003", 25_000_000),
        ("0.0.1001", -175_000_000),
    ]
    assert sum(amount for _, amount in as_pairs(result)) == 0
    assert result.transaction_memo == "rent"


def test_explicit_source_account_is_debited(mock_context, mock_client):
    result = HederaParameterNormaliser.normalise_transfer_hbar(
        {
            "source_account_id": "0.0.4004",
            "transfers": [{"account_id": "0.0.2002", "amount": 1}],
        },
        mock_context,
        mock_client,
    )

    assert as_pairs(result)[-1] == ("0.0.4004", -100_000_000)


def test_source_falls_back_to_operator(mock_client):
    result = HederaParameterNormaliser.normalise_transfer_hbar(
        {"transfers": [{"account_id": "0.0.2002", "amount": 2}]},
        Context(),
        mock_client,
    )

    assert as_pairs(result)[-1] == ("0.0.9999", -200_000_000)


@pytest.mark.parametrize(
    "amounts",
    [
        ["0.1", "0.2", "0.3"],
        [0.1, 0.2, 0.3],
        ["1", "0.00000001", "123456789.12345678"],
    ],
)
def test_sum_is_exactly_zero(mock_context, mock_client, amounts):
    result = HederaParameterNormaliser.normalise_transfer_hbar(
        {"transfers": [{"account_id": "0.0.2002", "amount": a} for a in amounts]},
        mock_context,
        mock_client,
    )

    assert sum(t.amount for t in result.hbar_transfers) == 0


def test_empty_transfer_list_is_allowed(mock_context, mock_client):
    result = HederaParameterNormaliser.normalise_transfer_hbar(
        {"transfers": []}, mock_context, mock_client
    )

    assert as_pairs(result) == [("0.0.1001", 0)]


@pytest.mark.parametrize("amount", [0, -2])
def test_non_positive_amount_is_rejected(mock_context, mock_client, amount):
    with pytest.raises(ValidationError, match=f"Invalid transfer amount: {amount}"):
        HederaParameterNormaliser.normalise_transfer_hbar(
            {"transfers": [{"account_id": "0.0.2002", "amount": amount}]},
            mock_context,
            mock_client,
        )


def test_amount_below_one_tinybar_is_rejected(mock_context, mock_client):
    with pytest.raises(ValidationError, match="Invalid transfer amount"):
        HederaParameterNormaliser.normalise_transfer_hbar(
            {"transfers": [{"account_id": "0.0.2002", "amount": "0.000000001"}]},
            mock_context,
            mock_client,
        )


@pytest.mark.parametrize(
    "amount, message",
    [
        ("1e100000000", "Amount out of range: 1e100000000"),
        ("100000000000000", "100000000000000 exceeds the maximum"),
    ],
)
def test_amount_beyond_ledger_range_is_rejected(
    mock_context, mock_client, amount, message
):
    with pytest.raises(ValidationError, match=message):
        HederaParameterNormaliser.normalise_transfer_hbar(
            {"transfers": [{"account_id": "0.0.2002", "amount": amount}]},
            mock_context,
            mock_client,
        )


def test_total_beyond_ledger_range_is_rejected(mock_context, mock_client):
    # each leg fits in 64 bits, the balancing debit does not
    transfers = [
        {"account_id": "0.0.2002", "amount": "50000000000"},
        {"account_id": "0.0.3003", "amount": "50000000000"},
    ]

    with pytest.raises(ValidationError, match="Total transfer amount .* exceeds the maximum"):
        HederaParameterNormaliser.normalise_transfer_hbar(
            {"transfers": transfers}, mock_context, mock_client
        )


def test_transfer_entries_carry_sdk_account_ids(mock_context, mock_client):
    result = HederaParameterNormaliser.normalise_transfer_hbar(
        {"transfers": [{"account_id": "0.0.2002", "amount": 1}]},
        mock_context,
        mock_client,
    )

    assert all(isinstance(t.account_id, AccountId) for t in result.hbar_transfers)
    assert result.hbar_transfers[0].account_id == AccountId.from_string("0.0.2002")

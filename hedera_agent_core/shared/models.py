from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class RawTransactionResponse:
    """Fields copied from a transaction receipt."""

    status: str
    account_id: Optional[str] = None
    token_id: Optional[str] = None
    topic_id: Optional[str] = None
    schedule_id: Optional[str] = None
    contract_id: Optional[str] = None
    transaction_id: Optional[str] = None
    serial_numbers: List[int] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "account_id": self.account_id,
            "token_id": self.token_id,
            "topic_id": self.topic_id,
            "schedule_id": self.schedule_id,
            "contract_id": self.contract_id,
            "transaction_id": self.transaction_id,
            "serial_numbers": list(self.serial_numbers),
            "error": self.error,
        }


@dataclass
class ToolResponse:
    """Result of finalising a transaction.

    ``human_message`` is for display, ``raw`` for programmatic use. On failure
    ``error`` is set and ``raw`` carries the failing status.
    """

    human_message: str
    raw: Any = None
    error: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        raw = self.raw.to_dict() if hasattr(self.raw, "to_dict") else self.raw
        return {
            "human_message": self.human_message,
            "raw": raw,
            "error": self.error,
            "extra": dict(self.extra),
        }


@dataclass
class ExecutedTransactionToolResponse(ToolResponse):
    raw: Optional[RawTransactionResponse] = None


@dataclass
class ReturnBytesToolResponse(ToolResponse):
    raw: dict[str, Any] = field(default_factory=dict)

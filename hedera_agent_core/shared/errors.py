from typing import Optional


class HederaAgentError(Exception):
    """Base class for every error raised by the agent core."""


class ValidationError(HederaAgentError, ValueError):
    """Raised when parameters have the wrong shape or violate a ledger invariant.

    Examples: a non-positive transfer amount, an initial supply above the
    maximum supply, an unsupported network name.
    """


class ResolutionError(HederaAgentError, ValueError):
    """Raised when a default cannot be resolved (account, public key, decimals, EVM address)."""


class KeyDetectionError(HederaAgentError, ValueError):
    """Raised when the on-chain key algorithm of an account cannot be determined or applied."""

    def __init__(self, account_id: str, message: str):
        self.account_id = account_id
        super().__init__(
            f"Failed to detect or parse key for account {account_id}: {message}"
        )


class NetworkError(HederaAgentError):
    """Raised when a mirror-node or ledger call fails at the transport level."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")


class ProtocolError(HederaAgentError):
    """Raised when the ledger rejects a transaction.

    The receipt status is kept verbatim so callers can surface it unchanged.
    """

    def __init__(self, status: str, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"Transaction failed with status: {status}")

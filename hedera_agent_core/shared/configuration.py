import logging
import os
from enum import Enum
from typing import Optional, Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from hedera_agent_core.shared.errors import ValidationError

logger = logging.getLogger(__name__)


class AgentMode(str, Enum):
    """How a built transaction is finalised."""

    AUTONOMOUS = "autonomous"
    RETURN_BYTES = "returnBytes"


class Context(BaseModel):
    """Per-call execution context.

    ``account_id`` is the caller's default account. When it is absent the
    client operator account is used instead. ``mirrornode_service`` is an
    injected ``IHederaMirrornodeService`` implementation.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    account_id: Optional[str] = None
    account_public_key: Optional[str] = None
    mode: AgentMode = AgentMode.AUTONOMOUS
    mirrornode_service: Optional[Any] = None


class OperatorConfig(BaseModel):
    """Operator credentials used to build a server-side signer."""

    model_config = ConfigDict(frozen=True)

    account_id: str
    private_key: str = Field(repr=False)
    network: str = "testnet"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "OperatorConfig":
        """Load operator credentials from the environment.

        Reads ``ACCOUNT_ID``, ``PRIVATE_KEY`` and ``HEDERA_NETWORK`` (defaults
        to ``testnet``), after loading a ``.env`` file if one is present.

        Raises:
            ValidationError: If ``ACCOUNT_ID`` or ``PRIVATE_KEY`` is missing.
        """
        load_dotenv(dotenv_path)

        account_id = os.getenv("ACCOUNT_ID")
        private_key = os.getenv("PRIVATE_KEY")
        network = os.getenv("HEDERA_NETWORK", "testnet")

        missing = [
            name
            for name, value in (("ACCOUNT_ID", account_id), ("PRIVATE_KEY", private_key))
            if not value
        ]
        if missing:
            raise ValidationError(
                f"Missing operator configuration: {', '.join(missing)}"
            )

        logger.debug("Loaded operator configuration for %s on %s", account_id, network)
        return cls(account_id=account_id, private_key=private_key, network=network)

__all__ = [
    "AgentMode",
    "Context",
    "OperatorConfig",
    "HederaParameterNormaliser",
    "AccountResolver",
    "ServerSigner",
    "handle_transaction",
]

from hedera_agent_core.shared.configuration import AgentMode, Context, OperatorConfig
from hedera_agent_core.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_core.shared.signer import ServerSigner
from hedera_agent_core.shared.strategies import handle_transaction
from hedera_agent_core.shared.utils.account_resolver import AccountResolver

from typing import Optional

from hedera_agent_core.shared.errors import ResolutionError
from hedera_agent_core.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_agent_core.shared.utils import LedgerId


def get_mirrornode_service(
    mirrornode_service: Optional[IHederaMirrornodeService],
    ledger_id: LedgerId,
) -> IHederaMirrornodeService:
    """Return the injected mirror-node service.

    No REST implementation ships with this package, so a service must be
    provided by the caller.

    Raises:
        ResolutionError: If no service was provided.
    """
    if mirrornode_service is not None:
        return mirrornode_service
    raise ResolutionError(
        f"No mirror node service configured for network {ledger_id.value}"
    )


__all__ = ["IHederaMirrornodeService", "get_mirrornode_service"]

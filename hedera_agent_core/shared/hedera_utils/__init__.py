from hedera_agent_core.shared.hedera_utils.decimals_utils import (
    HBAR_DECIMALS,
    from_tinybars,
    to_base_unit,
    to_display_unit,
    to_tinybars,
)

__all__ = [
    "HBAR_DECIMALS",
    "from_tinybars",
    "to_base_unit",
    "to_display_unit",
    "to_tinybars",
]

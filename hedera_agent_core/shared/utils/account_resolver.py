import logging
import re
from typing import Optional

from hiero_sdk_python import Client, PublicKey

from hedera_agent_core.shared.configuration import AgentMode, Context
from hedera_agent_core.shared.errors import (
    HederaAgentError,
    NetworkError,
    ResolutionError,
    ValidationError,
)
from hedera_agent_core.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_agent_core.shared.hedera_utils.mirrornode.types import AccountResponse
from hedera_agent_core.shared.utils.key_utils import parse_public_key

logger = logging.getLogger(__name__)

HEDERA_ADDRESS_REGEX = re.compile(r"^\d+\.\d+\.\d+$")
EVM_ADDRESS_REGEX = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")


class AccountResolver:
    """Resolves account references and default keys for a call."""

    @staticmethod
    def get_default_account(context: Context, client: Client) -> str:
        """Return the context account, falling back to the client operator.

        Raises:
            ResolutionError: If neither is available.
        """
        if context.account_id:
            return context.account_id

        operator_account = getattr(client, "operator_account_id", None)
        if operator_account:
            return str(operator_account)

        raise ResolutionError(
            "No account available: neither context.account_id nor operator account"
        )

    @staticmethod
    def resolve_account(
        provided_account: Optional[str],
        context: Context,
        client: Client,
    ) -> str:
        """Explicit account first, then the context account, then the operator."""
        return provided_account or AccountResolver.get_default_account(context, client)

    @staticmethod
    async def get_default_public_key(
        context: Context, client: Client
    ) -> PublicKey:
        """Public key of the default account.

        In AUTONOMOUS mode the operator signs, so its key is used. Otherwise the
        key comes from the context or from the mirror node.

        Raises:
            ResolutionError: If no key can be found.
            NetworkError: If the mirror-node lookup fails.
        """
        if context.mode == AgentMode.AUTONOMOUS:
            operator_key = getattr(client, "operator_private_key", None)
            if operator_key is None:
                raise ResolutionError("No operator key available in autonomous mode")
            return operator_key.public_key()

        if context.account_public_key:
            return parse_public_key(context.account_public_key)

        default_account_id = AccountResolver.get_default_account(context, client)
        if context.mirrornode_service is not None:
            account = await AccountResolver.lookup_account(
                default_account_id, context.mirrornode_service
            )
            public_key = account.get("account_public_key")
            if public_key:
                return parse_public_key(public_key)

        raise ResolutionError("No public key available for the default account")

    @staticmethod
    async def get_account_public_key(
        account_id: str,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService],
    ) -> PublicKey:
        """Public key of ``account_id`` from the mirror node, else the operator key.

        The operator key is only used when the account has no key on record
        or there is no mirror node to ask.

        Raises:
            NetworkError: If the mirror-node lookup fails.
            ResolutionError: If neither source yields a key.
        """
        if mirrornode_service is not None:
            account = await AccountResolver.lookup_account(
                account_id, mirrornode_service
            )
            public_key = account.get("account_public_key")
            if public_key:
                return parse_public_key(public_key)
            logger.debug(
                "Account %s has no public key on record, using operator key",
                account_id,
            )

        operator_key = getattr(client, "operator_private_key", None)
        if operator_key is not None:
            return operator_key.public_key()

        raise ResolutionError(f"Could not determine public key for account {account_id}")

    @staticmethod
    def get_default_account_description(context: Context) -> str:
        if context.account_id:
            return f"user account ({context.account_id})"
        return "operator account"

    @staticmethod
    def is_hedera_address(address: Optional[str]) -> bool:
        return bool(address) and bool(HEDERA_ADDRESS_REGEX.match(address))

    @staticmethod
    def is_evm_address(address: Optional[str]) -> bool:
        return bool(address) and bool(EVM_ADDRESS_REGEX.match(address))

    @staticmethod
    async def get_hedera_evm_address(
        address: str, mirrornode_service: IHederaMirrornodeService
    ) -> str:
        """Return the EVM address for ``address``.

        EVM addresses pass through (``0x``-prefixed). Hedera ids are looked up
        on the mirror node.

        Raises:
            ValidationError: If ``address`` is neither form.
            ResolutionError: If the account has no EVM address.
            NetworkError: If the mirror-node lookup fails.
        """
        if AccountResolver.is_evm_address(address):
            return address if address.startswith("0x") else f"0x{address}"
        if not AccountResolver.is_hedera_address(address):
            raise ValidationError(f"Invalid account address: {address}")

        account = await AccountResolver.lookup_account(address, mirrornode_service)
        evm_address = account.get("evm_address")
        if not evm_address:
            raise ResolutionError(f"No EVM address found for account {address}")
        return evm_address

    @staticmethod
    async def get_hedera_account_id(
        address: str, mirrornode_service: IHederaMirrornodeService
    ) -> str:
        """Return the ``shard.realm.num`` id for ``address``, looking EVM addresses up."""
        if AccountResolver.is_hedera_address(address):
            return address
        if not AccountResolver.is_evm_address(address):
            raise ValidationError(f"Invalid account address: {address}")

        account = await AccountResolver.lookup_account(address, mirrornode_service)
        account_id = account.get("account_id")
        if not account_id:
            raise ResolutionError(f"No Hedera account ID found for address {address}")
        return account_id

    @staticmethod
    async def lookup_account(
        address: str, mirrornode_service: IHederaMirrornodeService
    ) -> AccountResponse:
        """Fetch an account from the mirror node; transport failures become ``NetworkError``."""
        try:
            return await mirrornode_service.get_account(address)
        except HederaAgentError:
            raise
        except Exception as e:
            raise NetworkError(f"Mirror node account lookup for {address}", str(e)) from e

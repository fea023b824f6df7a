import logging
from typing import Callable, Optional, Union

from hiero_sdk_python import (
    AccountId,
    Client,
    PrivateKey,
    PublicKey,
    TransactionReceipt,
)
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_agent_core.shared.configuration import OperatorConfig
from hedera_agent_core.shared.errors import ValidationError
from hedera_agent_core.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_agent_core.shared.utils import LedgerId, SUPPORTED_SIGNER_NETWORKS
from hedera_agent_core.shared.utils.key_type_detector import (
    KeyMaterial,
    KeyType,
    detect_key_type_from_mirrornode,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[LedgerId], Client]


class ServerSigner:
    """Signs and submits transactions with an operator key held by the server.

    Use :meth:`create`; the key algorithm is read from the ledger before the
    client is configured, so a key is never applied with the wrong curve.
    """

    def __init__(
        self,
        account_id: str,
        key_material: KeyMaterial,
        network: LedgerId,
        client: Client,
    ):
        self._account_id = account_id
        self._key_material = key_material
        self._network = network
        self._client = client

    @classmethod
    async def create(
        cls,
        account_id: str,
        private_key: Union[str, PrivateKey],
        network: str,
        *,
        mirrornode_service: IHederaMirrornodeService,
        client_factory: ClientFactory,
    ) -> "ServerSigner":
        """Build a signer for ``account_id`` on ``network``.

        Args:
            account_id: Operator account ID.
            private_key: Operator private key, as a string or a parsed key.
            network: ``"mainnet"`` or ``"testnet"``.
            mirrornode_service: Mirror node used to read the account's key type.
            client_factory: Creates an SDK client for the given ledger.

        Raises:
            ValidationError: If the network is not supported.
            KeyDetectionError: If the key type cannot be determined or applied.
        """
        ledger_id = _parse_signer_network(network)

        key_string = (
            private_key.to_string_der()
            if isinstance(private_key, PrivateKey)
            else private_key
        )
        detection = await detect_key_type_from_mirrornode(
            mirrornode_service, account_id, key_string
        )

        client = client_factory(ledger_id)
        client.set_operator(AccountId.from_string(account_id), detection.private_key)

        logger.info(
            "Server signer ready for %s on %s (%s key)",
            account_id,
            ledger_id.value,
            detection.detected_type.value,
        )
        return cls(account_id, detection.key_material, ledger_id, client)

    @classmethod
    async def from_config(
        cls,
        config: OperatorConfig,
        *,
        mirrornode_service: IHederaMirrornodeService,
        client_factory: ClientFactory,
    ) -> "ServerSigner":
        return await cls.create(
            config.account_id,
            config.private_key,
            config.network,
            mirrornode_service=mirrornode_service,
            client_factory=client_factory,
        )

    async def sign_and_execute_transaction(
        self, transaction: Transaction
    ) -> TransactionReceipt:
        """Freeze (if needed), sign (if unsigned), submit and return the receipt."""
        transaction.freeze_with(self._client)
        transaction.sign(self._key_material.private_key)
        return transaction.execute(self._client)

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def network(self) -> LedgerId:
        return self._network

    @property
    def key_type(self) -> KeyType:
        return self._key_material.algorithm

    @property
    def client(self) -> Client:
        return self._client

    @property
    def operator_private_key(self) -> PrivateKey:
        return self._key_material.private_key

    @property
    def public_key(self) -> PublicKey:
        return self._key_material.public_key

    @property
    def key_material(self) -> KeyMaterial:
        return self._key_material


def _parse_signer_network(network: Optional[str]) -> LedgerId:
    for ledger_id in SUPPORTED_SIGNER_NETWORKS:
        if str(network).strip().lower() == ledger_id.value:
            return ledger_id
    raise ValidationError(
        f"Unsupported Hedera network type specified: {network}. "
        "Only 'mainnet' or 'testnet' are supported."
    )

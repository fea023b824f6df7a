import logging
import re
from datetime import datetime
from typing import Optional, Union, cast, Any, Type, TypeVar, Sequence

from hiero_sdk_python import AccountId, Client, ContractId, PublicKey, TokenId, TopicId
from pydantic import BaseModel, ValidationError as PydanticValidationError
from web3 import Web3

from hedera_agent_core.shared.configuration import Context
from hedera_agent_core.shared.constants.contracts import (
    CONTRACT_CALL_GAS,
    FACTORY_DEPLOY_GAS,
)
from hedera_agent_core.shared.errors import (
    HederaAgentError,
    NetworkError,
    ResolutionError,
    ValidationError,
)
from hedera_agent_core.shared.hedera_utils import to_base_unit, to_tinybars
from hedera_agent_core.shared.hedera_utils.decimals_utils import MAX_INT64
from hedera_agent_core.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_agent_core.shared.parameter_schemas import (
    AccountBalanceQueryParameters,
    AccountBalanceQueryParametersNormalised,
    AccountTokenBalancesQueryParameters,
    AccountTokenBalancesQueryParametersNormalised,
    AirdropFungibleTokenParameters,
    AirdropFungibleTokenParametersNormalised,
    AssociateTokenParameters,
    AssociateTokenParametersNormalised,
    ContractExecuteTransactionParametersNormalised,
    CreateAccountParameters,
    CreateAccountParametersNormalised,
    CreateERC20Parameters,
    CreateERC721Parameters,
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
    CreateTopicParameters,
    CreateTopicParametersNormalised,
    DeleteAccountParameters,
    DeleteAccountParametersNormalised,
    DeleteTopicParameters,
    DeleteTopicParametersNormalised,
    DissociateTokenParameters,
    DissociateTokenParametersNormalised,
    GetTokenInfoParameters,
    HbarTransfer,
    MintERC721Parameters,
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParameters,
    MintNonFungibleTokenParametersNormalised,
    SubmitTopicMessageParameters,
    SubmitTopicMessageParametersNormalised,
    SupplyType,
    TokenKeys,
    TokenTransfer,
    TransactionRecordQueryParameters,
    TransactionRecordQueryParametersNormalised,
    TransferERC20Parameters,
    TransferERC721Parameters,
    TransferHbarParameters,
    TransferHbarParametersNormalised,
    UpdateAccountParameters,
    UpdateAccountParametersNormalised,
    UpdateTopicParameters,
    UpdateTopicParametersNormalised,
)
from hedera_agent_core.shared.utils.account_resolver import AccountResolver
from hedera_agent_core.shared.utils.key_utils import (
    ExplicitKey,
    KeyCapability,
    Unset,
    UseCallerDefaultKey,
    parse_public_key,
)

logger = logging.getLogger(__name__)

SdkId = TypeVar("SdkId", AccountId, ContractId, TokenId, TopicId)

DEFAULT_FUNGIBLE_MAX_SUPPLY = 1_000_000
DEFAULT_NFT_MAX_SUPPLY = 100
MAX_MEMO_LENGTH = 100

# Management keys that follow the "true / key string / omitted" convention.
OPTIONAL_TOKEN_KEY_FIELDS = (
    "admin_key",
    "freeze_key",
    "wipe_key",
    "kyc_key",
    "pause_key",
    "metadata_key",
    "fee_schedule_key",
)


class HederaParameterNormaliser:
    """Utility class to normalise and validate Hedera transaction parameters.

    This class provides static methods for:
        - Validating and parsing parameters against Pydantic schemas.
        - Scaling display amounts to integer base units.
        - Resolving default accounts, public keys and EVM addresses.
        - Encoding EVM contract calls.
    """

    @staticmethod
    def parse_params_with_schema(
        params: Any,
        schema: Type[BaseModel],
    ) -> BaseModel:
        """Validate and parse parameters using a Pydantic schema.

        Args:
            params: The raw input parameters to validate.
            schema: The Pydantic model to validate against.

        Returns:
            BaseModel: An instance of the validated Pydantic model.

        Raises:
            ValidationError: If validation fails, with a formatted description of the issues.
        """
        if isinstance(params, BaseModel) and not isinstance(params, schema):
            params = params.model_dump()
        try:
            return schema.model_validate(params)
        except PydanticValidationError as e:
            issues: str = HederaParameterNormaliser.format_validation_errors(e)
            raise ValidationError(f"Invalid parameters: {issues}") from e

    @staticmethod
    def format_validation_errors(error: PydanticValidationError) -> str:
        """Format Pydantic validation errors into a single human-readable string.

        Args:
            error: The ValidationError instance from Pydantic.

        Returns:
            str: Formatted error message summarising all field errors.
        """
        return "; ".join(
            f'Field "{err["loc"][0] if err["loc"] else "params"}" - {err["msg"]}'
            for err in error.errors()
        )

    @staticmethod
    def resolve_key(
        raw_value: Union[KeyCapability, str, bool, None],
        user_key: Optional[PublicKey],
    ) -> Optional[PublicKey]:
        """Resolve a key capability to a PublicKey instance.

        Args:
            raw_value: A ``KeyCapability`` or the raw ``bool | str | None`` input.
            user_key: Key used when the caller asked for their default key.

        Returns:
            Optional[PublicKey]: Resolved PublicKey or None if no key is wanted.

        Raises:
            ValidationError: If an explicit key string does not parse.
            ResolutionError: If the default key is requested but unavailable.
        """
        capability = KeyCapability.from_raw(raw_value)
        if isinstance(capability, Unset):
            return None
        if isinstance(capability, UseCallerDefaultKey):
            if user_key is None:
                raise ResolutionError("Could not determine default public key")
            return user_key
        if isinstance(capability, ExplicitKey):
            return parse_public_key(capability.public_key)
        raise TypeError(f"Unknown key capability: {capability!r}")

    @staticmethod
    def _parse_id(value: str, id_type: Type[SdkId], label: str) -> SdkId:
        try:
            return id_type.from_string(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid {label}: {value}") from e

    @staticmethod
    def _ensure_hedera_id(value: str, id_type: Type[SdkId], label: str) -> SdkId:
        if not AccountResolver.is_hedera_address(value):
            raise ValidationError(f"{label} must be a Hedera address")
        return HederaParameterNormaliser._parse_id(value, id_type, label)

    @staticmethod
    def _ensure_int64_total(total: int) -> None:
        # the balancing debit is -total
        if total > MAX_INT64:
            raise ValidationError(
                f"Total transfer amount {total} exceeds the maximum of {MAX_INT64} base units"
            )

    @staticmethod
    async def _get_token_decimals(
        token_id: str,
        mirrornode_service: IHederaMirrornodeService,
        error_message: str,
    ) -> int:
        try:
            token_info = await mirrornode_service.get_token_info(token_id)
        except HederaAgentError:
            raise
        except Exception as e:
            raise NetworkError(f"Mirror node token lookup for {token_id}", str(e)) from e
        raw_decimals = token_info.get("decimals") if token_info else None
        try:
            decimals = int(raw_decimals)
        except (TypeError, ValueError) as e:
            raise ResolutionError(error_message) from e
        if decimals < 0:
            raise ResolutionError(error_message)
        return decimals

    @staticmethod
    def _encode_function_call(
        abi: list[dict], function_name: str, args: Sequence[Any]
    ) -> bytes:
        w3 = Web3()
        contract = w3.eth.contract(abi=abi)
        encoded_data = contract.encode_abi(
            abi_element_identifier=function_name,
            args=list(args),
        )
        return bytes.fromhex(encoded_data[2:])

    @staticmethod
    async def normalise_create_fungible_token_params(
        params: CreateFungibleTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService],
    ) -> CreateFungibleTokenParametersNormalised:
        """Normalise fungible token creation parameters.

        Supplies are given in display units and scaled by ``10**decimals``.
        A finite token without ``max_supply`` gets 1,000,000 display units.
        The caller's default key comes from the mirror node, falling back to
        the operator key when the account has no key on record, and is only
        looked up if some key asks for it.

        Args:
            params: Raw token creation parameters.
            context: Application context for resolving accounts.
            client: Hedera client used for operator defaults.
            mirrornode_service: Mirror node used to find the default public key.

        Returns:
            CreateFungibleTokenParametersNormalised: Normalised token parameters.

        Raises:
            ValidationError: If the initial supply exceeds the max supply.
            ResolutionError: If a required default cannot be resolved.
            NetworkError: If the mirror-node key lookup fails.
        """
        parsed_params: CreateFungibleTokenParameters = cast(
            CreateFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateFungibleTokenParameters
            ),
        )

        default_account_id = AccountResolver.get_default_account(context, client)
        treasury_account_id = parsed_params.treasury_account_id or default_account_id

        decimals = parsed_params.decimals
        initial_supply = to_base_unit(parsed_params.initial_supply, decimals)
        if initial_supply < 0:
            raise ValidationError(
                f"Invalid initial supply: {parsed_params.initial_supply}"
            )

        max_supply: Optional[int] = None
        if parsed_params.supply_type == SupplyType.FINITE:
            max_supply_display = (
                parsed_params.max_supply
                if parsed_params.max_supply is not None
                else DEFAULT_FUNGIBLE_MAX_SUPPLY
            )
            max_supply = to_base_unit(max_supply_display, decimals)
            if max_supply <= 0:
                raise ValidationError(f"Invalid max supply: {max_supply_display}")
            if initial_supply > max_supply:
                raise ValidationError(
                    f"Initial supply ({initial_supply}) cannot exceed max supply ({max_supply})"
                )

        capabilities = {
            name: KeyCapability.from_raw(getattr(parsed_params, name))
            for name in OPTIONAL_TOKEN_KEY_FIELDS
        }
        capabilities["supply_key"] = KeyCapability.from_raw(parsed_params.is_supply_key)

        user_public_key: Optional[PublicKey] = None
        if any(isinstance(c, UseCallerDefaultKey) for c in capabilities.values()):
            user_public_key = await AccountResolver.get_account_public_key(
                default_account_id, client, mirrornode_service
            )

        keys = TokenKeys(
            **{
                name: HederaParameterNormaliser.resolve_key(capability, user_public_key)
                for name, capability in capabilities.items()
            }
        )

        return CreateFungibleTokenParametersNormalised(
            token_name=parsed_params.token_name,
            token_symbol=parsed_params.token_symbol,
            decimals=decimals,
            initial_supply=initial_supply,
            supply_type=parsed_params.supply_type,
            max_supply=max_supply,
            treasury_account_id=HederaParameterNormaliser._parse_id(
                treasury_account_id, AccountId, "treasury account ID"
            ),
            auto_renew_account_id=HederaParameterNormaliser._parse_id(
                default_account_id, AccountId, "account ID"
            ),
            token_memo=parsed_params.token_memo,
            keys=keys,
        )

    @staticmethod
    async def normalise_create_non_fungible_token_params(
        params: CreateNonFungibleTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService],
    ) -> CreateNonFungibleTokenParametersNormalised:
        """Normalise NFT collection creation parameters.

        The collection is always finite and always gets a supply key, either the
        one given or the caller's default key.

        Raises:
            ResolutionError: If no supply key can be determined.
        """
        parsed_params: CreateNonFungibleTokenParameters = cast(
            CreateNonFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateNonFungibleTokenParameters
            ),
        )

        default_account_id = AccountResolver.get_default_account(context, client)
        treasury_account_id = parsed_params.treasury_account_id or default_account_id

        capabilities = {
            name: KeyCapability.from_raw(getattr(parsed_params, name))
            for name in OPTIONAL_TOKEN_KEY_FIELDS
        }
        capabilities["supply_key"] = KeyCapability.from_raw(
            parsed_params.supply_key or True
        )

        user_public_key: Optional[PublicKey] = None
        wanted = [
            name
            for name, capability in capabilities.items()
            if isinstance(capability, UseCallerDefaultKey)
        ]
        if wanted:
            label = "supply_key" if "supply_key" in wanted else wanted[0]
            try:
                user_public_key = await AccountResolver.get_account_public_key(
                    default_account_id, client, mirrornode_service
                )
            except ResolutionError as e:
                raise ResolutionError(
                    f"Could not determine public key for {label.replace('_', ' ')}"
                ) from e

        keys = TokenKeys(
            **{
                name: HederaParameterNormaliser.resolve_key(capability, user_public_key)
                for name, capability in capabilities.items()
            }
        )

        return CreateNonFungibleTokenParametersNormalised(
            token_name=parsed_params.token_name,
            token_symbol=parsed_params.token_symbol,
            max_supply=parsed_params.max_supply or DEFAULT_NFT_MAX_SUPPLY,
            treasury_account_id=HederaParameterNormaliser._parse_id(
                treasury_account_id, AccountId, "treasury account ID"
            ),
            auto_renew_account_id=HederaParameterNormaliser._parse_id(
                default_account_id, AccountId, "account ID"
            ),
            token_memo=parsed_params.token_memo,
            keys=keys,
        )

    @staticmethod
    def normalise_transfer_hbar(
        params: TransferHbarParameters,
        context: Context,
        client: Client,
    ) -> TransferHbarParametersNormalised:
        """Normalise HBAR transfer parameters into a balanced transfer list.

        This resolves the source account, converts amounts to tinybars and
        appends a debit of the total from the source, so the list sums to zero.

        Args:
            params: Raw HBAR transfer parameters.
            context: Application context for resolving accounts.
            client: Hedera client used for account resolution.

        Returns:
            TransferHbarParametersNormalised: Normalised HBAR transfer parameters.

        Raises:
            ValidationError: If transfer amounts are invalid (<= 0).
        """
        parsed_params: TransferHbarParameters = cast(
            TransferHbarParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransferHbarParameters
            ),
        )

        source_account_id: str = AccountResolver.resolve_account(
            parsed_params.source_account_id, context, client
        )

        hbar_transfers: list[HbarTransfer] = []
        total_tinybars: int = 0

        for transfer in parsed_params.transfers:
            tinybars = to_tinybars(transfer.amount)
            if tinybars <= 0:
                raise ValidationError(f"Invalid transfer amount: {transfer.amount}")

            hbar_transfers.append(
                HbarTransfer(
                    account_id=HederaParameterNormaliser._parse_id(
                        transfer.account_id, AccountId, "account ID"
                    ),
                    amount=tinybars,
                )
            )
            total_tinybars += tinybars

        HederaParameterNormaliser._ensure_int64_total(total_tinybars)
        hbar_transfers.append(
            HbarTransfer(
                account_id=HederaParameterNormaliser._parse_id(
                    source_account_id, AccountId, "source account ID"
                ),
                amount=-total_tinybars,
            )
        )

        return TransferHbarParametersNormalised(
            hbar_transfers=hbar_transfers,
            transaction_memo=parsed_params.transaction_memo,
        )

    @staticmethod
    async def normalise_airdrop_fungible_token_params(
        params: AirdropFungibleTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: IHederaMirrornodeService,
    ) -> AirdropFungibleTokenParametersNormalised:
        """Normalise a fungible token airdrop into a balanced token transfer list.

        Recipient amounts are display units, scaled with the token's decimals as
        reported by the mirror node. The source is debited with the total.

        Raises:
            ResolutionError: If the token decimals cannot be read.
            ValidationError: If a recipient amount is not positive.
        """
        parsed_params: AirdropFungibleTokenParameters = cast(
            AirdropFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AirdropFungibleTokenParameters
            ),
        )

        source_account_id = AccountResolver.resolve_account(
            parsed_params.source_account_id, context, client
        )
        token_id = HederaParameterNormaliser._parse_id(
            parsed_params.token_id, TokenId, "token ID"
        )
        decimals = await HederaParameterNormaliser._get_token_decimals(
            parsed_params.token_id,
            mirrornode_service,
            f"Invalid token decimals for token {parsed_params.token_id}",
        )

        token_transfers: list[TokenTransfer] = []
        total_amount = 0
        for recipient in parsed_params.recipients:
            amount = to_base_unit(recipient.amount, decimals)
            if amount <= 0:
                raise ValidationError(f"Invalid recipient amount: {recipient.amount}")

            total_amount += amount
            token_transfers.append(
                TokenTransfer(
                    token_id=token_id,
                    account_id=HederaParameterNormaliser._parse_id(
                        recipient.account_id, AccountId, "account ID"
                    ),
                    amount=amount,
                )
            )

        HederaParameterNormaliser._ensure_int64_total(total_amount)
        token_transfers.append(
            TokenTransfer(
                token_id=token_id,
                account_id=HederaParameterNormaliser._parse_id(
                    source_account_id, AccountId, "source account ID"
                ),
                amount=-total_amount,
            )
        )

        return AirdropFungibleTokenParametersNormalised(
            token_transfers=token_transfers,
            transaction_memo=parsed_params.transaction_memo,
        )

    @staticmethod
    async def normalise_mint_fungible_token_params(
        params: MintFungibleTokenParameters,
        context: Context,
        client: Client,
        mirrornode_service: IHederaMirrornodeService,
    ) -> MintFungibleTokenParametersNormalised:
        """Scale a mint amount to base units using the token's decimals.

        Raises:
            ResolutionError: If the token decimals cannot be read.
            ValidationError: If the amount is not positive.
        """
        parsed_params: MintFungibleTokenParameters = cast(
            MintFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, MintFungibleTokenParameters
            ),
        )

        token_id = HederaParameterNormaliser._parse_id(
            parsed_params.token_id, TokenId, "token ID"
        )
        decimals = await HederaParameterNormaliser._get_token_decimals(
            parsed_params.token_id,
            mirrornode_service,
            f"Unable to retrieve token decimals for token {parsed_params.token_id}",
        )

        amount = to_base_unit(parsed_params.amount, decimals)
        if amount <= 0:
            raise ValidationError(f"Invalid mint amount: {parsed_params.amount}")

        return MintFungibleTokenParametersNormalised(
            token_id=token_id,
            amount=amount,
        )

    @staticmethod
    def normalise_mint_non_fungible_token_params(
        params: MintNonFungibleTokenParameters,
        context: Context,
    ) -> MintNonFungibleTokenParametersNormalised:
        parsed_params: MintNonFungibleTokenParameters = cast(
            MintNonFungibleTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, MintNonFungibleTokenParameters
            ),
        )

        return MintNonFungibleTokenParametersNormalised(
            token_id=HederaParameterNormaliser._parse_id(
                parsed_params.token_id, TokenId, "token ID"
            ),
            metadata=[uri.encode("utf-8") for uri in parsed_params.uris],
        )

    @staticmethod
    def normalise_associate_token_params(
        params: AssociateTokenParameters,
        context: Context,
        client: Client,
    ) -> AssociateTokenParametersNormalised:
        parsed_params: AssociateTokenParameters = cast(
            AssociateTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AssociateTokenParameters
            ),
        )

        account_id = AccountResolver.resolve_account(
            parsed_params.account_id, context, client
        )
        token_ids = [
            HederaParameterNormaliser._ensure_hedera_id(token_id, TokenId, "Token ID")
            for token_id in parsed_params.token_ids
        ]

        return AssociateTokenParametersNormalised(
            account_id=HederaParameterNormaliser._parse_id(
                account_id, AccountId, "account ID"
            ),
            token_ids=token_ids,
        )

    @staticmethod
    def normalise_dissociate_token_params(
        params: DissociateTokenParameters,
        context: Context,
        client: Client,
    ) -> DissociateTokenParametersNormalised:
        """Normalize parameters for dissociating tokens.

        Args:
            params: The raw input parameters.
            context: The runtime context.
            client: The Hedera client.

        Returns:
            The normalized parameters are ready for transaction building.
        """
        parsed_params: DissociateTokenParameters = cast(
            DissociateTokenParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, DissociateTokenParameters
            ),
        )

        account_id = AccountResolver.resolve_account(
            parsed_params.account_id, context, client
        )
        token_ids = [
            HederaParameterNormaliser._ensure_hedera_id(token_id, TokenId, "Token ID")
            for token_id in parsed_params.token_ids
        ]

        return DissociateTokenParametersNormalised(
            token_ids=token_ids,
            account_id=HederaParameterNormaliser._parse_id(
                account_id, AccountId, "account ID"
            ),
            transaction_memo=parsed_params.transaction_memo,
        )

    @staticmethod
    async def normalise_create_account(
        params: CreateAccountParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService],
    ) -> CreateAccountParametersNormalised:
        """Normalize account-creation input.

        Actions performed:
        - Validates and parses `params` against the Pydantic schema.
        - Converts `initial_balance` to tinybars.
        - Truncates `account_memo` to 100 characters when present.
        - Resolves the account public key in priority order:
            1. `params.public_key`
            2. `client.operator_private_key` (if available)
            3. Mirror node lookup for the default account (via `mirrornode_service`)

        Args:
            params: Raw account creation parameters.
            context: Application context used for resolving defaults.
            client: Hedera client used to access operator key when present.
            mirrornode_service: Mirror node service used to fetch account data.

        Returns:
            CreateAccountParametersNormalised: Normalised account parameters.

        Raises:
            ResolutionError: If no public key can be resolved from params, client operator key, or mirror node.
            NetworkError: If the mirror-node lookup fails.
        """
        parsed_params: CreateAccountParameters = cast(
            CreateAccountParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateAccountParameters
            ),
        )

        initial_balance = to_tinybars(parsed_params.initial_balance)
        if initial_balance < 0:
            raise ValidationError(
                f"Invalid initial balance: {parsed_params.initial_balance}"
            )

        account_memo: Optional[str] = parsed_params.account_memo
        if account_memo and len(account_memo) > MAX_MEMO_LENGTH:
            account_memo = account_memo[:MAX_MEMO_LENGTH]

        public_key: Optional[PublicKey] = None
        if parsed_params.public_key:
            public_key = parse_public_key(parsed_params.public_key)
        elif getattr(client, "operator_private_key", None) is not None:
            public_key = client.operator_private_key.public_key()
        elif mirrornode_service is not None:
            default_account_id = AccountResolver.get_default_account(context, client)
            account = await AccountResolver.lookup_account(
                default_account_id, mirrornode_service
            )
            if account.get("account_public_key"):
                public_key = parse_public_key(account["account_public_key"])

        if public_key is None:
            raise ResolutionError(
                "Unable to resolve public key: no param, mirror node, or client operator key available."
            )

        return CreateAccountParametersNormalised(
            key=public_key,
            memo=account_memo,
            initial_balance=initial_balance,
            max_automatic_token_associations=parsed_params.max_automatic_token_associations,
        )

    @staticmethod
    def normalise_update_account(
        params: UpdateAccountParameters,
        context: Context,
        client: Client,
    ) -> UpdateAccountParametersNormalised:
        """Normalize account-update input.

        Resolves `account_id` (defaults to the operator account) and forwards
        only the fields that were provided, so unset fields stay untouched.

        Raises:
            ValidationError: If validation fails.
            ResolutionError: If the account ID cannot be resolved.
        """
        parsed_params: UpdateAccountParameters = cast(
            UpdateAccountParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, UpdateAccountParameters
            ),
        )

        account_id = AccountResolver.resolve_account(
            parsed_params.account_id, context, client
        )

        updates: dict[str, Any] = {
            name: getattr(parsed_params, name)
            for name in (
                "max_automatic_token_associations",
                "account_memo",
                "decline_staking_reward",
            )
            if getattr(parsed_params, name) is not None
        }
        if parsed_params.staked_account_id is not None:
            updates["staked_account_id"] = HederaParameterNormaliser._parse_id(
                parsed_params.staked_account_id, AccountId, "staked account ID"
            )

        return UpdateAccountParametersNormalised(
            account_id=HederaParameterNormaliser._parse_id(
                account_id, AccountId, "account ID"
            ),
            **updates,
        )

    @staticmethod
    def normalise_delete_account(
        params: DeleteAccountParameters,
        context: Context,
        client: Client,
    ) -> DeleteAccountParametersNormalised:
        """Normalise delete account parameters.

        Args:
            params: Raw delete account parameters.
            context: Application context for resolving accounts.
            client: Hedera client used for account resolution.

        Returns:
            DeleteAccountParametersNormalised: Normalised delete account parameters.

        Raises:
            ValidationError: If the account ID is not a Hedera address.
        """
        parsed_params: DeleteAccountParameters = cast(
            DeleteAccountParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, DeleteAccountParameters
            ),
        )

        account_id = HederaParameterNormaliser._ensure_hedera_id(
            parsed_params.account_id, AccountId, "Account ID"
        )

        # If no transfer account ID is provided, use the default account
        transfer_account_id: str = AccountResolver.resolve_account(
            parsed_params.transfer_account_id, context, client
        )

        return DeleteAccountParametersNormalised(
            account_id=account_id,
            transfer_account_id=HederaParameterNormaliser._parse_id(
                transfer_account_id, AccountId, "transfer account ID"
            ),
        )

    @staticmethod
    async def normalise_create_topic_params(
        params: CreateTopicParameters,
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService],
    ) -> CreateTopicParametersNormalised:
        """Normalise 'create topic' parameters.

        This function:
          - Validates and parses the raw parameters using the CreateTopicParameters schema.
          - Uses the default account as the auto-renew account.
          - Resolves submit and admin keys only when requested.

        Raises:
            ResolutionError: If a requested default key cannot be determined.
            NetworkError: If the mirror-node key lookup fails.
        """
        parsed_params: CreateTopicParameters = cast(
            CreateTopicParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateTopicParameters
            ),
        )

        default_account_id = AccountResolver.get_default_account(context, client)

        submit_capability = KeyCapability.from_raw(parsed_params.is_submit_key)
        admin_capability = KeyCapability.from_raw(parsed_params.is_admin_key)

        user_public_key: Optional[PublicKey] = None
        if isinstance(submit_capability, UseCallerDefaultKey) or isinstance(
            admin_capability, UseCallerDefaultKey
        ):
            label = (
                "submit key"
                if isinstance(submit_capability, UseCallerDefaultKey)
                else "admin key"
            )
            try:
                user_public_key = await AccountResolver.get_account_public_key(
                    default_account_id, client, mirrornode_service
                )
            except ResolutionError as e:
                raise ResolutionError(
                    f"Could not determine public key for {label}"
                ) from e

        return CreateTopicParametersNormalised(
            memo=parsed_params.topic_memo,
            transaction_memo=parsed_params.transaction_memo,
            auto_renew_account_id=HederaParameterNormaliser._parse_id(
                default_account_id, AccountId, "account ID"
            ),
            submit_key=HederaParameterNormaliser.resolve_key(
                submit_capability, user_public_key
            ),
            admin_key=HederaParameterNormaliser.resolve_key(
                admin_capability, user_public_key
            ),
        )

    @staticmethod
    async def normalise_update_topic(
        params: UpdateTopicParameters,
        context: Context,
        client: Client,
    ) -> UpdateTopicParametersNormalised:
        """Normalize parameters for updating a topic.

        Args:
            params: The raw input parameters.
            context: The runtime context.
            client: The Hedera client.

        Returns:
            The normalized parameters are ready for transaction building.
        """
        parsed_params: UpdateTopicParameters = cast(
            UpdateTopicParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, UpdateTopicParameters
            ),
        )
        topic_id = HederaParameterNormaliser._ensure_hedera_id(
            parsed_params.topic_id, TopicId, "Topic ID"
        )

        admin_capability = KeyCapability.from_raw(parsed_params.admin_key)
        submit_capability = KeyCapability.from_raw(parsed_params.submit_key)

        user_public_key: Optional[PublicKey] = None
        if isinstance(admin_capability, UseCallerDefaultKey) or isinstance(
            submit_capability, UseCallerDefaultKey
        ):
            user_public_key = await AccountResolver.get_default_public_key(
                context, client
            )

        updates: dict[str, Any] = {
            "memo": parsed_params.topic_memo,
            "admin_key": HederaParameterNormaliser.resolve_key(
                admin_capability, user_public_key
            ),
            "submit_key": HederaParameterNormaliser.resolve_key(
                submit_capability, user_public_key
            ),
            "auto_renew_account_id": (
                HederaParameterNormaliser._parse_id(
                    parsed_params.auto_renew_account_id, AccountId, "auto renew account ID"
                )
                if parsed_params.auto_renew_account_id
                else None
            ),
            "auto_renew_period": parsed_params.auto_renew_period,
        }

        expiration_time = parsed_params.expiration_time
        if expiration_time is not None and not isinstance(expiration_time, datetime):
            try:
                expiration_time = datetime.fromisoformat(
                    str(expiration_time).replace("Z", "+00:00")
                )
            except ValueError as e:
                raise ValidationError(
                    f"Invalid expiration time: {parsed_params.expiration_time}"
                ) from e
        updates["expiration_time"] = expiration_time

        return UpdateTopicParametersNormalised(
            topic_id=topic_id,
            **{name: value for name, value in updates.items() if value is not None},
        )

    @staticmethod
    def normalise_delete_topic(
        params: DeleteTopicParameters,
    ) -> DeleteTopicParametersNormalised:
        parsed_params: DeleteTopicParameters = cast(
            DeleteTopicParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, DeleteTopicParameters
            ),
        )

        topic_id = HederaParameterNormaliser._ensure_hedera_id(
            parsed_params.topic_id, TopicId, "Topic ID"
        )
        return DeleteTopicParametersNormalised(topic_id=topic_id)

    @staticmethod
    def normalise_submit_topic_message(
        params: SubmitTopicMessageParameters,
    ) -> SubmitTopicMessageParametersNormalised:
        parsed_params: SubmitTopicMessageParameters = cast(
            SubmitTopicMessageParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, SubmitTopicMessageParameters
            ),
        )

        topic_id = HederaParameterNormaliser._ensure_hedera_id(
            parsed_params.topic_id, TopicId, "Topic ID"
        )
        return SubmitTopicMessageParametersNormalised(
            topic_id=topic_id,
            message=parsed_params.message,
            transaction_memo=parsed_params.transaction_memo,
        )

    @staticmethod
    def normalise_create_erc20_params(
        params: CreateERC20Parameters,
        factory_contract_id: str,
        erc20_factory_abi: list[dict],
        factory_contract_function_name: str,
        context: Context,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Normalise ERC20 creation parameters for a factory contract call.

        Args:
            params: Raw ERC20 creation parameters.
            factory_contract_id: Hedera ID of the ERC20 factory contract.
            erc20_factory_abi: ABI of the factory contract.
            factory_contract_function_name: Function to invoke (e.g., 'deployToken').
            context: Application context.

        Returns:
            ContractExecuteTransactionParametersNormalised: Encoded call ready for execution.
        """
        parsed_params: CreateERC20Parameters = cast(
            CreateERC20Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateERC20Parameters
            ),
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            erc20_factory_abi,
            factory_contract_function_name,
            [
                parsed_params.token_name,
                parsed_params.token_symbol,
                parsed_params.decimals,
                parsed_params.initial_supply,
            ],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=HederaParameterNormaliser._parse_id(
                factory_contract_id, ContractId, "factory contract ID"
            ),
            function_parameters=function_parameters,
            gas=FACTORY_DEPLOY_GAS,
        )

    @staticmethod
    def normalise_create_erc721_params(
        params: CreateERC721Parameters,
        factory_contract_id: str,
        erc721_factory_abi: list[dict],
        factory_contract_function_name: str,
        context: Context,
    ) -> ContractExecuteTransactionParametersNormalised:
        parsed_params: CreateERC721Parameters = cast(
            CreateERC721Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, CreateERC721Parameters
            ),
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            erc721_factory_abi,
            factory_contract_function_name,
            [
                parsed_params.token_name,
                parsed_params.token_symbol,
                parsed_params.base_uri,
            ],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=HederaParameterNormaliser._parse_id(
                factory_contract_id, ContractId, "factory contract ID"
            ),
            function_parameters=function_parameters,
            gas=FACTORY_DEPLOY_GAS,
        )

    @staticmethod
    async def normalise_transfer_erc20_params(
        params: TransferERC20Parameters,
        erc20_abi: list[dict],
        function_name: str,
        context: Context,
        mirrornode_service: IHederaMirrornodeService,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode an ERC20 ``transfer`` call.

        The recipient is converted to an EVM address and the contract to a
        Hedera ID, looking either up on the mirror node when needed.

        Raises:
            ValidationError: If the amount is not positive.
        """
        parsed_params: TransferERC20Parameters = cast(
            TransferERC20Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransferERC20Parameters
            ),
        )

        if parsed_params.amount <= 0:
            raise ValidationError(f"Invalid transfer amount: {parsed_params.amount}")

        recipient_address = await AccountResolver.get_hedera_evm_address(
            parsed_params.recipient_address, mirrornode_service
        )
        contract_id = await AccountResolver.get_hedera_account_id(
            parsed_params.contract_id, mirrornode_service
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            erc20_abi,
            function_name,
            [Web3.to_checksum_address(recipient_address), parsed_params.amount],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=HederaParameterNormaliser._parse_id(
                contract_id, ContractId, "contract ID"
            ),
            function_parameters=function_parameters,
            gas=CONTRACT_CALL_GAS,
        )

    @staticmethod
    async def normalise_transfer_erc721_params(
        params: TransferERC721Parameters,
        erc721_abi: list[dict],
        function_name: str,
        context: Context,
        mirrornode_service: IHederaMirrornodeService,
        client: Client,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode an ERC721 ``transferFrom`` call; ``from`` defaults to the caller's account."""
        parsed_params: TransferERC721Parameters = cast(
            TransferERC721Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransferERC721Parameters
            ),
        )

        from_account = AccountResolver.resolve_account(
            parsed_params.from_address, context, client
        )
        from_address = await AccountResolver.get_hedera_evm_address(
            from_account, mirrornode_service
        )
        to_address = await AccountResolver.get_hedera_evm_address(
            parsed_params.to_address, mirrornode_service
        )
        contract_id = await AccountResolver.get_hedera_account_id(
            parsed_params.contract_id, mirrornode_service
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            erc721_abi,
            function_name,
            [
                Web3.to_checksum_address(from_address),
                Web3.to_checksum_address(to_address),
                parsed_params.token_id,
            ],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=HederaParameterNormaliser._parse_id(
                contract_id, ContractId, "contract ID"
            ),
            function_parameters=function_parameters,
            gas=CONTRACT_CALL_GAS,
        )

    @staticmethod
    async def normalise_mint_erc721_params(
        params: MintERC721Parameters,
        erc721_abi: list[dict],
        function_name: str,
        context: Context,
        mirrornode_service: IHederaMirrornodeService,
        client: Client,
    ) -> ContractExecuteTransactionParametersNormalised:
        parsed_params: MintERC721Parameters = cast(
            MintERC721Parameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, MintERC721Parameters
            ),
        )

        to_account = AccountResolver.resolve_account(
            parsed_params.to_address, context, client
        )
        to_address = await AccountResolver.get_hedera_evm_address(
            to_account, mirrornode_service
        )
        contract_id = await AccountResolver.get_hedera_account_id(
            parsed_params.contract_id, mirrornode_service
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            erc721_abi,
            function_name,
            [Web3.to_checksum_address(to_address)],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=HederaParameterNormaliser._parse_id(
                contract_id, ContractId, "contract ID"
            ),
            function_parameters=function_parameters,
            gas=CONTRACT_CALL_GAS,
        )

    @staticmethod
    def normalise_get_hbar_balance(
        params: AccountBalanceQueryParameters,
        context: Context,
        client: Client,
    ) -> AccountBalanceQueryParametersNormalised:
        """Normalise HBAR balance query parameters

        If an account_id is provided, it is used directly.
        Otherwise, the default account from AccountResolver is used.
        """
        parsed_params: AccountBalanceQueryParameters = cast(
            AccountBalanceQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AccountBalanceQueryParameters
            ),
        )

        return AccountBalanceQueryParametersNormalised(
            account_id=AccountResolver.resolve_account(
                parsed_params.account_id, context, client
            )
        )

    @staticmethod
    def normalise_account_token_balances_params(
        params: AccountTokenBalancesQueryParameters,
        context: Context,
        client: Client,
    ) -> AccountTokenBalancesQueryParametersNormalised:
        parsed_params: AccountTokenBalancesQueryParameters = cast(
            AccountTokenBalancesQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, AccountTokenBalancesQueryParameters
            ),
        )

        return AccountTokenBalancesQueryParametersNormalised(
            account_id=AccountResolver.resolve_account(
                parsed_params.account_id, context, client
            ),
            token_id=parsed_params.token_id,
        )

    @staticmethod
    def normalise_get_token_info(
        params: GetTokenInfoParameters,
    ) -> GetTokenInfoParameters:
        """Normalize parameters for getting token info.

        Raises:
            ValidationError: If token_id is missing.
        """
        parsed_params: GetTokenInfoParameters = cast(
            GetTokenInfoParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, GetTokenInfoParameters
            ),
        )
        if not parsed_params.token_id:
            raise ValidationError("Token ID is required to fetch token info.")
        return parsed_params

    @staticmethod
    def normalise_get_transaction_record_params(
        params: TransactionRecordQueryParameters,
    ) -> TransactionRecordQueryParametersNormalised:
        """Normalize transaction record query parameters.

        Converts transaction IDs from SDK-style format
        (e.g., "0.0.4177806@1755169980.051721264") to mirror-node style
        (e.g., "0.0.4177806-1755169980-051721264").

        Raises:
            ValidationError: If transaction_id is missing or in an invalid format.
        """
        parsed_params: TransactionRecordQueryParameters = cast(
            TransactionRecordQueryParameters,
            HederaParameterNormaliser.parse_params_with_schema(
                params, TransactionRecordQueryParameters
            ),
        )

        if not parsed_params.transaction_id:
            raise ValidationError("transactionId is required")

        mirror_node_style_regex = re.compile(r"^\d+\.\d+\.\d+-\d+-\d+$")
        sdk_style_regex = re.compile(r"^(\d+\.\d+\.\d+)@(\d+)\.(\d+)$")

        transaction_id: str
        if mirror_node_style_regex.match(parsed_params.transaction_id):
            transaction_id = parsed_params.transaction_id
        else:
            match = sdk_style_regex.match(parsed_params.transaction_id)
            if not match:
                raise ValidationError(
                    f"Invalid transactionId format: {parsed_params.transaction_id}"
                )

            account_id, seconds, nanos = match.groups()
            transaction_id = f"{account_id}-{seconds}-{nanos}"

        return TransactionRecordQueryParametersNormalised(
            transaction_id=transaction_id,
            nonce=parsed_params.nonce,
        )

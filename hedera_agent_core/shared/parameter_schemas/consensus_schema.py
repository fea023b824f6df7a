from datetime import datetime
from typing import Annotated, Optional, Union

from pydantic import Field

from hiero_sdk_python import AccountId, PublicKey, TopicId
from hedera_agent_core.shared.parameter_schemas.common_schema import (
    BaseModelWithArbitraryTypes,
    KeyInput,
)


class CreateTopicParameters(BaseModelWithArbitraryTypes):
    is_submit_key: Annotated[
        KeyInput,
        Field(description="Set a submit key: true for your key, or a public key string."),
    ] = False
    is_admin_key: Annotated[
        KeyInput,
        Field(description="Set an admin key: true for your key, or a public key string."),
    ] = False
    topic_memo: Annotated[
        Optional[str], Field(description="Memo for the topic.")
    ] = None
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo for the transaction.")
    ] = None


class CreateTopicParametersNormalised(BaseModelWithArbitraryTypes):
    memo: Optional[str] = None
    transaction_memo: Optional[str] = None
    auto_renew_account_id: AccountId
    submit_key: Optional[PublicKey] = None
    admin_key: Optional[PublicKey] = None


class UpdateTopicParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[str, Field(description="The ID of the topic to update.")]
    topic_memo: Annotated[Optional[str], Field(description="New topic memo.")] = None
    admin_key: Annotated[
        KeyInput, Field(description="New admin key: true for your key, or a public key string.")
    ] = None
    submit_key: Annotated[
        KeyInput, Field(description="New submit key: true for your key, or a public key string.")
    ] = None
    auto_renew_account_id: Annotated[
        Optional[str], Field(description="Account paying for topic renewal.")
    ] = None
    auto_renew_period: Annotated[
        Optional[int], Field(gt=0, description="Auto renew period in seconds.")
    ] = None
    expiration_time: Annotated[
        Optional[Union[datetime, str]],
        Field(description="New expiration time (ISO 8601)."),
    ] = None


class UpdateTopicParametersNormalised(BaseModelWithArbitraryTypes):
    topic_id: TopicId
    memo: Optional[str] = None
    admin_key: Optional[PublicKey] = None
    submit_key: Optional[PublicKey] = None
    auto_renew_account_id: Optional[AccountId] = None
    auto_renew_period: Optional[int] = None
    expiration_time: Optional[datetime] = None


class DeleteTopicParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[str, Field(description="The ID of the topic to delete.")]


class DeleteTopicParametersNormalised(BaseModelWithArbitraryTypes):
    topic_id: TopicId


class SubmitTopicMessageParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[str, Field(description="The ID of the topic.")]
    message: Annotated[str, Field(min_length=1, description="Message to submit.")]
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo for the transaction.")
    ] = None


class SubmitTopicMessageParametersNormalised(BaseModelWithArbitraryTypes):
    topic_id: TopicId
    message: str
    transaction_memo: Optional[str] = None

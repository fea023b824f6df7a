from typing import Annotated, Optional

from pydantic import Field

from hedera_agent_core.shared.parameter_schemas.common_schema import (
    BaseModelWithArbitraryTypes,
)


class TransactionRecordQueryParameters(BaseModelWithArbitraryTypes):
    transaction_id: Annotated[
        str,
        Field(
            description='Transaction ID, e.g. "0.0.4177806@1755169980.051721264" '
            'or "0.0.4177806-1755169980-051721264".'
        ),
    ]
    nonce: Annotated[
        Optional[int], Field(ge=0, description="Nonce of a child transaction.")
    ] = None


class TransactionRecordQueryParametersNormalised(BaseModelWithArbitraryTypes):
    transaction_id: str
    nonce: Optional[int] = None

from decimal import Decimal
from typing import Union

from pydantic import BaseModel, ConfigDict

# Display amounts arrive as numbers or numeric strings and are converted with Decimal.
AmountInput = Union[int, Decimal, float, str]

# True = caller's default key, str = explicit public key, False/None = no key.
KeyInput = Union[bool, str, None]


class BaseModelWithArbitraryTypes(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

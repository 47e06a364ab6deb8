from pydantic import Field, StrictStr
from typing_extensions import Literal
from .base import Value


class StringValue(Value):
    kind: Literal["string"] = Field(default="string", frozen=True)
    value: StrictStr

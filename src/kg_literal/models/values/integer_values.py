from pydantic import Field, StrictInt
from typing_extensions import Literal
from .base import Value

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


class SignedIntegerValue(Value):
    kind: Literal["signed_integer"] = Field(default="signed_integer", frozen=True)
    value: StrictInt = Field(ge=I64_MIN, le=I64_MAX)


class UnsignedIntegerValue(Value):
    kind: Literal["unsigned_integer"] = Field(default="unsigned_integer", frozen=True)
    value: StrictInt = Field(ge=0, le=U64_MAX)

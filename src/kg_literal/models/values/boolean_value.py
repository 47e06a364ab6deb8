from pydantic import Field, StrictBool
from typing_extensions import Literal
from .base import Value


class BooleanValue(Value):
    kind: Literal["boolean"] = Field(default="boolean", frozen=True)
    value: StrictBool

from typing import Annotated, Union

from pydantic import Field

from .base import Value
from .iri_value import IriValue
from .string_value import StringValue
from .boolean_value import BooleanValue
from .integer_values import SignedIntegerValue, UnsignedIntegerValue
from .blank_node_value import BlankNodeValue

Payload = Annotated[
    Union[
        IriValue,
        StringValue,
        BooleanValue,
        SignedIntegerValue,
        UnsignedIntegerValue,
        BlankNodeValue,
    ],
    Field(discriminator="kind"),
]

__all__ = [
    "Value",
    "Payload",
    "IriValue",
    "StringValue",
    "BooleanValue",
    "SignedIntegerValue",
    "UnsignedIntegerValue",
    "BlankNodeValue",
]

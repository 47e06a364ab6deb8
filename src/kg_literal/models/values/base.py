from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class Value(BaseModel):
    kind: Literal[
        "iri",
        "string",
        "boolean",
        "signed_integer",
        "unsigned_integer",
        "blank_node",
    ]
    value: Any

    model_config = ConfigDict(frozen=True)

import re

from pydantic import Field, field_validator
from typing_extensions import Literal
from .base import Value

# Absolute IRI: scheme, then no whitespace and none of the characters RFC 3987 excludes.
# Unanchored, use with fullmatch.
IRI_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*:[^\s<>"{}|\\^`]*')


class IriValue(Value):
    kind: Literal["iri"] = Field(default="iri", frozen=True)
    value: str

    @field_validator("value")
    @classmethod
    def validate_iri(cls, v: str) -> str:
        if not IRI_PATTERN.fullmatch(v):
            raise ValueError(f"Not an absolute IRI: {v!r}")
        return v

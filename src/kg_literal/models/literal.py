from typing import Any

import rdflib
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from kg_literal.errors import (
    InvalidIriError,
    LiteralInvariantError,
    UnknownValueForDataTypeError,
)
from kg_literal.models.datatypes import Datatype, DatatypeGroup
from kg_literal.models.values import (
    BlankNodeValue,
    BooleanValue,
    IriValue,
    Payload,
    SignedIntegerValue,
    StringValue,
    UnsignedIntegerValue,
)

TEXT_GROUPS = (
    DatatypeGroup.STRING,
    DatatypeGroup.DECIMAL,
    DatatypeGroup.DURATION,
    DatatypeGroup.DATE_TIME,
)


def _expect_group(data_type: Datatype, *groups: DatatypeGroup) -> None:
    if data_type.group not in groups:
        expected = ", ".join(group.value for group in groups)
        raise LiteralInvariantError(
            f"{data_type!r} cannot be used for a literal of group {expected}"
        )


class Literal(BaseModel):
    """An RDF literal: a datatype plus exactly one payload shape.

    The payload shape is fixed by ``data_type.group``. Literals are immutable;
    build them with the ``new_*`` constructors or with
    ``kg_literal.parsers.parse_literal``.
    """

    data_type: Datatype
    value: Payload

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_payload_kind(self) -> "Literal":
        group = self.data_type.group
        if group is None:
            raise ValueError(f"No literal can hold data type {self.data_type!r}")
        if group.value_kind != self.value.kind:
            raise ValueError(
                f"Data type {self.data_type!r} needs a {group.value_kind.value} value, "
                f"got {self.value.kind}"
            )
        return self

    # Construction

    @classmethod
    def new_text(cls, text: str, data_type: Datatype = Datatype.STRING) -> "Literal":
        _expect_group(data_type, *TEXT_GROUPS)
        return cls(data_type=data_type, value=StringValue(value=text))

    @classmethod
    def new_iri(cls, iri: str, data_type: Datatype = Datatype.ANY_URI) -> "Literal":
        """Build an IRI literal.

        Raises:
            InvalidIriError: if ``iri`` is not an absolute IRI
        """
        _expect_group(data_type, DatatypeGroup.IRI)
        try:
            payload = IriValue(value=str(iri))
        except ValidationError as e:
            raise InvalidIriError(str(iri)) from e
        return cls(data_type=data_type, value=payload)

    @classmethod
    def from_iri(cls, iri: str) -> "Literal":
        return cls.new_iri(iri, Datatype.ANY_URI)

    @classmethod
    def new_boolean(cls, boolean: bool, data_type: Datatype = Datatype.BOOLEAN) -> "Literal":
        _expect_group(data_type, DatatypeGroup.BOOLEAN)
        return cls(data_type=data_type, value=BooleanValue(value=boolean))

    @classmethod
    def new_signed_integer(cls, value: int, data_type: Datatype = Datatype.INTEGER) -> "Literal":
        _expect_group(data_type, DatatypeGroup.SIGNED_INTEGER)
        try:
            payload = SignedIntegerValue(value=value)
        except ValidationError as e:
            raise UnknownValueForDataTypeError(data_type, str(value)) from e
        return cls(data_type=data_type, value=payload)

    @classmethod
    def new_unsigned_integer(
        cls, value: int, data_type: Datatype = Datatype.NON_NEGATIVE_INTEGER
    ) -> "Literal":
        _expect_group(data_type, DatatypeGroup.UNSIGNED_INTEGER)
        try:
            payload = UnsignedIntegerValue(value=value)
        except ValidationError as e:
            raise UnknownValueForDataTypeError(data_type, str(value)) from e
        return cls(data_type=data_type, value=payload)

    @classmethod
    def new_signed_integer_inferred(cls, value: int) -> "Literal":
        """Integer literal for callers without a declared XSD subtype.

        Negative values become ``NEGATIVE_INTEGER``, everything else (zero
        included) goes down the unsigned path as ``POSITIVE_INTEGER``.
        """
        if value < 0:
            return cls.new_signed_integer(value, Datatype.NEGATIVE_INTEGER)
        return cls.new_unsigned_integer(value, Datatype.POSITIVE_INTEGER)

    @classmethod
    def new_blank_node(cls, blank_node: str, data_type: Datatype = Datatype.BLANK_NODE) -> "Literal":
        _expect_group(data_type, DatatypeGroup.BLANK_NODE)
        return cls(data_type=data_type, value=BlankNodeValue(value=blank_node))

    @classmethod
    def new_decimal(cls, text: str) -> "Literal":
        return cls.new_text(text, Datatype.DECIMAL)

    @classmethod
    def new_duration(cls, text: str) -> "Literal":
        return cls.new_text(text, Datatype.DURATION)

    @classmethod
    def new_date_time(cls, text: str) -> "Literal":
        return cls.new_text(text, Datatype.DATE_TIME)

    # Active shape

    @property
    def group(self) -> DatatypeGroup:
        group = self.data_type.group
        if group is None:
            raise LiteralInvariantError(f"Unsupported data type {self.data_type!r}")
        return group

    def active_value(self) -> str | bool | int:
        """The payload interpreted according to ``group``"""
        group = self.group
        if self.value.kind != group.value_kind:
            raise LiteralInvariantError(
                f"{self.data_type!r} literal holds a {self.value.kind} value"
            )
        return self.value.value

    def lexical_form(self) -> str:
        """Value as it appears in N-Triples, without quotes or prefixes"""
        value = self.active_value()
        if self.group is DatatypeGroup.BOOLEAN:
            return "true" if value else "false"
        return str(value)

    # Accessors

    def _value_if(self, group: DatatypeGroup) -> Any:
        if self.data_type.group is group:
            return self.active_value()
        return None

    def as_iri(self) -> str | None:
        return self._value_if(DatatypeGroup.IRI)

    def as_text(self) -> str | None:
        return self._value_if(DatatypeGroup.STRING)

    def as_boolean(self) -> bool | None:
        return self._value_if(DatatypeGroup.BOOLEAN)

    def as_signed(self) -> int | None:
        return self._value_if(DatatypeGroup.SIGNED_INTEGER)

    def as_unsigned(self) -> int | None:
        return self._value_if(DatatypeGroup.UNSIGNED_INTEGER)

    def as_blank_node(self) -> str | None:
        return self._value_if(DatatypeGroup.BLANK_NODE)

    def as_decimal_text(self) -> str | None:
        return self._value_if(DatatypeGroup.DECIMAL)

    def as_duration_text(self) -> str | None:
        return self._value_if(DatatypeGroup.DURATION)

    def as_date_time_text(self) -> str | None:
        return self._value_if(DatatypeGroup.DATE_TIME)

    def as_local_name(self) -> str | None:
        """Part of an IRI after the last ``/`` or ``#``"""
        iri = self.as_iri()
        if iri is None:
            return None
        separator = max(iri.rfind("/"), iri.rfind("#"))
        if separator < 0:
            return None
        return iri[separator + 1:] or None

    def is_id_iri(self, id_base_iri: str) -> bool:
        iri = self.as_iri()
        return iri is not None and iri.startswith(str(id_base_iri))

    def as_id(self, id_base_iri: str) -> str | None:
        """Identifier of an IRI literal under ``id_base_iri``"""
        if not self.is_id_iri(id_base_iri):
            return None
        return self.as_iri()[len(str(id_base_iri)):]

    # Structural traits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        if self.data_type != other.data_type:
            return False
        return self.active_value() == other.active_value()

    def __hash__(self) -> int:
        return hash((self.data_type, self.active_value()))

    def __repr__(self) -> str:
        return f"Literal({self.data_type.display_name}, {self.active_value()!r})"

    def __str__(self) -> str:
        from kg_literal.rdf.value_formatters import LiteralFormatter

        return LiteralFormatter.format_plain(self)

    def clone(self) -> "Literal":
        """Independent copy of this literal"""
        return self.model_copy(deep=True)

    def to_rdflib(self) -> rdflib.term.Identifier:
        """Convert to an rdflib term"""
        group = self.group
        if group is DatatypeGroup.IRI:
            return rdflib.URIRef(self.active_value())
        if group is DatatypeGroup.BLANK_NODE:
            return rdflib.BNode(self.active_value())
        if self.data_type is Datatype.PLAIN_LITERAL:
            return rdflib.Literal(self.lexical_form())
        return rdflib.Literal(
            self.lexical_form(), datatype=rdflib.URIRef(self.data_type.to_xsd_iri())
        )

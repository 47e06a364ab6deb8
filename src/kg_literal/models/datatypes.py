from enum import Enum, IntEnum

from rdflib.namespace import RDFS, XSD

from kg_literal.errors import (
    LiteralInvariantError,
    UnknownDataTypeError,
    UnknownXsdDataTypeError,
)
from kg_literal.models.value_kinds import ValueKind


class DatatypeGroup(str, Enum):
    """Datatypes that share one payload shape and one comparison rule"""

    IRI = "iri"
    STRING = "string"
    BOOLEAN = "boolean"
    SIGNED_INTEGER = "signed_integer"
    UNSIGNED_INTEGER = "unsigned_integer"
    BLANK_NODE = "blank_node"
    DECIMAL = "decimal"
    DURATION = "duration"
    DATE_TIME = "date_time"

    @property
    def value_kind(self) -> ValueKind:
        """Payload shape stored by literals of this group"""
        return _GROUP_VALUE_KINDS[self]


_GROUP_VALUE_KINDS = {
    DatatypeGroup.IRI: ValueKind.IRI,
    DatatypeGroup.STRING: ValueKind.STRING,
    DatatypeGroup.BOOLEAN: ValueKind.BOOLEAN,
    DatatypeGroup.SIGNED_INTEGER: ValueKind.SIGNED_INTEGER,
    DatatypeGroup.UNSIGNED_INTEGER: ValueKind.UNSIGNED_INTEGER,
    DatatypeGroup.BLANK_NODE: ValueKind.BLANK_NODE,
    DatatypeGroup.DECIMAL: ValueKind.STRING,
    DatatypeGroup.DURATION: ValueKind.STRING,
    DatatypeGroup.DATE_TIME: ValueKind.STRING,
}


class Datatype(IntEnum):
    """XSD / RDF datatype of a literal.

    The numeric values are shared with the database and must never change.
    """

    UNBOUND_VALUE = 0
    BLANK_NODE = 1
    IRI_REFERENCE = 2
    LITERAL = 3
    ANY_URI = 4
    STRING = 5
    PLAIN_LITERAL = 6
    BOOLEAN = 7
    DATE_TIME = 8
    DATE_TIME_STAMP = 9
    TIME = 10
    DATE = 11
    YEAR_MONTH = 12
    YEAR = 13
    MONTH_DAY = 14
    DAY = 15
    MONTH = 16
    DURATION = 17
    YEAR_MONTH_DURATION = 18
    DAY_TIME_DURATION = 19
    DOUBLE = 20
    FLOAT = 21
    DECIMAL = 22
    INTEGER = 23
    NON_NEGATIVE_INTEGER = 24
    NON_POSITIVE_INTEGER = 25
    NEGATIVE_INTEGER = 26
    POSITIVE_INTEGER = 27
    LONG = 28
    INT = 29
    SHORT = 30
    BYTE = 31
    UNSIGNED_LONG = 32
    UNSIGNED_INT = 33
    UNSIGNED_SHORT = 34
    UNSIGNED_BYTE = 35

    @classmethod
    def from_id(cls, data_type_id: int) -> "Datatype":
        """Look up a datatype by its numeric identifier.

        Raises:
            UnknownDataTypeError: if the id is not assigned to any datatype
        """
        if isinstance(data_type_id, bool) or not isinstance(data_type_id, int):
            raise UnknownDataTypeError(data_type_id)
        try:
            return cls(data_type_id)
        except ValueError:
            raise UnknownDataTypeError(data_type_id) from None

    @classmethod
    def from_xsd_iri(cls, iri: str) -> "Datatype":
        """Look up a datatype by its canonical IRI.

        Raises:
            UnknownXsdDataTypeError: if the IRI is not a known datatype IRI
        """
        data_type = _IRI_TO_DATATYPE.get(str(iri))
        if data_type is None:
            raise UnknownXsdDataTypeError(str(iri))
        return data_type

    def to_xsd_iri(self) -> str:
        """Canonical IRI of this datatype.

        Only datatypes listed in the IRI map have one, callers must check
        ``has_xsd_iri`` first.
        """
        iri = _DATATYPE_TO_IRI.get(self)
        if iri is None:
            raise LiteralInvariantError(f"{self!r} has no canonical datatype IRI")
        return iri

    @property
    def has_xsd_iri(self) -> bool:
        return self in _DATATYPE_TO_IRI

    @property
    def display_name(self) -> str:
        """CamelCase name, e.g. ``DateTime``"""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def group(self) -> DatatypeGroup | None:
        """Classification group, or None when no code path supports the datatype"""
        return _DATATYPE_GROUPS.get(self)

    def is_string(self) -> bool:
        return self in (Datatype.STRING, Datatype.PLAIN_LITERAL)

    def is_iri(self) -> bool:
        return self in (Datatype.ANY_URI, Datatype.IRI_REFERENCE)

    def is_boolean(self) -> bool:
        return self is Datatype.BOOLEAN

    def is_date(self) -> bool:
        return self is Datatype.DATE

    def is_date_time(self) -> bool:
        return self is Datatype.DATE_TIME

    def is_date_time_stamp(self) -> bool:
        return self is Datatype.DATE_TIME_STAMP

    def is_decimal(self) -> bool:
        return self is Datatype.DECIMAL

    def is_duration(self) -> bool:
        return self is Datatype.DURATION

    def is_signed_integer(self) -> bool:
        return self in (
            Datatype.INT,
            Datatype.INTEGER,
            Datatype.NEGATIVE_INTEGER,
            Datatype.NON_POSITIVE_INTEGER,
            Datatype.LONG,
            Datatype.SHORT,
        )

    def is_unsigned_integer(self) -> bool:
        return self in (
            Datatype.POSITIVE_INTEGER,
            Datatype.NON_NEGATIVE_INTEGER,
            Datatype.UNSIGNED_BYTE,
            Datatype.UNSIGNED_INT,
            Datatype.UNSIGNED_SHORT,
            Datatype.UNSIGNED_LONG,
        )

    def is_blank_node(self) -> bool:
        return self is Datatype.BLANK_NODE


def _classify(data_type: Datatype) -> DatatypeGroup | None:
    if data_type.is_iri():
        return DatatypeGroup.IRI
    if data_type.is_string():
        return DatatypeGroup.STRING
    if data_type.is_boolean():
        return DatatypeGroup.BOOLEAN
    if data_type.is_signed_integer():
        return DatatypeGroup.SIGNED_INTEGER
    if data_type.is_unsigned_integer():
        return DatatypeGroup.UNSIGNED_INTEGER
    if data_type.is_blank_node():
        return DatatypeGroup.BLANK_NODE
    if data_type.is_decimal():
        return DatatypeGroup.DECIMAL
    if data_type.is_duration():
        return DatatypeGroup.DURATION
    if data_type.is_date_time():
        return DatatypeGroup.DATE_TIME
    return None


_DATATYPE_GROUPS = {
    data_type: group
    for data_type in Datatype
    if (group := _classify(data_type)) is not None
}

# Pseudo IRIs for the three non-XSD datatypes are what the database reports.
_IRI_TO_DATATYPE = {
    "Unbound Value": Datatype.UNBOUND_VALUE,
    "Blank Node": Datatype.BLANK_NODE,
    "IRI Reference": Datatype.IRI_REFERENCE,
    str(RDFS.Literal): Datatype.LITERAL,
    str(XSD.anyURI): Datatype.ANY_URI,
    str(XSD.boolean): Datatype.BOOLEAN,
    str(XSD.byte): Datatype.BYTE,
    str(XSD.date): Datatype.DATE,
    str(XSD.dateTime): Datatype.DATE_TIME,
    str(XSD.dateTimeStamp): Datatype.DATE_TIME_STAMP,
    str(XSD.gDay): Datatype.DAY,
    str(XSD.dayTimeDuration): Datatype.DAY_TIME_DURATION,
    str(XSD.decimal): Datatype.DECIMAL,
    str(XSD.double): Datatype.DOUBLE,
    str(XSD.duration): Datatype.DURATION,
    str(XSD.float): Datatype.FLOAT,
    str(XSD.int): Datatype.INT,
    str(XSD.integer): Datatype.INTEGER,
    str(XSD.long): Datatype.LONG,
    str(XSD.gMonth): Datatype.MONTH,
    str(XSD.gMonthDay): Datatype.MONTH_DAY,
    str(XSD.negativeInteger): Datatype.NEGATIVE_INTEGER,
    str(XSD.nonNegativeInteger): Datatype.NON_NEGATIVE_INTEGER,
    str(XSD.nonPositiveInteger): Datatype.NON_POSITIVE_INTEGER,
    str(XSD.positiveInteger): Datatype.POSITIVE_INTEGER,
    str(XSD.short): Datatype.SHORT,
    str(XSD.string): Datatype.STRING,
    str(XSD.time): Datatype.TIME,
    str(XSD.unsignedByte): Datatype.UNSIGNED_BYTE,
    str(XSD.unsignedInt): Datatype.UNSIGNED_INT,
    str(XSD.unsignedLong): Datatype.UNSIGNED_LONG,
    str(XSD.unsignedShort): Datatype.UNSIGNED_SHORT,
    str(XSD.gYear): Datatype.YEAR,
    str(XSD.gYearMonth): Datatype.YEAR_MONTH,
    str(XSD.yearMonthDuration): Datatype.YEAR_MONTH_DURATION,
}

_DATATYPE_TO_IRI = {data_type: iri for iri, data_type in _IRI_TO_DATATYPE.items()}

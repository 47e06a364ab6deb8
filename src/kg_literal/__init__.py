"""RDF literal values for the knowledge-graph client."""

from kg_literal.errors import (
    InvalidIriError,
    LiteralInvariantError,
    RDFStoreError,
    UnknownDataTypeError,
    UnknownNTriplesValueError,
    UnknownValueForDataTypeError,
    UnknownXsdDataTypeError,
    UnsupportedDatatypeError,
)
from kg_literal.models import Datatype, DatatypeGroup, Literal, ValueKind
from kg_literal.parsers import parse_literal
from kg_literal.rdf import LiteralFormatter

__all__ = [
    "Datatype",
    "DatatypeGroup",
    "InvalidIriError",
    "Literal",
    "LiteralFormatter",
    "LiteralInvariantError",
    "RDFStoreError",
    "UnknownDataTypeError",
    "UnknownNTriplesValueError",
    "UnknownValueForDataTypeError",
    "UnknownXsdDataTypeError",
    "UnsupportedDatatypeError",
    "ValueKind",
    "parse_literal",
]

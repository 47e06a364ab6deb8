"""Errors raised while building, parsing and rendering literals.

Everything derived from ``RDFStoreError`` is caused by bad external input and is
meant to be caught. ``LiteralInvariantError`` signals a bug in the calling code
(or a datatype a code path does not implement) and is not.
"""

from typing import Any


class RDFStoreError(Exception):
    """Base class for recoverable literal errors"""


class UnknownDataTypeError(RDFStoreError):
    def __init__(self, data_type_id: Any):
        self.data_type_id = data_type_id
        super().__init__(f"Unknown data type {data_type_id}")


class UnknownXsdDataTypeError(RDFStoreError):
    def __init__(self, data_type_iri: str):
        self.data_type_iri = data_type_iri
        super().__init__(f"Unknown XSD data type {data_type_iri}")


class UnknownValueForDataTypeError(RDFStoreError):
    def __init__(self, data_type: Any, value: str):
        self.data_type = data_type
        self.value = value
        super().__init__(f"Unknown value [{value}] for data type {data_type!r}")


class UnknownNTriplesValueError(RDFStoreError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown literal value in N-Triples format: {value}")


class InvalidIriError(RDFStoreError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Could not parse IRI: {detail}")


class UnsupportedDatatypeError(RDFStoreError):
    def __init__(self, data_type: Any):
        self.data_type = data_type
        super().__init__(f"Cannot parse a literal of data type {data_type!r}")


class LiteralInvariantError(RuntimeError):
    """A literal was requested or used in a way that can only be a programming error"""

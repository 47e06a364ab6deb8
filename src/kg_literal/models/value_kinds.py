from enum import Enum


class ValueKind(str, Enum):
    IRI = "iri"
    STRING = "string"
    BOOLEAN = "boolean"
    SIGNED_INTEGER = "signed_integer"
    UNSIGNED_INTEGER = "unsigned_integer"
    BLANK_NODE = "blank_node"

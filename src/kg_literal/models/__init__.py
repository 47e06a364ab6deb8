from .datatypes import Datatype, DatatypeGroup
from .literal import Literal
from .value_kinds import ValueKind

__all__ = ["Datatype", "DatatypeGroup", "Literal", "ValueKind"]

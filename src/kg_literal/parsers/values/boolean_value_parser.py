import logging

from kg_literal.errors import UnknownNTriplesValueError
from kg_literal.models.datatypes import Datatype
from kg_literal.models.literal import Literal

logger = logging.getLogger(__name__)

BOOLEAN_VALUES = {"true": True, "false": False}


def parse_boolean_value(data_type: Datatype, text: str) -> Literal:
    if text not in BOOLEAN_VALUES:
        logger.debug(f"Rejecting boolean lexical form {text!r}")
        raise UnknownNTriplesValueError(text)
    return Literal.new_boolean(BOOLEAN_VALUES[text], data_type)

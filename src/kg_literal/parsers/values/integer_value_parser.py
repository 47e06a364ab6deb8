import logging
import re

from kg_literal.errors import UnknownValueForDataTypeError
from kg_literal.models.datatypes import Datatype
from kg_literal.models.literal import Literal
from kg_literal.models.values.integer_values import I64_MAX, I64_MIN, U64_MAX

logger = logging.getLogger(__name__)

SIGNED_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
UNSIGNED_INTEGER_PATTERN = re.compile(r"\+?[0-9]+")


def _reject(data_type: Datatype, text: str, reason: str) -> UnknownValueForDataTypeError:
    logger.debug(f"Rejecting {data_type.display_name} lexical form {text!r}: {reason}")
    return UnknownValueForDataTypeError(data_type, text)


def parse_signed_integer_value(data_type: Datatype, text: str) -> Literal:
    if not SIGNED_INTEGER_PATTERN.fullmatch(text):
        raise _reject(data_type, text, "not an integer")
    value = int(text)
    if not I64_MIN <= value <= I64_MAX:
        raise _reject(data_type, text, "out of range")
    return Literal.new_signed_integer(value, data_type)


def parse_unsigned_integer_value(data_type: Datatype, text: str) -> Literal:
    if not UNSIGNED_INTEGER_PATTERN.fullmatch(text):
        raise _reject(data_type, text, "not an unsigned integer")
    value = int(text)
    if value > U64_MAX:
        raise _reject(data_type, text, "out of range")
    return Literal.new_unsigned_integer(value, data_type)

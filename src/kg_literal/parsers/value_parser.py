import logging

from .values.blank_node_value_parser import parse_blank_node_value
from .values.boolean_value_parser import parse_boolean_value
from .values.integer_value_parser import (
    parse_signed_integer_value,
    parse_unsigned_integer_value,
)
from .values.iri_value_parser import parse_iri_value
from .values.text_value_parser import parse_text_value
from kg_literal.errors import UnsupportedDatatypeError
from kg_literal.models.datatypes import Datatype, DatatypeGroup
from kg_literal.models.literal import Literal

logger = logging.getLogger(__name__)

PARSERS = {
    DatatypeGroup.IRI: parse_iri_value,
    DatatypeGroup.BLANK_NODE: parse_blank_node_value,
    DatatypeGroup.BOOLEAN: parse_boolean_value,
    DatatypeGroup.STRING: parse_text_value,
    DatatypeGroup.DATE_TIME: parse_text_value,
    DatatypeGroup.SIGNED_INTEGER: parse_signed_integer_value,
    DatatypeGroup.UNSIGNED_INTEGER: parse_unsigned_integer_value,
    DatatypeGroup.DECIMAL: parse_text_value,
    DatatypeGroup.DURATION: parse_text_value,
}


def _resolve_data_type(data_type: Datatype | int | str) -> Datatype:
    if isinstance(data_type, Datatype):
        return data_type
    if isinstance(data_type, str):
        return Datatype.from_xsd_iri(data_type)
    return Datatype.from_id(data_type)


def parse_literal(data_type: Datatype | int | str, text: str) -> Literal | None:
    """Build a Literal from a datatype and a lexical form.

    Args:
        data_type: Datatype, numeric datatype id or datatype IRI
        text: Lexical form of the value

    Returns:
        The Literal, or None for an unbound value

    Raises:
        RDFStoreError: if the datatype is unknown or unsupported, or ``text``
            is not a valid lexical form for it
    """
    data_type = _resolve_data_type(data_type)

    if data_type is Datatype.UNBOUND_VALUE:
        logger.debug("Unbound value, no literal")
        return None

    parser = PARSERS.get(data_type.group)
    if not parser:
        logger.debug(f"No parser for data type {data_type.display_name}")
        raise UnsupportedDatatypeError(data_type)
    logger.debug(f"Parsing {data_type.display_name} value with {parser.__name__}")
    return parser(data_type, text)

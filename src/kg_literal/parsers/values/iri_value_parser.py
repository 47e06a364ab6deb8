import logging

from kg_literal.errors import InvalidIriError
from kg_literal.models.datatypes import Datatype
from kg_literal.models.literal import Literal

logger = logging.getLogger(__name__)


def parse_iri_value(data_type: Datatype, text: str) -> Literal:
    try:
        return Literal.new_iri(text, data_type)
    except InvalidIriError:
        logger.debug(f"Rejecting IRI {text!r}")
        raise

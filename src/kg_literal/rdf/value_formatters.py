import json
import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

from kg_literal.config.settings import settings
from kg_literal.errors import LiteralInvariantError
from kg_literal.models.datatypes import DatatypeGroup

if TYPE_CHECKING:
    from kg_literal.models.literal import Literal

logger = logging.getLogger(__name__)

BARE_GROUPS = (
    DatatypeGroup.BOOLEAN,
    DatatypeGroup.SIGNED_INTEGER,
    DatatypeGroup.UNSIGNED_INTEGER,
)

TURTLE_TYPE_SUFFIXES = {
    DatatypeGroup.DATE_TIME: "xsd:dateTime",
    DatatypeGroup.DURATION: "xsd:duration",
}


def _unsupported(renderer: str, literal: "Literal") -> LiteralInvariantError:
    return LiteralInvariantError(
        f"{renderer} rendering is not implemented for {literal.data_type!r}"
    )


class LiteralFormatter:
    """Format Literal objects as text.

    All renderers dispatch on ``literal.group`` so they support exactly the
    datatypes a Literal can be built for.
    """

    @staticmethod
    def format_plain(literal: "Literal") -> str:
        """N-Triples like form: ``<iri>``, ``_:id``, ``"text"``, ``42``, ``3.14 (Decimal)``"""
        group = literal.group

        if group is DatatypeGroup.IRI:
            return f"<{literal.lexical_form()}>"

        elif group is DatatypeGroup.BLANK_NODE:
            return f"_:{literal.lexical_form()}"

        elif group is DatatypeGroup.STRING:
            escaped = LiteralFormatter.escape_turtle(literal.lexical_form())
            return f'"{escaped}"'

        elif group in BARE_GROUPS:
            return literal.lexical_form()

        elif group in (DatatypeGroup.DECIMAL, DatatypeGroup.DURATION, DatatypeGroup.DATE_TIME):
            return f"{literal.lexical_form()} ({literal.data_type.display_name})"

        raise _unsupported("Plain", literal)

    @staticmethod
    def format_turtle(literal: "Literal") -> str:
        group = literal.group

        if group in TURTLE_TYPE_SUFFIXES:
            escaped = LiteralFormatter.escape_turtle(literal.lexical_form())
            return f'"{escaped}"^^{TURTLE_TYPE_SUFFIXES[group]}'

        elif group is DatatypeGroup.DECIMAL:
            return literal.lexical_form()

        elif group in (
            DatatypeGroup.IRI,
            DatatypeGroup.BLANK_NODE,
            DatatypeGroup.STRING,
            *BARE_GROUPS,
        ):
            return LiteralFormatter.format_plain(literal)

        raise _unsupported("Turtle", literal)

    @staticmethod
    def format_json(literal: "Literal") -> str:
        group = literal.group

        if group is DatatypeGroup.BLANK_NODE:
            return json.dumps(f"_:{literal.lexical_form()}", ensure_ascii=False)

        elif group in (
            DatatypeGroup.IRI,
            DatatypeGroup.STRING,
            DatatypeGroup.DECIMAL,
            DatatypeGroup.DURATION,
            DatatypeGroup.DATE_TIME,
        ):
            return json.dumps(literal.lexical_form(), ensure_ascii=False)

        elif group in BARE_GROUPS:
            return literal.lexical_form()

        raise _unsupported("JSON", literal)

    @staticmethod
    def format_url(literal: "Literal") -> str:
        """Form used inside a URL path or query: strings percent-encoded"""
        group = literal.group

        if group is DatatypeGroup.STRING:
            return quote(literal.lexical_form(), safe="")

        elif group is DatatypeGroup.BOOLEAN:
            return literal.lexical_form()

        return LiteralFormatter.format_plain(literal)

    @staticmethod
    def format_id_url(literal: "Literal", id_base_iri: str | None = None) -> str:
        """Bare id for IRIs under ``id_base_iri``, plain form for everything else"""
        if id_base_iri is None:
            id_base_iri = settings.id_base_iri
        if literal.is_id_iri(id_base_iri):
            logger.debug(f"Shortening {literal.as_iri()} to id under {id_base_iri}")
            return literal.as_id(id_base_iri)
        return LiteralFormatter.format_plain(literal)

    @staticmethod
    def escape_turtle(value: str) -> str:
        """Escape special characters for Turtle format"""
        value = value.replace("\\", "\\\\")
        value = value.replace('"', '\\"')
        value = value.replace("\n", "\\n")
        value = value.replace("\r", "\\r")
        value = value.replace("\t", "\\t")
        return value

import logging

import pytest

from kg_literal.config.settings import settings
from kg_literal.models import Datatype, Literal


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for all test sessions"""
    log_level = logging.DEBUG if settings.log_level == "DEBUG" else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        force=True
    )


@pytest.fixture
def sample_literals() -> list[Literal]:
    """One literal for every datatype group"""
    return [
        Literal.new_iri("https://example.kg/ns#Thing"),
        Literal.new_iri("https://example.kg/ns/Other", Datatype.IRI_REFERENCE),
        Literal.new_blank_node("b0"),
        Literal.new_text("hello"),
        Literal.new_text("hello", Datatype.PLAIN_LITERAL),
        Literal.new_boolean(True),
        Literal.new_signed_integer(-42, Datatype.LONG),
        Literal.new_unsigned_integer(42, Datatype.UNSIGNED_INT),
        Literal.new_decimal("3.140"),
        Literal.new_duration("P1Y2M"),
        Literal.new_date_time("2023-12-31T00:00:00Z"),
    ]

import pytest

from kg_literal.errors import (
    LiteralInvariantError,
    UnknownDataTypeError,
    UnknownXsdDataTypeError,
)
from kg_literal.models.datatypes import Datatype, DatatypeGroup
from kg_literal.models.value_kinds import ValueKind


def test_ids_are_stable():
    """Numeric ids are shared with the database"""
    assert Datatype.UNBOUND_VALUE == 0
    assert Datatype.BLANK_NODE == 1
    assert Datatype.ANY_URI == 4
    assert Datatype.BOOLEAN == 7
    assert Datatype.DECIMAL == 22
    assert Datatype.INTEGER == 23
    assert Datatype.UNSIGNED_BYTE == 35
    assert len(Datatype) == 36


def test_from_id():
    """Test lookup by numeric id"""
    assert Datatype.from_id(23) is Datatype.INTEGER
    assert Datatype.from_id(0) is Datatype.UNBOUND_VALUE


@pytest.mark.parametrize("data_type_id", [36, -1, 255, True, "5"])
def test_from_unknown_id(data_type_id):
    """Test that ids outside the vocabulary fail"""
    with pytest.raises(UnknownDataTypeError) as exc_info:
        Datatype.from_id(data_type_id)
    assert exc_info.value.data_type_id == data_type_id


def test_from_xsd_iri():
    """Test lookup by datatype IRI"""
    assert Datatype.from_xsd_iri("http://www.w3.org/2001/XMLSchema#integer") is Datatype.INTEGER
    assert Datatype.from_xsd_iri("http://www.w3.org/2001/XMLSchema#anyURI") is Datatype.ANY_URI
    assert Datatype.from_xsd_iri("http://www.w3.org/2000/01/rdf-schema#Literal") is Datatype.LITERAL
    assert Datatype.from_xsd_iri("Blank Node") is Datatype.BLANK_NODE


def test_from_unknown_xsd_iri():
    """Test that unmapped IRIs fail"""
    with pytest.raises(UnknownXsdDataTypeError) as exc_info:
        Datatype.from_xsd_iri("http://www.w3.org/2001/XMLSchema#nothing")
    assert exc_info.value.data_type_iri == "http://www.w3.org/2001/XMLSchema#nothing"
    assert "Unknown XSD data type" in str(exc_info.value)


def test_xsd_iri_map_is_bijective():
    """Every mapped datatype maps back to itself"""
    for data_type in Datatype:
        if data_type.has_xsd_iri:
            assert Datatype.from_xsd_iri(data_type.to_xsd_iri()) is data_type


def test_to_xsd_iri():
    assert Datatype.DATE_TIME.to_xsd_iri() == "http://www.w3.org/2001/XMLSchema#dateTime"
    assert Datatype.STRING.to_xsd_iri() == "http://www.w3.org/2001/XMLSchema#string"


def test_to_xsd_iri_without_mapping_is_fatal():
    """PlainLiteral has no canonical IRI, asking for one is a caller bug"""
    assert not Datatype.PLAIN_LITERAL.has_xsd_iri
    with pytest.raises(LiteralInvariantError):
        Datatype.PLAIN_LITERAL.to_xsd_iri()


def test_display_name():
    assert Datatype.DATE_TIME.display_name == "DateTime"
    assert Datatype.ANY_URI.display_name == "AnyUri"
    assert Datatype.DECIMAL.display_name == "Decimal"


def test_classification_predicates():
    assert Datatype.PLAIN_LITERAL.is_string()
    assert Datatype.IRI_REFERENCE.is_iri()
    assert Datatype.SHORT.is_signed_integer()
    assert not Datatype.SHORT.is_unsigned_integer()
    assert Datatype.POSITIVE_INTEGER.is_unsigned_integer()
    assert Datatype.DATE.is_date()
    assert Datatype.DATE_TIME_STAMP.is_date_time_stamp()
    assert not Datatype.BYTE.is_signed_integer()


@pytest.mark.parametrize(
    "data_type,group",
    [
        (Datatype.ANY_URI, DatatypeGroup.IRI),
        (Datatype.IRI_REFERENCE, DatatypeGroup.IRI),
        (Datatype.STRING, DatatypeGroup.STRING),
        (Datatype.PLAIN_LITERAL, DatatypeGroup.STRING),
        (Datatype.BOOLEAN, DatatypeGroup.BOOLEAN),
        (Datatype.NON_POSITIVE_INTEGER, DatatypeGroup.SIGNED_INTEGER),
        (Datatype.UNSIGNED_LONG, DatatypeGroup.UNSIGNED_INTEGER),
        (Datatype.BLANK_NODE, DatatypeGroup.BLANK_NODE),
        (Datatype.DECIMAL, DatatypeGroup.DECIMAL),
        (Datatype.DURATION, DatatypeGroup.DURATION),
        (Datatype.DATE_TIME, DatatypeGroup.DATE_TIME),
        (Datatype.DATE, None),
        (Datatype.DOUBLE, None),
        (Datatype.BYTE, None),
        (Datatype.UNBOUND_VALUE, None),
    ],
)
def test_group(data_type, group):
    assert data_type.group is group


def test_text_groups_share_string_payload():
    assert DatatypeGroup.DECIMAL.value_kind is ValueKind.STRING
    assert DatatypeGroup.DURATION.value_kind is ValueKind.STRING
    assert DatatypeGroup.DATE_TIME.value_kind is ValueKind.STRING
    assert DatatypeGroup.BLANK_NODE.value_kind is ValueKind.BLANK_NODE

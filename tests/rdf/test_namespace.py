from pathlib import Path

import pytest
from pydantic import ValidationError

from kg_literal.errors import InvalidIriError
from kg_literal.models import Datatype, Literal
from kg_literal.parsers import parse_literal
from kg_literal.rdf import Class, Graph, Namespace, Predicate


def test_namespace_with_hash():
    namespace = Namespace.declare("test:", "http://whatever.kom/test#")
    assert namespace.with_local_name("abc") == "http://whatever.kom/test#abc"


def test_namespace_with_slash():
    namespace = Namespace.declare("test:", "http://whatever.kom/test/")
    assert namespace.with_local_name("abc") == "http://whatever.kom/test/abc"


def test_namespace_gets_terminated():
    namespace = Namespace.declare("test:", "http://whatever.kom/test")
    assert namespace.iri == "http://whatever.kom/test/"
    assert str(namespace) == "test: <http://whatever.kom/test/>"


def test_namespace_rejects_relative_iri():
    with pytest.raises(ValidationError):
        Namespace.declare("test:", "whatever")


def test_namespace_rejects_trailing_newline():
    with pytest.raises(ValidationError):
        Namespace.declare("test:", "https://whatever.kom/test\n")


def test_with_local_name_rejects_trailing_newline():
    namespace = Namespace.declare("test:", "https://whatever.kom/test/")
    with pytest.raises(InvalidIriError):
        namespace.with_local_name("thing\n")


def test_class_display():
    namespace = Namespace.declare("test:", "https://whatever.com/test#")
    cls = Class.declare(namespace, "SomeClass")
    assert str(cls) == "test:SomeClass"
    assert cls.display_turtle() == "test:SomeClass"
    assert cls.as_iri() == "https://whatever.com/test#SomeClass"
    assert cls.plural_label() == "SomeClasss"


def test_class_is_literal():
    """Resource comparison is separate from literal equality"""
    namespace = Namespace.declare("test:", "https://whatever.com/test#")
    cls = Class.declare(namespace, "SomeClass")

    literal = parse_literal(Datatype.ANY_URI, "https://whatever.com/test#SomeClass")
    assert literal is not None
    assert cls.is_literal(literal)
    assert cls.is_literal(Literal.new_iri("https://whatever.com/test#SomeClass", Datatype.IRI_REFERENCE))
    assert not cls.is_literal(Literal.new_iri("https://whatever.com/test#Other"))
    assert not cls.is_literal(Literal.new_text("https://whatever.com/test#SomeClass"))
    assert not cls.is_literal(Literal.new_boolean(True))


def test_class_with_invalid_iri_is_no_literal():
    namespace = Namespace.declare("test:", "https://whatever.com/test#")
    cls = Class.declare(namespace, "Some Class")

    assert not cls.is_literal(Literal.new_iri("https://whatever.com/test#Some"))
    assert not cls.is_literal(Literal.new_iri("https://whatever.com/test#SomeClass"))


def test_graph_display_iri():
    graph_prefix = Namespace.declare("graph:", "https://whatever.kom/graph/")
    graph = Graph.declare(graph_prefix, "somedataset")

    assert str(graph) == "graph:somedataset"
    assert graph.as_display_iri() == "<https://whatever.kom/graph/somedataset>"


def test_graph_as_literal():
    graph_prefix = Namespace.declare("kggraph:", "https://whatever.kom/graph/")
    graph = Graph.declare(graph_prefix, "somedataset")

    literal = graph.as_literal()
    assert literal.data_type is Datatype.ANY_URI
    assert str(literal) == "<https://whatever.kom/graph/somedataset>"
    assert literal.as_local_name() == "somedataset"


def test_graph_from_path():
    namespace = Namespace.declare("graph:", "https://whatever.kom/graph/")
    path = Path("/data/import/people.ttl")
    assert Graph.dataset_from_path(namespace, path).local_name == "people.ttl"
    assert Graph.test_dataset_from_path(namespace, path).local_name == "test-people.ttl"


def test_predicate():
    namespace = Namespace.declare("abc:", "https://whatever.kg/def/")
    predicate = Predicate.declare(namespace, "xyz")

    assert str(predicate) == "<https://whatever.kg/def/xyz>"
    assert predicate.display_turtle() == "abc:xyz"
    assert predicate.as_iri() == "https://whatever.kg/def/xyz"

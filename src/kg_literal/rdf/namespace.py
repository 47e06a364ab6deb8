from pathlib import Path

from pydantic import BaseModel, ConfigDict, model_validator

from kg_literal.errors import InvalidIriError
from kg_literal.models.literal import Literal
from kg_literal.models.values.iri_value import IRI_PATTERN


class Namespace(BaseModel):
    """A namespace IRI together with its prefix name.

    ``rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>`` lets the local name
    ``type`` be written as ``rdf:type``.
    """

    name: str
    iri: str

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def terminate_iri(cls, data):
        if isinstance(data, dict):
            iri = str(data.get("iri", ""))
            if not IRI_PATTERN.fullmatch(iri):
                raise ValueError(f"Not an absolute IRI: {iri!r}")
            if not iri.endswith(("/", "#")):
                data = {**data, "iri": f"{iri}/"}
        return data

    @classmethod
    def declare(cls, name: str, iri: str) -> "Namespace":
        return cls(name=name, iri=str(iri))

    def with_local_name(self, name: str) -> str:
        """Full IRI of ``name`` within this namespace"""
        iri = f"{self.iri}{name}"
        if not IRI_PATTERN.fullmatch(iri):
            raise InvalidIriError(iri)
        return iri

    def __str__(self) -> str:
        return f"{self.name} <{self.iri}>"


class Class(BaseModel):
    namespace: Namespace
    local_name: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def declare(cls, namespace: Namespace, local_name: str) -> "Class":
        return cls(namespace=namespace, local_name=local_name)

    def as_iri(self) -> str:
        return self.namespace.with_local_name(self.local_name)

    def display_turtle(self) -> str:
        return f"{self.namespace.name}{self.local_name}"

    def plural_label(self) -> str:
        return f"{self.local_name}s"

    def is_literal(self, literal: Literal) -> bool:
        """Whether ``literal`` is an IRI literal naming this class.

        This is a resource comparison, separate from Literal equality.
        """
        that_iri = literal.as_iri()
        if that_iri is None:
            return False
        try:
            return that_iri == self.as_iri()
        except InvalidIriError:
            # Literal IRIs are always valid, so they never name a class with an invalid IRI.
            return False

    def __str__(self) -> str:
        return self.display_turtle()


class Graph(BaseModel):
    """Named graph identifier (context) within a namespace"""

    namespace: Namespace
    local_name: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def declare(cls, namespace: Namespace, local_name: str) -> "Graph":
        return cls(namespace=namespace, local_name=local_name)

    @classmethod
    def dataset_from_path(cls, namespace: Namespace, path: Path) -> "Graph":
        return cls.declare(namespace, Path(path).name)

    @classmethod
    def test_dataset_from_path(cls, namespace: Namespace, path: Path) -> "Graph":
        return cls.declare(namespace, f"test-{Path(path).name}")

    def as_iri(self) -> str:
        return self.namespace.with_local_name(self.local_name)

    def as_display_iri(self) -> str:
        return f"<{self.namespace.iri}{self.local_name}>"

    def as_literal(self) -> Literal:
        return Literal.from_iri(self.as_iri())

    def __str__(self) -> str:
        return f"{self.namespace.name}{self.local_name}"


class Predicate(BaseModel):
    namespace: Namespace
    local_name: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def declare(cls, namespace: Namespace, local_name: str) -> "Predicate":
        return cls(namespace=namespace, local_name=local_name)

    def as_iri(self) -> str:
        return self.namespace.with_local_name(self.local_name)

    def display_turtle(self) -> str:
        return f"{self.namespace.name}{self.local_name}"

    def __str__(self) -> str:
        return f"<{self.namespace.iri}{self.local_name}>"

from .namespace import Class, Graph, Namespace, Predicate
from .value_formatters import LiteralFormatter

__all__ = ["Class", "Graph", "LiteralFormatter", "Namespace", "Predicate"]

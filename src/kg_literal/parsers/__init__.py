from .value_parser import PARSERS, parse_literal

__all__ = ["PARSERS", "parse_literal"]

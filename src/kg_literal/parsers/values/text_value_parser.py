from kg_literal.models.datatypes import Datatype
from kg_literal.models.literal import Literal


def parse_text_value(data_type: Datatype, text: str) -> Literal:
    """Keep the lexical form verbatim (strings, decimals, durations, date-times)"""
    return Literal.new_text(text, data_type)
